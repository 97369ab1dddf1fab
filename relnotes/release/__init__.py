"""Release-notes generation.

- semver, model, taxonomy: data
- changelog, packages: the two generators
- document: sinks the generators write into
- fragments, service: file I/O and section ordering
"""

from __future__ import annotations
