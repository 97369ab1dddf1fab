"""Release-notes assembler for the Iosevka font family."""

__version__ = "0.1.0"
