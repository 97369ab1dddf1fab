from __future__ import annotations

from relnotes.release.model import ShapeVariant, SpacingVariant


# Order matters: it fixes both the table order and the ordinal numbering.
PACKAGE_SHAPES: tuple[ShapeVariant, ...] = (
    ShapeVariant(key="", description="Default", name_suffix="", is_counted=True),
    ShapeVariant(key="slab", description="Slab", name_suffix="Slab", is_slab=True, is_counted=True),
    ShapeVariant(key="curly", description="Curly", name_suffix="Curly", is_counted=True),
    ShapeVariant(
        key="curly-slab",
        description="Curly Slab",
        name_suffix="Curly Slab",
        is_slab=True,
        is_counted=True,
    ),
    ShapeVariant(key="ss01", description="Andale Mono Style", name_suffix="SS01"),
    ShapeVariant(key="ss02", description="Anonymous Pro Style", name_suffix="SS02"),
    ShapeVariant(key="ss03", description="Consolas Style", name_suffix="SS03"),
    ShapeVariant(key="ss04", description="Menlo Style", name_suffix="SS04"),
    ShapeVariant(key="ss05", description="Fira Mono Style", name_suffix="SS05"),
    ShapeVariant(key="ss06", description="Liberation Mono Style", name_suffix="SS06"),
    ShapeVariant(key="ss07", description="Monaco Style", name_suffix="SS07"),
    ShapeVariant(key="ss08", description="Pragmata Pro Style", name_suffix="SS08"),
    ShapeVariant(key="ss09", description="Source Code Pro Style", name_suffix="SS09"),
    ShapeVariant(key="ss10", description="Envy Code R Style", name_suffix="SS10"),
    ShapeVariant(key="ss11", description="X Windows Fixed Style", name_suffix="SS11"),
    ShapeVariant(key="ss12", description="Ubuntu Mono Style", name_suffix="SS12"),
    ShapeVariant(
        key="aile",
        description="Quasi-proportional",
        name_suffix="Aile",
        is_no_spacing=True,
    ),
    ShapeVariant(
        key="etoile",
        description="Quasi-proportional slab-serif",
        name_suffix="Etoile",
        is_no_spacing=True,
    ),
    ShapeVariant(
        key="sparkle",
        description="Quasi-proportional family — like iA Writer’s Duo.",
        name_suffix="Sparkle",
        is_no_spacing=True,
    ),
)


PACKAGE_SPACINGS: tuple[SpacingVariant, ...] = (
    SpacingVariant(key="", description="Default", has_ligatures=True, name_suffix=""),
    SpacingVariant(key="term", description="Terminal", has_ligatures=False, name_suffix="Term"),
    SpacingVariant(key="type", description="Typesetting", has_ligatures=True, name_suffix="Type"),
    SpacingVariant(
        key="term-lig",
        description="Terminal-Ligature",
        has_ligatures=True,
        name_suffix="TermLig",
    ),
)
