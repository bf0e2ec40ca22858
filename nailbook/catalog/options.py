"""Option catalogues with the human labels shown for each code."""

from typing import Optional

from nailbook.schemas.catalog_schema import CatalogOption

MAIN_SERVICE_OPTIONS: dict[str, CatalogOption] = {
    "hand": CatalogOption(code="hand", label="Hand Care", subtitle="手部保養與美甲", price=800),
    "foot": CatalogOption(code="foot", label="Foot Care", subtitle="足部保養與美甲", price=1000),
    "combo": CatalogOption(code="combo", label="Signature Combo", subtitle="手足全套", price=1500),
}

REMOVAL_OPTIONS: list[CatalogOption] = [
    CatalogOption(code="none", label="None", subtitle="無卸甲", price=0),
    CatalogOption(code="local", label="Return", subtitle="本店卸甲", price=0),
    CatalogOption(code="other", label="Other", subtitle="他店卸甲", price=100),
]

STYLE_OPTIONS: list[CatalogOption] = [
    CatalogOption(code="solid-cat", label="貓眼單色", price=0),
    CatalogOption(code="solid-mirror", label="鏡面單色", price=100),
    CatalogOption(code="solid-glitter", label="碎鑽單色", price=200),
    CatalogOption(code="design-french", label="法式美甲", price=300),
    CatalogOption(code="design-gradient", label="漸層美甲", price=400),
    CatalogOption(code="design-pattern", label="圖案彩繪", price=500),
]

ADDON_OPTIONS: dict[str, list[CatalogOption]] = {
    "hand": [
        CatalogOption(code="hand-deep", label="深層保養", price=600),
    ],
    "foot": [
        CatalogOption(code="foot-care", label="足部護理", price=400),
        CatalogOption(code="foot-deep", label="深層保養", price=899),
    ],
}

CARE_OPTIONS: list[CatalogOption] = [
    CatalogOption(code="hand-edge", label="手指緣保養", price=400),
    CatalogOption(code="hand-deep", label="手部深層保養", price=600),
    CatalogOption(code="foot-edge", label="足部指緣", price=500),
    CatalogOption(code="foot-care", label="足部護理保養", price=800),
    CatalogOption(code="foot-deep", label="足部深層保養", price=1000),
]

WAX_OPTIONS: list[CatalogOption] = [
    CatalogOption(code="half-arm", label="手部半手除毛", price=500),
    CatalogOption(code="full-arm", label="手部全手除毛", price=800),
    CatalogOption(code="half-leg", label="足部半腿除毛", price=700),
    CatalogOption(code="full-leg", label="足部全腿除毛", price=1200),
    CatalogOption(code="fingers", label="手指/足指除毛", price=200),
    CatalogOption(code="private", label="私密處除毛", price=1000),
]

EXTENSION_LABEL = "延甲"


def _find(options: list[CatalogOption], code: str) -> Optional[CatalogOption]:
    for option in options:
        if option.code == code:
            return option
    return None


def get_option_label(category: str, code: str, part: Optional[str] = None) -> str:
    """Human label for a priced code. Falls back to the code itself."""
    option: Optional[CatalogOption] = None
    if category == "base":
        option = MAIN_SERVICE_OPTIONS.get(code)
    elif category == "removal":
        option = _find(REMOVAL_OPTIONS, code)
    elif category == "style":
        option = _find(STYLE_OPTIONS, code)
    elif category == "addons" and part is not None:
        option = _find(ADDON_OPTIONS.get(part, []), code)
    elif category == "care":
        option = _find(CARE_OPTIONS, code)
    elif category == "wax":
        option = _find(WAX_OPTIONS, code)
    elif category == "extension":
        return EXTENSION_LABEL
    return option.label if option is not None else code
