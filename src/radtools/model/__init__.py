from radtools.model.component import DiscoveredComponent, PropDefinition
from radtools.model.diagnostic import Diagnostic, Severity
from radtools.model.results import SwitchErrorKind, SyncResult, ThemeSwitchResult
from radtools.model.tokens import (
    RADIUS_KEYS,
    BaseColor,
    ColorCategory,
    ColorMode,
    ThemeTokens,
    display_name,
)
from radtools.model.typography import (
    FontDefinition,
    FontFile,
    TypographyStyle,
    element_display_name,
)

__all__ = [
    "RADIUS_KEYS",
    "BaseColor",
    "ColorCategory",
    "ColorMode",
    "Diagnostic",
    "DiscoveredComponent",
    "FontDefinition",
    "FontFile",
    "PropDefinition",
    "Severity",
    "SwitchErrorKind",
    "SyncResult",
    "ThemeSwitchResult",
    "ThemeTokens",
    "TypographyStyle",
    "display_name",
    "element_display_name",
]
