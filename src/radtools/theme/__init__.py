from radtools.theme.switcher import (
    current_theme_import,
    is_valid_theme_package_name,
    switch_theme_import,
)

__all__ = ["current_theme_import", "is_valid_theme_package_name", "switch_theme_import"]
