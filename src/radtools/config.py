from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RadToolsConfig:
    root: str = "."
    stylesheet: str = "app/globals.css"
    components_dir: str = "components"
    fonts_dir: str = "public/fonts"
    environment: str = "development"  # anything else disables mutating routes
    host: str = "127.0.0.1"
    port: int = 4100

    @classmethod
    def from_env(cls) -> RadToolsConfig:
        """Build a config from RADTOOLS_* variables (NODE_ENV as an environment fallback)."""
        return cls(
            root=os.environ.get("RADTOOLS_ROOT", "."),
            stylesheet=os.environ.get("RADTOOLS_STYLESHEET", "app/globals.css"),
            components_dir=os.environ.get("RADTOOLS_COMPONENTS_DIR", "components"),
            fonts_dir=os.environ.get("RADTOOLS_FONTS_DIR", "public/fonts"),
            environment=os.environ.get("RADTOOLS_ENV") or os.environ.get("NODE_ENV") or "development",
        )

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def root_path(self) -> Path:
        return Path(self.root)

    @property
    def stylesheet_path(self) -> Path:
        return self.root_path / self.stylesheet

    @property
    def components_path(self) -> Path:
        return self.root_path / self.components_dir

    @property
    def fonts_path(self) -> Path:
        return self.root_path / self.fonts_dir
