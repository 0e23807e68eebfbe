"""
config.py - Configuration model for SauceFinder
"""

from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field
from rich.console import Console
import sys

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib

console = Console()

# aiohttp's own default total timeout; requests are not cut short unless configured.
DEFAULT_TIMEOUT_SECONDS = 300.0


class SauceNAOConfig(BaseModel):
    enable: bool = True
    api_key: str = ""
    low_similarity_warning_level: float = Field(
        default=60.0,
        description="Warn the reader when the provider's minimum similarity is below this level (0-100)"
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        description="Total timeout in seconds for one SauceNAO request"
    )


class GalleryConfig(BaseModel):
    """Secondary gallery lookups (e-hentai, nhentai)."""

    timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        description="Total timeout in seconds for one gallery search request"
    )
    max_concurrency: int = Field(
        default=1,
        ge=1,
        description="How many matches are resolved at the same time"
    )


class SauceFinderConfig(BaseModel):
    debug_mode: bool = False
    saucenao: SauceNAOConfig = Field(default_factory=SauceNAOConfig)
    gallery: GalleryConfig = Field(default_factory=GalleryConfig)
    config_path: Optional[Path] = None


def load_config(config_path: Path) -> SauceFinderConfig:
    """Load configuration from TOML file"""

    if not config_path.exists():
        console.print(f"[red][ERROR][/red] Configuration file not found: {config_path}")
        console.print("Please create config.toml with your SauceNAO API key")
        sys.exit(1)

    try:
        with open(config_path, "rb") as f:
            config_data = tomllib.load(f)

        return SauceFinderConfig(
            debug_mode=config_data.get("debug_mode", False),
            saucenao=SauceNAOConfig(**config_data.get("saucenao", {})),
            gallery=GalleryConfig(**config_data.get("gallery", {})),
            config_path=config_path,
        )

    except Exception as e:
        console.print(f"[red][ERROR][/red] Error loading configuration: {e}")
        sys.exit(1)
