"""Check configuration: fixed selectors, delays, tolerances and artefact filenames.

Defaults reproduce the exercise's canonical setup. pydantic-settings fills
every field from, in order of precedence:

  1. keyword arguments (CLI flags such as --work-dir)
  2. LAYOUT_CHECKER_* environment variables
  3. a .env file in the current directory (or --env-file)

  LAYOUT_CHECKER_WORK_DIR           directory holding canonical and captured images
  LAYOUT_CHECKER_SETTLE_DELAY_MS    wait before each dark-mode screenshot (>= 0)
  LAYOUT_CHECKER_COLOUR_TOLERANCE   per-channel palette tolerance (>= 0)
  LAYOUT_CHECKER_PALETTE_SIZE       number of dominant colours compared (>= 1)
  LAYOUT_CHECKER_VIEWPORT           JSON pair, e.g. [1280, 800]

Out-of-range values raise pydantic.ValidationError (a ValueError).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = 'LAYOUT_CHECKER_'

DEFAULT_LAUNCH_ARGS = ('--no-sandbox', '--disable-setuid-sandbox')
DEFAULT_VIEWPORT = (1024, 768)
THEME_BUTTON_SELECTOR = '.header__theme-menu-button.header__theme-menu-button_type_dark'


class ArtifactPaths(BaseModel):
    """Image filenames read and written by the dark-scheme check, relative to work_dir."""

    model_config = ConfigDict(frozen=True)

    dark_screenshot: str = 'layout-dark.jpg'
    canonical_dark: str = 'layout-canonical-dark.jpg'
    dark_full: str = 'layout-dark-full.jpg'
    canonical_dark_full: str = 'layout-canonical-dark-full.jpg'
    dark_diff: str = 'output-dark.jpg'


class CheckConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        frozen=True,
    )

    work_dir: Path = Path('.')
    viewport: tuple[int, int] = DEFAULT_VIEWPORT  # (width, height)
    launch_args: tuple[str, ...] = DEFAULT_LAUNCH_ARGS
    theme_button_selector: str = THEME_BUTTON_SELECTOR
    settle_delay_ms: int = Field(default=2000, ge=0)
    palette_size: int = Field(default=4, ge=1)
    colour_tolerance: int = Field(default=35, ge=0)
    artifacts: ArtifactPaths = Field(default_factory=ArtifactPaths)

    def path(self, name: str) -> Path:
        """Resolve an artefact filename against work_dir."""
        return self.work_dir / name

    @property
    def viewport_size(self) -> dict[str, int]:
        """Viewport in the {'width', 'height'} shape Playwright expects."""
        width, height = self.viewport
        return {'width': width, 'height': height}
