"""Centralised settings for the Markdown previewer.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _optional_path(name: str) -> Path | None:
    value = os.environ.get(name)
    return Path(value) if value else None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Previewer
    # ------------------------------------------------------------------
    preview_delay: float = field(
        default_factory=lambda: float(os.environ.get("MDP_PREVIEW_DELAY", "2.0"))
    )

    # ------------------------------------------------------------------
    # Temporary output
    # ------------------------------------------------------------------
    temp_dir: Path | None = field(
        default_factory=lambda: _optional_path("MDP_TEMP_DIR")
    )
    temp_prefix: str = field(
        default_factory=lambda: os.environ.get("MDP_TEMP_PREFIX", "markdown_preview")
    )


# Module-level singleton, import this everywhere:
#   from mdpreview.config import settings
settings = Settings()
