"""Configuration for paginate.

Defaults are read from environment variables when the module is imported.
"""
import os
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    """Read a non-negative integer env var, falling back to default."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid {name}={raw!r}, using default {default}")
        return default
    if value < 0:
        logger.warning(f"Negative {name}={raw!r}, using default {default}")
        return default
    return value


@dataclass
class PaginateConfig:
    """Library defaults loaded from environment variables."""

    # Page size used when Pages() is built without an explicit limit
    default_limit: int = field(
        default_factory=lambda: _env_int("PAGINATE_DEFAULT_LIMIT", 20)
    )

    # Row cap for markdown page listings
    max_rendered_pages: int = field(
        default_factory=lambda: _env_int("PAGINATE_MAX_RENDERED_PAGES", 50)
    )


config = PaginateConfig()
