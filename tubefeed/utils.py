"""Shared utility functions for tubefeed."""

import logging
import re

logger = logging.getLogger(__name__)

_FIRST_CHAR = re.compile(r"^[a-z]")


def sanitize_shape_key(key: str, suffix: str = "Renderer") -> str:
    """
    Turn a raw renderer key into a shape tag.

    Args:
        key: Raw key, e.g. ``tabRenderer`` or ``appendContinuationItemsAction``.
        suffix: Suffix stripped from the key when present.

    Returns:
        Shape tag, e.g. ``Tab`` or ``AppendContinuationItemsAction``.
    """
    if suffix and key.endswith(suffix) and key != suffix:
        key = key[: -len(suffix)]
    return _FIRST_CHAR.sub(lambda m: m.group(0).upper(), key)


def last_path_segment(url: str | None) -> str | None:
    """Return the last ``/``-separated segment of a URL path, ignoring a query string."""
    if not url:
        return None
    return url.split("?", 1)[0].rstrip("/").split("/")[-1]


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, set DEBUG level; otherwise INFO.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
