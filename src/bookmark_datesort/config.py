"""Configuration constants for bookmark-datesort."""

import os
from dataclasses import dataclass

from bookmark_datesort.models.bookmark import BLUE, CYAN, GREEN, LT_GRAY, MAGENTA, Color

# Name of the host action that triggers a sort.
MENU_ITEM_TEXT: str = "Sort Bookmarks by Date"

# Reserved labels of the two holding bookmarks. A tree whose top level already
# contains SORTED_COLLECTION_NAME has been processed.
SORTED_COLLECTION_NAME: str = "Sorted by Date"
ORIGINAL_COLLECTION_NAME: str = "Original Bookmarks"
RESERVED_LABELS: frozenset[str] = frozenset({SORTED_COLLECTION_NAME, ORIGINAL_COLLECTION_NAME})

# Environment variable switching to the dark-theme palette.
DARK_MODE_ENV_VAR: str = "BOOKMARK_DATESORT_DARK_MODE"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Palette:
    """Colors applied to bookmarks created by a sort."""

    collection: Color
    has_hierarchy: Color
    demoted: Color


LIGHT_PALETTE = Palette(collection=MAGENTA, has_hierarchy=BLUE, demoted=LT_GRAY)
DARK_PALETTE = Palette(collection=GREEN, has_hierarchy=CYAN, demoted=LT_GRAY)


def palette_for(dark_mode: bool) -> Palette:
    return DARK_PALETTE if dark_mode else LIGHT_PALETTE


def resolve_dark_mode() -> bool:
    """Return True if the dark-theme palette is requested via the environment."""
    return os.environ.get(DARK_MODE_ENV_VAR, "").strip().lower() in _TRUTHY
