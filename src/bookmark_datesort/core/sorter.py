"""Sort a bookmark tree by the dates in its labels.

A run keeps the original bookmarks untouched under "Original Bookmarks" and
adds a "Sorted by Date" collection holding every date bookmark, oldest first.
"""

from dataclasses import dataclass, field

from loguru import logger

from bookmark_datesort.config import (
    ORIGINAL_COLLECTION_NAME,
    RESERVED_LABELS,
    SORTED_COLLECTION_NAME,
    Palette,
    palette_for,
    resolve_dark_mode,
)
from bookmark_datesort.core.date.matcher import sort_chronologically
from bookmark_datesort.core.tree.builder import build_sorted_tree
from bookmark_datesort.core.tree.search import collect_date_nodes
from bookmark_datesort.errors import (
    AlreadySortedError,
    ConsistencyError,
    EmptyTreeError,
    PreconditionError,
    ReservedLabelError,
)
from bookmark_datesort.models.bookmark import Bookmark
from bookmark_datesort.protocols import NotifierProtocol


@dataclass(frozen=True)
class SortSettings:
    """Options for one sort run."""

    palette: Palette = field(default_factory=lambda: palette_for(resolve_dark_mode()))


def is_already_sorted(root: Bookmark) -> bool:
    return any(child.label == SORTED_COLLECTION_NAME for child in root.children or ())


def find_reserved_labels(root: Bookmark) -> list[str]:
    """Return reserved labels used anywhere below ``root``, in pre-order."""
    found: list[str] = []
    todo = list(reversed(root.children or []))
    while todo:
        bookmark = todo.pop()
        if bookmark.label in RESERVED_LABELS and bookmark.label not in found:
            found.append(bookmark.label)
        todo.extend(reversed(bookmark.children or []))
    return found


def check_preconditions(root: Bookmark) -> None:
    """Raise a :class:`PreconditionError` if ``root`` cannot be sorted."""
    if not root.children:
        raise EmptyTreeError
    if is_already_sorted(root):
        raise AlreadySortedError(SORTED_COLLECTION_NAME)
    collisions = find_reserved_labels(root)
    if collisions:
        raise ReservedLabelError(collisions)


def relocate_originals(root: Bookmark, palette: Palette) -> Bookmark:
    """Move all top-level bookmarks under a new "Original Bookmarks" holder."""
    originals = list(root.children or ())
    holder = root.create_child(ORIGINAL_COLLECTION_NAME, None, 0)
    holder.color = palette.collection
    for bookmark in originals:
        holder.insert_child(bookmark)
    logger.debug("Moved {} top-level bookmarks under {!r}", len(originals), holder.label)
    return holder


def collapse(sorted_root: Bookmark, original_root: Bookmark) -> None:
    """Close every date entry and both holders for a compact overview."""
    for bookmark in sorted_root.children or ():
        bookmark.open = False
    sorted_root.open = False
    original_root.open = False


def sort_bookmarks(root: Bookmark, settings: SortSettings | None = None) -> Bookmark:
    """Sort ``root`` in place and return the new sorted collection.

    Raises:
        PreconditionError: The tree is empty, already sorted, or uses a
            reserved label. Nothing has been modified.
        ConsistencyError: A date bookmark could not be located or its date
            could not be parsed. Changes made so far are not rolled back.
    """
    settings = settings or SortSettings()
    check_preconditions(root)

    original_root = relocate_originals(root, settings.palette)
    records = sort_chronologically(collect_date_nodes(root))
    sorted_root = build_sorted_tree(
        root, [r.bookmark for r in records], palette=settings.palette
    )
    collapse(sorted_root, original_root)

    logger.info("Sorted {} date bookmarks into {!r}", len(records), sorted_root.label)
    return sorted_root


def run_sort(
    root: Bookmark,
    notifier: NotifierProtocol,
    settings: SortSettings | None = None,
) -> None:
    """Host entry point: sort ``root`` and report failures to the user.

    Precondition failures are reported and the run ends. Consistency
    failures are reported as unexpected errors and re-raised.
    """
    try:
        sort_bookmarks(root, settings)
    except PreconditionError as e:
        logger.warning("Sort refused: {}", e)
        notifier.alert(str(e))
    except ConsistencyError as e:
        logger.error("Sort failed: {}", e)
        notifier.alert(f"Unexpected error. {e}")
        raise
