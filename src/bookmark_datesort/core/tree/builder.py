"""Build the "Sorted by Date" collection from chronologically sorted bookmarks."""

from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from bookmark_datesort.config import LIGHT_PALETTE, SORTED_COLLECTION_NAME, Palette
from bookmark_datesort.core.date.matcher import extract_date, has_date
from bookmark_datesort.core.tree.search import PathIndex, build_path_index, path_to_reference
from bookmark_datesort.models.bookmark import Bookmark


@dataclass(frozen=True)
class BuildContext:
    """State shared by every level of one tree build."""

    sorted_root: Bookmark
    paths: PathIndex
    palette: Palette


def build_sorted_tree(
    root: Bookmark,
    date_bookmarks: Sequence[Bookmark],
    *,
    palette: Palette = LIGHT_PALETTE,
) -> Bookmark:
    """Create the sorted collection at the top of ``root`` and fill it.

    Args:
        root: Bookmark root; its existing children are the original tree.
        date_bookmarks: Date-bearing bookmarks from the original tree, already
            in chronological order.
        palette: Colors for the collection and its entries.

    Returns:
        The new sorted collection bookmark (``root.children[0]``).
    """
    sorted_root = root.create_child(SORTED_COLLECTION_NAME, None, 0)
    sorted_root.color = palette.collection

    # Index after inserting the collection so paths account for the shift.
    ctx = BuildContext(
        sorted_root=sorted_root,
        paths=build_path_index(root, sorted_root=sorted_root),
        palette=palette,
    )
    build_children(ctx, sorted_root, date_bookmarks)

    logger.debug(
        "Built sorted collection with {} date entries", len(sorted_root.children or ())
    )
    return sorted_root


def build_children(
    ctx: BuildContext, parent: Bookmark, reference_bookmarks: Sequence[Bookmark]
) -> None:
    """Recreate ``reference_bookmarks`` (and their subtrees) under ``parent``.

    Each recreated bookmark executes the original it was built from. Date
    bookmarks are only placed directly under the sorted collection; below
    that they are skipped since they get their own top-level entry.
    """
    at_top = parent is ctx.sorted_root

    for reference in reference_bookmarks:
        dated = has_date(reference)
        if dated and not at_top:
            continue

        action = path_to_reference(ctx.paths.path_of(reference))
        index = 0 if parent.children is None else len(parent.children)
        bookmark = parent.create_child(reference.label, action, index)

        if dated:
            bookmark.label = extract_date(reference)
            demoted = bookmark.create_child(reference.label, action, 0)
            demoted.color = ctx.palette.demoted
            logger.debug("Placed {!r} as {}", reference.label, bookmark.label)

        if reference.children is not None:
            build_children(ctx, bookmark, reference.children)

        if at_top and bookmark.children is not None and len(bookmark.children) > 1:
            bookmark.color = ctx.palette.has_hierarchy
