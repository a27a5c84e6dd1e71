"""Tree search: collect date bookmarks, resolve and encode their paths."""

import re
from collections.abc import Iterator, Sequence

from loguru import logger

from bookmark_datesort.config import SORTED_COLLECTION_NAME
from bookmark_datesort.core.date.matcher import has_date
from bookmark_datesort.errors import InvalidReferenceError, PathNotFoundError
from bookmark_datesort.models.bookmark import Bookmark

IndexPath = tuple[int, ...]

REFERENCE_ROOT = "bookmarkRoot"
REFERENCE_SUFFIX = ".execute()"
_REFERENCE_RE = re.compile(
    rf"^{REFERENCE_ROOT}((?:\.children\[\d+\])*){re.escape(REFERENCE_SUFFIX)}$"
)
_INDEX_RE = re.compile(r"\[(\d+)\]")


def _is_sorted_collection(bookmark: Bookmark, sorted_root: Bookmark | None) -> bool:
    if sorted_root is not None:
        return bookmark is sorted_root
    return bookmark.label == SORTED_COLLECTION_NAME


def collect_date_nodes(
    root: Bookmark, *, sorted_root: Bookmark | None = None
) -> list[Bookmark]:
    """Return every date-bearing bookmark below ``root`` in pre-order.

    The root itself is not considered. Children of a date bookmark are
    searched as well, so nested dates are all collected. The sorted
    collection holds rebuilt copies and is skipped.
    """
    found: list[Bookmark] = []

    def walk(bookmark: Bookmark) -> None:
        for child in bookmark.children or ():
            if _is_sorted_collection(child, sorted_root):
                continue
            if has_date(child):
                found.append(child)
            walk(child)

    walk(root)
    logger.debug("Collected {} date bookmarks", len(found))
    return found


def iter_with_paths(
    root: Bookmark, *, sorted_root: Bookmark | None = None
) -> Iterator[tuple[IndexPath, Bookmark]]:
    """Yield ``(path, bookmark)`` pairs in pre-order, skipping the sorted collection.

    The sorted collection is recognised by identity when ``sorted_root`` is
    given, otherwise by its reserved label.
    """
    todo: list[tuple[IndexPath, Bookmark]] = [
        ((i,), child) for i, child in reversed(list(enumerate(root.children or ())))
    ]
    while todo:
        path, bookmark = todo.pop()
        if _is_sorted_collection(bookmark, sorted_root):
            continue
        yield path, bookmark
        for i, child in reversed(list(enumerate(bookmark.children or ()))):
            todo.append(((*path, i), child))


def resolve_path(
    target: Bookmark, root: Bookmark, *, sorted_root: Bookmark | None = None
) -> IndexPath:
    """Find the child-index path from ``root`` to ``target`` (matched by identity).

    Raises:
        PathNotFoundError: ``target`` is not in the tree, or only reachable
            through the sorted collection.
    """
    for path, bookmark in iter_with_paths(root, sorted_root=sorted_root):
        if bookmark is target:
            return path
    raise PathNotFoundError(target.label)


class PathIndex:
    """Bookmark-to-path lookup built with a single traversal of the tree.

    Paths stay valid as long as the indexed part of the tree is not
    restructured; bookmarks added under the sorted collection do not shift them.
    """

    def __init__(self, root: Bookmark, *, sorted_root: Bookmark | None = None) -> None:
        self._paths: dict[Bookmark, IndexPath] = {}
        for path, bookmark in iter_with_paths(root, sorted_root=sorted_root):
            self._paths.setdefault(bookmark, path)
        logger.debug("Indexed {} bookmark paths", len(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, bookmark: object) -> bool:
        return bookmark in self._paths

    def path_of(self, bookmark: Bookmark) -> IndexPath:
        try:
            return self._paths[bookmark]
        except KeyError:
            raise PathNotFoundError(bookmark.label) from None


def build_path_index(root: Bookmark, *, sorted_root: Bookmark | None = None) -> PathIndex:
    return PathIndex(root, sorted_root=sorted_root)


def path_to_reference(path: Sequence[int]) -> str:
    """Encode a path as an action that executes the bookmark it points to.

    >>> path_to_reference((1, 0, 2))
    'bookmarkRoot.children[1].children[0].children[2].execute()'
    """
    steps = "".join(f".children[{index}]" for index in path)
    return f"{REFERENCE_ROOT}{steps}{REFERENCE_SUFFIX}"


def parse_reference(reference: str) -> IndexPath:
    """Decode an action produced by :func:`path_to_reference` back into a path."""
    match = _REFERENCE_RE.match(reference)
    if match is None:
        msg = f"Not a bookmark reference: {reference!r}"
        raise InvalidReferenceError(msg)
    return tuple(int(index) for index in _INDEX_RE.findall(match.group(1)))


def dereference(root: Bookmark, reference: str) -> Bookmark:
    """Follow an action reference from ``root`` to the bookmark it points to."""
    bookmark = root
    for index in parse_reference(reference):
        children = bookmark.children or []
        if index >= len(children):
            msg = f"Reference {reference!r} points outside the tree"
            raise InvalidReferenceError(msg)
        bookmark = children[index]
    return bookmark
