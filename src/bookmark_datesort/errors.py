"""Errors raised while sorting a bookmark tree."""


class BookmarkSortError(Exception):
    """Base class; ``str(error)`` is suitable for showing to the user."""


class PreconditionError(BookmarkSortError):
    """The tree cannot be sorted. Raised before anything is modified."""


class EmptyTreeError(PreconditionError):
    def __init__(self) -> None:
        super().__init__("Error. There are no bookmarks to sort.")


class AlreadySortedError(PreconditionError):
    def __init__(self, label: str) -> None:
        super().__init__(f"Error. Bookmarks have already been sorted ({label!r} exists).")
        self.label = label


class ReservedLabelError(PreconditionError):
    def __init__(self, labels: list[str]) -> None:
        names = ", ".join(repr(label) for label in labels)
        super().__init__(f"Error. Bookmarks already use reserved names: {names}.")
        self.labels = labels


class ConsistencyError(BookmarkSortError):
    """Internal inconsistency found mid-run. Changes made so far are kept."""


class PathNotFoundError(ConsistencyError):
    def __init__(self, label: str) -> None:
        super().__init__(f"Bookmark {label!r} cannot be found in the original tree.")
        self.label = label


class MalformedDateError(ConsistencyError):
    def __init__(self, token: str, label: str) -> None:
        super().__init__(f"Date {token!r} in bookmark {label!r} is not a valid calendar date.")
        self.token = token
        self.label = label


class InvalidReferenceError(BookmarkSortError):
    """An action reference cannot be decoded or points outside the tree."""
