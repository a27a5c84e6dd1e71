"""Domain models for bookmark trees."""

from dataclasses import dataclass, field

# RGB components in [0, 1], the way PDF viewers describe bookmark colors.
Color = tuple[float, float, float]

BLACK: Color = (0.0, 0.0, 0.0)
WHITE: Color = (1.0, 1.0, 1.0)
DK_GRAY: Color = (0.25, 0.25, 0.25)
GRAY: Color = (0.5, 0.5, 0.5)
LT_GRAY: Color = (0.75, 0.75, 0.75)
RED: Color = (1.0, 0.0, 0.0)
GREEN: Color = (0.0, 1.0, 0.0)
BLUE: Color = (0.0, 0.0, 1.0)
CYAN: Color = (0.0, 1.0, 1.0)
MAGENTA: Color = (1.0, 0.0, 1.0)
YELLOW: Color = (1.0, 1.0, 0.0)

COLOR_NAMES: dict[Color, str] = {
    BLACK: "black",
    WHITE: "white",
    DK_GRAY: "dkGray",
    GRAY: "gray",
    LT_GRAY: "ltGray",
    RED: "red",
    GREEN: "green",
    BLUE: "blue",
    CYAN: "cyan",
    MAGENTA: "magenta",
    YELLOW: "yellow",
}


@dataclass(eq=False)
class Bookmark:
    """A single node in a bookmark tree.

    Bookmarks compare by identity: two entries with the same label are still
    different nodes. ``children`` is ``None`` for a bookmark that never had
    children, or whose last child was moved away.
    """

    label: str
    action: str | None = None
    children: list["Bookmark"] | None = None
    open: bool = True
    color: Color = BLACK
    _parent: "Bookmark | None" = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for child in self.children or ():
            if child._parent is not None:
                msg = f"Bookmark {child.label!r} already belongs to {child._parent.label!r}"
                raise ValueError(msg)
            child._parent = self

    @property
    def parent(self) -> "Bookmark | None":
        return self._parent

    def create_child(
        self, label: str, action: str | None = None, index: int | None = None
    ) -> "Bookmark":
        """Create a fresh child at ``index`` (default: last) and return it."""
        child = Bookmark(label=label, action=action)
        self.insert_child(child, index)
        return child

    def insert_child(self, child: "Bookmark", index: int | None = None) -> None:
        """Move ``child`` under this bookmark, detaching it from its old parent."""
        node: Bookmark | None = self
        while node is not None:
            if node is child:
                msg = f"Cannot insert bookmark {child.label!r} under its own subtree"
                raise ValueError(msg)
            node = node._parent

        count = len(self.children or ()) - (1 if child._parent is self else 0)
        if index is None:
            index = count
        if not 0 <= index <= count:
            msg = f"Child index {index} out of range for {self.label!r}"
            raise IndexError(msg)

        if child._parent is not None:
            child._parent._detach(child)
        if self.children is None:
            self.children = []
        self.children.insert(index, child)
        child._parent = self

    def _detach(self, child: "Bookmark") -> None:
        assert self.children is not None
        for i, existing in enumerate(self.children):
            if existing is child:
                del self.children[i]
                break
        if not self.children:
            self.children = None
        child._parent = None


@dataclass(frozen=True)
class DateRecord:
    """A date-bearing bookmark with its extracted date token and timestamp."""

    bookmark: Bookmark
    token: str
    timestamp: int
