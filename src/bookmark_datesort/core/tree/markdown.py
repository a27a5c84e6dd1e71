"""Render bookmark trees as markdown."""

import io

from bookmark_datesort.config import Palette
from bookmark_datesort.models.bookmark import BLACK, COLOR_NAMES, Bookmark


def _annotation(bookmark: Bookmark, palette: Palette | None) -> str:
    """Describe a bookmark by its color.

    With a palette, the hierarchy and demoted colors are shown by meaning.
    Only the color is looked at, so a user bookmark that happens to share
    one of those colors is described the same way.
    """
    if palette is not None:
        if bookmark.color == palette.has_hierarchy:
            return "has hierarchy"
        if bookmark.color == palette.demoted:
            return "original"
    if bookmark.color == BLACK:
        return ""
    return COLOR_NAMES.get(bookmark.color, "")


def render_tree_as_markdown(
    root: Bookmark,
    *,
    max_depth: int | None = None,
    show_actions: bool = False,
    palette: Palette | None = None,
) -> str:
    """Render the bookmarks below ``root`` as an indented bullet list.

    Args:
        root: Bookmark whose descendants are rendered (the root itself is not).
        max_depth: Max levels to include (None = unlimited).
        show_actions: Whether to append each bookmark's action.
        palette: Palette used by a sort; lets colors be shown by meaning.

    Returns:
        Markdown string with bullet-list hierarchy.
    """
    out = io.StringIO()

    def write(bookmark: Bookmark, depth: int) -> None:
        indent = "    " * depth
        marker = "+ " if bookmark.children and not bookmark.open else "- "
        line = f"{indent}{marker}{bookmark.label}"

        annotation = _annotation(bookmark, palette)
        if annotation:
            line += f"  [{annotation}]"
        if show_actions and bookmark.action:
            line += f"  -> {bookmark.action}"
        out.write(line + "\n")

        children = bookmark.children or []
        if max_depth is not None and depth + 1 >= max_depth:
            if children:
                noun = "child" if len(children) == 1 else "children"
                out.write(f"{indent}    - ... ({len(children)} more {noun})\n")
            return
        for child in children:
            write(child, depth + 1)

    for top in root.children or ():
        write(top, 0)
    return out.getvalue()
