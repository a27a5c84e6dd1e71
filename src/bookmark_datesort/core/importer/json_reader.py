"""Read bookmark trees from JSON outlines and turn them back into plain data."""

import json
from pathlib import Path
from typing import Any

from bookmark_datesort.models.bookmark import BLACK, Bookmark, Color

ROOT_LABEL = "bookmarkRoot"


def _is_component(value: Any) -> bool:
    # bool is an int subclass; true/false are not colors.
    return isinstance(value, int | float) and not isinstance(value, bool) and 0 <= value <= 1


def _parse_color(raw: Any, *, label: str) -> Color:
    if raw is None:
        return BLACK
    if isinstance(raw, list) and len(raw) == 3 and all(_is_component(c) for c in raw):
        return (float(raw[0]), float(raw[1]), float(raw[2]))
    msg = f"Bookmark {label!r}: color must be three numbers in [0, 1], got {raw!r}"
    raise ValueError(msg)


def parse_bookmark(data: dict[str, Any]) -> Bookmark:
    """Build a bookmark (and its subtree) from a JSON object.

    Recognised keys: ``label`` (required), ``action``, ``children``, ``open``
    and ``color``. A missing ``children`` key means the bookmark has no
    children; an empty list is kept as such.
    """
    if not isinstance(data, dict) or not isinstance(data.get("label"), str):
        msg = f"Bookmark entry needs a string 'label': {data!r}"
        raise ValueError(msg)

    label = data["label"]
    raw_children = data.get("children")
    children: list[Bookmark] | None = None
    if raw_children is not None:
        if not isinstance(raw_children, list):
            msg = f"Bookmark {label!r}: 'children' must be a list"
            raise ValueError(msg)
        children = [parse_bookmark(child) for child in raw_children]

    action = data.get("action")
    if action is not None and not isinstance(action, str):
        msg = f"Bookmark {label!r}: 'action' must be a string"
        raise ValueError(msg)
    is_open = data.get("open", True)
    if not isinstance(is_open, bool):
        msg = f"Bookmark {label!r}: 'open' must be true or false, got {is_open!r}"
        raise ValueError(msg)

    return Bookmark(
        label=label,
        action=action,
        children=children,
        open=is_open,
        color=_parse_color(data.get("color"), label=label),
    )


def parse_tree(data: dict[str, Any] | list[Any]) -> Bookmark:
    """Parse a whole outline: a root object, or a list of top-level entries."""
    if isinstance(data, list):
        return Bookmark(label=ROOT_LABEL, children=[parse_bookmark(item) for item in data])
    return parse_bookmark(data)


def load_tree(path: Path) -> Bookmark:
    return parse_tree(json.loads(path.read_text(encoding="utf-8")))


def bookmark_to_dict(bookmark: Bookmark) -> dict[str, Any]:
    data: dict[str, Any] = {
        "label": bookmark.label,
        "action": bookmark.action,
        "open": bookmark.open,
        "color": list(bookmark.color),
    }
    if bookmark.children is not None:
        data["children"] = [bookmark_to_dict(child) for child in bookmark.children]
    return data
