"""Find date tokens such as ``2022-02-14`` in bookmark labels."""

import re
from collections.abc import Iterable
from datetime import UTC, datetime

from bookmark_datesort.errors import MalformedDateError
from bookmark_datesort.models.bookmark import Bookmark, DateRecord

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
DATE_FORMAT = "%Y-%m-%d"


def has_date(bookmark: Bookmark) -> bool:
    return DATE_PATTERN.search(bookmark.label) is not None


def extract_date(bookmark: Bookmark) -> str:
    """Return the first date token in the label, e.g. ``"2022-02-14"``."""
    match = DATE_PATTERN.search(bookmark.label)
    if match is None:
        msg = f"Bookmark {bookmark.label!r} has no date"
        raise ValueError(msg)
    return match.group(0)


def to_timestamp(token: str, *, label: str | None = None) -> int:
    """Convert a date token to milliseconds since the Unix epoch (UTC midnight).

    Raises:
        MalformedDateError: The token matches the pattern but is not a real
            calendar date (e.g. ``2021-02-30``).
    """
    try:
        parsed = datetime.strptime(token, DATE_FORMAT).replace(tzinfo=UTC)
    except ValueError as e:
        raise MalformedDateError(token, label if label is not None else token) from e
    return int(parsed.timestamp()) * 1000


def date_record(bookmark: Bookmark) -> DateRecord:
    token = extract_date(bookmark)
    return DateRecord(
        bookmark=bookmark, token=token, timestamp=to_timestamp(token, label=bookmark.label)
    )


def sort_chronologically(bookmarks: Iterable[Bookmark]) -> list[DateRecord]:
    """Sort date-bearing bookmarks oldest first.

    Bookmarks with the same date keep their input order.
    """
    return sorted((date_record(b) for b in bookmarks), key=lambda r: r.timestamp)
