"""Group dated bookmarks chronologically without losing the original tree."""

from loguru import logger

from bookmark_datesort.core.sorter import SortSettings, run_sort, sort_bookmarks
from bookmark_datesort.models.bookmark import Bookmark
from bookmark_datesort.protocols import NotifierProtocol

logger.disable("bookmark_datesort")

__all__ = ["Bookmark", "NotifierProtocol", "SortSettings", "run_sort", "sort_bookmarks"]
