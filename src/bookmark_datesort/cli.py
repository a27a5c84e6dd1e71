"""CLI for bookmark-datesort (sort a bookmark outline by date)."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from bookmark_datesort.config import MENU_ITEM_TEXT, palette_for, resolve_dark_mode
from bookmark_datesort.core.date.matcher import sort_chronologically
from bookmark_datesort.core.importer.json_reader import bookmark_to_dict, load_tree
from bookmark_datesort.core.sorter import SortSettings, run_sort
from bookmark_datesort.core.tree.markdown import render_tree_as_markdown
from bookmark_datesort.core.tree.search import (
    build_path_index,
    collect_date_nodes,
    path_to_reference,
)
from bookmark_datesort.errors import BookmarkSortError
from bookmark_datesort.logging_config import configure_logging
from bookmark_datesort.models.bookmark import Bookmark

app = typer.Typer(help=f"{MENU_ITEM_TEXT}: group dated bookmarks chronologically.")


class EchoNotifier:
    """Notifier that prints alerts to stderr and remembers them."""

    def __init__(self) -> None:
        self.alerts: list[str] = []

    def alert(self, message: str) -> None:
        self.alerts.append(message)
        typer.echo(message, err=True)


def _load(path: Path) -> Bookmark:
    if not path.exists():
        logger.error("Bookmark file not found: {}", path)
        raise typer.Exit(1)
    try:
        return load_tree(path)
    except ValueError as e:
        logger.error("Cannot read bookmarks from {}: {}", path, e)
        raise typer.Exit(1) from e


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


@app.command()
def sort(
    path: Path = typer.Argument(..., help="JSON outline of the bookmark tree"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-m", min=1, help="Max depth levels to render"),
    ] = None,
    show_actions: bool = typer.Option(False, "--actions", "-a", help="Show bookmark actions"),
    dark_mode: bool = typer.Option(False, "--dark-mode", help="Use the dark-theme palette"),
) -> None:
    """Sort the bookmarks in PATH by date and print the resulting tree."""
    root = _load(path)
    palette = palette_for(dark_mode or resolve_dark_mode())

    notifier = EchoNotifier()
    try:
        run_sort(root, notifier, SortSettings(palette=palette))
    except BookmarkSortError as e:
        raise typer.Exit(1) from e
    if notifier.alerts:
        raise typer.Exit(1)

    if output_json:
        typer.echo(json.dumps(bookmark_to_dict(root), indent=2))
    else:
        typer.echo(
            render_tree_as_markdown(
                root, max_depth=max_depth, show_actions=show_actions, palette=palette
            ),
            nl=False,
        )


@app.command()
def dates(
    path: Path = typer.Argument(..., help="JSON outline of the bookmark tree"),
) -> None:
    """List dated bookmarks in PATH oldest first, without changing anything."""
    root = _load(path)
    try:
        records = sort_chronologically(collect_date_nodes(root))
        paths = build_path_index(root)
        references = [path_to_reference(paths.path_of(r.bookmark)) for r in records]
    except BookmarkSortError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    typer.echo(f"Found {len(records)} dated bookmarks:\n")
    for record, reference in zip(records, references, strict=True):
        typer.echo(f"  {record.token}  {record.bookmark.label}")
        typer.echo(f"    {reference}")
