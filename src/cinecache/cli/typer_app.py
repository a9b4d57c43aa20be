"""
CineCache Typer CLI Application

Thin caller of :class:`~cinecache.services.repository.MovieRepository`:
each command runs one repository read and renders the result as a rich
table or, with ``--json``, as a JSON envelope. A Failure prints its
reason and exits with code 1.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cinecache.cli.context import CliContext, LogLevel, get_cli_context, set_cli_context
from cinecache.cli.error_handler import handle_cli_error
from cinecache.cli.json_formatter import format_json_output
from cinecache.cli.options import json_output_option, log_level_option, version_option
from cinecache.containers import Container
from cinecache.services.repository import MovieRepository
from cinecache.shared.constants import CLICommands, CLIDefaults, CLIHelp
from cinecache.shared.logging import setup_structured_logger
from cinecache.shared.models.movie import MovieDetail, MovieSummary
from cinecache.shared.result import Failure, OperationResult

__version__ = CLIDefaults.VERSION

app = typer.Typer(
    name=CLIHelp.APP_NAME,
    help=CLIHelp.APP_DESCRIPTION,
    rich_markup_mode=CLIHelp.APP_STYLE,
    no_args_is_help=True,
    invoke_without_command=True,
)


def create_container() -> Container:
    """Build the production object graph."""
    return Container()


@app.callback()
def main(
    log_level: Annotated[LogLevel | None, log_level_option] = None,
    json_output: Annotated[bool, json_output_option] = False,
    version: Annotated[bool, version_option] = False,
) -> None:
    """CineCache - Offline-first movie catalog backed by TMDB."""
    if version:
        typer.echo(CLIHelp.VERSION_TEXT.format(version=__version__))
        raise typer.Exit

    set_cli_context(CliContext(log_level=log_level, json_output=json_output))


@app.command(CLICommands.TRENDING, help=CLIHelp.TRENDING_HELP)
def trending_command() -> None:
    """Show this week's trending movies, or the cached list when offline."""
    _run(CLICommands.TRENDING, lambda repository: repository.get_trending())


@app.command(CLICommands.DETAIL, help=CLIHelp.DETAIL_HELP)
def detail_command(
    movie_id: Annotated[int, typer.Argument(help=CLIHelp.DETAIL_ID_HELP)],
) -> None:
    """Show a single movie, synthesized from the cache when offline."""
    _run(CLICommands.DETAIL, lambda repository: repository.get_detail(movie_id))


@app.command(CLICommands.SEARCH, help=CLIHelp.SEARCH_HELP)
def search_command(
    query: Annotated[str, typer.Argument(help=CLIHelp.SEARCH_QUERY_HELP)] = "",
) -> None:
    """Search cached titles. Never contacts TMDB."""
    _run(CLICommands.SEARCH, lambda repository: repository.search(query))


@app.command(CLICommands.CLEAR_CACHE, help=CLIHelp.CLEAR_CACHE_HELP)
def clear_cache_command() -> None:
    """Remove every cached movie."""
    context = get_cli_context()
    try:
        container = _prepare(context)
        store = container.movie_store()
        removed = store.count()
        store.clear()
    except Exception as e:  # noqa: BLE001
        exit_code = handle_cli_error(e, CLICommands.CLEAR_CACHE, json_output=context.json_output)
        raise typer.Exit(exit_code) from e

    if context.json_output:
        output = format_json_output(
            success=True,
            command=CLICommands.CLEAR_CACHE,
            data={"removed": removed},
        )
        typer.echo(output.decode("utf-8"))
    else:
        typer.echo(CLIHelp.CACHE_CLEARED.format(count=removed))


# ───────────────────────────── helpers ──────────────────────────────
def _prepare(context: CliContext) -> Container:
    """Create the container and configure logging from its settings."""
    container = create_container()
    settings = container.config()
    level = context.log_level.value if context.log_level else settings.logging.level
    setup_structured_logger(
        level=level,
        log_file=settings.logging.file,
        use_rich_console=settings.logging.console_output,
    )
    return container


def _run(
    command: str,
    call: Callable[[MovieRepository], Awaitable[OperationResult[Any]]],
) -> None:
    context = get_cli_context()
    try:
        container = _prepare(context)
        result = asyncio.run(_execute(container, call))
    except Exception as e:  # noqa: BLE001
        exit_code = handle_cli_error(e, command, json_output=context.json_output)
        raise typer.Exit(exit_code) from e

    if context.json_output:
        _render_json(command, result)
    else:
        _render_text(command, result)

    if isinstance(result, Failure):
        raise typer.Exit(CLIDefaults.EXIT_ERROR)


async def _execute(
    container: Container,
    call: Callable[[MovieRepository], Awaitable[OperationResult[Any]]],
) -> OperationResult[Any]:
    try:
        return await call(container.repository())
    finally:
        await container.tmdb_client().close()


def _render_json(command: str, result: OperationResult[Any]) -> None:
    if isinstance(result, Failure):
        output = format_json_output(
            success=False,
            command=command,
            errors=[result.reason],
            data={
                "error_code": result.code,
                "stage": result.stage,
            },
        )
    else:
        key = "movie" if isinstance(result.value, MovieDetail) else "movies"
        output = format_json_output(
            success=True,
            command=command,
            data={
                key: result.value,
                "source": result.source,
                "stage": result.stage,
            },
        )
    typer.echo(output.decode("utf-8"))


def _render_text(command: str, result: OperationResult[Any]) -> None:
    if isinstance(result, Failure):
        typer.echo(f"Error: {result.reason}", err=True)
        return

    console = Console()
    if isinstance(result.value, MovieDetail):
        _print_detail(console, result.value)
    else:
        _print_movies(console, result.value)

    if result.is_stale and command != CLICommands.SEARCH:
        console.print(f"[yellow]{CLIHelp.STALE_NOTICE}[/yellow]")


def _print_movies(console: Console, movies: list[MovieSummary]) -> None:
    table = Table(show_lines=False)
    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Overview", max_width=CLIDefaults.TABLE_OVERVIEW_WIDTH, overflow="ellipsis")

    for movie in movies:
        table.add_row(str(movie.id), escape(movie.title), escape(movie.overview))

    console.print(table)
    console.print(f"{len(movies)} movie(s)")


def _print_detail(console: Console, movie: MovieDetail) -> None:
    console.print(f"[bold]{escape(movie.title)}[/bold] [dim]({movie.id})[/dim]")
    if movie.poster_path:
        console.print(f"Poster: {escape(movie.poster_path)}")
    if movie.overview:
        console.print(escape(movie.overview))
