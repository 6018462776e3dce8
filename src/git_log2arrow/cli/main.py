"""Main CLI interface for Git Log2Arrow."""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from git_log2arrow.core.pipeline import write_log_stream
from git_log2arrow.core.source import GitCommitSource
from git_log2arrow.errors import GitLogArrowError
from git_log2arrow.models.filter import DEFAULT_MAX_COUNT, FilterConfig

# stdout carries the Arrow stream, so all text goes to stderr
console = Console(stderr=True)


@click.command(context_settings={"auto_envvar_prefix": "GIT_LOG2ARROW"})
@click.version_option(package_name="git-log2arrow-ipc-stream")
@click.option(
    "--trim-message", is_flag=True, help="Trim trailing newline from commit messages"
)
@click.option(
    "--max-count",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_COUNT,
    show_default=True,
    help="Maximum number of log entries to output",
)
@click.option("--author", help="Only include commits by this exact author name")
@click.option("--since", help="Show commits more recent than an RFC 3339 date")
@click.option("--until", help="Show commits older than an RFC 3339 date")
@click.option(
    "--repo-path",
    type=click.Path(file_okay=False),
    default=".",
    help="Path inside the git repository to read",
)
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr")
def main(
    trim_message: bool,
    max_count: int,
    author: Optional[str],
    since: Optional[str],
    until: Optional[str],
    repo_path: str,
    verbose: bool,
):
    """Write the commit history of HEAD to stdout as an Arrow IPC stream."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    # Unparsable dates simply leave the bound unset
    config = FilterConfig(
        author=author,
        since=since,
        until=until,
        max_count=max_count,
        trim_message=trim_message,
    )

    try:
        source = GitCommitSource.discover(Path(repo_path))
        write_log_stream(source, click.get_binary_stream("stdout"), config)
    except GitLogArrowError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort() from e


if __name__ == "__main__":
    main()
