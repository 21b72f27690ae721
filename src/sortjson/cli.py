from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

import typer

from sortjson import __version__
from sortjson.config import default_config, find_config
from sortjson.exceptions import ConfigValidationError
from sortjson.processing import FileResult, FileStatus, RunOptions, RunSummary, iter_results
from sortjson.runtime.discovery import expand_globs
from sortjson.runtime.file_system import FileSystem, LocalFileSystem

EchoFn = Callable[..., None]

_HELP = """Sort the keys of JSON files.

FILES are paths or glob patterns; without them the `include` patterns of the
config file (.sortjsonrc.json, .sortjsonrc or sortjson.config.json) are used.
"""

_EPILOG = """Examples:

  sort-json                          # uses config file settings

  sort-json config.json              # sort a specific file

  sort-json "**/*.json"              # sort all JSON files

  sort-json --check "src/**/*.json"  # check that files are sorted

  sort-json --verbose                # show which config is applied
"""

_STATUS_ICONS: dict[FileStatus, tuple[str, str]] = {
    FileStatus.SUCCESS: ("✓", typer.colors.GREEN),
    FileStatus.SKIPPED: ("⚠", typer.colors.YELLOW),
    FileStatus.ERROR: ("✗", typer.colors.RED),
    FileStatus.CHANGED: ("✗", typer.colors.RED),
}

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def render_result(result: FileResult, *, verbose: bool) -> str:
    icon, color = _STATUS_ICONS[result.status]
    line = f"{typer.style(icon, fg=color)} {result.path}"
    if result.message:
        line += f" ({result.message})"
    if verbose:
        source = (
            f'pattern: "{result.matched_pattern}"'
            if result.matched_pattern is not None
            else "default"
        )
        line += " " + typer.style(
            f"[sortFrom={result.sort_from}, {source}]",
            fg=typer.colors.BRIGHT_BLACK,
        )
    return line


def run(
    fs: FileSystem,
    patterns: List[str],
    options: RunOptions,
    *,
    quiet: bool = False,
    verbose: bool = False,
    echo_fn: EchoFn = typer.echo,
) -> int:
    """Sort or check files and return the process exit code."""
    try:
        loaded = find_config(fs)
    except ConfigValidationError as exc:
        echo_fn(f"Error: {exc}", err=True)
        for issue in exc.issues[1:]:
            echo_fn(f"  {issue.message}", err=True)
        return 1
    config = loaded.config if loaded is not None else default_config()
    if verbose and loaded is not None:
        echo_fn(f"Using config: {loaded.source}")

    targets = patterns or list(config.include)
    files = expand_globs(
        fs,
        targets,
        ignore=[*options.ignore, *config.ignore],
        respect_gitignore=options.respect_gitignore,
    )
    if not files:
        if patterns:
            echo_fn("Error: No files found matching the patterns", err=True)
        else:
            echo_fn(
                "Error: No files found. Create .sortjsonrc.json or specify files.",
                err=True,
            )
        return 1

    summary = RunSummary()
    for result in iter_results(fs, files, config, options):
        summary.add(result)
        if quiet and result.status is FileStatus.SUCCESS:
            continue
        echo_fn(render_result(result, verbose=verbose))

    if not quiet:
        echo_fn("")
        echo_fn(summary.describe())
    return summary.exit_code


@app.command(help=_HELP, epilog=_EPILOG)
def main(
    files: Optional[List[str]] = typer.Argument(None, metavar="[FILES]..."),
    check: bool = typer.Option(
        False, "--check", "-c", help="Check if files are sorted (exit 1 if not)."
    ),
    write: bool = typer.Option(
        True, "--write/--no-write", "-w", help="Write changes to files."
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Force processing of JSONC files (comments will be lost).",
    ),
    indent: int = typer.Option(2, "--indent", "-i", min=1, help="Indentation width."),
    tabs: bool = typer.Option(False, "--tabs", help="Use tabs for indentation."),
    sort_from: Optional[int] = typer.Option(
        None,
        "--sort-from",
        min=0,
        help="Depth to start sorting from (0=root, 1=children, etc.).",
    ),
    ignore: Optional[List[str]] = typer.Option(
        None,
        "--ignore",
        help="Ignore files matching pattern (can be used multiple times).",
    ),
    gitignore: bool = typer.Option(
        True, "--gitignore/--no-gitignore", help="Respect the .gitignore file."
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress output."),
    verbose: bool = typer.Option(
        False, "--verbose", help="Show the applied config per file."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version.",
    ),
) -> None:
    options = RunOptions(
        check=check,
        write=write and not check,
        force=force,
        indent=indent,
        tabs=tabs,
        sort_from=sort_from,
        ignore=tuple(ignore or ()),
        respect_gitignore=gitignore,
    )
    exit_code = run(
        LocalFileSystem(Path.cwd()),
        list(files or ()),
        options,
        quiet=quiet,
        verbose=verbose,
    )
    raise typer.Exit(code=exit_code)
