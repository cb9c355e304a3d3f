"""
bracketcalc CLI - Entry point.

Commands:

- repl: read expressions from standard input, one per line (default)
- eval: evaluate a single expression given on the command line
"""

from __future__ import annotations

import logging
import platform
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.text import Text

from bracketcalc._version import get_version
from bracketcalc.core.config import CalcConfig, load_config, with_overrides
from bracketcalc.core.errors import CalcError, ConfigError
from bracketcalc.core.expression_lang.render import format_number
from bracketcalc.core.pipeline import LineResult, run_line

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)

app = typer.Typer(
    help="""bracketcalc - arithmetic with + - * / ^ and brackets of any shape

Each line is tokenized, parsed, reconstructed and evaluated, and every
stage is printed:

  tokenstream:          the token list, brackets resolved into groups
  abstract syntax tree: the parsed tree
  reconstructed input:  the tree written back out as text
  = result
""",
    no_args_is_help=False,
)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"bracketcalc version {get_version()}")
        typer.echo(f"Python {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


def _print_error(error: CalcError) -> None:
    err_console.print(Text.assemble(("error: ", "bold red"), str(error)), soft_wrap=True)


def _print_result(result: LineResult, config: CalcConfig) -> None:
    if config.show_tokens:
        typer.echo(f"tokenstream: {list(result.tokens)!r}")
    if config.show_tree:
        typer.echo(f"abstract syntax tree: {result.tree!r}")
    if config.show_reconstructed:
        typer.echo(f"reconstructed input: {result.reconstructed}")
    typer.echo(f"= {format_number(result.value)}")


def _run_repl(config: CalcConfig) -> None:
    """Read and evaluate lines until standard input ends."""
    stdin = typer.get_text_stream("stdin")
    while True:
        if config.prompt:
            typer.echo(config.prompt)
        line = stdin.readline()
        if not line:
            break
        try:
            result = run_line(line)
        except CalcError as e:
            logger.info("Rejected line %r: %s", line, e.message)
            _print_error(e)
            if config.fail_fast:
                raise typer.Exit(code=1) from e
            continue
        _print_result(result, config)


def _configure(
    ctx: typer.Context,
    quiet: bool,
    fail_fast: bool | None = None,
    prompt: str | None = None,
) -> CalcConfig:
    """Merge command options over the loaded config."""
    config: CalcConfig = ctx.obj or CalcConfig()
    updates: dict[str, object] = {}
    if quiet:
        updates.update(show_tokens=False, show_tree=False, show_reconstructed=False)
    if fail_fast is not None:
        updates["fail_fast"] = fail_fast
    if prompt is not None:
        updates["prompt"] = prompt
    return with_overrides(config, **updates)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file (default: ./bracketcalc.toml if present)",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level for diagnostics on stderr (DEBUG, INFO, WARNING, ...)",
    ),
) -> None:
    """bracketcalc main callback for global options."""
    try:
        config = load_config(config_file)
        if log_level is not None:
            config = with_overrides(config, log_level=log_level)
    except ConfigError as e:
        _print_error(e)
        raise typer.Exit(code=2) from e

    logging.basicConfig(
        level=config.log_level_value,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("bracketcalc").setLevel(config.log_level_value)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        _run_repl(config)


@app.command()
def repl(
    ctx: typer.Context,
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Only print the result of each line"
    ),
    fail_fast: bool | None = typer.Option(
        None,
        "--fail-fast/--keep-going",
        help="Stop at the first malformed line (default: keep going)",
    ),
    prompt: str | None = typer.Option(None, "--prompt", help="Text shown before each read"),
) -> None:
    """Evaluate expressions read from standard input, one per line."""
    _run_repl(_configure(ctx, quiet, fail_fast, prompt))


@app.command("eval")
def eval_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to evaluate, e.g. '(2+3)*4'"),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Only print the result"
    ),
) -> None:
    """Evaluate a single expression."""
    config = _configure(ctx, quiet)
    try:
        result = run_line(expression)
    except CalcError as e:
        _print_error(e)
        raise typer.Exit(code=1) from e
    _print_result(result, config)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, prog_name="bracketcalc")


if __name__ == "__main__":
    main(sys.argv[1:])
