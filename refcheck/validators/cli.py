#!/usr/bin/env python3
"""
cli.py
------
Command line entry point for refcheck.

Checks that every footnote marker (``[^N]``) in a markdown file has a
matching definition line (``[^N]: ...``).

Usage:
    refcheck                        # Check all markdown files in the current directory
    refcheck --file notes.md        # Check a single file
    refcheck --directory docs       # Check all markdown files in docs/
    refcheck --verbose              # Also print the ids found in each file
    refcheck --log-dir logs         # Keep a log of the run under logs/operations

Exit status:
    0  every checked document has a definition for each reference
    1  a document has missing definitions, the invocation is invalid,
       or a document could not be read
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import sys
from pathlib import Path
from typing import Optional

# --- Third party imports ---
import click

# --- Local imports ---
from refcheck.core.cli import setup_logger
from refcheck.core.cli_options import (
    color_option,
    directory_option,
    file_option,
    log_dir_option,
    verbose_option,
)
from refcheck.core.console import ConsoleReporter
from refcheck.core.exceptions import InvocationError, RefcheckError
from refcheck.core.logging_manager import handle_cli_error, safe_logger
from refcheck.utils.fs import resolve_path
from refcheck.validators.documents import ReferenceChecker


class RefcheckCommand(click.Command):
    """Click command whose usage errors exit with status 1."""

    def main(self, *args, **kwargs):
        kwargs["standalone_mode"] = False
        try:
            rv = super().main(*args, **kwargs)
        except click.ClickException as e:
            e.show()
            sys.exit(1)
        except click.exceptions.Abort:
            click.echo("Aborted!", err=True)
            sys.exit(1)
        sys.exit(rv if isinstance(rv, int) else 0)


def resolve_target(file_path: Optional[str], directory: Optional[str]) -> Path:
    """
    Pick the path to check from the command line options.

    Raises:
        InvocationError: If both options are given or the path does not exist
    """
    if file_path and directory:
        raise InvocationError("Please provide only one of --file or --directory.")

    value = file_path or directory
    if value is None:
        return Path.cwd()

    target = resolve_path(value)
    if not target.exists():
        raise InvocationError(
            f"Invalid argument or file does not exist: {value}", argument=value
        )
    return target


@click.command(cls=RefcheckCommand, context_settings={"help_option_names": ["-h", "--help"]})
@file_option
@directory_option
@verbose_option
@log_dir_option
@color_option
@click.pass_context
def cli(
    ctx: click.Context,
    file_path: Optional[str],
    directory: Optional[str],
    verbose: bool,
    log_dir: Optional[str],
    color: Optional[bool],
) -> None:
    """
    Check markdown footnote references.

    Reports every [^N] marker that has no "[^N]: ..." definition line in
    the same document. Defaults to checking all markdown files in the
    current directory.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["color"] = color
    ctx.obj["logger"] = setup_logger(Path(log_dir), "refcheck") if log_dir else None

    logger = ctx.obj["logger"]
    reporter = ConsoleReporter(color=color)

    try:
        target = resolve_target(file_path, directory)
        safe_logger(logger).log_operation("check_start", {"target": str(target)})

        checker = ReferenceChecker(reporter, logger, verbose)
        success = checker.check_path(target)

        safe_logger(logger).log_operation("check_complete", {
            "target": str(target),
            "success": success,
            "summary": checker.stats.summary(),
            **checker.stats.to_dict(),
        })
    except InvocationError as e:
        context = {"argument": e.argument} if e.argument is not None else None
        handle_cli_error(ctx, e, "check", context)
        return
    except (RefcheckError, OSError) as e:
        handle_cli_error(ctx, e, "check")
        return

    if success:
        reporter.emit("✓ All checks passed.", "success")
        ctx.exit(0)

    reporter.emit("✗ Some checks failed.", "error")
    ctx.exit(1)


def main() -> None:
    """Console script entry point."""
    cli(prog_name="refcheck")


if __name__ == "__main__":
    main()
