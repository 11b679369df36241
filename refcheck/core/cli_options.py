#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click option decorators for refcheck commands.

Usage:
    from refcheck.core.cli_options import verbose_option, log_dir_option

    @click.command()
    @verbose_option
    @log_dir_option
    def my_command(verbose, log_dir):
        pass
"""
import click


# Environment variable read by --log-dir
LOG_DIR_ENVVAR = "REFCHECK_LOG_DIR"


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Be more verbose"
)

log_dir_option = click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=None,
    envvar=LOG_DIR_ENVVAR,
    show_envvar=True,
    help="Directory for log files (file logging is off when unset)"
)

color_option = click.option(
    "--color/--no-color",
    default=None,
    help="Force or disable colored output (default: auto-detect)"
)


# ═══════════════════════════════════════════════════════════════════════════
# PATH OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

# Existence is checked by the command so a missing path exits with status 1
file_option = click.option(
    "--file", "file_path",
    type=click.Path(),
    default=None,
    help="Specify a markdown file to check"
)

directory_option = click.option(
    "--directory", "directory",
    type=click.Path(),
    default=None,
    help="Specify a directory to check"
)
