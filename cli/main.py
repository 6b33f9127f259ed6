"""
Main entry point for the hashcheck CLI.
- Sets up the Click command group and context object.
- Dynamically loads all CLI commands from this directory.
"""
import os
import sys
import importlib
import click
import logging
import rich_click as rclick
from pydantic import ValidationError
from services.hashing_service import HashingService
from utils.hashcheck_config import load_hashing_settings, DEFAULT_CONFIG_PATH
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


@rclick.group()
@click.option('--logfile', '-l', type=click.Path(dir_okay=False, writable=True), help="Log to file")
@click.option('--verbose', '-v', count=True, help="Set verbosity level (-v = INFO, -vv = DEBUG)")
@click.option('--config', '-c', type=click.Path(dir_okay=False), default=DEFAULT_CONFIG_PATH, help="Path to config file (optional)")
@click.pass_context
def hashcheck_cli(ctx: click.Context, verbose: int, logfile: str, config: str) -> None:
    """
    Main CLI group. Sets up the context object with the hashing settings and service.
    All subcommands share this context.

    Args:
        ctx (click.Context): Click context for Click command group.
        verbose (int): Verbosity level (-v = INFO, -vv = DEBUG).
        logfile (str): Path to log file.
        config (str): Path to configuration file.

    Returns:
        None
    """
    # Tests and embedding callers may pass a ready-made context object
    if ctx.obj and all(k in ctx.obj for k in ("settings", "hashing")):
        return

    setup_logging(verbosity=verbose, logfile=logfile)

    try:
        settings = load_hashing_settings(config)
    except (ValidationError, ValueError) as e:
        logger.error(f"Invalid configuration in {config}: {e}")
        click.secho(f"❌ Invalid configuration: {e}", fg="red", bold=True, err=True)
        sys.exit(2)

    ctx.obj = {
        "settings": settings,
        "hashing": HashingService(
            chunk_size=settings.read_chunk_size,
            case_mode=settings.case,
            parallel=settings.parallel,
        ),
    }


# Dynamic discovery loop: auto-register all CLI commands in this directory
COMMAND_DIR = os.path.dirname(__file__)
for filename in sorted(os.listdir(COMMAND_DIR)):
    # Only import .py files that are not main.py or __init__.py
    if filename.endswith(".py") and filename not in {"main.py", "__init__.py"}:
        command_name = filename[:-3]
        module_name = f"cli.{command_name}"
        try:
            module = importlib.import_module(module_name)
            cli_function = getattr(module, command_name, None)
            if cli_function:
                hashcheck_cli.add_command(cli_function)
            else:
                logger.debug(f"No command function found in {module_name}")
        except Exception as e:
            logger.debug(f"Failed to import {module_name}: {e}")
    else:
        logger.debug(f"Skipping non-Python file: {filename}")

if __name__ == '__main__':
    hashcheck_cli()
