"""CLI application entry point for infra-creator.

This module is the **sole error boundary** for the entire application.
It catches :class:`~infra_creator.exceptions.InfraCreatorError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering a
message on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; the menu loop lives in
  :mod:`infra_creator.cli.navigator`.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from infra_creator.cli import exit_codes
from infra_creator.cli.console import err_console, escape_markup
from infra_creator.config import AppConfig, load_config
from infra_creator.exceptions import InfraCreatorError
from infra_creator.utils.logger import get_logger, setup_logging
from infra_creator.version import __version__

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    There are no sub-commands: running ``infra-creator`` enters the
    interactive menu straight away.
    """
    parser = argparse.ArgumentParser(
        prog="infra-creator",
        description="Interactive menu for creating Azure infrastructure.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


# ---------------------------------------------------------------------------
# Menu wiring
# ---------------------------------------------------------------------------

def _run_menu(config: AppConfig) -> int:
    """Wire the placeholder adapters into a navigator and run it."""
    from infra_creator.cli.navigator import MenuNavigator
    from infra_creator.infra.ephemeral_settings_store import EphemeralSettingsStore
    from infra_creator.infra.placeholder_provisioner import PlaceholderProvisioner

    navigator = MenuNavigator(
        PlaceholderProvisioner(),
        EphemeralSettingsStore(),
        default_resource_group=config.default_resource_group,
    )
    return navigator.run()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the infra-creator CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    parser.parse_args(argv)

    config = load_config()
    setup_logging(config.log_level)
    logger.debug("Starting infra-creator %s", __version__)

    return _run_menu(config)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except InfraCreatorError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unhandled exception", exc_info=True)
        err_console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        sys.exit(exit_codes.GENERAL_ERROR)
