"""Allow ``python -m infra_creator`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m infra_creator`` behaves identically to the
``infra-creator`` console script.
"""

from __future__ import annotations

from infra_creator.cli.app import cli

if __name__ == "__main__":
    cli()
