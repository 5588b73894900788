"""
Main CLI entry point for the tree visitor.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import importlib
from typing import Dict, Optional

import click

_COMMANDS: Dict[str, str] = {
    "walk": "visit_parents.cli.walk_cli:walk",
    "count": "visit_parents.cli.walk_cli:count",
}


def _load_click_command(import_path: str) -> click.Command:
    module_path, obj_name = import_path.split(":", 1)
    mod = importlib.import_module(module_path)
    return getattr(mod, obj_name)


class LazyGroup(click.Group):
    """Click group that loads subcommands on demand."""

    def list_commands(self, ctx: click.Context) -> list:
        return sorted(_COMMANDS.keys())

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        target = _COMMANDS.get(cmd_name)
        if not target:
            return None
        return _load_click_command(target)


@click.group(cls=LazyGroup)
def cli() -> None:
    """Walk unist-style JSON trees, printing nodes with their ancestors."""
    pass


if __name__ == "__main__":
    cli()
