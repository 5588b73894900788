"""
CLI commands that walk a JSON tree file.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Optional

import click

from ..core.config import WalkConfig, load_config
from ..core.exceptions import VisitParentsError
from ..engine import SKIP, convert, describe_node, node_type, visit_parents
from ..engine.matcher import Test
from ..logging import configure_logging
from ..selector import parse_test

logger = logging.getLogger(__name__)


def _resolve_config(config_path: Optional[Path], **overrides: Any) -> WalkConfig:
    """Load the config file (if any) and apply command-line overrides."""
    try:
        base = load_config(config_path) if config_path else WalkConfig()
        return base.merged(**overrides)
    except VisitParentsError as e:
        raise click.ClickException(e.message)
    except ValueError as e:
        raise click.ClickException(f"Invalid option: {e}")


def _load_tree(tree_file: Path) -> Dict[str, Any]:
    """Load a unist JSON tree; the root must be an object with a 'type'."""
    try:
        with open(tree_file, "r", encoding="utf-8") as f:
            tree = json.load(f)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON in {tree_file}: {e}")
    if not isinstance(tree, dict) or "type" not in tree:
        raise click.ClickException(
            f"Tree root in {tree_file} must be a JSON object with a 'type' field"
        )
    return tree


def _parse_selector(selector: Optional[str]) -> Test:
    if not selector:
        return None
    try:
        return parse_test(selector)
    except VisitParentsError as e:
        raise click.ClickException(e.message)


def _collect(
    tree: Dict[str, Any], test: Test, config: WalkConfig
) -> List[Dict[str, Any]]:
    """
    Walk `tree` and return one record per node passing `test`.

    Every node is offered to the visitor so that the depth limit applies to
    non-matching nodes as well; selectors only test type and properties, so the
    check is called without an index.
    """
    check = convert(test)
    records: List[Dict[str, Any]] = []

    def visitor(node: Any, ancestors: list) -> Any:
        depth = len(ancestors)
        parent = ancestors[-1] if ancestors else None
        if check(node, None, parent):
            records.append(
                {
                    "type": node_type(node),
                    "depth": depth,
                    "path": [node_type(a) for a in ancestors],
                    "label": describe_node(node),
                }
            )
        if config.max_depth is not None and depth >= config.max_depth:
            return SKIP
        return None

    visit_parents(
        tree, None, visitor, config.reverse, annotate_errors=config.annotate_errors
    )
    logger.info(f"Collected {len(records)} nodes")
    return records


_tree_argument = click.argument(
    "tree_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
_test_option = click.option(
    "--test",
    "-t",
    "selector",
    type=str,
    default=None,
    help='Selector, e.g. "heading[depth=1], paragraph"',
)
_config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON configuration file",
)
_format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default=None,
    help="Output format",
)
_log_level_option = click.option(
    "--log-level", type=str, default=None, help="Logging level (default: WARNING)"
)
_max_depth_option = click.option(
    "--max-depth", type=int, default=None, help="Do not descend below this depth"
)


@click.command()
@_tree_argument
@_test_option
@click.option(
    "--reverse/--forward", default=None, help="Visit siblings from last to first"
)
@_max_depth_option
@_format_option
@_config_option
@_log_level_option
def walk(
    tree_file: Path,
    selector: Optional[str],
    reverse: Optional[bool],
    max_depth: Optional[int],
    output_format: Optional[str],
    config_path: Optional[Path],
    log_level: Optional[str],
) -> None:
    """Print every node of TREE_FILE that passes the test, in visit order."""
    config = _resolve_config(
        config_path,
        reverse=reverse,
        max_depth=max_depth,
        output_format=output_format,
        log_level=log_level,
    )
    configure_logging(config.log_level)
    records = _collect(_load_tree(tree_file), _parse_selector(selector), config)

    if config.output_format == "json":
        click.echo(json.dumps(records, indent=2, ensure_ascii=False))
        return
    for record in records:
        click.echo("  " * record["depth"] + record["label"])


@click.command()
@_tree_argument
@_test_option
@_max_depth_option
@_format_option
@_config_option
@_log_level_option
def count(
    tree_file: Path,
    selector: Optional[str],
    max_depth: Optional[int],
    output_format: Optional[str],
    config_path: Optional[Path],
    log_level: Optional[str],
) -> None:
    """Count nodes of TREE_FILE that pass the test, grouped by type."""
    config = _resolve_config(
        config_path,
        max_depth=max_depth,
        output_format=output_format,
        log_level=log_level,
    )
    configure_logging(config.log_level)
    records = _collect(_load_tree(tree_file), _parse_selector(selector), config)
    counts = Counter(record["type"] for record in records)

    if config.output_format == "json":
        click.echo(json.dumps(dict(counts.most_common()), indent=2))
        return
    for kind, n in counts.most_common():
        click.echo(f"{kind}\t{n}")
