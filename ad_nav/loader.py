"""Load navigation fragments from YAML files."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ad_common.errors import ConfigurationError
from ad_nav.models import NavigationNode, iter_nodes
from ad_nav.resolver import Forest, compose_forest

logger = logging.getLogger(__name__)


def _read_mapping(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(
            f"Navigation file not found: {path}", context={"path": path}
        )
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Navigation file is not valid YAML: {path}", context={"path": path}, cause=exc
        ) from exc
    if not isinstance(data, dict):
        raise ConfigurationError("Navigation file must contain a mapping at the top level.")
    return data


def parse_fragment(name: str, raw_nodes: Any) -> Forest:
    """Validate one fragment (a list of node mappings)."""
    if not isinstance(raw_nodes, list):
        raise ConfigurationError(
            f"Fragment '{name}' must be a list of navigation nodes."
        )
    try:
        nodes = tuple(NavigationNode.model_validate(raw) for raw in raw_nodes)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid navigation node in fragment '{name}'",
            context={"errors": [err["msg"] for err in exc.errors()]},
            cause=exc,
        ) from exc
    duplicates = sorted(
        key for key, count in Counter(node.key for node in iter_nodes(nodes)).items() if count > 1
    )
    if duplicates:
        raise ConfigurationError(
            f"Duplicate navigation keys in fragment '{name}': {', '.join(duplicates)}",
            context={"fragment": name, "keys": duplicates},
        )
    return nodes


def load_fragments(path: Path) -> dict[str, Forest]:
    """Return the fragments declared in *path*, in file order."""
    data = _read_mapping(path)
    raw_fragments = data.get("fragments")
    if not isinstance(raw_fragments, dict) or not raw_fragments:
        raise ConfigurationError("Navigation file needs a non-empty 'fragments' mapping.")
    fragments = {
        str(name): parse_fragment(str(name), nodes) for name, nodes in raw_fragments.items()
    }
    logger.debug("Loaded %d navigation fragments from %s", len(fragments), path)
    return fragments


def load_forest(path: Path) -> Forest:
    return compose_forest(*load_fragments(path).values())
