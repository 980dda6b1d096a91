from __future__ import annotations

from pathlib import Path

import pytest

from ad_common.errors import ConfigurationError
from ad_nav.loader import load_forest, load_fragments, parse_fragment
from ad_nav.models import NodeKind
from ad_nav.resolver import resolve_forest
from ad_nav.roles import Role

pytestmark = pytest.mark.unit_nav

NAV_YAML = """\
fragments:
  admin:
    - key: apps
      title: Apps
      type: NAV_ITEM_TYPE_TITLE
      authority: [SuperAdmin, admin]
      subMenu:
        - key: apps.shops
          path: /app/shop-list
          title: Shops
          translateKey: nav.shops
          type: item
          authority: [admin]
  driver:
    - key: drv
      title: Driver
      type: title
      authority: [driver]
      subMenu:
        - key: drv.myworks
          path: /drv/soon
          title: My works
          authority: [driver]
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "navigation.yaml"
    path.write_text(text)
    return path


def test_load_fragments_in_file_order(tmp_path: Path) -> None:
    fragments = load_fragments(_write(tmp_path, NAV_YAML))

    assert list(fragments) == ["admin", "driver"]
    apps = fragments["admin"][0]
    assert apps.kind is NodeKind.TITLE
    assert apps.allowed_roles == {Role.SUPERADMIN, Role.ADMIN}
    assert apps.children[0].translate_key == "nav.shops"
    assert fragments["driver"][0].children[0].kind is NodeKind.ITEM


def test_loaded_forest_resolves(tmp_path: Path) -> None:
    forest = load_forest(_write(tmp_path, NAV_YAML))

    menu = resolve_forest(forest, {Role.DRIVER})

    assert [node.key for node in menu] == ["drv"]


def test_duplicate_keys_in_fragment_rejected() -> None:
    nodes = [
        {"key": "a", "title": "A", "type": "collapse", "authority": ["admin"],
         "subMenu": [{"key": "a", "title": "Again", "authority": ["admin"]}]},
    ]

    with pytest.raises(ConfigurationError, match="Duplicate navigation keys"):
        parse_fragment("admin", nodes)


def test_unknown_role_rejected() -> None:
    with pytest.raises(ConfigurationError, match="Invalid navigation node"):
        parse_fragment("admin", [{"key": "a", "title": "A", "authority": ["janitor"]}])


def test_fragment_must_be_list() -> None:
    with pytest.raises(ConfigurationError):
        parse_fragment("admin", {"key": "a"})


@pytest.mark.parametrize(
    "text",
    ["fragments: {}\n", "- a\n- b\n", "fragments: [unclosed\n", "other: 1\n"],
)
def test_malformed_files_rejected(tmp_path: Path, text: str) -> None:
    with pytest.raises(ConfigurationError):
        load_fragments(_write(tmp_path, text))


def test_missing_file_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_fragments(tmp_path / "nope.yaml")
