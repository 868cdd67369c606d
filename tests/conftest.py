"""Shared fixtures: write view trees into a temporary directory."""

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import pytest

from warble.config import ViewsConfig
from warble.engine import Views

_SITE_TREE: dict[str, str] = {
    "layouts/base.html": (
        "<html><head><title>{% block title %}Site{% end %}</title></head>"
        '<body class="base">{% block main %}{% end %}</body></html>'
    ),
    "layouts/alt.html": '<div class="alt">{% block main %}{% end %}</div>',
    "layouts/partial.html": '<section class="partial-wrapper">{% block main %}{% end %}</section>',
    "index.html": "<p>Hello {{ name }}</p>",
    "events/list.html": (
        "{% block title %}Events{% end %}"
        '{% block main %}<ul class="events">{% for e in events %}<li>{{ e }}</li>{% end %}</ul>{% end %}'
    ),
    "_nav.html": "<nav>{{ active }}</nav>",
    "events/_row.html": "<li>{{ event }}</li>",
}


@pytest.fixture
def site_files() -> dict[str, str]:
    """The standard site tree: three layouts, two pages, two partials."""
    return dict(_SITE_TREE)


@pytest.fixture
def view_root(tmp_path: Path) -> Path:
    """An empty view root directory."""
    root = tmp_path / "views"
    root.mkdir()
    return root


@pytest.fixture
def write_tree(view_root: Path) -> Callable[[Mapping[str, str]], Path]:
    """Write ``{relative_path: source}`` under ``view_root`` and return it."""

    def _write(files: Mapping[str, str]) -> Path:
        for relative, source in files.items():
            path = view_root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(source, encoding="utf-8")
        return view_root

    return _write


@pytest.fixture
def make_views(
    view_root: Path,
    write_tree: Callable[[Mapping[str, str]], Path],
    site_files: dict[str, str],
) -> Callable[..., Views]:
    """Build ``Views`` over a tree written into ``view_root``.

    Usage::

        views = make_views({"index.html": "<p>hi</p>"}, injector=...)
    """

    def _make(
        files: Mapping[str, str] | None = None,
        *,
        config: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Views:
        write_tree(site_files if files is None else files)
        return Views(ViewsConfig(root=view_root, **(config or {})), **kwargs)

    return _make


@pytest.fixture
def site(make_views: Callable[..., Views]) -> Views:
    """Views over the standard site tree."""
    return make_views()
