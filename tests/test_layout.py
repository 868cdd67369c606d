"""Tests for warble.views.layout: choosing the template a render executes."""

from collections.abc import Callable, Mapping
from pathlib import Path

import pytest

from warble.config import ViewsConfig
from warble.context import RenderContext
from warble.errors import LayoutNotFound
from warble.views.discovery import build_registry
from warble.views.layout import resolve_layout
from warble.views.types import ViewRegistry

type WriteTree = Callable[[Mapping[str, str]], Path]


@pytest.fixture
def config(view_root: Path) -> ViewsConfig:
    return ViewsConfig(root=view_root)


@pytest.fixture
def registry(config: ViewsConfig, write_tree: WriteTree, site_files: dict[str, str]) -> ViewRegistry:
    write_tree(site_files)
    return build_registry(config)


class TestPages:
    def test_default_is_base(self, registry: ViewRegistry, config: ViewsConfig) -> None:
        page = registry.pages["index"]
        assert resolve_layout(page, RenderContext(), config) == "layouts/base"

    def test_override(self, registry: ViewRegistry, config: ViewsConfig) -> None:
        page = registry.pages["index"]
        assert resolve_layout(page, RenderContext(layout="alt"), config) == "layouts/alt"

    def test_missing_override_raises(self, registry: ViewRegistry, config: ViewsConfig) -> None:
        page = registry.pages["index"]
        with pytest.raises(LayoutNotFound) as exc_info:
            resolve_layout(page, RenderContext(layout="admin"), config)
        assert exc_info.value.layout == "layouts/admin"
        assert exc_info.value.view == "index"

    def test_skip(self, registry: ViewRegistry, config: ViewsConfig) -> None:
        page = registry.pages["index"]
        assert resolve_layout(page, RenderContext(skip_layout=True), config) == "main"

    def test_skip_wins_over_override(self, registry: ViewRegistry, config: ViewsConfig) -> None:
        page = registry.pages["index"]
        context = RenderContext(layout="admin", skip_layout=True)
        assert resolve_layout(page, context, config) == "main"


class TestPartials:
    def test_fixed_wrapper(self, registry: ViewRegistry, config: ViewsConfig) -> None:
        partial = registry.partials["nav"]
        assert resolve_layout(partial, RenderContext(), config) == "layouts/partial"

    def test_override_ignored(self, registry: ViewRegistry, config: ViewsConfig) -> None:
        partial = registry.partials["events/row"]
        context = RenderContext(layout="missing")
        assert resolve_layout(partial, context, config) == "layouts/partial"

    def test_skip(self, registry: ViewRegistry, config: ViewsConfig) -> None:
        partial = registry.partials["nav"]
        assert resolve_layout(partial, RenderContext(skip_layout=True), config) == "main"


class TestFallback:
    def test_tree_without_layouts_renders_body(
        self, config: ViewsConfig, write_tree: WriteTree
    ) -> None:
        write_tree({"index.html": "<p>hi</p>", "_card.html": "<div></div>"})
        registry = build_registry(config)

        assert resolve_layout(registry.pages["index"], RenderContext(), config) == "main"
        assert resolve_layout(registry.partials["card"], RenderContext(), config) == "main"

    def test_missing_override_still_raises_without_layouts(
        self, config: ViewsConfig, write_tree: WriteTree
    ) -> None:
        write_tree({"index.html": "<p>hi</p>"})
        registry = build_registry(config)
        with pytest.raises(LayoutNotFound):
            resolve_layout(registry.pages["index"], RenderContext(layout="base"), config)

    def test_custom_names(self, view_root: Path, write_tree: WriteTree) -> None:
        write_tree(
            {
                "shells/app.html": "{% block body %}{% end %}",
                "shells/fragment.html": "{% block body %}{% end %}",
                "index.html": "hi",
                "+card.html": "card",
            }
        )
        config = ViewsConfig(
            root=view_root,
            partial_prefix="+",
            layouts_dir="shells",
            default_layout="app",
            partial_layout="fragment",
            body_block="body",
        )
        registry = build_registry(config)

        assert resolve_layout(registry.pages["index"], RenderContext(), config) == "shells/app"
        assert resolve_layout(registry.partials["card"], RenderContext(), config) == "shells/fragment"
        assert resolve_layout(registry.pages["index"], RenderContext(skip_layout=True), config) == "body"
