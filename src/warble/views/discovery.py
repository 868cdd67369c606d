"""Filesystem discovery and registry compilation for a view tree.

Walks the view root once and discovers:
- files whose base name starts with ``_`` as partials
- files under ``layouts/`` (directly below the root) as layouts
- every other markup file as a page

Then compiles each file exactly once with kida and assembles the
immutable :class:`ViewRegistry`.  Any failure aborts the whole build
with :class:`ScanError`; a partially built registry is never returned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from warble.config import ViewsConfig
from warble.errors import ScanError
from warble.templating.integration import create_environment
from warble.views.naming import classify, is_markup, logical_name
from warble.views.types import CompiledView, SourceFile, ViewKind, ViewRegistry

if TYPE_CHECKING:
    from kida.template import Template

logger = logging.getLogger("warble.views")


def discover_sources(config: ViewsConfig) -> list[SourceFile]:
    """Walk the view root and classify every markup file.

    Args:
        config: View configuration (root, extensions, conventions).

    Returns:
        Classified source files in sorted walk order.

    Raises:
        ScanError: If the root is missing, a directory cannot be read,
            or two files derive the same logical name.
    """
    root = Path(config.root).resolve()
    if not root.is_dir():
        raise ScanError(str(root), "view root is not a directory")

    sources: list[SourceFile] = []
    _walk_directory(root, root, config, sources)
    _check_unique(sources)
    return sources


def _walk_directory(
    directory: Path,
    root: Path,
    config: ViewsConfig,
    sources: list[SourceFile],
) -> None:
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        raise ScanError(str(directory), str(exc)) from exc

    for item in entries:
        if item.name.startswith("."):
            continue
        if item.is_dir():
            _walk_directory(item, root, config, sources)
            continue
        if not item.is_file() or not is_markup(item, config):
            continue

        relative = item.relative_to(root)
        kind = classify(relative, config)
        if kind is ViewKind.PARTIAL and relative.stem == config.partial_prefix:
            raise ScanError(str(item), "partial file has no name after the marker")
        sources.append(SourceFile(path=item, kind=kind, name=logical_name(relative, kind, config)))


def _check_unique(sources: list[SourceFile]) -> None:
    """Fail on two files deriving the same name within one namespace.

    Pages have their own namespace.  Partials and layouts share one,
    since both are attached to views under their logical names.
    """
    seen: dict[tuple[bool, str], Path] = {}
    for source in sources:
        key = (source.kind is ViewKind.PAGE, source.name)
        previous = seen.get(key)
        if previous is not None:
            raise ScanError(
                str(source.path),
                f"logical name {source.name!r} is already used by {previous}",
            )
        seen[key] = source.path


def build_registry(
    config: ViewsConfig,
    *,
    filters: Mapping[str, Callable[..., Any]] | None = None,
    globals_: Mapping[str, Any] | None = None,
) -> ViewRegistry:
    """Scan the view tree and compile the registry.

    Called once at startup.  Every page is attached to every layout and
    partial; every partial is attached to the same set, so the fixed
    partial wrapper and sibling partials are reachable from it.

    Args:
        config: View configuration.
        filters: Extra kida filters.
        globals_: Extra kida globals (static, shared by every request).

    Returns:
        The immutable registry.

    Raises:
        ConfigurationError: If *config* is invalid.
        ScanError: On any I/O or template syntax failure.
    """
    config.validate()
    sources = discover_sources(config)
    texts = {source.path: _read_source(source) for source in sources}

    attachable = {
        source.name: texts[source.path]
        for source in sources
        if source.kind is not ViewKind.PAGE
    }
    env = create_environment(config, attachable, filters, globals_)

    # Compile attachable templates once; every view shares the same objects
    compiled: dict[str, Template] = {}
    for source in sources:
        if source.kind is ViewKind.PAGE:
            continue
        compiled[source.name] = _compile(source, lambda name=source.name: env.get_template(name))
    attached: Mapping[str, Template] = MappingProxyType(compiled)

    pages: dict[str, CompiledView] = {}
    partials: dict[str, CompiledView] = {}
    layouts: list[str] = []

    for source in sources:
        if source.kind is ViewKind.LAYOUT:
            layouts.append(source.name)
            continue

        if source.kind is ViewKind.PARTIAL:
            root = compiled[source.name]
            target = partials
        else:
            root = _compile(source, lambda text=texts[source.path]: env.from_string(text))
            target = pages

        target[source.name] = CompiledView(
            name=source.name,
            kind=source.kind,
            path=source.path,
            root=root,
            blocks=tuple(root.list_blocks()),
            attached=attached,
        )

    logger.info(
        "Built view registry from %s: %d pages, %d partials, %d layouts",
        config.root,
        len(pages),
        len(partials),
        len(layouts),
    )
    return ViewRegistry(
        pages=MappingProxyType(pages),
        partials=MappingProxyType(partials),
        layouts=tuple(sorted(layouts)),
    )


def _read_source(source: SourceFile) -> str:
    try:
        return source.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ScanError(str(source.path), f"cannot read template: {exc}") from exc


def _compile(source: SourceFile, compile_: Callable[[], Template]) -> Template:
    """Run a kida compile step, converting any failure into ``ScanError``."""
    try:
        return compile_()
    except Exception as exc:
        raise ScanError(str(source.path), f"cannot compile {source.kind.value}: {exc}") from exc
