"""Data models for convention-based view discovery.

Immutable frozen dataclasses representing classified source files,
compiled views and the registry that owns them.  Built once at startup
by :func:`warble.views.discovery.build_registry`, then only read.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kida.template import Template


class ViewKind(enum.Enum):
    """What a markup file is, decided by its name and location."""

    PAGE = "page"
    PARTIAL = "partial"
    LAYOUT = "layout"


@dataclass(frozen=True, slots=True)
class SourceFile:
    """A markup file classified during discovery.

    Attributes:
        path: Absolute filesystem path.
        kind: Page, Partial or Layout.
        name: Logical name (root, extension and partial marker removed).
    """

    path: Path
    kind: ViewKind
    name: str


@dataclass(frozen=True, slots=True)
class CompiledView:
    """A page or partial together with every template it may reference.

    Attributes:
        name: Logical name of the view.
        kind: ``ViewKind.PAGE`` or ``ViewKind.PARTIAL``.
        path: Source file the root template was compiled from.
        root: The view's own compiled template.
        blocks: Names of the blocks the view's source declares.
        attached: Layouts and partials reachable by logical name.
    """

    name: str
    kind: ViewKind
    path: Path
    root: Template
    blocks: tuple[str, ...]
    attached: Mapping[str, Template]

    @property
    def is_partial(self) -> bool:
        return self.kind is ViewKind.PARTIAL

    def lookup(self, name: str) -> Template | None:
        """Return the attached template called *name*, if any."""
        return self.attached.get(name)

    def has_block(self, name: str) -> bool:
        return name in self.blocks


@dataclass(frozen=True, slots=True)
class ViewRegistry:
    """Pages and partials by logical name.

    The two namespaces are separate: a page and a partial may share a
    logical name.  Safe to read from any number of threads.

    Attributes:
        pages: Page views by logical name.
        partials: Partial views by logical name.
        layouts: Logical names of every discovered layout.
    """

    pages: Mapping[str, CompiledView]
    partials: Mapping[str, CompiledView]
    layouts: tuple[str, ...]

    def page(self, name: str) -> CompiledView | None:
        return self.pages.get(name)

    def partial(self, name: str) -> CompiledView | None:
        return self.partials.get(name)

    def find(self, name: str) -> CompiledView | None:
        """Look up *name* among partials first, then pages."""
        view = self.partials.get(name)
        if view is None:
            view = self.pages.get(name)
        return view
