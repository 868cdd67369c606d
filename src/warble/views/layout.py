"""Layout negotiation.

Decides which template a render executes, from the request-scoped
overrides and the kind of view being rendered:

- **Skip requested**: the view's own body block, no wrapper.
- **Partial**: the fixed ``layouts/partial`` wrapper, whatever the
  caller asked for.
- **Explicit override**: ``layouts/<override>``.  An override the view
  cannot reach is an error, never silently replaced.
- **Page, no override**: ``layouts/base``.

When a default wrapper (``base`` or ``partial``) is not part of the
view's attached set, the body block is executed instead.  This lets a
tree without layouts render its pages bare.
"""

from __future__ import annotations

import logging

from warble.config import ViewsConfig
from warble.context import RenderContext
from warble.errors import LayoutNotFound
from warble.views.types import CompiledView

logger = logging.getLogger("warble.views")


def resolve_layout(view: CompiledView, context: RenderContext, config: ViewsConfig) -> str:
    """Return the name of the template to execute for *view*.

    The result is either a layouts-qualified name present in
    ``view.attached`` or ``config.body_block``.

    Raises:
        LayoutNotFound: If an explicit override names a layout that is not
            attached to *view*.
    """
    state = context.state
    if state == "skip":
        return config.body_block

    if view.is_partial:
        layout = config.layout_name(config.partial_layout)
    elif state == "override":
        layout = config.layout_name(context.layout)
        if view.lookup(layout) is None:
            raise LayoutNotFound(view.name, layout)
        return layout
    else:
        layout = config.layout_name(config.default_layout)

    # TODO: confirm with view authors whether a missing default wrapper
    # should warn at build time instead of quietly rendering the bare body.
    if view.lookup(layout) is None:
        logger.debug("No %s for %r, rendering %r", layout, view.name, config.body_block)
        return config.body_block
    return layout
