"""Kida environment setup.

Creates a kida Environment from warble's ViewsConfig and binds built-in
and user-supplied filters and globals.  The environment is created once
while the registry is built and is never modified afterwards; per-request
helpers travel in the render context instead.
"""

from collections.abc import Callable, Mapping
from typing import Any

from kida import DictLoader, Environment

from warble.config import ViewsConfig
from warble.templating.filters import BUILTIN_FILTERS, BUILTIN_GLOBALS


def create_environment(
    config: ViewsConfig,
    sources: Mapping[str, str],
    filters: Mapping[str, Callable[..., Any]] | None = None,
    globals_: Mapping[str, Any] | None = None,
) -> Environment:
    """Create a kida Environment serving *sources* by logical name.

    *sources* maps the logical names of attachable views (layouts and
    partials) to their template source, so templates may also pull them
    in with ``{% include "nav" %}``.
    """
    env = Environment(
        loader=DictLoader(dict(sources)),
        autoescape=config.autoescape,
        auto_reload=False,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )

    # Register warble's built-in filters (attr, dom_id)
    env.update_filters(BUILTIN_FILTERS)

    # Register user-defined filters (may override built-ins)
    if filters:
        env.update_filters(dict(filters))

    for name, value in BUILTIN_GLOBALS.items():
        env.add_global(name, value)

    # Register user-defined globals (may override built-ins)
    if globals_:
        for name, value in globals_.items():
            env.add_global(name, value)

    return env
