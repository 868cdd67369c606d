"""Path classification and logical naming.

Both functions take a path *relative to the view root*; making it
relative is the caller's job (``Path.relative_to`` raises for a path
outside the root).

Examples with the default convention::

    index.html               -> PAGE     "index"
    events/show.html         -> PAGE     "events/show"
    _flash.html              -> PARTIAL  "flash"
    events/_row.html         -> PARTIAL  "events/row"
    layouts/base.html        -> LAYOUT   "layouts/base"
"""

from pathlib import PurePath

from warble.config import ViewsConfig
from warble.views.types import ViewKind


def is_markup(path: PurePath, config: ViewsConfig) -> bool:
    """True if *path* has one of the configured markup extensions."""
    return path.suffix in config.extensions


def classify(relative: PurePath, config: ViewsConfig) -> ViewKind:
    """Tag a root-relative markup path as Page, Partial or Layout."""
    if relative.stem.startswith(config.partial_prefix):
        return ViewKind.PARTIAL
    parts = relative.parts
    if len(parts) > 1 and parts[0] == config.layouts_dir:
        return ViewKind.LAYOUT
    return ViewKind.PAGE


def logical_name(relative: PurePath, kind: ViewKind, config: ViewsConfig) -> str:
    """Derive the logical name used to address a view.

    The extension is always dropped.  Partials also lose the marker from
    their base name; layouts keep the layouts folder in their name.
    """
    stem = relative.stem
    if kind is ViewKind.PARTIAL:
        stem = stem.removeprefix(config.partial_prefix)
    return "/".join((*relative.parent.parts, stem))
