"""Built-in warble template helpers.

Auto-registered on every warble kida Environment.  They complement
kida's built-in filters with the few helpers view trees lean on:
passing ad-hoc data to partials, trusting pre-rendered markup, and
building DOM IDs for stream targets.
"""

import html
import re
from typing import Any

from kida.template import Markup

_DOM_ID_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_-]+")


def safe(value: Any) -> Markup:
    """Mark a string as trusted HTML so autoescaping leaves it alone.

    Example:
        {{ safe(post.rendered_body) }}
    """
    return Markup(str(value))


def map_(*values: Any) -> dict[str, Any]:
    """Build a dict from alternating keys and values.

    Lets a template hand a partial exactly the data it needs::

        {{ partial("guest_row", map("guest", guest, "editable", true)) }}

    Raises:
        TypeError: On an odd number of arguments or a non-string key.
    """
    if len(values) % 2 != 0:
        raise TypeError("map() expects an even number of arguments (key, value pairs)")

    data: dict[str, Any] = {}
    for i in range(0, len(values), 2):
        key = values[i]
        if not isinstance(key, str):
            raise TypeError(f"map() keys must be strings, got {type(key).__name__}")
        data[key] = values[i + 1]
    return data


def attr(value: Any, name: str) -> str | Markup:
    """Output an HTML attribute when value is truthy, else empty string.

    Example:
        <li{{ css_class | attr("class") }}>
        → <li class="done">   (when css_class is "done")
        → <li>                (when css_class is None or "")
    """
    if not value:
        return ""
    return Markup(f' {name}="{html.escape(str(value))}"')


def dom_id(value: Any, prefix: str = "") -> str:
    """Build a DOM element ID suitable as a stream target.

    Example:
        <li id="{{ event.id | dom_id('event') }}">  → <li id="event-42">
    """
    text = _DOM_ID_UNSAFE_RE.sub("-", str(value)).strip("-")
    if prefix:
        return f"{prefix}-{text}" if text else prefix
    return text


BUILTIN_GLOBALS: dict[str, Any] = {
    "map": map_,
    "safe": safe,
}


# All built-in warble filters, registered automatically on every env.
BUILTIN_FILTERS: dict[str, Any] = {
    "attr": attr,
    "dom_id": dom_id,
}
