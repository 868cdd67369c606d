"""View engine configuration.

ViewsConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path

from warble.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ViewsConfig:
    """View engine configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ViewsConfig(root="templates", default_layout="app")
    """

    # Source tree
    root: str | Path = "views"
    extensions: tuple[str, ...] = (".html",)
    partial_prefix: str = "_"
    layouts_dir: str = "layouts"

    # Layout negotiation
    default_layout: str = "base"
    partial_layout: str = "partial"
    body_block: str = "main"

    # Templates
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    # Error responses include exception detail when True
    debug: bool = False

    def layout_name(self, layout: str) -> str:
        """Qualify a bare layout name with the layouts folder."""
        return f"{self.layouts_dir}/{layout}"

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if the convention cannot be applied."""
        if not self.partial_prefix:
            raise ConfigurationError("partial_prefix must not be empty")
        if not self.layouts_dir or "/" in self.layouts_dir:
            raise ConfigurationError(
                f"layouts_dir must be a single folder name, got {self.layouts_dir!r}"
            )
        if not self.extensions:
            raise ConfigurationError("at least one markup extension is required")
        for ext in self.extensions:
            if not ext.startswith(".") or len(ext) < 2:
                raise ConfigurationError(f"extension must start with a dot, got {ext!r}")
        if not self.body_block:
            raise ConfigurationError("body_block must not be empty")
