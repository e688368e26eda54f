"""Shell configuration.

ShellConfig is frozen; every setting is fixed when the shell is built.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ShellConfig:
    """Shell configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ShellConfig(title="Widgets", initial_path="/table")
    """

    # Page chrome
    title: str = "Wren"
    heading: str = "Components"

    # Navigation: used when the platform history has no location yet
    initial_path: str = "/"

    # Templates
    template_dir: str | Path | None = None  # User templates, searched before the built-ins
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True
    debug: bool = False  # kida auto_reload

    # Logging
    log_level: str | None = None  # Applied to the "wren" logger when set
