"""Demo shell — every widget on its own route, with the sidebar wired up."""

from wren.config import ShellConfig
from wren.demo.pages import DemoPages
from wren.navigation.history import PlatformHistory
from wren.shell import Shell


def build_demo_shell(
    config: ShellConfig | None = None,
    *,
    history: PlatformHistory | None = None,
) -> tuple[Shell, DemoPages]:
    """Create a shell with the demo routes registered (not yet mounted)."""
    shell = Shell(config or ShellConfig(title="Wren Components", heading="Components"), history=history)
    pages = DemoPages()
    pages.register(shell)
    return shell, pages


__all__ = ["DemoPages", "build_demo_shell"]
