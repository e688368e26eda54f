"""Kida environment setup.

Creates a kida Environment from wren's ShellConfig and binds the
built-in filters and globals. A shell creates its environment once and
passes it to every component it renders; components rendered on their
own fall back to a shared default environment.
"""

import functools
from collections.abc import Mapping
from typing import Any

from kida import ChoiceLoader, Environment, FileSystemLoader, PackageLoader
from kida.template import Markup

from wren.config import ShellConfig
from wren.templating.filters import BUILTIN_FILTERS, BUILTIN_GLOBALS


def create_environment(config: ShellConfig | None = None) -> Environment:
    """Create a kida Environment from shell configuration.

    User templates in ``config.template_dir`` are searched before the
    package's built-ins, so any ``wren/*.html`` template can be
    overridden by dropping a file with the same name there.
    """
    config = config or ShellConfig()
    loaders = []
    if config.template_dir is not None:
        loaders.append(FileSystemLoader(str(config.template_dir)))
    loaders.append(PackageLoader("wren.templating", "templates"))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=config.autoescape,
        auto_reload=config.debug,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )
    env.update_filters(BUILTIN_FILTERS)
    for name, value in BUILTIN_GLOBALS.items():
        env.add_global(name, value)
    return env


@functools.cache
def default_environment() -> Environment:
    """The environment used when a component is rendered without one."""
    return create_environment()


def render_template(
    env: Environment | None,
    name: str,
    context: Mapping[str, Any],
) -> Markup:
    """Render a full template and mark the result as safe HTML."""
    template = (env or default_environment()).get_template(name)
    return Markup(template.render(dict(context)))
