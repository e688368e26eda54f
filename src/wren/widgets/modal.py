"""Modal — an overlay dialog with an action bar.

Opening a modal acquires a body scroll lock and closing releases it.
``ScrollLock`` counts holders so nested modals release correctly.
"""

import logging
from collections.abc import Callable
from typing import Any

from kida import Environment
from kida.template import Markup

from wren.templating.integration import render_template

logger = logging.getLogger("wren.widgets")


class ScrollLock:
    """Reference-counted body scroll lock."""

    __slots__ = ("_holders",)

    def __init__(self) -> None:
        self._holders = 0

    @property
    def locked(self) -> bool:
        return self._holders > 0

    @property
    def body_overflow(self) -> str:
        return "hidden" if self.locked else "auto"

    def acquire(self) -> None:
        self._holders += 1

    def release(self) -> None:
        if self._holders:
            self._holders -= 1


class Modal:
    """A dialog that is either open or closed.

    Clicking the overlay calls ``on_close``; the caller decides whether
    that actually closes the modal (``close()``).
    """

    __slots__ = ("action_bar", "content", "is_open", "lock", "on_close")

    def __init__(
        self,
        content: str | Markup,
        *,
        action_bar: str | Markup = "",
        on_close: Callable[[], Any] | None = None,
        lock: ScrollLock | None = None,
    ) -> None:
        self.content = content
        self.action_bar = action_bar
        self.on_close = on_close
        self.lock = lock or ScrollLock()
        self.is_open = False

    def open(self) -> None:
        if self.is_open:
            return
        self.is_open = True
        self.lock.acquire()
        logger.debug("modal opened")

    def close(self) -> None:
        if not self.is_open:
            return
        self.is_open = False
        self.lock.release()
        logger.debug("modal closed")

    def click_overlay(self) -> None:
        if self.on_close is not None:
            self.on_close()

    def render(self, env: Environment | None = None) -> Markup:
        if not self.is_open:
            return Markup("")
        return render_template(
            env,
            "wren/modal.html",
            {"content": self.content, "action_bar": self.action_bar},
        )
