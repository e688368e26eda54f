"""Activation events — the headless stand-in for a DOM click.

An ``ActivationEvent`` carries the button and modifier keys of a click
plus the two flags a handler can set: ``default_prevented`` (the
platform's own action is suppressed) and ``propagation_stopped``
(ancestors such as a table row do not see the click).
"""

from dataclasses import dataclass

PRIMARY_BUTTON = 0


@dataclass(slots=True)
class ActivationEvent:
    """A click or keyboard activation on a component.

    Mutable on purpose: handlers flip the flags as the event bubbles.
    """

    button: int = PRIMARY_BUTTON
    meta_key: bool = False
    ctrl_key: bool = False
    shift_key: bool = False
    alt_key: bool = False
    default_prevented: bool = False
    propagation_stopped: bool = False

    @property
    def opens_new_context(self) -> bool:
        """True when the platform would open the target in a new tab or window."""
        return self.meta_key or self.ctrl_key

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True
