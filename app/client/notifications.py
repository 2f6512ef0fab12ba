from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

VARIANT_DEFAULT = "default"
VARIANT_DESTRUCTIVE = "destructive"


@dataclass(frozen=True, slots=True)
class Toast:
    title: str
    description: str | None = None
    variant: str = VARIANT_DEFAULT

    @property
    def is_destructive(self) -> bool:
        return self.variant == VARIANT_DESTRUCTIVE


ToastListener = Callable[[Toast], None]


class Notifier:
    """Collects transient notifications and forwards them to an optional listener."""

    def __init__(self, listener: ToastListener | None = None) -> None:
        self._listener = listener
        self._history: list[Toast] = []

    @property
    def history(self) -> tuple[Toast, ...]:
        return tuple(self._history)

    @property
    def last(self) -> Toast | None:
        return self._history[-1] if self._history else None

    def toast(self, title: str, *, description: str | None = None, variant: str = VARIANT_DEFAULT) -> Toast:
        item = Toast(title=title, description=description, variant=variant)
        self._history.append(item)
        if self._listener is not None:
            self._listener(item)
        return item

    def error(self, title: str, *, description: str | None = None) -> Toast:
        return self.toast(title, description=description, variant=VARIANT_DESTRUCTIVE)
