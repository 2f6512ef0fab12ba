from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from string import ascii_uppercase

MAX_LABELS = len(ascii_uppercase)
DEFAULT_LABEL_COUNT = 4


@dataclass(frozen=True, slots=True)
class LabelSet:
    """Ordered answer labels ("A", "B", ...) for one question layout."""

    labels: tuple[str, ...]

    @classmethod
    def of_size(cls, size: int = DEFAULT_LABEL_COUNT) -> LabelSet:
        if size < 1 or size > MAX_LABELS:
            raise ValueError(f"label count must be within 1..{MAX_LABELS}, got {size}")
        return cls(labels=tuple(ascii_uppercase[:size]))

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)

    def __len__(self) -> int:
        return len(self.labels)

    def __contains__(self, label: object) -> bool:
        return label in self.labels

    def normalize(self, label: str) -> str | None:
        candidate = label.strip().upper()
        return candidate if candidate in self.labels else None

    def empty_answers(self) -> dict[str, str]:
        return {label: "" for label in self.labels}

    def empty_flags(self) -> dict[str, bool]:
        return {label: False for label in self.labels}
