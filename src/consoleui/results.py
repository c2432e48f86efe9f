"""Prompt outcome types.

Cancellation is always an explicit value, never a collision with a real
answer:

- Selection: (item, index) pair, CANCELLED is (None, -1)
- TextAnswer: tagged VALUE / EMPTY / CANCELLED outcome of optional input
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional


class Selection(NamedTuple):
    """Outcome of a cancellable single-choice menu."""

    item: Optional[str]
    index: int

    @property
    def cancelled(self) -> bool:
        """True when the user cancelled instead of choosing."""
        return self.index < 0


CANCELLED = Selection(None, -1)


class AnswerKind(Enum):
    """What the user did at an optional text prompt."""

    VALUE = "value"
    EMPTY = "empty"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class TextAnswer:
    """Outcome of an optional, cancellable text prompt."""

    kind: AnswerKind
    value: Optional[str] = None

    @classmethod
    def of(cls, text: str) -> "TextAnswer":
        """Build an answer from submitted text (empty text is EMPTY)."""
        if text:
            return cls(AnswerKind.VALUE, text)
        return cls(AnswerKind.EMPTY, "")

    @classmethod
    def cancel(cls) -> "TextAnswer":
        """Build the cancelled answer."""
        return cls(AnswerKind.CANCELLED, None)

    @property
    def cancelled(self) -> bool:
        return self.kind is AnswerKind.CANCELLED

    @property
    def empty(self) -> bool:
        return self.kind is AnswerKind.EMPTY
