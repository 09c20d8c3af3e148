"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self
from uuid import uuid4


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event.

    Seed events carry short literal ids ("1", "2", ...); events created at
    runtime get a UUID4 string.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("EventId cannot be blank")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value.strip())

    @classmethod
    def generate(cls) -> Self:
        return cls(value=str(uuid4()))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VoteCount:
    """Non-negative vote counter that only moves forward."""

    value: int = 0

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("VoteCount cannot be negative")

    def increment(self) -> Self:
        return type(self)(value=self.value + 1)

    def __int__(self) -> int:
        return self.value
