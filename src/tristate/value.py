from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple


class State(IntEnum):
    """Underlying tag of a `TriState`.

    UNSET must stay at 0: a default-constructed `TriState` relies on it.
    """

    UNSET = 0  # not provided / inherit
    FALSE = 1
    TRUE = 2


@dataclass(frozen=True)
class TriState:
    """
    Three-valued flag: explicitly true, explicitly false, or unset.

    Use it where `Optional[bool]` would otherwise travel through an API or
    a serialized record. `TriState()` is unset, so a field that nobody filled
    in never reads as `False`.

    Reading the value
    - `is_true()` / `is_false()` / `is_unset()` for plain checks.
    - `as_bool()` returns `(value, ok)`; `ok` is False when unset.
    - `value_or(default)` substitutes `default` for the unset case.

    Truthiness is refused (`bool(ts)` raises TypeError) so an unset value
    can't be mistaken for `False` in an `if`.
    """

    value: State = State.UNSET

    def __post_init__(self) -> None:
        # bool is an int subclass: TriState(True) would land on State.FALSE
        if isinstance(self.value, bool):
            raise TypeError("TriState() takes a State; use TriState.from_bool() for booleans")
        if not isinstance(self.value, int):
            raise TypeError(f"TriState() takes a State or int ordinal, not {type(self.value).__name__}")
        # Coerce raw ordinals; State() raises ValueError when out of range
        object.__setattr__(self, "value", State(self.value))

    # -------- Construction --------
    @classmethod
    def from_bool(cls, v: bool) -> "TriState":
        return cls(State.TRUE if v else State.FALSE)

    @classmethod
    def from_optional(cls, v: Optional[bool]) -> "TriState":
        """Map a nullable boolean: None becomes unset."""
        if v is None:
            return cls()
        return cls.from_bool(v)

    # -------- Queries --------
    def is_unset(self) -> bool:
        return self.value == State.UNSET

    def is_true(self) -> bool:
        return self.value == State.TRUE

    def is_false(self) -> bool:
        return self.value == State.FALSE

    def as_bool(self) -> Tuple[bool, bool]:
        """Return `(value, ok)`.

        - TRUE  -> (True, True)
        - FALSE -> (False, True)
        - UNSET -> (False, False)
        """
        if self.value == State.TRUE:
            return (True, True)
        if self.value == State.FALSE:
            return (False, True)
        return (False, False)

    def value_or(self, default: bool) -> bool:
        val, ok = self.as_bool()
        if ok:
            return val
        return default

    # -------- Text encoding --------
    def encode(self) -> str:
        from .codec import encode

        return encode(self)

    @classmethod
    def decode(cls, token: str | bytes) -> "TriState":
        from .codec import decode

        return decode(token)

    # -------- Dunder helpers --------
    def __bool__(self) -> bool:
        raise TypeError(
            f"{self!r} has no truth value; use as_bool(), value_or() or is_true()"
        )

    def __repr__(self) -> str:
        return f"TriState({self.value.name})"

    def __str__(self) -> str:
        return self.encode()

    @classmethod
    def __get_pydantic_core_schema__(cls, source, handler):
        from .models import tristate_core_schema

        return tristate_core_schema()


UNSET = TriState()
FALSE = TriState(State.FALSE)
TRUE = TriState(State.TRUE)


__all__ = [
    "State",
    "TriState",
    "UNSET",
    "FALSE",
    "TRUE",
]
