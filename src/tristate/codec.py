from __future__ import annotations

from typing import Any, Dict, Optional

from .value import State, TriState


NULL_TOKEN = "null"
TRUE_TOKEN = "true"
FALSE_TOKEN = "false"

_ENCODE: Dict[State, str] = {
    State.UNSET: NULL_TOKEN,
    State.FALSE: FALSE_TOKEN,
    State.TRUE: TRUE_TOKEN,
}
_DECODE: Dict[str, State] = {tok: st for st, tok in _ENCODE.items()}
_DECODE_BYTES: Dict[bytes, State] = {tok.encode("ascii"): st for tok, st in _DECODE.items()}


class InvalidLiteralError(ValueError):
    """Raised when input is not one of the literals `true`, `false`, `null`."""

    def __init__(self, literal: Any, message: Optional[str] = None) -> None:
        self.literal = literal
        super().__init__(message or f"invalid tristate value: {literal!r}")


def encode(ts: TriState) -> str:
    """Return the JSON literal for `ts`: "true", "false" or "null"."""
    return _ENCODE[ts.value]


def decode(token: str | bytes) -> TriState:
    """Parse a single JSON literal into a TriState.

    Matching is exact: no whitespace trimming, no case folding and no
    numeric coercion ("1", "True", " true" all fail). Surrounding whitespace
    is the tokenizer's business, not ours.

    Raises InvalidLiteralError for anything else.
    """
    st: Optional[State] = None
    if isinstance(token, str):
        st = _DECODE.get(token)
    elif isinstance(token, (bytes, bytearray)):
        st = _DECODE_BYTES.get(bytes(token))
    if st is None:
        raise InvalidLiteralError(token)
    return TriState(st)


# -------- JSON value bridge (for serialization adapters) --------
def to_json_value(ts: TriState) -> Optional[bool]:
    if ts.is_unset():
        return None
    return ts.is_true()


def from_json_value(v: Any) -> TriState:
    """Map an already-parsed JSON value (None/True/False) to a TriState.

    Only real booleans are accepted; 1, 0 and strings are rejected even
    though Python would happily treat them as truthy.
    """
    if isinstance(v, TriState):
        return v
    if v is None:
        return TriState()
    if isinstance(v, bool):
        return TriState.from_bool(v)
    raise InvalidLiteralError(v)


__all__ = [
    "InvalidLiteralError",
    "NULL_TOKEN",
    "TRUE_TOKEN",
    "FALSE_TOKEN",
    "encode",
    "decode",
    "to_json_value",
    "from_json_value",
]
