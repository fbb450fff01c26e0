from __future__ import annotations

import os
from typing import Mapping, Optional

from .codec import InvalidLiteralError, decode
from .value import TriState


class EnvFlagError(InvalidLiteralError):
    """Raised when an environment flag holds something other than true/false/null."""

    def __init__(self, name: str, literal: str) -> None:
        self.name = name
        super().__init__(literal, f"invalid tristate value for ${name}: {literal!r}")


def getenv_tristate(name: str, environ: Optional[Mapping[str, str]] = None) -> TriState:
    """Read a tri-state flag from the environment.

    - Variable missing or empty -> UNSET (same as a missing record field).
    - "true" / "false" / "null" -> decoded strictly, no trimming or case folding.
    - Anything else raises EnvFlagError.
    """
    env = os.environ if environ is None else environ
    raw = env.get(name)
    if raw in (None, ""):
        return TriState()
    try:
        return decode(raw)
    except InvalidLiteralError as ex:
        raise EnvFlagError(name, raw) from ex


__all__ = [
    "EnvFlagError",
    "getenv_tristate",
]
