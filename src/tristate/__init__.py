"""
Tri-state flags: explicitly true, explicitly false, or unset.

Modules:
- value: the TriState value type and its State tag
- codec: JSON literal encoding/decoding (true / false / null)
- models: pydantic integration and the omit-unset record base
- env: reading tri-state flags from environment variables
"""

from .codec import InvalidLiteralError, decode, encode
from .env import EnvFlagError, getenv_tristate
from .models import TriStateModel
from .value import FALSE, TRUE, UNSET, State, TriState

__all__ = [
    "State",
    "TriState",
    "UNSET",
    "FALSE",
    "TRUE",
    "InvalidLiteralError",
    "encode",
    "decode",
    "TriStateModel",
    "EnvFlagError",
    "getenv_tristate",
]
