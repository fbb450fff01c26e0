from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Sequence, Union

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)
from pydantic.fields import FieldInfo
from pydantic_core import core_schema

from .codec import from_json_value, to_json_value
from .value import UNSET, TriState


def tristate_core_schema() -> core_schema.CoreSchema:
    """pydantic core schema for a `TriState` field.

    - JSON input: only the literals true / false / null.
    - Python input: TriState, bool or None (1, 0 and strings are rejected).
    - Output (both modes): True / False / None.
    """
    from_json = core_schema.chain_schema(
        [
            core_schema.nullable_schema(core_schema.bool_schema(strict=True)),
            core_schema.no_info_plain_validator_function(from_json_value),
        ]
    )
    return core_schema.json_or_python_schema(
        json_schema=from_json,
        python_schema=core_schema.no_info_plain_validator_function(from_json_value),
        serialization=core_schema.plain_serializer_function_ser_schema(
            to_json_value,
            return_schema=core_schema.nullable_schema(core_schema.bool_schema()),
        ),
    )


def _tristate_fields(model: type[BaseModel]):
    for name, field in model.model_fields.items():
        if field.annotation is TriState:
            yield name, field


Path = List[Union[str, int]]


def _validation_paths(field: FieldInfo) -> List[Path]:
    """Input locations pydantic reads for a field's validation alias, in lookup order."""
    va = field.validation_alias
    if isinstance(va, str):
        return [[va]]
    if isinstance(va, AliasPath):
        return [list(va.path)]
    if isinstance(va, AliasChoices):
        return [[c] if isinstance(c, str) else list(c.path) for c in va.choices]
    return []


def _has_path(data: Any, path: Sequence[Union[str, int]]) -> bool:
    cur = data
    for seg in path:
        if isinstance(seg, int):
            if not isinstance(cur, (list, tuple)) or not -len(cur) <= seg < len(cur):
                return False
        elif not isinstance(cur, dict) or seg not in cur:
            return False
        cur = cur[seg]
    return True


def _can_set_path(data: Dict[str, Any], path: Path) -> bool:
    # Only string keys can be created; list indexes are never fabricated
    if not all(isinstance(seg, str) for seg in path):
        return False
    cur: Any = data
    for seg in path[:-1]:
        if seg not in cur:
            return True
        cur = cur[seg]
        if not isinstance(cur, dict):
            return False
    return True


def _set_none_at(data: Dict[str, Any], path: Path) -> None:
    """Write None at `path`, copying nested dicts so the caller's input is untouched."""
    cur = data
    for seg in path[:-1]:
        nxt = dict(cur[seg]) if seg in cur else {}
        cur[seg] = nxt
        cur = nxt
    cur[path[-1]] = None


class TriStateModel(BaseModel):
    """
    Record base that applies the absent-field contract to `TriState` fields.

    Decoding
    - A TriState field missing from the input is UNSET, with or without a
      declared default. Explicit `null` is UNSET as well.

    Encoding
    - `omit_unset = True` (default): UNSET fields are dropped from
      `model_dump()` / `model_dump_json()` output.
    - `omit_unset = False`: UNSET fields are written as `null`.

    Override `omit_unset` on a subclass to pick the policy per record type.
    """

    omit_unset: ClassVar[bool] = True

    @model_validator(mode="before")
    @classmethod
    def _fill_missing_tristates(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        by_name = bool(
            cls.model_config.get("populate_by_name") or cls.model_config.get("validate_by_name")
        )
        filled = dict(data)
        for name, field in _tristate_fields(cls):
            read_paths = _validation_paths(field) or [[field.alias or name]]
            candidates = read_paths + [[name]] if by_name else read_paths
            if any(_has_path(filled, p) for p in candidates):
                continue
            # Fill where pydantic looks first: the validation alias when set
            for path in read_paths:
                if _can_set_path(filled, path):
                    _set_none_at(filled, path)
                    break
        return filled

    @model_serializer(mode="wrap")
    def _omit_unset_tristates(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Dict[str, Any]:
        data = handler(self)
        if not self.omit_unset:
            return data
        by_alias = info.by_alias
        if by_alias is None:
            by_alias = self.model_config.get("serialize_by_alias", False)
        for name, field in _tristate_fields(type(self)):
            # model_construct() may leave a field unpopulated; that reads as UNSET
            if not getattr(self, name, UNSET).is_unset():
                continue
            key = (field.serialization_alias or field.alias or name) if by_alias else name
            data.pop(key, None)
        return data


__all__ = [
    "TriStateModel",
    "tristate_core_schema",
]
