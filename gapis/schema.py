"""Dataclass based schema types mirroring Google JSON objects.

Attribute names are snake_case; the wire name is the camelCase form, unless a
field overrides it with ``field(metadata={"json": ...})``. A trailing
underscore (``type_``) is dropped on the wire.
"""
from __future__ import annotations
import dataclasses
import functools
import typing
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar

T = TypeVar("T", bound="Schema")


def wire_name(attr: str) -> str:
    head, *rest = attr.rstrip("_").split("_")
    return head + "".join(p[:1].upper() + p[1:] for p in rest)


def json_field(name: str, **kwargs: Any) -> Any:
    """Optional field whose wire name can't be derived from its attribute name."""
    kwargs.setdefault("default", None)
    return field(metadata={"json": name}, **kwargs)


@dataclass
class FieldInfo:
    attr: str
    wire: str
    # one of "scalar", "list", "map"
    container: str
    item_type: Any


def _describe(hint: Any) -> Tuple[str, Any]:
    origin = typing.get_origin(hint)
    args = typing.get_args(hint)
    if origin is typing.Union:
        inner = [a for a in args if a is not type(None)]
        return _describe(inner[0]) if len(inner) == 1 else ("scalar", Any)
    if origin in (list, typing.List):
        return "list", (args[0] if args else Any)
    if origin in (dict, typing.Dict):
        return "map", (args[1] if len(args) > 1 else Any)
    return "scalar", hint


@functools.lru_cache(maxsize=None)
def schema_fields(cls: type) -> Dict[str, FieldInfo]:
    """Wire name -> FieldInfo for every declared field of a schema class."""
    hints = typing.get_type_hints(cls)
    out: Dict[str, FieldInfo] = {}
    for f in dataclasses.fields(cls):
        if f.name == "additional_properties":
            continue
        wire = f.metadata.get("json") or wire_name(f.name)
        container, item_type = _describe(hints[f.name])
        out[wire] = FieldInfo(f.name, wire, container, item_type)
    return out


def is_schema(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, Schema)


def _decode(tp: Any, value: Any) -> Any:
    if value is None:
        return None
    if is_schema(tp):
        return tp.from_dict(value)
    return value


def _encode(value: Any) -> Any:
    if isinstance(value, Schema):
        return value.to_dict()
    if isinstance(value, list):
        return [_encode(v) for v in value]
    if isinstance(value, dict):
        return {k: _encode(v) for k, v in value.items()}
    return value


@dataclass
class Schema:
    # unmodelled wire fields; filled by from_dict, never a constructor argument
    additional_properties: Dict[str, Any] = field(default_factory=dict, init=False, repr=False, compare=False)

    @classmethod
    def from_dict(cls: Type[T], src: Mapping[str, Any]) -> T:
        if not isinstance(src, Mapping):
            raise TypeError(f"{cls.__name__} expects a JSON object, got {type(src).__name__}")
        known = schema_fields(cls)
        kwargs: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in src.items():
            info = known.get(key)
            if info is None:
                extra[key] = value
                continue
            if value is None:
                continue
            if info.container == "list":
                if not isinstance(value, list):
                    raise TypeError(f"{cls.__name__}.{key} expects a JSON array, got {type(value).__name__}")
                kwargs[info.attr] = [_decode(info.item_type, v) for v in value]
            elif info.container == "map":
                if not isinstance(value, Mapping):
                    raise TypeError(f"{cls.__name__}.{key} expects a JSON object, got {type(value).__name__}")
                kwargs[info.attr] = {k: _decode(info.item_type, v) for k, v in value.items()}
            else:
                kwargs[info.attr] = _decode(info.item_type, value)
        obj = cls(**kwargs)
        obj.additional_properties = extra
        return obj

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for wire, info in schema_fields(type(self)).items():
            value = getattr(self, info.attr)
            if value is not None:
                out[wire] = _encode(value)
        for key, value in self.additional_properties.items():
            out.setdefault(key, value)
        return out


@dataclass
class Empty(Schema):
    """A generic empty message, returned by delete methods."""


def remove_json_null_values(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: remove_json_null_values(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [remove_json_null_values(v) for v in value]
    return value
