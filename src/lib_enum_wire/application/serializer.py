"""Dataclass payload serializer that routes enum fields to :class:`EnumCodec`.

Purpose
-------
Stand in for the generic JSON framework the codec plugs into: walk the
declared field types of a dataclass, hand enum fields to the codec, recurse
into nested dataclasses and containers, and pass everything else through.

Contents
--------
* :class:`PayloadSerializer` - ``to_dict`` / ``dumps`` / ``from_dict`` /
  ``loads`` plus ``encode_args`` for call-argument maps.

System Role
-----------
Application service at the boundary between request/response models and JSON
text. Any codec failure aborts the whole payload and surfaces as
:class:`PayloadError` naming the offending field path.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from enum import Enum
from functools import lru_cache
from typing import Any, TypeVar, get_args, get_origin, get_type_hints

from lib_enum_wire.application.codec import EnumCodec
from lib_enum_wire.domain import NO_MATCH, DeclaredType, DecodeError, EnumWireError, PayloadError, UnknownMemberError

T = TypeVar("T")

_MISSING = dataclasses.MISSING
_MAPPING_ORIGINS: tuple[Any, ...] = (dict, Mapping)


@lru_cache(maxsize=None)
def _field_hints(cls: type) -> tuple[tuple[dataclasses.Field, Any], ...]:
    hints = get_type_hints(cls)
    return tuple((field, hints.get(field.name, Any)) for field in dataclasses.fields(cls))


def _field_default(field: dataclasses.Field) -> Any:
    if field.default is not _MISSING:
        return field.default
    if field.default_factory is not _MISSING:
        return field.default_factory()
    return _MISSING


def _key_text(key: Any) -> str:
    return key.name if isinstance(key, Enum) else str(key)


def _is_dataclass_type(annotation: Any) -> bool:
    return isinstance(annotation, type) and dataclasses.is_dataclass(annotation)


class PayloadSerializer:
    """Convert dataclass payloads to and from JSON using one :class:`EnumCodec`.

    Examples
    --------
    >>> from lib_enum_wire.adapters.naming import SnakeCaseNaming
    >>> serializer = PayloadSerializer(EnumCodec(SnakeCaseNaming()))
    >>> serializer.encode_args({"query": "deploy", "count": 20, "cursor": None})
    {'query': 'deploy', 'count': 20}
    """

    def __init__(self, codec: EnumCodec) -> None:
        self._codec = codec

    @property
    def codec(self) -> EnumCodec:
        return self._codec

    def to_dict(self, obj: Any) -> dict[str, Any]:
        """Encode the dataclass instance ``obj`` into JSON-compatible data."""

        if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
            raise TypeError(f"Expected a dataclass instance, got {type(obj).__name__}")
        return self._encode_dataclass(obj, type(obj).__name__)

    def dumps(self, obj: Any, **json_kwargs: Any) -> str:
        return json.dumps(self.to_dict(obj), **json_kwargs)

    def from_dict(self, cls: type[T], data: Mapping[str, Any]) -> T:
        """Build an instance of the dataclass ``cls`` from decoded JSON data."""

        if not _is_dataclass_type(cls):
            raise TypeError(f"Expected a dataclass type, got {cls!r}")
        return self._decode_dataclass(cls, data, cls.__name__)

    def loads(self, cls: type[T], text: str | bytes) -> T:
        return self.from_dict(cls, json.loads(text))

    def encode_args(self, args: Mapping[str, Any]) -> dict[str, Any]:
        """Prepare a call-argument map for a Web API request.

        ``None`` entries are dropped; enum values are rendered through the
        codec; other values are kept as they are.
        """

        encoded: dict[str, Any] = {}
        for key, value in args.items():
            if value is None:
                continue
            encoded[key] = self._encode_value(value, Any, key)
        return encoded

    def _encode_dataclass(self, obj: Any, path: str) -> dict[str, Any]:
        return {
            field.name: self._encode_value(getattr(obj, field.name), annotation, f"{path}.{field.name}")
            for field, annotation in _field_hints(type(obj))
        }

    def _encode_value(self, value: Any, annotation: Any, path: str) -> Any:
        if value is None:
            return None
        handled = self._codec.can_handle(annotation)
        if isinstance(value, Enum) or handled:
            declared = annotation if handled else None
            try:
                return self._codec.encode(value, declared).to_python()
            except EnumWireError as error:
                raise PayloadError(path, error) from error
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return self._encode_dataclass(value, path)

        if isinstance(value, Mapping):
            key_type, item_type = self._mapping_types(annotation)
            encoded: dict[Any, Any] = {}
            for key, item in value.items():
                item_path = f"{path}.{_key_text(key)}"
                encoded[self._encode_key(key, key_type, item_path)] = self._encode_value(item, item_type, item_path)
            return encoded
        if isinstance(value, (list, tuple)):
            item_types = self._item_types(annotation, len(value))
            return [
                self._encode_value(item, item_type, f"{path}[{index}]")
                for index, (item, item_type) in enumerate(zip(value, item_types))
            ]
        return value

    def _encode_key(self, key: Any, key_type: Any, path: str) -> Any:
        if isinstance(key, Enum) or self._codec.can_handle(key_type):
            return self._encode_value(key, key_type, path)
        return key

    def _decode_dataclass(self, cls: type[T], data: Any, path: str) -> T:
        if not isinstance(data, Mapping):
            raise PayloadError(path, DecodeError(f"Expected an object for {cls.__name__}"))

        kwargs: dict[str, Any] = {}
        for field, annotation in _field_hints(cls):
            if not field.init:
                continue
            field_path = f"{path}.{field.name}"
            default = _field_default(field)
            if field.name not in data:
                if default is _MISSING:
                    raise PayloadError(field_path, DecodeError("Required field is missing"))
                kwargs[field.name] = default
                continue
            kwargs[field.name] = self._decode_value(data[field.name], annotation, field_path, default)
        return cls(**kwargs)

    def _decode_value(self, raw: Any, annotation: Any, path: str, default: Any = _MISSING) -> Any:
        declared = DeclaredType.of(annotation)
        if declared.is_enum:
            return self._decode_enum(raw, declared, path, default)
        if raw is None:
            return None
        if _is_dataclass_type(declared.underlying):
            return self._decode_dataclass(declared.underlying, raw, path)

        origin = get_origin(declared.underlying)
        if origin in (list, tuple) and isinstance(raw, list):
            shape = self._fixed_shape(declared.underlying)
            if shape is not None and len(shape) != len(raw):
                raise PayloadError(path, DecodeError(f"Expected {len(shape)} items, got {len(raw)}"))
            item_types = self._item_types(declared.underlying, len(raw))
            items = [
                self._decode_value(item, item_type, f"{path}[{index}]")
                for index, (item, item_type) in enumerate(zip(raw, item_types))
            ]
            return tuple(items) if origin is tuple else items
        if origin in _MAPPING_ORIGINS and isinstance(raw, Mapping):
            key_type, item_type = self._mapping_types(declared.underlying)
            decoded: dict[Any, Any] = {}
            for key, item in raw.items():
                item_path = f"{path}.{key}"
                decoded[self._decode_key(key, key_type, item_path)] = self._decode_value(item, item_type, item_path)
            return decoded
        return raw

    def _decode_key(self, key: Any, key_type: Any, path: str) -> Any:
        declared = DeclaredType.of(key_type)
        if declared.is_enum:
            return self._decode_enum(key, declared, path, _MISSING)
        return key

    def _decode_enum(self, raw: Any, declared: DeclaredType, path: str, default: Any) -> Any:
        try:
            value = self._codec.from_json(raw, declared)
            if value is not NO_MATCH:
                return value
            if declared.nullable:
                return None
            if default is not _MISSING:
                return default
            raise UnknownMemberError(str(raw), declared)
        except EnumWireError as error:
            raise PayloadError(path, error) from error

    @staticmethod
    def _fixed_shape(annotation: Any) -> tuple[Any, ...] | None:
        """Return the per-position types of ``tuple[A, B]``; ``None`` for other sequences."""

        annotation = DeclaredType.of(annotation).underlying
        args = get_args(annotation)
        if get_origin(annotation) is not tuple or not args or args[-1] is Ellipsis:
            return None
        return () if args == ((),) else args

    @classmethod
    def _item_types(cls, annotation: Any, count: int) -> list[Any]:
        """Return one declared type per item of a ``count``-long sequence."""

        shape = cls._fixed_shape(annotation)
        if shape is not None:
            return list(shape[:count]) + [Any] * (count - len(shape))
        annotation = DeclaredType.of(annotation).underlying
        args = get_args(annotation)
        element = args[0] if get_origin(annotation) in (list, tuple) and args else Any
        return [element] * count

    @staticmethod
    def _mapping_types(annotation: Any) -> tuple[Any, Any]:
        """Return the key and value types of a mapping annotation."""

        annotation = DeclaredType.of(annotation).underlying
        args = get_args(annotation)
        if get_origin(annotation) in _MAPPING_ORIGINS and len(args) == 2:
            return args[0], args[1]
        return Any, Any


__all__ = ["PayloadSerializer"]
