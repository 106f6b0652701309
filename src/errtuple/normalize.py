"""Error normalization: turn any failure payload into a canonical error.

Classification, in priority order:

1. exceptions are returned unchanged (identity, subclass and attributes kept);
2. compiled regular expressions use their ``repr``;
3. structured values (mappings, sequences, sets, dataclasses, pydantic models,
   dates, plain objects via ``vars()``) are serialized to compact JSON,
   keeping iteration order;
4. if serialization fails (a self-referential structure, NaN or infinity,
   nesting too deep), the serializer's own failure text becomes the message;
5. everything else uses ``str()``.

A :class:`~errtuple.errors.Thrown` carrier is unwrapped first, so payloads
raised through :func:`~errtuple.errors.throw` are classified by their value.
"""

from __future__ import annotations

from collections.abc import Mapping
import dataclasses
import datetime
from enum import Enum
import json
import re
from types import ModuleType
from typing import Any

from pydantic import BaseModel

from errtuple.errors import NormalizedError, Thrown

_STRUCTURED_TYPES: tuple[type, ...] = (
    Mapping,
    list,
    tuple,
    set,
    frozenset,
    BaseModel,
    datetime.date,
    datetime.time,
)


def normalize_error(raw: object) -> BaseException:
    """Convert an arbitrary failure payload into a canonical error.

    Never raises: failures inside normalization are folded into the returned
    error's message.

    Args:
        raw: The caught exception or any other failure value.

    Returns:
        ``raw`` itself when it already is an exception, otherwise a
        :class:`NormalizedError` carrying the original payload in ``raw``.

    Example:
        normalize_error({"foo": "bar"}).message  # '{"foo":"bar"}'
    """
    if isinstance(raw, Thrown):
        normalized = normalize_error(raw.value)
        if isinstance(normalized, NormalizedError):
            return normalized.with_traceback(raw.__traceback__)
        return normalized
    if isinstance(raw, BaseException):
        return raw
    if isinstance(raw, re.Pattern):
        return NormalizedError(repr(raw), raw=raw, kind="pattern")
    if _is_structured(raw):
        try:
            text = _to_compact_json(raw)
        except Exception as exc:
            # Surfaces the serializer's own text, e.g. "Circular reference detected".
            return NormalizedError(_safe_str(exc), raw=raw, kind="serialization")
        return NormalizedError(text, raw=raw, kind="structural")
    return NormalizedError(_safe_str(raw), raw=raw, kind="primitive")


def _is_structured(value: object) -> bool:
    if isinstance(value, _STRUCTURED_TYPES):
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return _is_plain_object(value)


def _is_plain_object(value: object) -> bool:
    """Instances that carry their state in ``__dict__``, serialized via ``vars()``."""
    return (
        hasattr(value, "__dict__")
        and not callable(value)
        and not isinstance(value, (type, ModuleType, Enum))
    )


def _to_compact_json(value: object) -> str:
    return json.dumps(
        value,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
        default=_to_jsonable,
    )


def _to_jsonable(obj: Any) -> Any:
    """``json.dumps`` hook for structured types it does not know natively."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        # Shallow; nested values go back through the encoder.
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, Mapping):
        return dict(obj)
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    if isinstance(obj, (datetime.date, datetime.time)):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    if _is_plain_object(obj):
        return dict(vars(obj))
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _safe_str(value: object) -> str:
    try:
        return str(value)
    except Exception as exc:
        try:
            return str(exc)
        except Exception:
            return f"<unprintable {type(value).__name__} object>"
