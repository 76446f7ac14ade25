"""Records stored by the tracker and their JSON form."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any


class ValidationError(ValueError):
    """Raised when a request body cannot be decoded or fails validation."""


def _as_object(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValidationError("request body must be a JSON object")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{key} must be an integer")
    return value


def _float(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{key} must be a number")
    return float(value)


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be a string")
    return value


@dataclass(frozen=True)
class Field:
    """A cultivated field."""

    id: int = 0
    name: str = ""
    area_ha: float = 0.0
    region: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "Field":
        """Decode a field from a parsed JSON object; missing keys take zero values."""
        obj = _as_object(data)
        return cls(
            id=_int(obj, "id"),
            name=_str(obj, "name"),
            area_ha=_float(obj, "area_ha"),
            region=_str(obj, "region"),
        )

    def to_json(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Sowing:
    """A crop sown on a field at a given date."""

    id: int = 0
    field_id: int = 0
    crop: str = ""
    sowed_at: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "Sowing":
        """Decode a sowing from a parsed JSON object; missing keys take zero values."""
        obj = _as_object(data)
        return cls(
            id=_int(obj, "id"),
            field_id=_int(obj, "field_id"),
            crop=_str(obj, "crop"),
            sowed_at=_str(obj, "sowed_at"),
        )

    def to_json(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Harvest:
    """A crop harvested from a field, with its yield in tonnes per hectare."""

    id: int = 0
    field_id: int = 0
    crop: str = ""
    yield_t_per_ha: float = 0.0

    @classmethod
    def from_json(cls, data: Any) -> "Harvest":
        """Decode a harvest from a parsed JSON object; missing keys take zero values."""
        obj = _as_object(data)
        return cls(
            id=_int(obj, "id"),
            field_id=_int(obj, "field_id"),
            crop=_str(obj, "crop"),
            yield_t_per_ha=_float(obj, "yield_t_per_ha"),
        )

    def to_json(self) -> dict[str, Any]:
        return asdict(self)