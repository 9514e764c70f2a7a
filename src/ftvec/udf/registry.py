"""Function registry: SQL name -> UDF class."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from ftvec.udf.errors import UnknownFunctionError

if TYPE_CHECKING:
    from ftvec.udf.base import GenericUDF

_U = TypeVar("_U", bound="type[GenericUDF]")

_REGISTRY: dict[str, type[GenericUDF]] = {}


def register_udf(cls: _U) -> _U:
    """Class decorator registering a UDF under ``cls.name``.

    Raises:
        ValueError: If another class is already registered under the name.
    """
    key = cls.name.lower()
    existing = _REGISTRY.get(key)
    if existing is not None and existing is not cls:
        raise ValueError(f"UDF '{key}' already registered by {existing.__qualname__}")
    _REGISTRY[key] = cls
    return cls


def create_udf(name: str) -> GenericUDF:
    """Instantiate the UDF registered under name (case-insensitive).

    Raises:
        UnknownFunctionError: If no UDF is registered under name.
    """
    cls = _REGISTRY.get(name.strip().lower())
    if cls is None:
        raise UnknownFunctionError(name)
    return cls()


def list_udfs() -> list[str]:
    """Registered function names, sorted."""
    return sorted(_REGISTRY)
