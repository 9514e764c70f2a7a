"""Type descriptors for UDF argument binding.

A TypeInfo describes the declared type of a UDF argument or result the way
a SQL host does: a category (primitive, list, map, struct) plus, for
primitives, the primitive category, and for containers, the nested types.

Type names follow the Hive grammar:

    int, bigint, float, double, string, ...
    array<int>
    map<int,float>
    struct<id:int,weight:float>

Provides:
- Category / PrimitiveCategory enums
- TypeInfo (frozen) with a canonical ``type_name``
- parse_type_name: type name -> TypeInfo
- from_arrow: pyarrow DataType -> TypeInfo
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pyarrow as pa


class TypeParseError(ValueError):
    """Raised when a type name or Arrow type cannot be mapped to a TypeInfo."""


class Category(Enum):
    """Top-level type category."""

    PRIMITIVE = "PRIMITIVE"
    LIST = "LIST"
    MAP = "MAP"
    STRUCT = "STRUCT"


class PrimitiveCategory(Enum):
    """Primitive type category. Values are the canonical type names."""

    BOOLEAN = "boolean"
    BYTE = "tinyint"
    SHORT = "smallint"
    INT = "int"
    LONG = "bigint"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"
    BINARY = "binary"


# Accepted spellings -> canonical primitive
_PRIMITIVE_ALIASES: dict[str, PrimitiveCategory] = {
    **{p.value: p for p in PrimitiveCategory},
    "bool": PrimitiveCategory.BOOLEAN,
    "integer": PrimitiveCategory.INT,
    "long": PrimitiveCategory.LONG,
    "real": PrimitiveCategory.FLOAT,
    "varchar": PrimitiveCategory.STRING,
}


@dataclass(frozen=True)
class TypeInfo:
    """Declared type of a value.

    Attributes:
        category: Top-level category
        primitive: Primitive category (PRIMITIVE only)
        key: Key type (MAP only)
        value: Value type (MAP only)
        element: Element type (LIST only)
        fields: (name, type) pairs in declaration order (STRUCT only)
    """

    category: Category
    primitive: PrimitiveCategory | None = None
    key: TypeInfo | None = None
    value: TypeInfo | None = None
    element: TypeInfo | None = None
    fields: tuple[tuple[str, TypeInfo], ...] = ()

    def __post_init__(self) -> None:
        if self.category is Category.PRIMITIVE and self.primitive is None:
            raise ValueError("primitive TypeInfo requires a primitive category")
        if self.category is Category.MAP and (self.key is None or self.value is None):
            raise ValueError("map TypeInfo requires key and value types")
        if self.category is Category.LIST and self.element is None:
            raise ValueError("list TypeInfo requires an element type")

    @property
    def type_name(self) -> str:
        """Canonical Hive type name, e.g. ``map<int,float>``."""
        if self.category is Category.PRIMITIVE:
            assert self.primitive is not None
            return self.primitive.value
        if self.category is Category.LIST:
            assert self.element is not None
            return f"array<{self.element.type_name}>"
        if self.category is Category.MAP:
            assert self.key is not None and self.value is not None
            return f"map<{self.key.type_name},{self.value.type_name}>"
        inner = ",".join(f"{name}:{t.type_name}" for name, t in self.fields)
        return f"struct<{inner}>"

    def is_primitive(self, primitive: PrimitiveCategory) -> bool:
        """Check whether this is exactly the given primitive type."""
        return self.category is Category.PRIMITIVE and self.primitive is primitive

    def __str__(self) -> str:
        return self.type_name


def primitive(cat: PrimitiveCategory) -> TypeInfo:
    """Build a primitive TypeInfo."""
    return TypeInfo(category=Category.PRIMITIVE, primitive=cat)


def list_of(element: TypeInfo) -> TypeInfo:
    """Build a list TypeInfo."""
    return TypeInfo(category=Category.LIST, element=element)


def map_of(key: TypeInfo, value: TypeInfo) -> TypeInfo:
    """Build a map TypeInfo."""
    return TypeInfo(category=Category.MAP, key=key, value=value)


def struct_of(*fields: tuple[str, TypeInfo]) -> TypeInfo:
    """Build a struct TypeInfo."""
    return TypeInfo(category=Category.STRUCT, fields=tuple(fields))


# --- Type name parsing ------------------------------------------------------


class _Parser:
    """Recursive-descent parser over a tokenized type name."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.tokens = self._tokenize(text)
        self.pos = 0

    def _tokenize(self, text: str) -> list[str]:
        tokens: list[str] = []
        word = ""
        for ch in text:
            if ch.isalnum() or ch == "_":
                word += ch
                continue
            if word:
                tokens.append(word)
                word = ""
            if ch in "<>,:":
                tokens.append(ch)
            elif not ch.isspace():
                raise TypeParseError(f"unexpected character {ch!r} in type name {text!r}")
        if word:
            tokens.append(word)
        return tokens

    def _peek(self) -> str | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _next(self) -> str:
        tok = self._peek()
        if tok is None:
            raise TypeParseError(f"unexpected end of type name {self.text!r}")
        self.pos += 1
        return tok

    def _expect(self, tok: str) -> None:
        got = self._next()
        if got != tok:
            raise TypeParseError(f"expected {tok!r} but found {got!r} in type name {self.text!r}")

    def parse(self) -> TypeInfo:
        result = self._parse_type()
        if self._peek() is not None:
            raise TypeParseError(f"trailing tokens in type name {self.text!r}")
        return result

    def _parse_type(self) -> TypeInfo:
        word = self._next().lower()
        if word in ("array", "list"):
            self._expect("<")
            element = self._parse_type()
            self._expect(">")
            return list_of(element)
        if word == "map":
            self._expect("<")
            key = self._parse_type()
            self._expect(",")
            value = self._parse_type()
            self._expect(">")
            return map_of(key, value)
        if word == "struct":
            self._expect("<")
            fields: list[tuple[str, TypeInfo]] = []
            while True:
                name = self._next()
                self._expect(":")
                fields.append((name, self._parse_type()))
                if self._peek() == ",":
                    self._next()
                    continue
                break
            self._expect(">")
            return struct_of(*fields)
        cat = _PRIMITIVE_ALIASES.get(word)
        if cat is None:
            raise TypeParseError(f"unknown type {word!r} in type name {self.text!r}")
        return primitive(cat)


def parse_type_name(name: str) -> TypeInfo:
    """Parse a Hive-style type name.

    Whitespace is ignored and type keywords are case-insensitive.

    Raises:
        TypeParseError: If the name is malformed or names an unknown type.
    """
    if not name or not name.strip():
        raise TypeParseError("empty type name")
    return _Parser(name).parse()


# --- Arrow mapping ----------------------------------------------------------


def from_arrow(data_type: pa.DataType) -> TypeInfo:
    """Map a pyarrow DataType to a TypeInfo.

    Raises:
        TypeParseError: If the Arrow type has no counterpart.
    """
    import pyarrow as pa  # noqa: PLC0415 - keep pyarrow optional for row-wise callers

    t = pa.types
    if t.is_boolean(data_type):
        return primitive(PrimitiveCategory.BOOLEAN)
    if t.is_int8(data_type):
        return primitive(PrimitiveCategory.BYTE)
    if t.is_int16(data_type):
        return primitive(PrimitiveCategory.SHORT)
    if t.is_int32(data_type):
        return primitive(PrimitiveCategory.INT)
    if t.is_int64(data_type):
        return primitive(PrimitiveCategory.LONG)
    if t.is_float32(data_type):
        return primitive(PrimitiveCategory.FLOAT)
    if t.is_float64(data_type):
        return primitive(PrimitiveCategory.DOUBLE)
    if t.is_string(data_type) or t.is_large_string(data_type):
        return primitive(PrimitiveCategory.STRING)
    if t.is_binary(data_type) or t.is_large_binary(data_type):
        return primitive(PrimitiveCategory.BINARY)
    if t.is_map(data_type):
        return map_of(from_arrow(data_type.key_type), from_arrow(data_type.item_type))
    if t.is_list(data_type) or t.is_large_list(data_type):
        return list_of(from_arrow(data_type.value_type))
    if t.is_struct(data_type):
        fields = (data_type.field(i) for i in range(data_type.num_fields))
        return struct_of(*((f.name, from_arrow(f.type)) for f in fields))
    raise TypeParseError(f"unsupported arrow type: {data_type}")


__all__ = [
    "Category",
    "PrimitiveCategory",
    "TypeInfo",
    "TypeParseError",
    "from_arrow",
    "list_of",
    "map_of",
    "parse_type_name",
    "primitive",
    "struct_of",
]
