"""sort_by_feature(map<int,float>) -> map<int,float>.

Host adapter for ftvec.sorting.sort_by_feature. The argument type is checked
once at initialize time; rows are then handed to the core without any
further inspection.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ftvec.sorting import sort_by_feature
from ftvec.udf.base import GenericUDF
from ftvec.udf.errors import UDFArgumentLengthError, UDFArgumentTypeError
from ftvec.udf.registry import register_udf
from ftvec.udf.typeinfo import Category, PrimitiveCategory, TypeInfo, map_of, primitive

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

FEATURE_MAP_TYPE: TypeInfo = map_of(
    primitive(PrimitiveCategory.INT),
    primitive(PrimitiveCategory.FLOAT),
)


def is_feature_map(t: TypeInfo) -> bool:
    """Check for exactly map<int,float>. Any other type is rejected."""
    if t.category is not Category.MAP:
        return False
    assert t.key is not None and t.value is not None
    return t.key.is_primitive(PrimitiveCategory.INT) and t.value.is_primitive(
        PrimitiveCategory.FLOAT
    )


@register_udf
class SortByFeatureUDF(GenericUDF):
    """Return the feature vector with keys in ascending order."""

    name = "sort_by_feature"

    def bind(self, arg_types: tuple[TypeInfo, ...]) -> TypeInfo:
        if len(arg_types) != 1:
            raise UDFArgumentLengthError(f"{self.name}() has an only single argument.")

        arg = arg_types[0]
        if not is_feature_map(arg):
            raise UDFArgumentTypeError(
                0,
                f"{self.name}() must have Map[int, float] as an argument, "
                f"but {arg.type_name} was found.",
            )

        logger.debug("Bound %s(%s)", self.name, arg.type_name)
        # Result type is a fresh map type with the argument's key/value types
        assert arg.key is not None and arg.value is not None
        return map_of(arg.key, arg.value)

    def compute(self, args: Sequence[Any]) -> dict[int, float] | None:
        vector = args[0]
        if vector is None:
            return None
        return sort_by_feature(vector)
