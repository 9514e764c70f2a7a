"""Host-side UDF boundary.

Provides:
- TypeInfo / parse_type_name / from_arrow: argument type descriptors
- GenericUDF: initialize-once, evaluate-per-row lifecycle
- SortByFeatureUDF: sort_by_feature(map<int,float>)
- create_udf / list_udfs / register_udf: function registry
- UDFError hierarchy
"""

from ftvec.udf.base import GenericUDF
from ftvec.udf.errors import (
    UDFArgumentError,
    UDFArgumentLengthError,
    UDFArgumentTypeError,
    UDFError,
    UnknownFunctionError,
)
from ftvec.udf.registry import create_udf, list_udfs, register_udf
from ftvec.udf.sort_by_feature import FEATURE_MAP_TYPE, SortByFeatureUDF, is_feature_map
from ftvec.udf.typeinfo import (
    Category,
    PrimitiveCategory,
    TypeInfo,
    TypeParseError,
    from_arrow,
    list_of,
    map_of,
    parse_type_name,
    primitive,
    struct_of,
)

__all__ = [
    "FEATURE_MAP_TYPE",
    "Category",
    "GenericUDF",
    "PrimitiveCategory",
    "SortByFeatureUDF",
    "TypeInfo",
    "TypeParseError",
    "UDFArgumentError",
    "UDFArgumentLengthError",
    "UDFArgumentTypeError",
    "UDFError",
    "UnknownFunctionError",
    "create_udf",
    "from_arrow",
    "is_feature_map",
    "list_of",
    "list_udfs",
    "map_of",
    "parse_type_name",
    "primitive",
    "register_udf",
    "struct_of",
]
