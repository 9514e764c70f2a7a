"""Generic UDF lifecycle.

A host binds a UDF once per query and then evaluates it once per row:

    udf = SortByFeatureUDF()
    out_type = udf.initialize([parse_type_name("map<int,float>")])  # bind time
    for row in rows:
        udf.evaluate([row])                                          # per row

Argument checks belong in ``initialize``; ``evaluate`` trusts what was bound.
Subclasses keep only immutable bind-time state so one instance can be
evaluated from several threads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from ftvec.udf.errors import UDFError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ftvec.udf.typeinfo import TypeInfo


class GenericUDF(ABC):
    """Base class for host-invoked functions."""

    name: ClassVar[str]

    def __init__(self) -> None:
        self._arg_types: tuple[TypeInfo, ...] | None = None
        self._return_type: TypeInfo | None = None

    @property
    def is_initialized(self) -> bool:
        return self._return_type is not None

    @property
    def return_type(self) -> TypeInfo:
        if self._return_type is None:
            raise UDFError(f"{self.name}() has not been initialized")
        return self._return_type

    def initialize(self, arg_types: Sequence[TypeInfo]) -> TypeInfo:
        """Validate argument types and return the result type.

        Raises:
            UDFArgumentError: If arity or types are not accepted.
        """
        arg_types = tuple(arg_types)
        return_type = self.bind(arg_types)
        self._arg_types = arg_types
        self._return_type = return_type
        return return_type

    def evaluate(self, args: Sequence[Any]) -> Any:
        """Evaluate one row.

        Raises:
            UDFError: If called before a successful initialize().
        """
        if self._return_type is None:
            raise UDFError(f"{self.name}() evaluated before initialize()")
        return self.compute(args)

    def __call__(self, *args: Any) -> Any:
        return self.evaluate(args)

    def display_string(self, children: Sequence[str]) -> str:
        """Render this call for query plans, e.g. ``fn([a, b])``."""
        return f"{self.name}([{', '.join(children)}])"

    @abstractmethod
    def bind(self, arg_types: tuple[TypeInfo, ...]) -> TypeInfo:
        """Check argument types; return the result type."""

    @abstractmethod
    def compute(self, args: Sequence[Any]) -> Any:
        """Per-row body. Arguments already match the bound types."""
