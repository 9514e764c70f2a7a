"""Column-at-a-time host for sort_by_feature.

Applies the transformation to every row of an Arrow ``map<int32, float32>``
column. The UDF is bound once against the column type, so type errors are
raised before any row is touched. Rows are then sorted in a single
vectorized pass over the flattened entries:

    row_ids = [0, 0, 0, 1, 1, 2, ...]   (row of each entry)
    order   = lexsort((keys, row_ids))  (by row, then by key)

Offsets, null rows and null weights are preserved; only the order of
entries within each row changes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import pyarrow as pa

from ftvec.udf.sort_by_feature import SortByFeatureUDF
from ftvec.udf.typeinfo import from_arrow

if TYPE_CHECKING:
    from ftvec.udf.typeinfo import TypeInfo

logger = logging.getLogger(__name__)


def bind_map_type(data_type: pa.DataType) -> TypeInfo:
    """Bind sort_by_feature against an Arrow type; return the result type.

    Raises:
        UDFArgumentTypeError: If the type is not map<int32, float32>.
        TypeParseError: If the Arrow type has no TypeInfo counterpart.
    """
    return SortByFeatureUDF().initialize([from_arrow(data_type)])


def _sort_chunk(chunk: pa.MapArray) -> pa.MapArray:
    if len(chunk) == 0:
        # Arrow arrays are immutable; nothing to reorder
        return chunk

    # Offsets are absolute into the (unsliced) child arrays
    offsets = chunk.offsets.to_numpy(zero_copy_only=False).astype(np.int64)
    start, stop = int(offsets[0]), int(offsets[-1])
    keys = chunk.keys.slice(start, stop - start)
    items = chunk.items.slice(start, stop - start)

    row_ids = np.repeat(np.arange(len(chunk), dtype=np.int64), np.diff(offsets))
    order = np.lexsort((keys.to_numpy(zero_copy_only=False), row_ids))
    indices = pa.array(order, type=pa.int64())

    mask = None
    if chunk.null_count > 0:
        mask = chunk.is_null()

    return pa.MapArray.from_arrays(
        pa.array(offsets - start, type=pa.int32()),
        keys.take(indices),
        items.take(indices),
        type=chunk.type,
        mask=mask,
    )


def sort_map_array(array: pa.MapArray | pa.ChunkedArray) -> pa.MapArray | pa.ChunkedArray:
    """Sort every feature vector in a map column by feature id.

    Args:
        array: map<int32, float32> array or chunked array.

    Returns:
        New array of the same kind and type with sorted rows.

    Raises:
        UDFArgumentTypeError: If the column is not map<int32, float32>.
    """
    bind_map_type(array.type)

    if isinstance(array, pa.ChunkedArray):
        chunks = [_sort_chunk(c) for c in array.chunks]
        logger.debug(
            "Sorted %d rows in %d chunks (%d nulls)",
            len(array),
            array.num_chunks,
            array.null_count,
        )
        return pa.chunked_array(chunks, type=array.type)

    result = _sort_chunk(array)
    logger.debug("Sorted %d rows (%d nulls)", len(array), array.null_count)
    return result


def sort_table_column(table: pa.Table, column: str) -> pa.Table:
    """Return a copy of table with the named feature column sorted.

    Raises:
        KeyError: If the column does not exist.
        UDFArgumentTypeError: If the column is not map<int32, float32>.
    """
    idx = table.schema.get_field_index(column)
    if idx < 0:
        raise KeyError(f"column not found: {column!r} (have: {table.column_names})")
    sorted_col = sort_map_array(table.column(idx))
    return table.set_column(idx, table.schema.field(idx), sorted_col)


__all__ = ["bind_map_type", "sort_map_array", "sort_table_column"]
