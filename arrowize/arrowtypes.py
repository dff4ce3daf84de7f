"""Maps Python and numpy runtime values to Arrow primitive types."""

from collections.abc import Mapping
from typing import Any, Dict, Optional

import numpy as np
import pyarrow as pa

# Runtime scalar kinds to Arrow primitive types. Sized numpy scalars keep
# their width; plain Python int and float are platform-native 64-bit values.
PYTHON_TO_ARROW_TYPES: Dict[type, pa.DataType] = {
    bool: pa.bool_(),
    np.bool_: pa.bool_(),
    np.int8: pa.int8(),
    np.int16: pa.int16(),
    np.int32: pa.int32(),
    np.int64: pa.int64(),
    int: pa.int64(),
    np.uint8: pa.uint8(),
    np.uint16: pa.uint16(),
    np.uint32: pa.uint32(),
    np.uint64: pa.uint64(),
    np.float32: pa.float32(),
    np.float64: pa.float64(),
    float: pa.float64(),
    np.str_: pa.string(),
    str: pa.string(),
    np.bytes_: pa.binary(),
    bytes: pa.binary(),
    bytearray: pa.binary(),
    memoryview: pa.binary(),
}


def scalar_type_of(value: Any) -> Optional[pa.DataType]:
    """Returns the Arrow type for a scalar value, or None if the kind is unsupported.

    The exact runtime type wins; otherwise the closest listed base class in
    the value's MRO is used, so subclasses such as ``enum.IntEnum`` members
    resolve like their base.
    """
    for klass in type(value).__mro__:
        data_type = PYTHON_TO_ARROW_TYPES.get(klass)
        if data_type is not None:
            return data_type
    if isinstance(value, np.generic):
        # platform aliases such as numpy.longlong share a width with a listed kind
        dtype = value.dtype
        if (dtype.kind in 'iu' and dtype.itemsize in (1, 2, 4, 8)) or (dtype.kind == 'f' and dtype.itemsize in (4, 8)):
            return pa.from_numpy_dtype(dtype)
    return None


def is_mapping(value: Any) -> bool:
    """Check whether a value is a nested document."""
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    """Check whether a value is a sequence of values. Strings and bytes are scalars."""
    return isinstance(value, (list, tuple))
