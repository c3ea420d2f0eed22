"""Foundation utilities and shared definitions public exports."""

from . import constants as _constants
from . import exceptions as _exceptions
from .constants import *
from .exceptions import *
from .traits import (
    as_dtype,
    common_type,
    dtype_of,
    floating_dtype,
    greater_of,
    integral_dtype,
    is_floating_point,
    is_floating_value,
    is_integral,
    is_integral_value,
    lesser_of,
    result_dtype,
)

__all__ = [
    "as_dtype",
    "integral_dtype",
    "floating_dtype",
    "is_integral",
    "is_floating_point",
    "is_integral_value",
    "is_floating_value",
    "common_type",
    "dtype_of",
    "result_dtype",
    "greater_of",
    "lesser_of",
]
__all__ += _constants.__all__ + _exceptions.__all__
