"""
Utility functions for ptkit.
"""

from .collection_utils import (
    cmp,
    deep_copy,
    find_item_from_list,
    find_key_from_list,
    identity,
    keys,
    max_value,
    min_value,
    noop,
    range_list,
    stable_sort,
    unimplemented,
    values,
)
from .number_utils import format_number
from .type_utils import (
    is_array,
    is_boolean,
    is_function,
    is_int,
    is_nan,
    is_number,
    is_object,
    is_string,
    number_to_str,
    to_bool,
    to_float,
    to_int,
    to_list,
    to_str,
)

__all__ = [
    "cmp",
    "deep_copy",
    "find_item_from_list",
    "find_key_from_list",
    "identity",
    "keys",
    "max_value",
    "min_value",
    "noop",
    "range_list",
    "stable_sort",
    "unimplemented",
    "values",
    "format_number",
    "is_array",
    "is_boolean",
    "is_function",
    "is_int",
    "is_nan",
    "is_number",
    "is_object",
    "is_string",
    "number_to_str",
    "to_bool",
    "to_float",
    "to_int",
    "to_list",
    "to_str",
]
