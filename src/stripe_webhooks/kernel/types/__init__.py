"""Kernel types – boxed options and permissive value coercion."""
from stripe_webhooks.kernel.types.option import Nothing, Option, Some
from stripe_webhooks.kernel.types.value import (
    AttributeGetter,
    Value,
    extract_bool,
    extract_string,
    extract_string_list,
    to_bool,
    to_list,
    to_map,
    to_string,
    to_string_list,
)

__all__ = [
    "AttributeGetter",
    "Nothing",
    "Option",
    "Some",
    "Value",
    "extract_bool",
    "extract_string",
    "extract_string_list",
    "to_bool",
    "to_list",
    "to_map",
    "to_string",
    "to_string_list",
]
