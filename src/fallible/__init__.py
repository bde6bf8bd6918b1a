from fallible.adapters import normalize_return, wrap_with_option, wrap_with_result
from fallible.config import DEFAULT_POLICY, AdapterPolicy, create_config, load_policy
from fallible.exceptions import (
    ConfigError,
    FallibleException,
    InvalidConstructionError,
    InvalidReturnError,
    UnwrapError,
)
from fallible.option import Nothing, Option, Some
from fallible.result import Err, Ok, Result
from fallible.sentinel import UNDEFINED, is_absent

__all__ = [
    "DEFAULT_POLICY",
    "UNDEFINED",
    "AdapterPolicy",
    "ConfigError",
    "Err",
    "FallibleException",
    "InvalidConstructionError",
    "InvalidReturnError",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
    "UnwrapError",
    "create_config",
    "is_absent",
    "load_policy",
    "normalize_return",
    "wrap_with_option",
    "wrap_with_result",
]
