"""rest_options — an API-key-gated lookup service over a settings store.

A caller presents an API key and a list of option names.  The key is
checked first; then the administrator's allow/restrict policy decides
which of the requested names come back.
"""

from rest_options.context import RequestContext
from rest_options.exceptions import (
    ConfigError,
    InvalidParamError,
    KeyGenerationError,
    RequestError,
    RestOptionsError,
    StoreError,
    UnauthorizedError,
)
from rest_options.gate import authorize
from rest_options.keys import generate_api_key
from rest_options.restrictions import (
    RestrictionPolicy,
    RestrictionType,
    evaluate,
    parse_restriction_list,
    validate_requested,
)
from rest_options.result import GateResult
from rest_options.service import OptionsService

__all__ = [
    "ConfigError",
    "GateResult",
    "InvalidParamError",
    "KeyGenerationError",
    "OptionsService",
    "RequestContext",
    "RequestError",
    "RestOptionsError",
    "RestrictionPolicy",
    "RestrictionType",
    "StoreError",
    "UnauthorizedError",
    "authorize",
    "evaluate",
    "generate_api_key",
    "parse_restriction_list",
    "validate_requested",
]
