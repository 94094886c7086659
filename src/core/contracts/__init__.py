"""
Contract Validation Module

Разбор payload'ов калькуляторов: JSON Schema контракт + Pydantic модель запроса.
"""

from .validators import (
    REQUEST_MODELS,
    ContractValidator,
    SchemaLoader,
    UnknownContractError,
    get_contract,
    parse_request,
)

__all__ = [
    # Registry
    "REQUEST_MODELS",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "UnknownContractError",
    # Functions
    "get_contract",
    "parse_request",
]
