"""
Contract Validation Module

Модуль для валидации JSON контрактов (stock, history_query).
"""

from .validators import (
    HISTORY_QUERY_CONTRACT,
    STOCK_CONTRACT,
    SchemaLoader,
    contract_errors,
    default_loader,
    get_validator,
    validate_contract,
    validate_history_query,
    validate_stock,
)

__all__ = [
    # Constants
    "STOCK_CONTRACT",
    "HISTORY_QUERY_CONTRACT",
    # Classes
    "SchemaLoader",
    # Functions
    "default_loader",
    "get_validator",
    "validate_contract",
    "contract_errors",
    "validate_stock",
    "validate_history_query",
]
