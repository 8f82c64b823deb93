"""
JSON Schema Contract Validators

Контракты сериализованных market-моделей (Draft 2020-12, jsonschema):
- stock.json          — Stock.to_contract()
- history_query.json  — History.to_contract()

Схемы поставляются внутри пакета (src/core/contracts/schema/) и читаются
через importlib.resources, поэтому работают и из checkout, и после
установки. Загрузчик и валидаторы создаются лениво при первом обращении.
"""

import json
from functools import lru_cache
from importlib.resources import files
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

# Имена контрактов, поставляемых с пакетом
STOCK_CONTRACT = "stock"
HISTORY_QUERY_CONTRACT = "history_query"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем и meta-валидацией.

    По умолчанию читает схемы из ресурсов пакета; schema_dir позволяет
    указать любой каталог (Path или Traversable).
    """

    def __init__(self, schema_dir=None):
        self._schema_dir = schema_dir if schema_dir is not None else files(__package__) / "schema"
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self):
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def default_loader() -> SchemaLoader:
    """Общий загрузчик для схем пакета (создаётся при первом вызове)."""
    return SchemaLoader()


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> Draft202012Validator:
    """Скомпилированный валидатор для контракта пакета."""
    return Draft202012Validator(default_loader().load_schema(schema_name))


# =============================================================================
# VALIDATION
# =============================================================================


def validate_contract(schema_name: str, data: Dict[str, Any]) -> None:
    """
    Валидация данных против контракта.

    Raises:
        jsonschema.ValidationError: первая найденная ошибка
    """
    get_validator(schema_name).validate(data)


def contract_errors(schema_name: str, data: Dict[str, Any]) -> list[str]:
    """Все нарушения контракта в виде 'path: message' (пустой список, если валидно)."""
    errors = sorted(get_validator(schema_name).iter_errors(data), key=lambda e: list(e.path))
    return [f"{'/'.join(str(p) for p in e.path) or '<root>'}: {e.message}" for e in errors]


def validate_stock(data: Dict[str, Any]) -> None:
    validate_contract(STOCK_CONTRACT, data)


def validate_history_query(data: Dict[str, Any]) -> None:
    """
    Валидация history_query данных.

    Порядок границ (period1 < period2) схемой не выражается и проверяется
    моделью History.
    """
    validate_contract(HISTORY_QUERY_CONTRACT, data)
