"""
Builders — step-wise accumulators for immutable market models

Билдер накапливает поля через fluent-методы и создаёт frozen Pydantic модель
в build(). Отсутствие обязательных полей обнаруживается до вызова конструктора
модели и сообщается одним исключением MissingField со списком всех полей.

Билдер не сбрасывается после build(): повторный вызов создаёт новую
эквивалентную модель.

Если у билдера задан contract, сериализованная форма модели (to_contract())
проверяется JSON Schema контрактом до возврата из build().
"""

import logging
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from src.core.contracts import validate_contract

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class MissingField(ValueError):
    """Обязательные поля не заданы к моменту build()."""

    def __init__(self, model: str, fields: list[str]):
        self.model = model
        self.fields = tuple(fields)
        super().__init__(f"{model}: missing required field(s): {', '.join(fields)}")


class Builder(Generic[ModelT]):
    """
    Базовый билдер.

    Подклассы задают:
        model: класс создаваемой модели
        required: имена обязательных полей
        contract: имя JSON Schema контракта для to_contract() (опционально)
    """

    model: ClassVar[type[BaseModel]]
    required: ClassVar[tuple[str, ...]] = ()
    contract: ClassVar[str | None] = None

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def _set(self, field: str, value: Any):
        # None означает "не задано", чтобы модель применила default
        if value is None:
            self._values.pop(field, None)
        else:
            self._values[field] = value
        return self

    def missing_fields(self) -> list[str]:
        """Обязательные поля, которые ещё не заданы (в порядке объявления)."""
        return [name for name in self.required if name not in self._values]

    def build(self) -> ModelT:
        """
        Создание immutable модели.

        Raises:
            MissingField: если не заданы обязательные поля
            pydantic.ValidationError: если значения полей невалидны
            jsonschema.ValidationError: если to_contract() нарушает контракт
        """
        missing = self.missing_fields()
        if missing:
            raise MissingField(self.model.__name__, missing)

        instance = self.model(**self._values)
        if self.contract is not None:
            validate_contract(self.contract, instance.to_contract())
        logger.debug("built %s: %r", self.model.__name__, instance)
        return instance  # type: ignore[return-value]
