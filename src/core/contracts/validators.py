"""
Request Contracts — разбор payload'ов калькуляторов

Сырой payload (dict из JSON / формы) проходит два шага:
1. JSON Schema контракт: обязательные поля, формат строк, запрет лишних полей
2. Pydantic модель запроса: существование даты, сравнение с now

parse_request(schema_name, payload) выполняет оба шага и возвращает
провалидированную модель из src.core.domain.requests. Калькуляторы
принимают payload через evaluate_payload, который вызывает parse_request.

Схемы лежат внутри пакета (src/core/contracts/schema/*.json) и читаются
через importlib.resources, поэтому доступны и из установленного wheel.
"""

import json
from importlib import resources
from typing import Any, Dict, Final, Iterator, Type

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel

from src.core.domain.requests import (
    AgeComparisonRequest,
    AgeRequest,
    DateRangeRequest,
    DateTimeRangeRequest,
    SingleDateRequest,
)

SCHEMA_PACKAGE: Final[str] = "src.core.contracts"
SCHEMA_SUBDIR: Final[str] = "schema"

# Имя контракта → модель, в которую разбирается payload
REQUEST_MODELS: Final[Dict[str, Type[BaseModel]]] = {
    "age_request": AgeRequest,
    "age_comparison_request": AgeComparisonRequest,
    "date_range_request": DateRangeRequest,
    "datetime_range_request": DateTimeRangeRequest,
    "single_date_request": SingleDateRequest,
}


class UnknownContractError(KeyError):
    """Запрошен контракт, которого нет в REQUEST_MODELS."""
    pass


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema из ресурсов пакета.

    Схемы кэшируются после первой загрузки и проходят meta-validation.
    """

    def __init__(self, package: str = SCHEMA_PACKAGE):
        self._schema_root = resources.files(package) / SCHEMA_SUBDIR
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_root(self):
        """Traversable каталога схем."""
        return self._schema_root

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema по имени.

        Args:
            schema_name: Имя схемы без расширения (например, 'age_request')

        Raises:
            FileNotFoundError: Если ресурс схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_file = self._schema_root / f"{schema_name}.json"
        if not schema_file.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_name}.json")

        schema = json.loads(schema_file.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """Проверка payload'а против одной JSON Schema."""

    def __init__(self, schema_name: str, loader: SchemaLoader = _SCHEMA_LOADER):
        self.schema_name = schema_name
        self.validator = Draft202012Validator(loader.load_schema(schema_name))

    def validate(self, payload: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое найденное нарушение контракта
        """
        self.validator.validate(payload)

    def is_valid(self, payload: Dict[str, Any]) -> bool:
        return self.validator.is_valid(payload)

    def iter_errors(self, payload: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(payload)


_CONTRACTS: Dict[str, ContractValidator] = {}


def get_contract(schema_name: str) -> ContractValidator:
    """
    Валидатор контракта по имени (создаётся один раз на процесс).

    Raises:
        UnknownContractError: Если имя не зарегистрировано в REQUEST_MODELS
    """
    if schema_name not in REQUEST_MODELS:
        raise UnknownContractError(schema_name)

    contract = _CONTRACTS.get(schema_name)
    if contract is None:
        contract = ContractValidator(schema_name)
        _CONTRACTS[schema_name] = contract
    return contract


# =============================================================================
# PARSING
# =============================================================================


def parse_request(schema_name: str, payload: Dict[str, Any]) -> BaseModel:
    """
    Разбор сырого payload'а: контракт, затем Pydantic модель.

    Args:
        schema_name: Имя контракта из REQUEST_MODELS
        payload: Сырые данные (ISO-строки дат)

    Returns:
        Экземпляр модели REQUEST_MODELS[schema_name]

    Raises:
        UnknownContractError: Неизвестное имя контракта
        jsonschema.ValidationError: Payload не соответствует форме
        pydantic.ValidationError: Несуществующая дата или дата рождения в будущем

    Examples:
        >>> parse_request("single_date_request", {"target_date": "1969-07-20"})
        SingleDateRequest(target_date=datetime.date(1969, 7, 20))
    """
    get_contract(schema_name).validate(payload)
    return REQUEST_MODELS[schema_name].model_validate(payload)
