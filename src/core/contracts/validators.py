"""
JSON Schema Contract Validators

Экспортируемые JSON контракты результатов. CLI сериализует каждый
результат через export_computation_result: JSON, не прошедший схему,
наружу не уходит.

Схемы (src/core/contracts/schema/, Draft 2020-12):
- digit_histogram.json
- computation_result.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel

from src.core.domain.computation import ComputationResult

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Кэширующий загрузчик схем контрактов.

    Каждая схема читается один раз и проходит meta-validation до первого
    использования.
    """

    def __init__(self, schema_dir: Path | None = None):
        self.schema_dir = schema_dir or SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._validators: Dict[str, Draft202012Validator] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема контракта по имени файла без расширения.

        Raises:
            FileNotFoundError: файла схемы нет
            ValueError: схема не проходит meta-validation
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema

    def validator_for(self, schema_name: str) -> Draft202012Validator:
        """Draft 2020-12 валидатор схемы, один на имя."""
        if schema_name not in self._validators:
            self._validators[schema_name] = Draft202012Validator(self.load_schema(schema_name))
        return self._validators[schema_name]


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка данных и pydantic моделей против одной схемы."""

    schema_name: str

    def __init__(self, loader: SchemaLoader | None = None):
        self._validator = (loader or _SCHEMA_LOADER).validator_for(self.schema_name)

    @property
    def schema(self) -> Dict[str, Any]:
        return self._validator.schema

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: данные не соответствуют схеме
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self._validator.iter_errors(data)

    def export(self, model: BaseModel) -> str:
        """
        JSON запись модели, проверенная по схеме.

        Raises:
            ValidationError: модель и контракт разошлись
        """
        payload = model.model_dump(mode="json")
        self.validate(payload)
        return json.dumps(payload, ensure_ascii=False)


class DigitHistogramValidator(ContractValidator):
    schema_name = "digit_histogram"


class ComputationResultValidator(ContractValidator):
    schema_name = "computation_result"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_digit_histogram(data: Dict[str, Any]) -> None:
    DigitHistogramValidator().validate(data)


def validate_computation_result(data: Dict[str, Any]) -> None:
    ComputationResultValidator().validate(data)


def export_computation_result(result: ComputationResult) -> str:
    """JSON запись результата вычисления для вывода наружу."""
    return ComputationResultValidator().export(result)
