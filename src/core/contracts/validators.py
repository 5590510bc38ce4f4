"""
JSON Schema Contract Validators

Модуль для валидации JSON представления снимков векторов согласно
формальному JSON Schema контракту. Использует библиотеку jsonschema.

Схемы (src/core/contracts/schema/):
- vector_snapshot.json

Контракт проверяет только форму документа. Согласованность length и
числа items дополнительно проверяется здесь, т.к. JSON Schema не умеет
сравнивать значение поля с длиной массива.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.snapshot import VectorSnapshot


# =============================================================================
# SCHEMA LOADER
# =============================================================================

# Каталог схем поставляется внутри пакета (package-data)
SCHEMA_DIR = Path(__file__).parent / "schema"


class SchemaLoader:
    """
    Читает и кэширует JSON Schema контрактов по имени.

    Каждая схема при первой загрузке проходит meta-validation по
    Draft 2020-12; битая схема не попадает в кэш.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения ('vector_snapshot').

        Raises:
            FileNotFoundError: Если файла <schema_name>.json нет в каталоге
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка документов одного контракта против его JSON Schema."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения контракта в документе."""
        return self.validator.iter_errors(data)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение контракта
        """
        for error in self.iter_errors(data):
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return next(iter(self.iter_errors(data)), None) is None


class VectorSnapshotValidator(ContractValidator):
    """
    Валидатор vector_snapshot: схема плюс согласованность length и items.

    validate, is_valid и iter_errors опираются на один iter_errors,
    поэтому всегда дают одинаковый ответ.
    """

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("vector_snapshot", loader)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        yield from super().iter_errors(data)

        # Длину сверяем только у документа правильной формы: иначе уже есть ошибка схемы
        if not isinstance(data, dict):
            return
        items, length = data.get("items"), data.get("length")
        if isinstance(items, list) and isinstance(length, int) and not isinstance(length, bool):
            if len(items) != length:
                yield ValidationError(
                    f"items has {len(items)} elements, expected length {length}"
                )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_vector_snapshot(data: Dict[str, Any]) -> None:
    """
    Валидация JSON представления снимка вектора.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    VectorSnapshotValidator().validate(data)


def snapshot_to_contract(snapshot: VectorSnapshot) -> Dict[str, Any]:
    """
    JSON представление снимка, проверенное контрактом.

    Decimal, complex и Fraction пишутся строкой (см. VectorSnapshot) и
    восстанавливаются snapshot_from_contract по element_type.

    Raises:
        ValidationError: Если элемент не число и не строка в JSON
            (например, tuple становится массивом)
    """
    data = snapshot.model_dump(mode="json")
    validate_vector_snapshot(data)
    return data


def snapshot_from_contract(data: Dict[str, Any]) -> VectorSnapshot:
    """
    Снимок из JSON представления: сначала контракт, затем Pydantic модель.

    Raises:
        ValidationError: Если данные не соответствуют контракту
        pydantic.ValidationError: Если строковый элемент не разбирается
            как тип из element_type
    """
    validate_vector_snapshot(data)
    return VectorSnapshot.model_validate(data)
