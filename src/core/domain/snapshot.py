"""
VectorSnapshot — неизменяемая копия FixedVector

Immutable Pydantic модель для защитного копирования на границах API:
вызывающий код получает значения, не удерживая ссылку на мутабельный
вектор. Соответствует контракту vector_snapshot.json.

JSON не имеет Decimal, complex и Fraction: в JSON режиме такие элементы
пишутся строкой (str), а при валидации восстанавливаются по element_type.
"""

from decimal import Decimal
from fractions import Fraction
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

# Типы элементов, которые в JSON представлены строкой: имя → конструктор
STRING_ENCODED_TYPES: Dict[str, type] = {
    "Decimal": Decimal,
    "complex": complex,
    "Fraction": Fraction,
}


def _decode_item(decoder: type, value: Any) -> Any:
    if not isinstance(value, str):
        return value
    try:
        return decoder(value)
    except (ValueError, ArithmeticError) as e:
        raise ValueError(f"item {value!r} is not a valid {decoder.__name__}") from e


class VectorSnapshot(BaseModel):
    """
    Снимок вектора: параметры типа и элементы по порядку.

    Immutable модель (frozen=True).
    """

    length: int = Field(..., ge=1, description="Длина N (LENGTH класса вектора)")
    element_type: Optional[str] = Field(
        None, min_length=1, description="Имя типа элемента (None для непараметризованного)"
    )
    items: Tuple[Any, ...] = Field(..., min_length=1, description="Элементы по порядку")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def decode_string_items(cls, data: Any) -> Any:
        """Строковые элементы из JSON → тип, названный в element_type"""
        if not isinstance(data, dict):
            return data
        element_type = data.get("element_type")
        items = data.get("items")
        decoder = STRING_ENCODED_TYPES.get(element_type) if isinstance(element_type, str) else None
        if decoder is None or not isinstance(items, (list, tuple)):
            return data
        return {**data, "items": tuple(_decode_item(decoder, v) for v in items)}

    @field_validator("length", mode="before")
    @classmethod
    def validate_length_is_int(cls, v: Any) -> Any:
        """bool не принимается как длина"""
        if isinstance(v, bool):
            raise ValueError(f"length must be an integer, got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_items_match_length(self) -> "VectorSnapshot":
        """Проверка, что число элементов равно length"""
        if len(self.items) != self.length:
            raise ValueError(
                f"items has {len(self.items)} elements, expected length {self.length}"
            )
        return self

    @field_serializer("items", when_used="json")
    def serialize_items(self, items: Tuple[Any, ...]) -> List[Any]:
        """Decimal, complex и Fraction пишутся строкой"""
        return [str(v) if isinstance(v, (Decimal, complex, Fraction)) else v for v in items]
