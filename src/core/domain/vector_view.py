"""
VectorView — невладеющий список ссылок на FixedVector

Упорядоченный read-only view на существующие векторы одного класса
FixedVector[T, N] (дубликаты допустимы). Редукции — "reduce-of-reduces":
сначала summary()/multiply() каждого вектора, затем левая свёртка этих
результатов в порядке списка. Данные элементов не копируются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все ссылки — экземпляры одного и того же класса FixedVector[T, N]
2. View никогда не мутирует векторы, на которые ссылается
3. get_matrix_by_index возвращает ту же ссылку (identity), не копию
4. Редукция пустого view → EmptyViewViolation
"""

import logging
import operator
from typing import Any, ClassVar, Dict, Iterable, Iterator, Optional, Tuple

from src.core.domain.fixed_vector import (
    FixedVector,
    VectorIndexViolation,
    VectorTypeMismatch,
)
from src.core.domain.snapshot import VectorSnapshot
from src.core.math.folds import EmptyFoldViolation, fold_product, fold_sum

logger = logging.getLogger(__name__)


class EmptyViewViolation(EmptyFoldViolation):
    """Редукция view без ссылок: seed refs[0] не существует."""

    pass


# Кэш специализаций view: класс вектора → класс view
_VIEW_SPECIALIZATIONS: Dict[type, type] = {}


class VectorView:
    """
    View на упорядоченный набор векторов одного класса.

    Создание:
        VectorView[int, 5]([a, b, a])  # явная специализация
        VectorView([a, b])             # класс вектора берётся из первой ссылки

    View хранит ссылки, поэтому векторы живут не меньше view. Чтение из
    нескольких потоков безопасно только при отсутствии мутатора у любого
    из векторов.
    """

    VECTOR_TYPE: ClassVar[Optional[type]] = None

    def __class_getitem__(cls, params: Any) -> type:
        return cls.over(FixedVector[params])

    @classmethod
    def over(cls, vector_type: type) -> type:
        """
        Специализация view по классу вектора (например FixedVector[int, 5]).

        Raises:
            TypeError: Если vector_type не параметризованный FixedVector
        """
        if cls.VECTOR_TYPE is not None:
            raise TypeError(f"{cls.__name__} is already parameterized")
        if not (isinstance(vector_type, type) and issubclass(vector_type, FixedVector)):
            raise TypeError(f"VectorView requires a FixedVector class, got {vector_type!r}")
        if vector_type.LENGTH is None:
            raise TypeError("VectorView requires a parameterized FixedVector class")

        specialized = _VIEW_SPECIALIZATIONS.get(vector_type)
        if specialized is None:
            name = vector_type.__name__.replace("FixedVector", cls.__name__, 1)
            specialized = type(
                name,
                (cls,),
                {
                    "VECTOR_TYPE": vector_type,
                    "__module__": cls.__module__,
                    "__qualname__": name,
                },
            )
            _VIEW_SPECIALIZATIONS[vector_type] = specialized
        return specialized

    def __new__(cls, refs: Iterable[FixedVector]):
        references = tuple(refs)

        target = cls
        if cls.VECTOR_TYPE is None and references:
            if not isinstance(references[0], FixedVector):
                raise VectorTypeMismatch(
                    f"{cls.__name__}: reference 0 is {type(references[0]).__name__}, "
                    f"expected a FixedVector"
                )
            target = cls.over(type(references[0]))

        vector_type = target.VECTOR_TYPE
        if vector_type is not None:
            for position, ref in enumerate(references):
                if type(ref) is not vector_type:
                    raise VectorTypeMismatch(
                        f"{target.__name__}: reference {position} is "
                        f"{type(ref).__name__}, expected {vector_type.__name__}"
                    )

        self = super().__new__(target)
        self._refs = references
        logger.debug(
            "Constructed %s over %d vectors",
            target.__name__,
            len(references),
            extra={"vector_type": target.__name__, "length": len(references)},
        )
        return self

    def get_matrix_by_index(self, index: int) -> FixedVector:
        """
        Вектор по позиции в view (та же ссылка, что была передана).

        Raises:
            VectorIndexViolation: Если index вне [0, len(view))
        """
        position = operator.index(index)
        if not 0 <= position < len(self._refs):
            raise VectorIndexViolation(
                f"Index {position} out of bounds for {type(self).__name__} "
                f"of {len(self._refs)} vectors"
            )
        return self._refs[position]

    def _per_vector(self, label: str) -> Tuple[FixedVector, ...]:
        if not self._refs:
            raise EmptyViewViolation(f"{type(self).__name__}.{label}: view has no vectors")
        return self._refs

    def summary(self) -> Any:
        """
        Сумма summary() всех векторов в порядке списка.

        refs[0].summary() + refs[1].summary() + ... (левая свёртка)
        """
        return fold_sum(ref.summary() for ref in self._per_vector("summary"))

    def multiply(self) -> Any:
        """Произведение multiply() всех векторов в порядке списка."""
        return fold_product(ref.multiply() for ref in self._per_vector("multiply"))

    def snapshots(self) -> Tuple[VectorSnapshot, ...]:
        """Защитные копии содержимого всех векторов по порядку."""
        return tuple(ref.snapshot() for ref in self._refs)

    def __len__(self) -> int:
        return len(self._refs)

    def __iter__(self) -> Iterator[FixedVector]:
        return iter(self._refs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._refs)!r})"
