"""
FixedVector — однородный контейнер фиксированной длины

Модель "матрицы" из N элементов одного числового типа T:
- Индексированное чтение (get_by_index, get_items, size)
- Скалярные преобразования на месте (add_to_each_item, mul_to_each_item)
- Полные редукции левой свёрткой (summary, multiply)

Длина входит в идентичность типа, а не значения:
    FixedVector[int, 5] и FixedVector[int, 3] — разные несовместимые классы.
Python не проверяет это статически, поэтому длина проверяется при
конструировании (VectorLengthMismatch), без усечения и дополнения.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(items) == LENGTH на протяжении всей жизни экземпляра
2. LENGTH >= 1 (N = 0 отвергается при специализации)
3. Индекс вне [0, N) → VectorIndexViolation; библиотека его не перехватывает
4. Преобразования атомарны: при ошибке элементы не изменяются
"""

import logging
import operator
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Iterable, Iterator, Optional, Tuple

from src.core.domain.snapshot import VectorSnapshot
from src.core.math.folds import fold_product, fold_sum
from src.core.math.numerical_safeguards import is_finite_element

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class VectorIndexViolation(IndexError):
    """
    Индекс вне диапазона [0, N).

    Нарушение предусловия вызывающим кодом (аналог panic): библиотека не
    перехватывает и не логирует его. Отрицательные индексы НЕ
    интерпретируются как отсчёт с конца.
    """

    pass


class VectorLengthMismatch(ValueError):
    """Число элементов не совпадает с LENGTH, либо LENGTH < 1."""

    pass


class VectorTypeMismatch(TypeError):
    """Элемент, скаляр, ссылка или snapshot несовместимы с типом контейнера."""

    pass


class NonFiniteElementViolation(ValueError):
    """NaN/Inf при включённом ElementPolicy.reject_non_finite."""

    pass


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass(frozen=True)
class ElementPolicy:
    """Политика допуска элементов в контейнер.

    - strict_element_type: для параметризованных векторов каждый элемент,
      скаляр и результат преобразования обязан быть экземпляром
      ELEMENT_TYPE (bool не принимается вместо int/float)
    - reject_non_finite: NaN/Inf в элементах, скалярах и результатах
      преобразований запрещены
    """

    strict_element_type: bool = True
    reject_non_finite: bool = False


DEFAULT_ELEMENT_POLICY = ElementPolicy()


# Кэш специализаций: (базовый класс, T, N) → класс
_SPECIALIZATIONS: Dict[Tuple[type, Optional[type], int], type] = {}


def _type_name(element_type: Optional[type]) -> str:
    """Имя типа элемента в имени специализации ("Any" для непараметризованного)."""
    return "Any" if element_type is None else element_type.__name__


def _validate_length(length: Any) -> int:
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"Vector length must be an int, got {length!r}")
    if length < 1:
        raise VectorLengthMismatch(f"Vector length must be >= 1, got {length}")
    return length


# =============================================================================
# FIXED VECTOR
# =============================================================================


class FixedVector:
    """
    Владеющий контейнер из ровно LENGTH элементов типа ELEMENT_TYPE.

    Создание:
        FixedVector[int, 3]([1, 2, 3])  # явная специализация
        FixedVector([1, 2, 3])          # N выводится, T не ограничен

    Требования к T зависят от операции: add_to_each_item/summary нужен
    замкнутый "+", mul_to_each_item/multiply нужен замкнутый "*". Элементы
    без оператора дают собственный TypeError Python.

    Мутабельный, поэтому unhashable. Чтение из нескольких потоков
    допустимо только без параллельного мутатора (синхронизация на стороне
    вызывающего кода).
    """

    LENGTH: ClassVar[Optional[int]] = None
    ELEMENT_TYPE: ClassVar[Optional[type]] = None

    __hash__ = None  # type: ignore[assignment]

    def __class_getitem__(cls, params: Any) -> type:
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError(
                f"{cls.__name__}[...] expects [element_type, length], got {params!r}"
            )
        element_type, length = params
        if element_type is Any:
            element_type = None
        return cls.of(length, element_type)

    @classmethod
    def of(cls, length: int, element_type: Optional[type] = None) -> type:
        """
        Специализация контейнера по длине и типу элемента.

        Повторный вызов с теми же параметрами возвращает тот же класс,
        поэтому FixedVector.of(3, int) is FixedVector[int, 3].

        Raises:
            TypeError: Если класс уже специализирован или параметры не типы
            VectorLengthMismatch: Если length < 1
        """
        if cls.LENGTH is not None:
            raise TypeError(f"{cls.__name__} is already parameterized")
        if element_type is not None and not isinstance(element_type, type):
            raise TypeError(f"Element type must be a type, got {element_type!r}")
        length = _validate_length(length)

        key = (cls, element_type, length)
        specialized = _SPECIALIZATIONS.get(key)
        if specialized is None:
            name = f"{cls.__name__}[{_type_name(element_type)}, {length}]"
            specialized = type(
                name,
                (cls,),
                {
                    "LENGTH": length,
                    "ELEMENT_TYPE": element_type,
                    "__module__": cls.__module__,
                    "__qualname__": name,
                },
            )
            _SPECIALIZATIONS[key] = specialized
        return specialized

    def __new__(cls, items: Iterable[Any], policy: Optional[ElementPolicy] = None):
        values = list(items)
        target = cls if cls.LENGTH is not None else cls.of(len(values))

        if len(values) != target.LENGTH:
            raise VectorLengthMismatch(
                f"{target.__name__} requires exactly {target.LENGTH} items, got {len(values)}"
            )

        self = super().__new__(target)
        self._policy = policy or DEFAULT_ELEMENT_POLICY
        self._items = values
        for value in values:
            self._admit(value, role="item")

        logger.debug(
            "Constructed %s",
            target.__name__,
            extra={"vector_type": target.__name__, "length": target.LENGTH},
        )
        return self

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def _admit(self, value: Any, role: str) -> None:
        """Проверка значения по ElementPolicy перед записью или применением."""
        element_type = type(self).ELEMENT_TYPE
        if self._policy.strict_element_type and element_type is not None:
            is_bool_stand_in = isinstance(value, bool) and element_type is not bool
            if is_bool_stand_in or not isinstance(value, element_type):
                raise VectorTypeMismatch(
                    f"{type(self).__name__}: {role} {value!r} is "
                    f"{type(value).__name__}, expected {element_type.__name__}"
                )
        if self._policy.reject_non_finite and not is_finite_element(value):
            raise NonFiniteElementViolation(
                f"{type(self).__name__}: non-finite {role} {value!r}"
            )

    def _check_index(self, index: Any) -> int:
        position = operator.index(index)
        if not 0 <= position < type(self).LENGTH:
            raise VectorIndexViolation(
                f"Index {position} out of bounds for {type(self).__name__} "
                f"(valid range 0..{type(self).LENGTH - 1})"
            )
        return position

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    def get_by_index(self, index: int) -> Any:
        """
        Элемент по индексу.

        Raises:
            VectorIndexViolation: Если index вне [0, N)
            TypeError: Если index не целое число
        """
        return self._items[self._check_index(index)]

    def size(self) -> int:
        """Длина N (всегда равна LENGTH класса)."""
        return type(self).LENGTH

    def get_items(self) -> Tuple[Any, ...]:
        """Все элементы по порядку (неизменяемая копия)."""
        return tuple(self._items)

    @property
    def policy(self) -> ElementPolicy:
        return self._policy

    # -------------------------------------------------------------------------
    # In-place scalar transforms
    # -------------------------------------------------------------------------

    def _apply(self, op: Callable[[Any, Any], Any], value: Any, label: str) -> None:
        self._admit(value, role="scalar")

        updated = [op(item, value) for item in self._items]
        # Результат обязан остаться T: bool + bool даёт int
        if self._policy.strict_element_type or self._policy.reject_non_finite:
            for result in updated:
                self._admit(result, role=f"{label} result")

        # Атомарная замена: при исключении выше self._items не тронут
        self._items = updated
        logger.debug(
            "%s applied to %s",
            label,
            type(self).__name__,
            extra={"vector_type": type(self).__name__, "operation": label},
        )

    def add_to_each_item(self, value: Any) -> None:
        """Каждый элемент e заменяется на e + value (in place)."""
        self._apply(operator.add, value, label="add_to_each_item")

    def mul_to_each_item(self, value: Any) -> None:
        """Каждый элемент e заменяется на e * value (in place)."""
        self._apply(operator.mul, value, label="mul_to_each_item")

    # -------------------------------------------------------------------------
    # Reductions
    # -------------------------------------------------------------------------

    def summary(self) -> Any:
        """
        Сумма всех элементов.

        Левая свёртка: ((items[0] + items[1]) + items[2]) + ... + items[N-1]
        """
        return fold_sum(self._items)

    def multiply(self) -> Any:
        """
        Произведение всех элементов.

        Левая свёртка: ((items[0] * items[1]) * items[2]) * ... * items[N-1]
        """
        return fold_product(self._items)

    # -------------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------------

    def snapshot(self) -> VectorSnapshot:
        """Неизменяемая копия параметров типа и элементов."""
        element_type = type(self).ELEMENT_TYPE
        return VectorSnapshot(
            length=type(self).LENGTH,
            element_type=None if element_type is None else element_type.__name__,
            items=tuple(self._items),
        )

    @classmethod
    def from_snapshot(
        cls, snapshot: VectorSnapshot, policy: Optional[ElementPolicy] = None
    ) -> "FixedVector":
        """
        Восстановление вектора из snapshot.

        Для параметризованного класса длина и имя типа элемента snapshot
        должны совпадать с LENGTH и ELEMENT_TYPE класса.

        Raises:
            VectorLengthMismatch: Если длина snapshot отличается от LENGTH
            VectorTypeMismatch: Если тип элемента snapshot отличается
        """
        if cls.LENGTH is not None:
            if snapshot.length != cls.LENGTH:
                raise VectorLengthMismatch(
                    f"Snapshot of length {snapshot.length} cannot restore {cls.__name__}"
                )
            expected = None if cls.ELEMENT_TYPE is None else cls.ELEMENT_TYPE.__name__
            if snapshot.element_type != expected:
                raise VectorTypeMismatch(
                    f"Snapshot element type {snapshot.element_type!r} "
                    f"cannot restore {cls.__name__}"
                )
        return cls(snapshot.items, policy=policy)

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return type(self).LENGTH

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedVector):
            return NotImplemented
        return type(self) is type(other) and self._items == other._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
