"""
Folds — левые свёртки, засеянные первым элементом

Модуль содержит единственный способ редукции последовательностей в пакете:
- left_fold: общая левая свёртка по бинарному оператору
- fold_sum: сумма через operator.add
- fold_product: произведение через operator.mul

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Seed всегда items[0]; нейтральный элемент (0 или 1) НЕ подставляется
2. Порядок применения строго слева направо, каждый элемент ровно один раз
3. Пустая последовательность → EmptyFoldViolation (нарушение контракта)
"""

import operator
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EmptyFoldViolation(IndexError):
    """
    Свёртка пустой последовательности.

    Seed свёртки это первый элемент, поэтому пустой вход не имеет результата.
    Это нарушение контракта вызывающего кода, а не recoverable ошибка.
    """

    pass


# =============================================================================
# LEFT FOLD
# =============================================================================


def left_fold(items: Iterable[T], op: Callable[[T, T], T], label: str = "fold") -> T:
    """
    Левая свёртка, засеянная первым элементом.

    ((items[0] op items[1]) op items[2]) op ... op items[n-1]

    Args:
        items: Последовательность (любой iterable, читается один раз)
        op: Бинарный оператор, замкнутый над T
        label: Имя операции для сообщения об ошибке

    Returns:
        Результат свёртки

    Raises:
        EmptyFoldViolation: Если items пуст

    Examples:
        >>> left_fold([1, 2, 3], operator.sub)
        -4
        >>> left_fold(["a", "b"], operator.add)
        'ab'
    """
    iterator = iter(items)
    try:
        acc = next(iterator)
    except StopIteration:
        raise EmptyFoldViolation(f"{label}: cannot reduce an empty sequence") from None

    for item in iterator:
        acc = op(acc, item)
    return acc


def fold_sum(items: Iterable[T]) -> T:
    """
    Сумма элементов, начиная с items[0].

    В отличие от builtin sum() не прибавляет к 0, поэтому работает для
    любого T с замкнутым сложением (включая типы без сложения с int).
    """
    return left_fold(items, operator.add, label="sum")


def fold_product(items: Iterable[T]) -> T:
    """Произведение элементов, начиная с items[0]."""
    return left_fold(items, operator.mul, label="product")
