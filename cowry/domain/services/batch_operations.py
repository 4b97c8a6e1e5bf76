from typing import Callable, Iterable, Iterator

from cowry.domain.exceptions import DivisionByZeroError
from cowry.domain.values import Money, RoundingMode
from cowry.shared.logging import get_logger

logger = get_logger(__name__)


class BatchOperations:
    """
    Applies per-value scaling to an ordered sequence of Money.

    Every element is transformed on its own; the result keeps the length and
    order of the input.
    """

    def __init__(self, items: Iterable[Money]):
        self._items = tuple(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Money]:
        return iter(self._items)

    def _map(self, operation: str, transform: Callable[[Money], Money]) -> list[Money]:
        result = [transform(item) for item in self._items]
        logger.debug("batch_applied", operation=operation, count=len(result))
        return result

    def multiply_all(self, scalar: float) -> list[Money]:
        return self.multiply_all_with_mode(scalar, RoundingMode.NEAREST)

    def divide_all(self, scalar: float) -> list[Money]:
        return self.divide_all_with_mode(scalar, RoundingMode.NEAREST)

    def percentage_all(self, percent: float) -> list[Money]:
        return self.percentage_all_with_mode(percent, RoundingMode.NEAREST)

    def multiply_all_with_mode(self, scalar: float, mode: RoundingMode) -> list[Money]:
        return self._map(
            "multiply", lambda item: item.multiply_with_mode(scalar, mode)
        )

    def divide_all_with_mode(self, scalar: float, mode: RoundingMode) -> list[Money]:
        """
        :raises DivisionByZeroError: If scalar is zero, before any element is touched
        """
        if scalar == 0:
            raise DivisionByZeroError("divide_all")

        return self._map("divide", lambda item: item.divide_with_mode(scalar, mode))

    def percentage_all_with_mode(
        self, percent: float, mode: RoundingMode
    ) -> list[Money]:
        return self._map(
            "percentage", lambda item: item.percentage_with_mode(percent, mode)
        )


def multiply_all(
    items: Iterable[Money], scalar: float, mode: RoundingMode = RoundingMode.NEAREST
) -> list[Money]:
    return BatchOperations(items).multiply_all_with_mode(scalar, mode)


def divide_all(
    items: Iterable[Money], scalar: float, mode: RoundingMode = RoundingMode.NEAREST
) -> list[Money]:
    return BatchOperations(items).divide_all_with_mode(scalar, mode)


def percentage_all(
    items: Iterable[Money], percent: float, mode: RoundingMode = RoundingMode.NEAREST
) -> list[Money]:
    return BatchOperations(items).percentage_all_with_mode(percent, mode)
