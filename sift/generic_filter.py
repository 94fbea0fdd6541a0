from typing import Iterable, List, TypeVar

from .predicate import Predicate

T = TypeVar("T")


# --------------------------------------------------------------------------------
class GenericFilter:
    @staticmethod
    def filter_with_predicate(elements: Iterable[T], predicate: Predicate[T]) -> List[T]:
        """
        Keep the elements the predicate accepts, in their original order.

        The predicate is called once per element. Whatever it raises reaches the caller untouched.
        """

        return [element for element in elements if predicate(element)]
