from typing import Callable, TypeVar

T = TypeVar("T")

Predicate = Callable[[T], bool]


# --------------------------------------------------------------------------------
class Predicates:
    @staticmethod
    def both(first: Predicate[T], second: Predicate[T]) -> Predicate[T]:
        return lambda element: first(element) and second(element)

    @staticmethod
    def either(first: Predicate[T], second: Predicate[T]) -> Predicate[T]:
        return lambda element: first(element) or second(element)

    @staticmethod
    def negate(predicate: Predicate[T]) -> Predicate[T]:
        return lambda element: not predicate(element)

    @staticmethod
    def always(_: object) -> bool:
        return True

    @staticmethod
    def never(_: object) -> bool:
        return False
