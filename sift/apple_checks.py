from .apple import Apple
from .predicate import Predicate

ApplePredicate = Predicate[Apple]


# --------------------------------------------------------------------------------
class AppleChecks:
    HEAVY_WEIGHT = 150

    @staticmethod
    def is_green(apple: Apple) -> bool:
        return apple.color == "green"

    @staticmethod
    def is_heavy(apple: Apple) -> bool:
        return apple.weight > AppleChecks.HEAVY_WEIGHT

    @staticmethod
    def is_red_and_heavy(apple: Apple) -> bool:
        return apple.color == "red" and AppleChecks.is_heavy(apple)

    @staticmethod
    def has_color(color: str) -> ApplePredicate:
        return lambda apple: apple.color == color

    @staticmethod
    def heavier_than(weight: int) -> ApplePredicate:
        return lambda apple: apple.weight > weight
