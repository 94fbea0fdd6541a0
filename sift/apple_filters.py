from enum import Enum
from typing import Iterable, List, Union

from .apple import Apple
from .apple_checks import AppleChecks, ApplePredicate
from .generic_filter import GenericFilter


class AppleCriterion(str, Enum):
    COLOR = "color"
    WEIGHT = "weight"


# --------------------------------------------------------------------------------
class AppleFilters:
    @staticmethod
    def filter_green_apples(inventory: Iterable[Apple]) -> List[Apple]:
        return [apple for apple in inventory if apple.color == "green"]

    @staticmethod
    def filter_apples_by_color(inventory: Iterable[Apple], color: str) -> List[Apple]:
        return [apple for apple in inventory if apple.color == color]

    @staticmethod
    def filter_apples_by_weight(inventory: Iterable[Apple], weight: int) -> List[Apple]:
        return [apple for apple in inventory if apple.weight > weight]

    @staticmethod
    def filter_apples(
        inventory: Iterable[Apple],
        criterion: Union[AppleCriterion, str],
        color: str = "",
        weight: int = 0,
    ) -> List[Apple]:
        """The criterion picks which of colour or weight decides"""

        criterion = AppleCriterion(criterion)

        if criterion is AppleCriterion.COLOR:
            return AppleFilters.filter(inventory, AppleChecks.has_color(color))

        return AppleFilters.filter(inventory, AppleChecks.heavier_than(weight))

    @staticmethod
    def filter(inventory: Iterable[Apple], predicate: ApplePredicate) -> List[Apple]:
        return GenericFilter.filter_with_predicate(inventory, predicate)
