import logging
import sys
from typing import Optional, Sequence

import structlog
import typer

from sift.apple import Apple
from sift.apple_checks import AppleChecks
from sift.apple_filters import AppleCriterion, AppleFilters
from sift.generic_filter import GenericFilter
from sift.inventory import Inventory
from sift.predicate import Predicates


class Sift:
    def __init__(self) -> None:
        Sift.__configure_logging()
        self.__logger = structlog.get_logger(self.__class__.__name__)

    @staticmethod
    def __configure_logging():

        logging.basicConfig(format="%(message)s", stream=sys.stdout, level=logging.INFO)
        logging.getLogger("sift").setLevel(logging.DEBUG)
        structlog.configure(
            processors=[
                structlog.processors.add_log_level,
                structlog.processors.StackInfoRenderer(),
                structlog.dev.set_exc_info,
                structlog.processors.CallsiteParameterAdder([structlog.processors.CallsiteParameter.MODULE, structlog.processors.CallsiteParameter.FUNC_NAME]),
                structlog.contextvars.merge_contextvars,
                structlog.processors.TimeStamper("iso"),
                structlog.dev.ConsoleRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(logging.NOTSET),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(),
            cache_logger_on_first_use=False,
        )

    def sift(
        self,
        color: str = typer.Option(
            default="green",
            help="Colour of apple to pick out.",
        ),
        heavier_than: int = typer.Option(
            default=AppleChecks.HEAVY_WEIGHT,
            help="Pick out apples weighing more than this.",
        ),
        criterion: AppleCriterion = typer.Option(
            default=AppleCriterion.COLOR,
            help="Which property decides when filtering by a single criterion.",
        ),
        inventory: Optional[str] = typer.Option(
            default=None,
            help="JSON file of apples. Falls back to SIFT_INVENTORY and then the built-in apples.",
        ),
        numbers: bool = typer.Option(
            default=True,
            help="Also pick the even numbers from 1 to 10.",
        ),
    ):
        """
        Filter an inventory of apples in progressively more flexible ways.
        """

        try:
            apples = Inventory().resolve(inventory)
        except (OSError, ValueError) as err:
            self.__logger.error("Unable to load the inventory", error=str(err))
            raise typer.Exit(code=1) from err

        self.__logger.info("Inventory", size=len(apples), color=color, heavier_than=heavier_than, criterion=criterion.value)

        self.show("green apples", AppleFilters.filter_green_apples(apples))
        self.show(f"{color} apples", AppleFilters.filter_apples_by_color(apples, color))
        self.show(f"apples heavier than {heavier_than}", AppleFilters.filter_apples_by_weight(apples, heavier_than))
        self.show(f"apples by {criterion.value}", AppleFilters.filter_apples(apples, criterion, color=color, weight=heavier_than))

        for check in [AppleChecks.is_green, AppleChecks.is_heavy, AppleChecks.is_red_and_heavy]:
            self.show(check.__name__, AppleFilters.filter(apples, check))

        light_in_color = Predicates.both(lambda apple: apple.color == color, Predicates.negate(AppleChecks.is_heavy))
        self.show(f"{color} and not heavy", AppleFilters.filter(apples, light_in_color))

        if numbers:
            self.show("even numbers", GenericFilter.filter_with_predicate(Inventory.numbers(), lambda number: number % 2 == 0))

    def show(self, label: str, selected: Sequence) -> None:
        self.__logger.debug("Selected", label=label, size=len(selected))
        typer.echo(f"{label}: {Sift.describe(selected)}")

    @staticmethod
    def describe(selected: Sequence) -> str:
        return "[" + ", ".join(Sift.describe_one(item) for item in selected) + "]"

    @staticmethod
    def describe_one(item: object) -> str:
        if isinstance(item, Apple):
            return f"{item.color} {item.weight}g"
        return str(item)


def main() -> None:
    typer.run(Sift().sift)


if __name__ == "__main__":
    main()
