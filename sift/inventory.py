import json
import os
from collections.abc import Mapping
from typing import List, Optional

import structlog
from dotenv import load_dotenv

from .apple import Apple

load_dotenv()

INVENTORY_ENVIRONMENT_VARIABLE = "SIFT_INVENTORY"


# --------------------------------------------------------------------------------
class Inventory:
    def __init__(self) -> None:
        self.__logger = structlog.get_logger(self.__class__.__name__)

    @staticmethod
    def default() -> List[Apple]:
        return [Apple(80, "green"), Apple(155, "green"), Apple(120, "red")]

    @staticmethod
    def numbers() -> List[int]:
        return list(range(1, 11))

    def load(self, path: str) -> List[Apple]:
        """
        Read apples from a JSON array such as [{"weight": 80, "color": "green"}].
        """

        self.__logger.debug("Loading inventory", source=path)

        with open(path, encoding="utf-8") as inventory_file:
            try:
                raw_apples = json.load(inventory_file)
            except json.JSONDecodeError as err:
                raise ValueError(f"The inventory in {path} is not valid JSON: {err}") from err

        if not isinstance(raw_apples, list):
            raise ValueError(f"The inventory in {path} should be a JSON array but was {type(raw_apples).__name__}")

        apples = []
        for index, raw_apple in enumerate(raw_apples):
            if not isinstance(raw_apple, Mapping):
                raise ValueError(f"Entry {index} in {path} should be an object but was {type(raw_apple).__name__}")
            apples.append(Apple.from_raw(raw_apple))

        self.__logger.debug("Loaded inventory", source=path, size=len(apples))
        return apples

    def resolve(self, path: Optional[str] = None) -> List[Apple]:
        if path:
            return self.load(path)

        configured_path = os.environ.get(INVENTORY_ENVIRONMENT_VARIABLE)
        if configured_path:
            self.__logger.debug("Using inventory from the environment", variable=INVENTORY_ENVIRONMENT_VARIABLE)
            return self.load(configured_path)

        self.__logger.debug("Using the default inventory")
        return Inventory.default()
