from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class Apple:
    weight: int
    color: str

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Apple":
        try:
            weight = raw["weight"]
            color = raw["color"]
        except KeyError as err:
            raise ValueError(f"Apple is missing '{err.args[0]}': {raw}") from err

        if isinstance(weight, bool) or not isinstance(weight, int):
            raise ValueError(f"Apple weight must be a whole number but was {weight!r}")

        return cls(weight=weight, color=str(color))
