"""
Pydantic data models for stored price documents and the extracted series.
Defines the tagged hour-slot values, the hourly price series and the summary.
"""

import re
from typing import Annotated, Any, Dict, Iterator, List, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    FiniteFloat,
    RootModel,
    Tag,
    model_validator,
)

HOURS_PER_DAY = 24

SLOT_KEY_PATTERN = re.compile(r"^klo (\d{2})$")


def slot_key(hour: int) -> str:
    """Slot key used by the stored documents, e.g. 'klo 07'."""
    return f"klo {hour:02d}"


class PriceMap(RootModel[Dict[str, FiniteFloat]]):
    """
    Hour slot carrying prices keyed by year.

    Example stored value: {"2024": 0.412, "2025": 0.459}
    """

    def price_for(self, year: str) -> Optional[float]:
        return self.root.get(year)


class Placeholder(RootModel[int]):
    """Hour slot holding an integer placeholder instead of prices."""


def _slot_variant(value: Any) -> Optional[str]:
    if isinstance(value, (PriceMap, dict)):
        return "price_map"
    if isinstance(value, Placeholder):
        return "placeholder"
    # bool is an int subclass but never a valid placeholder
    if isinstance(value, int) and not isinstance(value, bool):
        return "placeholder"
    return None


SlotValue = Annotated[
    Union[
        Annotated[PriceMap, Tag("price_map")],
        Annotated[Placeholder, Tag("placeholder")],
    ],
    Discriminator(_slot_variant),
]


class PriceDocument(BaseModel):
    """
    One stored price record.

    Stored shape:
    {"_id": ObjectId(...), "klo 00": {"2025": 0.89}, "klo 01": 0, ...}

    Only "klo HH" keys are read; any other field is ignored.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[Any] = Field(default=None, alias="_id")
    slots: Dict[str, SlotValue] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _collect_slots(cls, data: Any) -> Any:
        if isinstance(data, dict) and "slots" not in data:
            return {
                "_id": data.get("_id", data.get("id")),
                "slots": {key: value for key, value in data.items() if SLOT_KEY_PATTERN.match(key)},
            }
        return data

    def slot(self, hour: int) -> Optional[Union[PriceMap, Placeholder]]:
        return self.slots.get(slot_key(hour))

    def price_for(self, hour: int, year: str) -> Optional[float]:
        """Price for the hour and year, or None when the slot has no such price."""
        value = self.slot(hour)
        if isinstance(value, PriceMap):
            return value.price_for(year)
        return None

    def has_prices_for(self, year: str) -> bool:
        """True when at least one hour slot carries a price for the year."""
        return any(
            isinstance(value, PriceMap) and value.price_for(year) is not None
            for value in self.slots.values()
        )


class HourlyPrice(BaseModel):
    """
    A single hour's price in sub-units (cents/kWh x 100, truncated).
    """
    hour: str = Field(pattern=r"^\d{2}$", description="Zero padded hour label '00'..'23'")
    price: int = Field(description="Price in sub-units")


class PriceSeries(RootModel[List[HourlyPrice]]):
    """
    Ordered hourly prices for the displayed day.

    Hours without a price in the source are omitted, so the series may be
    shorter than 24 entries.
    """

    root: List[HourlyPrice] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.root)

    def __iter__(self) -> Iterator[HourlyPrice]:  # type: ignore[override]
        return iter(self.root)

    def __getitem__(self, index: int) -> HourlyPrice:
        return self.root[index]

    def labels(self) -> List[str]:
        return [entry.hour for entry in self.root]

    def prices(self) -> List[int]:
        return [entry.price for entry in self.root]

    def bars(self) -> List[Tuple[str, int]]:
        """(label, value) pairs in series order, as drawn by the bar chart."""
        return [(entry.hour, entry.price) for entry in self.root]


class PriceWindow(BaseModel):
    """One-hour window starting at a series index."""
    start_index: int = Field(ge=0)
    price: int

    @property
    def label(self) -> str:
        return f"{self.start_index}-{self.start_index + 1}"


class PriceSummary(BaseModel):
    """
    Current, cheapest and most expensive hour of a series.
    """
    hour: int = Field(ge=0, lt=HOURS_PER_DAY, description="Wall-clock hour used for the current price")
    current_price: int
    cheapest: PriceWindow
    most_expensive: PriceWindow
