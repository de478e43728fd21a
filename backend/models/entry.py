from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Entry(BaseModel):
    """One country's pandemic statistics, keyed by ISO code.

    The count fields are independently optional. ``None`` means the figure
    was not reported and is kept distinct from zero.
    """

    model_config = ConfigDict(populate_by_name=True)

    iso_code: str = Field(alias="isoCode", frozen=True)
    country: str
    cases: Decimal | None = None
    deaths: Decimal | None = None
    recovered: Decimal | None = None
    active: Decimal | None = None

    def snapshot(self) -> "Entry":
        """Return an independent deep copy of this entry."""
        return self.model_copy(deep=True)
