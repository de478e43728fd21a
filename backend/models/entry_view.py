from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from models.entry import Entry


class EntryView(BaseModel):
    """Read-only projection of an Entry, taken at construction time.

    Views are what the API returns. They are never stored and never
    change after they are built, so later writes to the store or to the
    source entry are not visible through them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    iso_code: str = Field(alias="isoCode")
    country: str
    cases: Decimal | None = None
    deaths: Decimal | None = None
    recovered: Decimal | None = None
    active: Decimal | None = None

    @classmethod
    def from_entry(cls, entry: Entry) -> "EntryView":
        return cls.model_validate(entry.snapshot().model_dump())
