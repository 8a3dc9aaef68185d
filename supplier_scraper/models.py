"""Record and selector models for supplier directory scraping."""

from pydantic import BaseModel, Field, field_validator


class Record(BaseModel):
    """One supplier's contact details, keyed by name in the spreadsheet export."""

    # Required fields
    name: str = Field(min_length=1, description="Company name, unique key")

    # Optional fields (None means the page had no such element)
    contact_name: str | None = Field(default=None)
    contact_telephone: str | None = Field(default=None)
    contact_email: str | None = Field(default=None)
    description: str | None = Field(default=None)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class Selectors(BaseModel):
    """CSS selectors locating the structural markers of one directory."""

    navigation: str = Field(description="Container holding the A-Z listing links")
    result_title: str = Field(description="Search result title wrapping a supplier link")
    next_page: str = Field(description="Pagination control pointing at the next listing page")
    name: str = Field(description="Primary heading of a supplier page")
    description: str = Field(description="Optional supplier description block")
    contact_name: str = Field(description="Optional nested contact name element")
    contact_block: str = Field(description="Contact detail blocks; the first is a label")
    contact_type_attr: str = Field(default="itemprop", description="Attribute typing a contact block")
