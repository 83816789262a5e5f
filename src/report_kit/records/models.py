# src/report_kit/records/models.py

"""Report schema shared by the oracle, the merger and the stores.

Every section of `PartialRecord` is optional: `None` means the section was
not found, never zero. Wire names follow the dashboard's camelCase schema
(`libraryOverview.populationServed`); Python code uses snake_case.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, Field, ValidationError, WrapValidator
from pydantic.alias_generators import to_camel


def _absent_if_invalid(value: Any, handler: Any) -> Any:
    # "N/A", "about 400" and the like read as not found
    try:
        return handler(value)
    except ValidationError:
        return None


Number = Annotated[int | float, WrapValidator(_absent_if_invalid)]


class SchemaModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "ignore"


# ----------------------------------------------------------------------------
# Scalar-group sections
# ----------------------------------------------------------------------------


class LibraryOverview(SchemaModel):
    population_served: Number | None = None
    annual_visits: Number | None = None
    registered_borrowers: Number | None = None
    open_hours_per_week: Number | None = None


class CollectionOverview(SchemaModel):
    total_items: Number | None = None
    print_materials: Number | None = None
    physical_audio_video: Number | None = None
    other_physical_items: Number | None = None


class UsageStatistics(SchemaModel):
    physical_item_circulation: Number | None = None
    e_book_circulation: Number | None = None
    e_audio_circulation: Number | None = None
    reference_transactions: Number | None = None


# ----------------------------------------------------------------------------
# Category-breakdown entries
# ----------------------------------------------------------------------------


class CategoryEntry(SchemaModel):
    """Base for breakdown entries. `name` identifies the entry in its section."""

    name: str

    def numeric_fields(self) -> dict[str, Number | None]:
        return {
            field_name: getattr(self, field_name)
            for field_name in type(self).model_fields
            if field_name != "name"
        }


class CategoryValue(CategoryEntry):
    value: Number | None = None


class SessionAttendance(CategoryEntry):
    sessions: Number | None = None
    attendance: Number | None = None


class SummerReadingEntry(CategoryEntry):
    registered: Number | None = None
    sessions: Number | None = None
    attendance: Number | None = None


# ----------------------------------------------------------------------------
# Findings
# ----------------------------------------------------------------------------


class KeyFindings(SchemaModel):
    strengths: list[str] = Field(default_factory=list)
    areas_for_development: list[str] = Field(default_factory=list)


# ----------------------------------------------------------------------------
# Records
# ----------------------------------------------------------------------------


class PartialRecord(SchemaModel):
    """What one chunk's extraction yielded. Any section may be absent."""

    SCALAR_SECTIONS: ClassVar[tuple[str, ...]] = (
        "library_overview",
        "collection_overview",
        "usage_statistics",
    )
    BREAKDOWN_SECTIONS: ClassVar[tuple[str, ...]] = (
        "collection_data",
        "circulation_data",
        "revenue_data",
        "expense_data",
        "program_data",
        "venue_data",
        "summer_reading_data",
    )
    FINDINGS_SECTION: ClassVar[str] = "key_findings"

    library_overview: LibraryOverview | None = None
    collection_overview: CollectionOverview | None = None
    usage_statistics: UsageStatistics | None = None

    collection_data: list[CategoryValue] | None = None
    circulation_data: list[CategoryValue] | None = None
    revenue_data: list[CategoryValue] | None = None
    expense_data: list[CategoryValue] | None = None
    program_data: list[SessionAttendance] | None = None
    venue_data: list[SessionAttendance] | None = None
    summer_reading_data: list[SummerReadingEntry] | None = None

    key_findings: KeyFindings | None = None

    @classmethod
    def section_names(cls) -> tuple[str, ...]:
        return (*cls.SCALAR_SECTIONS, *cls.BREAKDOWN_SECTIONS, cls.FINDINGS_SECTION)

    @classmethod
    def section_aliases(cls) -> frozenset[str]:
        """Wire names of every section, e.g. `libraryOverview`."""
        return frozenset(
            cls.model_fields[name].alias or name for name in cls.section_names()
        )

    def present_sections(self) -> list[str]:
        return [name for name in self.section_names() if getattr(self, name) is not None]

    def is_empty(self) -> bool:
        return not self.present_sections()

    def to_document(self) -> dict[str, Any]:
        """Serialize with wire names, dropping absent sections and fields."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FinalRecord(PartialRecord):
    """The merged record for one report, as persisted for the dashboard."""

    report_id: str
    library_name: str
    year: int
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @classmethod
    def from_sections(
        cls,
        sections: PartialRecord,
        *,
        report_id: str,
        library_name: str,
        year: int,
    ) -> "FinalRecord":
        values = {name: getattr(sections, name) for name in cls.section_names()}
        return cls(
            report_id=report_id,
            library_name=library_name,
            year=year,
            **values,
        )
