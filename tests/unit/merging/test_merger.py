from report_kit.merging.merger import (
    merge_breakdown_section,
    merge_findings,
    merge_records,
)
from report_kit.observability.base import InMemoryMetricsHook
from report_kit.records.models import (
    CategoryValue,
    CollectionOverview,
    KeyFindings,
    LibraryOverview,
    PartialRecord,
    SessionAttendance,
    SummerReadingEntry,
)


def _collection(*entries: tuple[str, int]) -> PartialRecord:
    return PartialRecord(
        collection_data=[CategoryValue(name=name, value=value) for name, value in entries]
    )


class TestScalarSections:
    def test_first_present_section_wins(self) -> None:
        first = LibraryOverview(population_served=100)
        second = LibraryOverview(
            population_served=999, annual_visits=5000, open_hours_per_week=31
        )

        merged = merge_records(
            [PartialRecord(library_overview=first), PartialRecord(library_overview=second)]
        )

        assert merged.library_overview == first

    def test_no_field_level_fill_in(self) -> None:
        merged = merge_records(
            [
                PartialRecord(library_overview=LibraryOverview(population_served=100)),
                PartialRecord(library_overview=LibraryOverview(annual_visits=4911)),
            ]
        )

        assert merged.library_overview is not None
        assert merged.library_overview.annual_visits is None

    def test_absent_sections_skipped_until_present(self) -> None:
        overview = CollectionOverview(total_items=7655)

        merged = merge_records(
            [PartialRecord(), PartialRecord(collection_overview=overview)]
        )

        assert merged.collection_overview == overview


class TestBreakdownSections:
    def test_same_name_values_are_summed(self) -> None:
        merged = merge_records(
            [_collection(("Adult Fiction", 10)), _collection(("Adult Fiction", 5))]
        )

        assert merged.collection_data == [CategoryValue(name="Adult Fiction", value=15)]

    def test_disjoint_names_union_in_order(self) -> None:
        a = _collection(("Adult Fiction", 1), ("Adult Non-Fiction", 2))
        b = _collection(("Audio Materials", 3), ("Video Materials", 4))

        merged = merge_records([a, b])

        assert merged.collection_data is not None
        assert [e.name for e in merged.collection_data] == [
            "Adult Fiction",
            "Adult Non-Fiction",
            "Audio Materials",
            "Video Materials",
        ]
        assert [e.value for e in merged.collection_data] == [1, 2, 3, 4]

    def test_first_seen_order_kept_when_names_repeat(self) -> None:
        merged = merge_records(
            [_collection(("B", 1), ("A", 1)), _collection(("C", 1), ("A", 1))]
        )

        assert merged.collection_data is not None
        assert [(e.name, e.value) for e in merged.collection_data] == [
            ("B", 1),
            ("A", 2),
            ("C", 1),
        ]

    def test_duplicates_within_one_chunk_are_summed(self) -> None:
        merged = merge_records([_collection(("Other", 2), ("Other", 3))])

        assert merged.collection_data == [CategoryValue(name="Other", value=5)]

    def test_names_are_case_sensitive(self) -> None:
        merged = merge_records([_collection(("Other", 1)), _collection(("other", 1))])

        assert merged.collection_data is not None
        assert len(merged.collection_data) == 2

    def test_sessions_and_attendance_summed(self) -> None:
        merged = merge_records(
            [
                PartialRecord(
                    program_data=[
                        SessionAttendance(name="Ages 0-5", sessions=10, attendance=100)
                    ]
                ),
                PartialRecord(
                    program_data=[
                        SessionAttendance(name="Ages 0-5", sessions=13, attendance=102)
                    ]
                ),
            ]
        )

        assert merged.program_data == [
            SessionAttendance(name="Ages 0-5", sessions=23, attendance=202)
        ]

    def test_registered_is_summed_too(self) -> None:
        entry = SummerReadingEntry(
            name="Children", registered=14, sessions=12, attendance=464
        )

        merged = merge_records(
            [PartialRecord(summer_reading_data=[entry])] * 2
        )

        assert merged.summer_reading_data == [
            SummerReadingEntry(
                name="Children", registered=28, sessions=24, attendance=928
            )
        ]

    def test_missing_values_count_as_zero(self) -> None:
        merged = merge_records(
            [
                PartialRecord(venue_data=[SessionAttendance(name="Onsite", sessions=5)]),
                PartialRecord(
                    venue_data=[SessionAttendance(name="Onsite", attendance=40)]
                ),
                PartialRecord(venue_data=[SessionAttendance(name="Onsite")]),
            ]
        )

        assert merged.venue_data == [
            SessionAttendance(name="Onsite", sessions=5, attendance=40)
        ]

    def test_float_values_sum(self) -> None:
        merged = merge_records(
            [
                PartialRecord(revenue_data=[CategoryValue(name="LLSA", value=1493.5)]),
                PartialRecord(revenue_data=[CategoryValue(name="LLSA", value=0.5)]),
            ]
        )

        assert merged.revenue_data == [CategoryValue(name="LLSA", value=1494.0)]

    def test_inputs_are_not_mutated(self) -> None:
        a = _collection(("Fiction", 10))
        b = _collection(("Fiction", 5))

        merge_records([a, b])

        assert a.collection_data == [CategoryValue(name="Fiction", value=10)]

    def test_empty_lists_leave_section_absent(self) -> None:
        merged = merge_records([PartialRecord(expense_data=[])])

        assert merged.expense_data is None
        assert merge_breakdown_section([PartialRecord()], "expense_data") is None


class TestFindings:
    def test_union_capped_at_five(self) -> None:
        records = [
            PartialRecord(key_findings=KeyFindings(strengths=["s1", "s2", "s3"])),
            PartialRecord(key_findings=KeyFindings(strengths=["s4", "s5", "s6", "s7"])),
        ]

        merged = merge_records(records)

        assert merged.key_findings is not None
        assert merged.key_findings.strengths == ["s1", "s2", "s3", "s4", "s5"]

    def test_duplicates_removed_in_first_appearance_order(self) -> None:
        records = [
            PartialRecord(
                key_findings=KeyFindings(
                    strengths=["b", "a"], areas_for_development=["x", "x"]
                )
            ),
            PartialRecord(
                key_findings=KeyFindings(
                    strengths=["a", "c", "A"], areas_for_development=["y", "x"]
                )
            ),
        ]

        findings = merge_findings(records)

        assert findings == KeyFindings(
            strengths=["b", "a", "c", "A"], areas_for_development=["x", "y"]
        )

    def test_lists_capped_independently(self) -> None:
        findings = merge_findings(
            [
                PartialRecord(
                    key_findings=KeyFindings(
                        strengths=[f"s{i}" for i in range(7)],
                        areas_for_development=["d1"],
                    )
                )
            ]
        )

        assert findings is not None
        assert len(findings.strengths) == 5
        assert findings.areas_for_development == ["d1"]

    def test_custom_limit(self) -> None:
        findings = merge_findings(
            [PartialRecord(key_findings=KeyFindings(strengths=["a", "b", "c"]))],
            limit=2,
        )

        assert findings is not None
        assert findings.strengths == ["a", "b"]

    def test_absent_when_no_chunk_contributed(self) -> None:
        assert merge_records([PartialRecord(), _collection(("A", 1))]).key_findings is None

    def test_empty_findings_section_still_present(self) -> None:
        merged = merge_records([PartialRecord(key_findings=KeyFindings())])

        assert merged.key_findings == KeyFindings()


class TestMergeRecords:
    def test_empty_input_gives_empty_record(self) -> None:
        assert merge_records([]).is_empty()

    def test_three_chunk_scenario_with_failed_middle_chunk(self) -> None:
        chunk_1 = PartialRecord(library_overview=LibraryOverview(population_served=100))
        chunk_2 = PartialRecord()
        chunk_3 = _collection(("Fiction", 20))

        merged = merge_records([chunk_1, chunk_2, chunk_3])

        assert merged.library_overview is not None
        assert merged.library_overview.population_served == 100
        assert merged.collection_data == [CategoryValue(name="Fiction", value=20)]
        assert merged.present_sections() == ["library_overview", "collection_data"]
        assert merged == merge_records([chunk_1, chunk_3])

    def test_records_merge_latency(self) -> None:
        hook = InMemoryMetricsHook()

        merge_records([PartialRecord()], metrics_hook=hook)

        assert len(hook.latencies["merge_duration"]) == 1
