# tests/unit/stores/test_library_csv.py

from pathlib import Path

from report_kit.stores import read_libraries_csv

HEADER = (
    "Library Name,Street Address,City,Zipcode,Phone Number,"
    "Website URL,Email Address,County"
)


def _write(path: Path, *lines: str) -> Path:
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class TestReadLibrariesCsv:
    def test_maps_columns(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "libraries.csv",
            HEADER,
            "Hillsboro Public Library,123 Main St,Hillsboro,97123,555-0100,"
            "https://hillsboro.example.org,info@hillsboro.example.org,Washington",
        )

        [library] = read_libraries_csv(path)

        assert library.name == "Hillsboro Public Library"
        assert library.address == "123 Main St"
        assert library.city == "Hillsboro"
        assert library.zipcode == "97123"
        assert library.phone == "555-0100"
        assert library.website == "https://hillsboro.example.org"
        assert library.email == "info@hillsboro.example.org"
        assert library.county == "Washington"
        assert len(library.library_id) == 32

    def test_skips_rows_without_name(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "libraries.csv",
            HEADER,
            ",1 Nowhere Rd,Ghost Town,00000,,,,",
            "Morristown Library,,,,,,,",
        )

        libraries = read_libraries_csv(path)

        assert [lib.name for lib in libraries] == ["Morristown Library"]
        assert libraries[0].city == ""

    def test_uses_id_column_when_present(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "libraries.csv",
            "Library ID," + HEADER,
            "lib-7,Morristown Library,,,,,,,",
        )

        [library] = read_libraries_csv(path)

        assert library.library_id == "lib-7"

    def test_generated_ids_are_unique(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "libraries.csv",
            HEADER,
            "A,,,,,,,",
            "B,,,,,,,",
        )

        libraries = read_libraries_csv(path)

        assert libraries[0].library_id != libraries[1].library_id

    def test_strips_byte_order_mark(self, tmp_path: Path) -> None:
        path = tmp_path / "libraries.csv"
        path.write_bytes(("\ufeff" + HEADER + "\nMorristown Library,,,,,,,\n").encode("utf-8"))

        [library] = read_libraries_csv(path)

        assert library.name == "Morristown Library"
