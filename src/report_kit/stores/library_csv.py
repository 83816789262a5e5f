"""Read the state library directory CSV into LibraryRecords."""

import csv
import logging
import uuid
from pathlib import Path

from .types import LibraryRecord

logger = logging.getLogger(__name__)

# CSV header -> LibraryRecord field
CSV_COLUMNS = {
    "Library Name": "name",
    "Street Address": "address",
    "City": "city",
    "Zipcode": "zipcode",
    "Phone Number": "phone",
    "Website URL": "website",
    "Email Address": "email",
    "County": "county",
}


def read_libraries_csv(path: str | Path, id_column: str = "Library ID") -> list[LibraryRecord]:
    """Parse a library directory export.

    Rows without a library name are skipped. When the file has no
    `id_column`, each library gets a generated id.
    """
    libraries = []
    with open(path, newline="", encoding="utf-8-sig") as f:
        for row in csv.DictReader(f):
            values = {
                field: (row.get(header) or "").strip()
                for header, field in CSV_COLUMNS.items()
            }
            if not values["name"]:
                continue
            library_id = (row.get(id_column) or "").strip() or uuid.uuid4().hex
            libraries.append(LibraryRecord(library_id=library_id, **values))

    logger.info("Read %d libraries from %s", len(libraries), path)
    return libraries
