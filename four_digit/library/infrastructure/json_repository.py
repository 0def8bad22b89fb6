"""JSON file implementation of the LibraryRepository port."""

from pathlib import Path

from pydantic import TypeAdapter

from four_digit.library.domain.entry import QAEntry
from four_digit.storage.domain.absent import Absent
from four_digit.storage.infrastructure.json_file import read_json_file, write_json_file

_ENTRIES = TypeAdapter(list[QAEntry])


class JsonLibraryRepository:
    """Stores the library as a JSON array of ``{question, number}`` objects.

    Satisfies the LibraryRepository protocol structurally.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[QAEntry] | Absent:
        return read_json_file(path=self._path, adapter=_ENTRIES)

    def save(self, entries: list[QAEntry]) -> None:
        write_json_file(path=self._path, adapter=_ENTRIES, value=entries)
