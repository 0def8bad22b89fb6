"""JSON file implementation of the CurrentAnswerRepository port."""

from pathlib import Path

from pydantic import TypeAdapter

from four_digit.current.domain.answer import CurrentAnswer
from four_digit.storage.domain.absent import Absent
from four_digit.storage.infrastructure.json_file import read_json_file, write_json_file

_ANSWER = TypeAdapter(CurrentAnswer)


class JsonCurrentAnswerRepository:
    """Stores the current answer as a single JSON object.

    Satisfies the CurrentAnswerRepository protocol structurally.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> CurrentAnswer | Absent:
        return read_json_file(path=self._path, adapter=_ANSWER)

    def save(self, answer: CurrentAnswer) -> None:
        write_json_file(path=self._path, adapter=_ANSWER, value=answer)
