"""CurrentAnswerRepository Protocol."""

from typing import Protocol

from four_digit.current.domain.answer import CurrentAnswer
from four_digit.storage.domain.absent import Absent


class CurrentAnswerRepository(Protocol):
    def load(self) -> CurrentAnswer | Absent: ...

    def save(self, answer: CurrentAnswer) -> None: ...
