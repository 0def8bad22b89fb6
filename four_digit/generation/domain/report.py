"""Outcome of one batch generation run."""

from pydantic import BaseModel, ConfigDict

from four_digit.library.domain.entry import AppendOutcome, QAEntry


class BatchItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    entry: QAEntry
    outcome: AppendOutcome


class BatchReport(BaseModel):
    """Cleaned, normalized pairs in oracle order with their append outcomes."""

    model_config = ConfigDict(frozen=True)

    requested: int
    items: list[BatchItem]

    @property
    def entries(self) -> list[QAEntry]:
        return [item.entry for item in self.items]

    @property
    def stored(self) -> int:
        return sum(1 for item in self.items if item.outcome is AppendOutcome.STORED)
