"""Bulk-populates the library from a single oracle call."""

import re

from four_digit.generation.domain.observer import GenerationObserver
from four_digit.generation.domain.report import BatchItem, BatchReport
from four_digit.library.application.question_store import QuestionStore
from four_digit.library.domain.entry import QAEntry
from four_digit.number.domain.normalizer import normalize_number
from four_digit.oracle.domain.oracle import Oracle
from four_digit.oracle.infrastructure.errors import OracleUnavailableError

_TRAILING_PUNCTUATION = re.compile(r"[.,;]+$")


def clean_question(raw: str) -> str:
    """Strip surrounding whitespace and any trailing run of ``.``, ``,`` or ``;``."""
    return _TRAILING_PUNCTUATION.sub("", raw.strip()).strip()


class BatchGenerator:
    """Requests many question/number pairs at once and appends the usable ones.

    The oracle call is all-or-nothing: a failure or a short reply appends
    nothing. Appends then go one by one through QuestionStore.append, so the
    cap may cut a batch part-way.
    """

    def __init__(
        self, oracle: Oracle, store: QuestionStore, observer: GenerationObserver
    ) -> None:
        self._oracle = oracle
        self._store = store
        self._observer = observer

    async def generate(self, count: int) -> BatchReport:
        """
        Generate ``count`` pairs and append them to the library.

        Raises:
            ValueError: if ``count`` is not positive.
            OracleUnavailableError: if the oracle fails or returns fewer than
                ``count`` pairs.
        """
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")

        self._observer.batch_started(requested=count)
        try:
            pairs = await self._oracle.generate_question_number_pairs(count)
        except OracleUnavailableError as exc:
            self._observer.batch_failed(requested=count, reason=exc.reason)
            raise

        if len(pairs) < count:
            reason = f"oracle returned {len(pairs)} of {count} requested pairs"
            self._observer.batch_failed(requested=count, reason=reason)
            raise OracleUnavailableError(reason=reason)

        entries: list[QAEntry] = []
        for pair in pairs[:count]:
            question = clean_question(pair.question)
            if not question:
                self._observer.batch_question_dropped(raw_question=pair.question)
                continue
            entries.append(
                QAEntry(question=question, number=normalize_number(pair.number))
            )

        items: list[BatchItem] = []
        for entry in entries:
            outcome = await self._store.append(entry.question, entry.number)
            items.append(BatchItem(entry=entry, outcome=outcome))

        report = BatchReport(requested=count, items=items)
        self._observer.batch_completed(
            requested=count, received=len(pairs), stored=report.stored
        )
        return report
