"""Tests for BatchGenerator and question cleaning."""

import pytest

from four_digit.generation.application.batch_generator import (
    BatchGenerator,
    clean_question,
)
from four_digit.library.application.question_store import QuestionStore
from four_digit.library.domain.entry import AppendOutcome, QAEntry
from four_digit.oracle.domain.pair import OraclePair
from four_digit.oracle.infrastructure.errors import OracleUnavailableError
from tests.generation.fake_observer import FakeGenerationObserver
from tests.library.fake_observer import FakeLibraryObserver
from tests.library.fake_repository import FakeLibraryRepository
from tests.oracle.fake_oracle import FakeOracle


async def _make_generator(
    pairs: list[OraclePair] | None = None,
    entries: list[QAEntry] | None = None,
    capacity: int = 1000,
    fail: bool = False,
) -> tuple[BatchGenerator, QuestionStore, FakeOracle, FakeGenerationObserver]:
    oracle = FakeOracle(pairs=pairs, fail=fail)
    store = QuestionStore(
        repository=FakeLibraryRepository(entries=entries),
        observer=FakeLibraryObserver(),
        capacity=capacity,
    )
    await store.load()
    observer = FakeGenerationObserver()
    generator = BatchGenerator(oracle=oracle, store=store, observer=observer)
    return generator, store, oracle, observer


def _pairs(count: int) -> list[OraclePair]:
    return [OraclePair(question=f"Question {i}?", number=i + 1) for i in range(count)]


class TestCleanQuestion:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("How many legs does a spider have.", "How many legs does a spider have"),
            ("Keys on a piano?;", "Keys on a piano?"),
            ("  Moons of Mars,.;  ", "Moons of Mars"),
            ("Days in a week", "Days in a week"),
            ("Year the Eiffel Tower opened?", "Year the Eiffel Tower opened?"),
            ("1.5 times 2.", "1.5 times 2"),
            ("...", ""),
            ("   ", ""),
        ],
    )
    def test_cleans(self, raw: str, expected: str) -> None:
        assert clean_question(raw) == expected


class TestGenerate:
    async def test_makes_exactly_one_oracle_call(self) -> None:
        generator, _, oracle, _ = await _make_generator(pairs=_pairs(25))

        await generator.generate(25)

        assert oracle.batch_requests == [25]

    async def test_appends_every_pair(self) -> None:
        generator, store, _, observer = await _make_generator(pairs=_pairs(25))

        report = await generator.generate(25)

        assert len(store) == 25
        assert report.requested == 25
        assert report.stored == 25
        assert observer.completed == [{"requested": 25, "received": 25, "stored": 25}]

    async def test_cleans_questions_and_normalizes_numbers(self) -> None:
        pairs = [
            OraclePair(question="How many legs does a spider have.", number=8),
            OraclePair(question="  Grains in a big bag;", number=123456),
            OraclePair(question="Degrees below zero?,", number=-40.5),
        ]
        generator, store, _, _ = await _make_generator(pairs=pairs)

        await generator.generate(3)

        assert store.entries == [
            QAEntry(question="How many legs does a spider have", number=8),
            QAEntry(question="Grains in a big bag", number=3469),
            QAEntry(question="Degrees below zero?", number=40),
        ]

    async def test_extra_pairs_are_ignored(self) -> None:
        generator, store, _, observer = await _make_generator(pairs=_pairs(30))

        await generator.generate(25)

        assert len(store) == 25
        assert observer.completed[0]["received"] == 30

    async def test_question_empty_after_cleaning_is_dropped(self) -> None:
        pairs = [OraclePair(question="...", number=5), *_pairs(2)]
        generator, store, _, observer = await _make_generator(pairs=pairs)

        report = await generator.generate(3)

        assert len(store) == 2
        assert len(report.items) == 2
        assert observer.dropped == ["..."]

    async def test_duplicates_are_reported_not_stored(self) -> None:
        pairs = [
            OraclePair(question="Keys on a piano?", number=88),
            OraclePair(question="keys on a piano?", number=90),
        ]
        generator, store, _, _ = await _make_generator(pairs=pairs)

        report = await generator.generate(2)

        assert [item.outcome for item in report.items] == [
            AppendOutcome.STORED,
            AppendOutcome.DUPLICATE,
        ]
        assert report.stored == 1
        assert len(store) == 1

    async def test_stops_storing_at_capacity(self) -> None:
        existing = [QAEntry(question=f"Old {i}?", number=1) for i in range(990)]
        generator, store, _, _ = await _make_generator(
            pairs=_pairs(25), entries=existing
        )

        report = await generator.generate(25)

        assert len(store) == 1000
        assert report.stored == 10
        outcomes = [item.outcome for item in report.items]
        assert outcomes[:10] == [AppendOutcome.STORED] * 10
        assert outcomes[10:] == [AppendOutcome.CAP_REACHED] * 15

    async def test_entries_lists_what_was_generated(self) -> None:
        generator, _, _, _ = await _make_generator(pairs=_pairs(2))

        report = await generator.generate(2)

        assert report.entries == [
            QAEntry(question="Question 0?", number=1),
            QAEntry(question="Question 1?", number=2),
        ]


class TestGenerateFailures:
    async def test_oracle_failure_appends_nothing(self) -> None:
        generator, store, _, observer = await _make_generator(fail=True)

        with pytest.raises(OracleUnavailableError):
            await generator.generate(25)

        assert len(store) == 0
        assert observer.failed == [{"requested": 25, "reason": "oracle offline"}]

    async def test_short_reply_appends_nothing(self) -> None:
        generator, store, _, observer = await _make_generator(pairs=_pairs(10))

        with pytest.raises(OracleUnavailableError) as exc_info:
            await generator.generate(25)

        assert "10 of 25" in exc_info.value.reason
        assert len(store) == 0
        assert len(observer.failed) == 1

    @pytest.mark.parametrize("count", [0, -3])
    async def test_non_positive_count_raises(self, count: int) -> None:
        generator, _, oracle, _ = await _make_generator(pairs=_pairs(5))

        with pytest.raises(ValueError):
            await generator.generate(count)

        assert oracle.batch_requests == []
