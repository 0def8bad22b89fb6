"""Constructs and wires the core components from an AppConfig."""

from dataclasses import dataclass

from four_digit.broadcast.application.broadcaster import Broadcaster
from four_digit.broadcast.infrastructure.observer import StructlogBroadcastObserver
from four_digit.config.domain.config import AppConfig
from four_digit.current.application.current_answer_store import CurrentAnswerStore
from four_digit.current.infrastructure.json_repository import JsonCurrentAnswerRepository
from four_digit.current.infrastructure.observer import StructlogCurrentAnswerObserver
from four_digit.generation.application.batch_generator import BatchGenerator
from four_digit.generation.infrastructure.observer import StructlogGenerationObserver
from four_digit.library.application.question_store import QuestionStore
from four_digit.library.infrastructure.json_repository import JsonLibraryRepository
from four_digit.library.infrastructure.observer import StructlogLibraryObserver
from four_digit.oracle.domain.oracle import Oracle
from four_digit.oracle.infrastructure.litellm import LiteLLMOracle
from four_digit.oracle.infrastructure.observer import StructlogOracleObserver
from four_digit.resolution.application.resolver import QuestionResolver
from four_digit.resolution.infrastructure.observer import StructlogResolutionObserver


@dataclass(frozen=True)
class Services:
    config: AppConfig
    store: QuestionStore
    current: CurrentAnswerStore
    broadcaster: Broadcaster
    resolver: QuestionResolver
    batch_generator: BatchGenerator

    async def start(self) -> None:
        await self.store.load()

    async def stop(self) -> None:
        await self.resolver.aclose()
        await self.broadcaster.aclose()


def build_services(config: AppConfig, oracle: Oracle | None = None) -> Services:
    """Wire every component with structlog observers and JSON file storage.

    ``oracle`` overrides the LiteLLM oracle built from ``config.oracle``.
    """
    if oracle is None:
        oracle = LiteLLMOracle(config=config.oracle, observer=StructlogOracleObserver())

    store = QuestionStore(
        repository=JsonLibraryRepository(path=config.storage.library_path),
        observer=StructlogLibraryObserver(),
        capacity=config.library.capacity,
    )
    current = CurrentAnswerStore(
        repository=JsonCurrentAnswerRepository(path=config.storage.current_path),
        observer=StructlogCurrentAnswerObserver(),
    )
    broadcaster = Broadcaster(
        observer=StructlogBroadcastObserver(),
        queue_size=config.server.subscriber_queue_size,
    )
    resolver = QuestionResolver(
        store=store,
        current=current,
        oracle=oracle,
        broadcaster=broadcaster,
        observer=StructlogResolutionObserver(),
    )
    batch_generator = BatchGenerator(
        oracle=oracle, store=store, observer=StructlogGenerationObserver()
    )
    return Services(
        config=config,
        store=store,
        current=current,
        broadcaster=broadcaster,
        resolver=resolver,
        batch_generator=batch_generator,
    )
