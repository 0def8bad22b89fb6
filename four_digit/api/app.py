"""
four-digit HTTP API

Resolves questions over HTTP and pushes every new number to WebSocket
clients connected at ``/``.
"""

import contextlib
import secrets
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Query, Request, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from four_digit.api.errors import BatchForbiddenError
from four_digit.api.schemas import (
    CurrentNumberResponse,
    ErrorResponse,
    GenerateQuestionsResponse,
    HealthResponse,
    ProcessQuestionRequest,
    ProcessQuestionResponse,
    SuggestedQuestionsResponse,
)
from four_digit.broadcast.infrastructure.websocket import WebSocketSubscriber
from four_digit.core.errors import FourDigitError
from four_digit.library.infrastructure.errors import EmptyStoreError
from four_digit.oracle.infrastructure.errors import OracleUnavailableError
from four_digit.resolution.infrastructure.errors import EmptyQuestionError
from four_digit.services import Services

# (status code, short error label) per error type; anything else is a 500.
_ERROR_STATUS: dict[type[FourDigitError], tuple[int, str]] = {
    EmptyQuestionError: (400, "Question is required"),
    BatchForbiddenError: (403, "Forbidden"),
    EmptyStoreError: (404, "No questions available"),
    OracleUnavailableError: (503, "Oracle unavailable"),
}


def create_app(services: Services) -> FastAPI:
    """Build the FastAPI app around already-wired services.

    The lifespan loads the library on startup and drains in-flight
    resolutions and subscriber tasks on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await services.start()
        try:
            yield
        finally:
            await services.stop()

    server = services.config.server
    app = FastAPI(title="four-digit", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=server.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(FourDigitError)
    async def handle_four_digit_error(
        request: Request, exc: FourDigitError
    ) -> JSONResponse:
        status_code, label = _ERROR_STATUS.get(type(exc), (500, "Internal error"))
        body = ErrorResponse(error=label, message=str(exc))
        return JSONResponse(status_code=status_code, content=body.model_dump())

    @app.post("/process-question", response_model=ProcessQuestionResponse)
    async def process_question(req: ProcessQuestionRequest) -> ProcessQuestionResponse:
        result = await services.resolver.resolve(req.question or "")
        return ProcessQuestionResponse(number=result.number, source=result.source)

    @app.get("/current-number", response_model=CurrentNumberResponse)
    async def current_number() -> CurrentNumberResponse:
        view = await services.resolver.get_current_answer()
        answer = view.answer
        return CurrentNumberResponse(
            question=answer.question,
            number=answer.number,
            source=answer.source,
            timestamp=answer.timestamp,
            auto_generated=view.auto_generated,
        )

    @app.get("/get-suggested-questions", response_model=SuggestedQuestionsResponse)
    async def get_suggested_questions(
        count: int = Query(services.config.library.batch_size, ge=1, le=100),
    ) -> SuggestedQuestionsResponse:
        questions = services.store.sample_random(count)
        return SuggestedQuestionsResponse(questions=questions, count=len(questions))

    @app.post("/generate-questions", response_model=GenerateQuestionsResponse)
    async def generate_questions(
        secret: str | None = Query(None),
        count: int = Query(services.config.library.batch_size, ge=1, le=100),
    ) -> GenerateQuestionsResponse:
        expected = server.batch_secret
        if not expected or not secrets.compare_digest(secret or "", expected):
            raise BatchForbiddenError()
        report = await services.batch_generator.generate(count)
        return GenerateQuestionsResponse(
            requested=report.requested, stored=report.stored, entries=report.entries
        )

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(
            library_size=len(services.store), subscribers=len(services.broadcaster)
        )

    @app.websocket("/")
    async def number_updates(websocket: WebSocket) -> None:
        await websocket.accept()
        subscriber = WebSocketSubscriber(websocket)
        # The subscriber holds updates until greet() has sent "connected".
        handle = services.broadcaster.subscribe(subscriber)
        try:
            with contextlib.suppress(WebSocketDisconnect):
                await subscriber.greet()
                # Clients only listen; inbound frames of either kind are discarded.
                while True:
                    message = await websocket.receive()
                    if message["type"] == "websocket.disconnect":
                        break
        finally:
            services.broadcaster.unsubscribe(handle)

    return app
