"""Tests for the HTTP and WebSocket API."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from four_digit.api.app import create_app
from four_digit.config.domain.config import AppConfig
from four_digit.config.domain.oracle import OracleConfig
from four_digit.config.domain.server import ServerConfig
from four_digit.config.domain.storage import StorageConfig
from four_digit.library.domain.entry import QAEntry
from four_digit.library.infrastructure.json_repository import JsonLibraryRepository
from four_digit.oracle.domain.pair import OraclePair
from four_digit.services import build_services
from tests.oracle.fake_oracle import FakeOracle

_SECRET = "s3cret"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_config(data_dir: Path, batch_secret: str | None = _SECRET) -> AppConfig:
    return AppConfig(
        name="four-digit-test",
        oracle=OracleConfig(model="fake-model"),
        storage=StorageConfig(data_dir=data_dir),
        server=ServerConfig(batch_secret=batch_secret),
    )


def _seed_library(data_dir: Path, entries: list[QAEntry]) -> None:
    JsonLibraryRepository(path=data_dir / "questions.json").save(entries)


@pytest.fixture
def oracle() -> FakeOracle:
    return FakeOracle(number=12345)


@pytest.fixture
def client(tmp_path: Path, oracle: FakeOracle) -> Iterator[TestClient]:
    _seed_library(tmp_path, [QAEntry(question="What is 2+2", number=4)])
    services = build_services(_make_config(tmp_path), oracle=oracle)
    with TestClient(create_app(services)) as test_client:
        yield test_client


@pytest.fixture
def empty_client(tmp_path: Path, oracle: FakeOracle) -> Iterator[TestClient]:
    services = build_services(_make_config(tmp_path), oracle=oracle)
    with TestClient(create_app(services)) as test_client:
        yield test_client


# ---------------------------------------------------------------------------
# POST /process-question
# ---------------------------------------------------------------------------


class TestProcessQuestion:
    def test_library_hit(self, client: TestClient, oracle: FakeOracle) -> None:
        response = client.post("/process-question", json={"question": "  what is 2+2 "})

        assert response.status_code == 200
        assert response.json() == {"success": True, "number": 4, "source": "library"}
        assert oracle.questions_asked == []

    def test_library_miss_asks_oracle_and_normalizes(self, client: TestClient) -> None:
        response = client.post(
            "/process-question", json={"question": "Population of a small town?"}
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "number": 2347, "source": "oracle"}

    def test_miss_is_persisted_to_library_file(
        self, client: TestClient, tmp_path: Path
    ) -> None:
        client.post("/process-question", json={"question": "Population of a small town?"})

        stored = json.loads((tmp_path / "questions.json").read_text(encoding="utf-8"))
        assert stored[-1] == {"question": "Population of a small town?", "number": 2347}

    def test_current_answer_is_persisted(self, client: TestClient, tmp_path: Path) -> None:
        client.post("/process-question", json={"question": "What is 2+2"})

        current = json.loads((tmp_path / "current.json").read_text(encoding="utf-8"))
        assert current["question"] == "What is 2+2"
        assert current["number"] == 4
        assert current["source"] == "library"

    @pytest.mark.parametrize("body", [{}, {"question": None}, {"question": "   "}])
    def test_missing_question_is_400(self, client: TestClient, body: dict) -> None:
        response = client.post("/process-question", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "Question is required"

    def test_oracle_failure_is_503(self, client: TestClient, oracle: FakeOracle) -> None:
        oracle.fail = True

        response = client.post("/process-question", json={"question": "Unknown?"})

        assert response.status_code == 503
        assert response.json()["error"] == "Oracle unavailable"
        assert "oracle offline" in response.json()["message"]


# ---------------------------------------------------------------------------
# GET /current-number
# ---------------------------------------------------------------------------


class TestCurrentNumber:
    def test_returns_latest_resolution(self, client: TestClient) -> None:
        client.post("/process-question", json={"question": "What is 2+2"})

        body = client.get("/current-number").json()

        assert body["success"] is True
        assert body["question"] == "What is 2+2"
        assert body["number"] == 4
        assert body["source"] == "library"
        assert body["auto_generated"] is False
        assert body["timestamp"]

    def test_seeds_from_library_when_no_answer_exists(self, client: TestClient) -> None:
        first = client.get("/current-number").json()
        second = client.get("/current-number").json()

        assert first["auto_generated"] is True
        assert first["number"] == 4
        assert second["auto_generated"] is False

    def test_empty_library_and_no_answer_is_404(self, empty_client: TestClient) -> None:
        response = empty_client.get("/current-number")

        assert response.status_code == 404
        assert response.json()["error"] == "No questions available"


# ---------------------------------------------------------------------------
# GET /get-suggested-questions
# ---------------------------------------------------------------------------


class TestSuggestedQuestions:
    def test_returns_library_questions(self, client: TestClient) -> None:
        body = client.get("/get-suggested-questions").json()

        assert body == {"success": True, "questions": ["What is 2+2"], "count": 1}

    def test_count_limits_result(self, tmp_path: Path, oracle: FakeOracle) -> None:
        _seed_library(
            tmp_path, [QAEntry(question=f"Q{i}?", number=i + 1) for i in range(40)]
        )
        services = build_services(_make_config(tmp_path), oracle=oracle)
        with TestClient(create_app(services)) as test_client:
            body = test_client.get("/get-suggested-questions", params={"count": 5}).json()

        assert body["count"] == 5
        assert len(set(body["questions"])) == 5

    def test_empty_library_is_404(self, empty_client: TestClient) -> None:
        response = empty_client.get("/get-suggested-questions")

        assert response.status_code == 404

    def test_zero_count_is_rejected(self, client: TestClient) -> None:
        response = client.get("/get-suggested-questions", params={"count": 0})

        assert response.status_code == 422


# ---------------------------------------------------------------------------
# POST /generate-questions
# ---------------------------------------------------------------------------


class TestGenerateQuestions:
    @pytest.mark.parametrize("params", [{}, {"secret": "wrong"}, {"secret": ""}])
    def test_bad_secret_is_403(
        self, client: TestClient, oracle: FakeOracle, params: dict
    ) -> None:
        response = client.post("/generate-questions", params=params)

        assert response.status_code == 403
        assert response.json()["error"] == "Forbidden"
        assert oracle.batch_requests == []

    def test_unset_secret_always_forbids(self, tmp_path: Path, oracle: FakeOracle) -> None:
        services = build_services(_make_config(tmp_path, batch_secret=None), oracle=oracle)
        with TestClient(create_app(services)) as test_client:
            response = test_client.post("/generate-questions", params={"secret": ""})

        assert response.status_code == 403

    def test_generates_and_stores_batch(
        self, client: TestClient, oracle: FakeOracle
    ) -> None:
        oracle.pairs = [
            OraclePair(question="Keys on a piano.", number=88),
            OraclePair(question="Moons of Mars;", number=2),
        ]

        response = client.post(
            "/generate-questions", params={"secret": _SECRET, "count": 2}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["requested"] == 2
        assert body["stored"] == 2
        assert body["entries"] == [
            {"question": "Keys on a piano", "number": 88},
            {"question": "Moons of Mars", "number": 2},
        ]
        assert client.get("/health").json()["library_size"] == 3

    def test_short_oracle_reply_is_503(self, client: TestClient) -> None:
        response = client.post(
            "/generate-questions", params={"secret": _SECRET, "count": 5}
        )

        assert response.status_code == 503


# ---------------------------------------------------------------------------
# GET /health and WebSocket /
# ---------------------------------------------------------------------------


class TestHealth:
    def test_reports_library_size(self, client: TestClient) -> None:
        assert client.get("/health").json() == {
            "status": "ok",
            "library_size": 1,
            "subscribers": 0,
        }


class TestWebSocket:
    def test_greets_on_connect(self, client: TestClient) -> None:
        with client.websocket_connect("/") as websocket:
            assert websocket.receive_json() == {"type": "connected"}

    def test_pushes_number_update_after_resolution(self, client: TestClient) -> None:
        with client.websocket_connect("/") as websocket:
            websocket.receive_json()

            client.post("/process-question", json={"question": "What is 2+2"})
            message = websocket.receive_json()

        assert message["type"] == "number-update"
        assert message["number"] == 4
        assert message["question"] == "What is 2+2"
        assert message["source"] == "library"
        assert message["timestamp"]

    def test_every_client_receives_update(self, client: TestClient) -> None:
        with (
            client.websocket_connect("/") as first,
            client.websocket_connect("/") as second,
        ):
            first.receive_json()
            second.receive_json()

            client.post("/process-question", json={"question": "What is 2+2"})

            assert first.receive_json()["number"] == 4
            assert second.receive_json()["number"] == 4

    def test_connected_client_counts_as_subscriber(self, client: TestClient) -> None:
        with client.websocket_connect("/") as websocket:
            websocket.receive_json()

            assert client.get("/health").json()["subscribers"] == 1

    def test_binary_frame_does_not_close_connection(self, client: TestClient) -> None:
        with client.websocket_connect("/") as websocket:
            websocket.receive_json()
            websocket.send_bytes(b"\x00\x01")
            websocket.send_text("ping")

            client.post("/process-question", json={"question": "What is 2+2"})

            assert websocket.receive_json()["number"] == 4
