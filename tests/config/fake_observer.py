"""Fake ConfigObserver for use in tests."""


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[dict[str, str]] = []
        self.batch_secret_missing = 0

    def config_loaded(self, name: str, model: str) -> None:
        self.loaded.append({"name": name, "model": model})

    def config_batch_secret_missing(self) -> None:
        self.batch_secret_missing += 1
