"""Observer port for the config domain. Defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, name: str, model: str) -> None: ...

    def config_batch_secret_missing(self) -> None: ...
