"""Oracle Protocol, the structural interface for the generative number source."""

from typing import Protocol

from four_digit.oracle.domain.pair import OraclePair


class Oracle(Protocol):
    """Best-effort numeric answers from a generative model.

    Implementations raise OracleUnavailableError on any failure. Outputs are
    untrusted: callers normalize every number they receive.
    """

    async def generate_number(self, question: str) -> float: ...

    async def generate_question_number_pairs(self, count: int) -> list[OraclePair]: ...
