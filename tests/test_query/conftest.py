"""Fake Neo4j sessions shared by the query server tests."""

import pytest
from neo4j.exceptions import Neo4jError


class FakeResult:
    """Async-iterable stand-in for ``neo4j.AsyncResult``."""

    def __init__(self, records):
        self._records = list(records)

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for record in self._records:
            yield record


class FakeSession:
    """Records what it was asked to run and whether it was released."""

    def __init__(self, records=None, error=None):
        self.records = records or []
        self.error = error
        self.calls: list[tuple[str, dict]] = []
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.closed = True
        return False

    async def run(self, query, parameters):
        self.calls.append((query, parameters))
        if self.error is not None:
            raise self.error
        return FakeResult(self.records)


class FakeHandler:
    """Hands out a new FakeSession per ``session()`` call."""

    def __init__(self, records=None, error=None):
        self.records = records
        self.error = error
        self.sessions: list[FakeSession] = []

    def session(self):
        session = FakeSession(self.records, self.error)
        self.sessions.append(session)
        return session


@pytest.fixture
def make_handler():
    def _make(records=None, error=None) -> FakeHandler:
        return FakeHandler(records, error)
    return _make


def server_error(cls=Neo4jError, message="Invalid input 'MATCHH'"):
    """Build a server-side driver error (``Neo4jError`` subclass) with ``message``.

    The driver only ever hydrates these from server responses, so the
    message is pinned through a subclass property.
    """

    class _ServerError(cls):
        @property
        def message(self):
            return self.__dict__.get("_server_message", message)

        @message.setter
        def message(self, value):
            if value is not None:
                self.__dict__["_server_message"] = value

    return _ServerError(f"{{code: Neo.ClientError.Statement.SyntaxError}} {{message: {message}}}")


@pytest.fixture
def make_server_error():
    return server_error


@pytest.fixture
def neo4j_error():
    return server_error()
