from typing import Any, List, Optional, Sequence, Tuple

import pytest
from fastapi.testclient import TestClient

from customer_directory_api.app.core.config import settings
from customer_directory_api.app.core.db import SCHEMA_SQL, QueryResult, StoreError
from customer_directory_api.app.main import create_app


class FakeStore:
    """Stands in for ``StoreClient``.

    Statements are recorded with whitespace collapsed.  Results are
    replayed in the order they were pushed; an empty queue answers with
    no rows.
    """

    def __init__(self) -> None:
        self.statements: List[Tuple[str, List[Any]]] = []
        self._outcomes: List[Any] = []
        self.opened = False
        self.closed = False
        self.schema_initialized = False

    def open(self) -> None:
        self.opened = True

    def close(self) -> None:
        self.closed = True

    def query(self, sql: str, params: Sequence[Any] = ()) -> QueryResult:
        if sql == SCHEMA_SQL:
            self.schema_initialized = True
            return QueryResult()
        self.statements.append((" ".join(sql.split()), list(params)))
        if not self._outcomes:
            return QueryResult()
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def ping(self) -> None:
        self.query("SELECT 1")

    def push_rows(self, *rows: dict, row_count: Optional[int] = None) -> None:
        self._outcomes.append(
            QueryResult(rows=list(rows), row_count=len(rows) if row_count is None else row_count)
        )

    def push_error(self, message: str = "connection refused") -> None:
        self._outcomes.append(StoreError(message))

    @property
    def last_statement(self) -> Tuple[str, List[Any]]:
        return self.statements[-1]


@pytest.fixture()
def store():
    return FakeStore()


@pytest.fixture()
def client(store, monkeypatch):
    monkeypatch.setattr(settings, "init_schema", True)
    app = create_app(store=store)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def customer_row():
    return {
        "customer_id": "0b9d3a4e-6a3c-4d4e-9a55-2b1f7c1d8e01",
        "first_name": "Homer",
        "last_name": "Simpson",
        "phone_number": "555-0134",
        "city": "Springfield",
        "state": "IL",
        "postal_code": "62701",
    }


@pytest.fixture()
def address_row(customer_row):
    return {
        "address_id": "5f1c2e8a-7b3d-4c2a-8e9f-0a1b2c3d4e5f",
        "customer_id": customer_row["customer_id"],
        "address_line": "742 Evergreen Terrace",
        "city": "Springfield",
        "state": "IL",
        "postal_code": "62701",
    }
