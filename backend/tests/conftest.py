import pytest
from fastapi.testclient import TestClient

from tripsplit.main import app
from tripsplit.schemas import ExpenseRecord


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_expense():
    def _make(amount, payer, involved=(), description="Expense"):
        return ExpenseRecord(amount=amount, payer=payer, involved=list(involved), description=description)
    return _make


@pytest.fixture
def trip_payload():
    return {
        "roster": [{"name": "A"}, {"name": "B"}, {"name": "C"}],
        "expenses": [
            {"amount": 300, "payer": "A", "involved": ["A", "B", "C"], "description": "Hotel"},
        ],
    }
