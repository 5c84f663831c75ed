"""Shared fixtures for the test suite."""

import pytest

from wealth_dashboard.infrastructure import settings as settings_module


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path, monkeypatch):
    """Keep logs, .env files and the default database out of the checkout."""
    monkeypatch.setenv("WEALTH_DASHBOARD_HOME", str(tmp_path))
    monkeypatch.delenv("RECORD_STORE_BACKEND", raising=False)
    monkeypatch.delenv("FINANCE_DB_URL", raising=False)
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)


@pytest.fixture
def income_payload():
    return {
        "id": "inc-1",
        "name": "Salary",
        "amount": 5000,
        "frequency": "monthly",
        "category": "Salary",
        "nextPayment": "2024-05-05",
        "isActive": True,
    }


@pytest.fixture
def bill_payload():
    return {
        "id": "bill-1",
        "name": "Power",
        "company": "Utility Co",
        "amount": 300,
        "dueDay": 10,
        "category": "Utilities",
        "isRecurring": True,
        "isActive": True,
        "nextDue": "2024-05-10",
    }


@pytest.fixture
def investment_payload():
    return {
        "id": "inv-1",
        "type": "equities",
        "name": "Index fund",
        "broker": "Broker",
        "amount": 10000,
        "currentPrice": 10500,
        "monthlyIncome": 50,
        "purchaseDate": "2023-01-15",
    }


@pytest.fixture
def loan_payload():
    return {
        "id": "loan-1",
        "type": "personal",
        "bank": "Bank",
        "amount": 5000,
        "remainingAmount": 2000,
        "interestRate": 1.5,
        "monthlyPayment": 150,
        "dueDate": "2024-05-20",
        "startDate": "2023-01-01",
        "endDate": "2025-06-01",
    }


@pytest.fixture
def end_to_end_payloads(
    income_payload,
    bill_payload,
    investment_payload,
    loan_payload,
):
    """One income source, bill, investment and loan."""
    return {
        "income": [income_payload],
        "bills": [bill_payload],
        "investments": [investment_payload],
        "loans": [loan_payload],
    }
