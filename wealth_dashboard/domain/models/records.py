"""Record schemas for the persisted finance collections.

Each model mirrors one JSON object stored under a collection key. JSON keys
are camelCase; Python attributes are snake_case.
"""

from dataclasses import dataclass
import datetime as dt
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from wealth_dashboard.domain.constants import LEGACY_TYPE_ALIASES


class FinancialRecord(BaseModel):
    """Base model shared by every persisted record."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        coerce_numbers_to_str=True,
    )

    id: str

    @field_validator("type", mode="before", check_fields=False)
    @classmethod
    def _map_legacy_type(cls, value):
        if isinstance(value, str):
            return LEGACY_TYPE_ALIASES.get(value, value)
        return value

    def to_payload(self) -> dict:
        """Return the record as a camelCase dict, omitting missing fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Transaction(FinancialRecord):
    """Raw ledger entry (income or expense)."""

    kind: Literal["income", "expense"] = Field(alias="type")
    amount: Decimal
    category: str
    description: str = ""
    date: dt.date
    is_recurring: bool = False
    receipt: str | None = None


class IncomeSource(FinancialRecord):
    """Recurring income stream."""

    name: str
    amount: Decimal
    frequency: Literal["monthly", "weekly", "yearly", "one-time"]
    category: str = ""
    next_payment: dt.date | None = None
    is_active: bool = True


class Investment(FinancialRecord):
    type: Literal[
        "fixed-income",
        "equities",
        "real-estate-fund",
        "private-equity",
        "credit-instrument",
    ]
    name: str
    broker: str = ""
    amount: Decimal
    purchase_price: Decimal | None = None
    current_price: Decimal | None = None
    interest_rate: Decimal | None = None
    monthly_income: Decimal | None = None
    purchase_date: dt.date
    maturity_date: dt.date | None = None


class RealEstateHolding(FinancialRecord):
    """Property holding; ``expenses`` is a monthly figure."""

    type: Literal["residential", "commercial", "land", "reit"]
    address: str
    purchase_price: Decimal
    current_value: Decimal | None = None
    monthly_rent: Decimal | None = None
    expenses: Decimal
    purchase_date: dt.date
    is_rented: bool = False
    attachments: tuple[str, ...] = ()


class RetirementPlan(FinancialRecord):
    type: Literal["public-pension", "private", "PGBL", "VGBL"]
    name: str
    company: str = ""
    monthly_contribution: Decimal
    total_contributed: Decimal
    expected_return: Decimal | None = None
    start_date: dt.date
    retirement_age: int | None = None


class LoanOrDebt(FinancialRecord):
    """Loan or debt; ``interest_rate`` is a monthly percentage."""

    type: Literal[
        "personal",
        "payroll-deduction",
        "credit-card",
        "financing",
        "overdraft",
    ]
    bank: str
    amount: Decimal
    remaining_amount: Decimal
    interest_rate: Decimal
    monthly_payment: Decimal
    due_date: dt.date
    start_date: dt.date
    end_date: dt.date


class Bill(FinancialRecord):
    name: str
    company: str = ""
    amount: Decimal
    due_day: int = Field(ge=1, le=31)
    category: str = ""
    is_recurring: bool = True
    is_active: bool = True
    last_paid: dt.date | None = None
    next_due: dt.date


@dataclass(frozen=True)
class FinancialCollections:
    """Validated snapshot of every finance collection."""

    transactions: tuple[Transaction, ...] = ()
    income: tuple[IncomeSource, ...] = ()
    investments: tuple[Investment, ...] = ()
    real_estate: tuple[RealEstateHolding, ...] = ()
    retirement: tuple[RetirementPlan, ...] = ()
    loans: tuple[LoanOrDebt, ...] = ()
    bills: tuple[Bill, ...] = ()


__all__ = [
    "FinancialRecord",
    "Transaction",
    "IncomeSource",
    "Investment",
    "RealEstateHolding",
    "RetirementPlan",
    "LoanOrDebt",
    "Bill",
    "FinancialCollections",
]
