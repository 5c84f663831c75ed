"""Domain constants for the finance dashboard."""

from decimal import Decimal

TRANSACTIONS_KEY = "transactions"
INCOME_KEY = "income"
INVESTMENTS_KEY = "investments"
REAL_ESTATE_KEY = "realEstate"
RETIREMENT_KEY = "retirement"
LOANS_KEY = "loans"
BILLS_KEY = "bills"

COLLECTION_KEYS = (
    TRANSACTIONS_KEY,
    INCOME_KEY,
    INVESTMENTS_KEY,
    REAL_ESTATE_KEY,
    RETIREMENT_KEY,
    LOANS_KEY,
    BILLS_KEY,
)

# Average number of weeks in a month.
WEEKS_PER_MONTH = Decimal("4.33")
MONTHS_PER_YEAR = Decimal("12")

INCOME_FREQUENCIES = ("monthly", "weekly", "yearly", "one-time")
TRANSACTION_KINDS = ("income", "expense")
INVESTMENT_TYPES = (
    "fixed-income",
    "equities",
    "real-estate-fund",
    "private-equity",
    "credit-instrument",
)
REAL_ESTATE_TYPES = ("residential", "commercial", "land", "reit")
RETIREMENT_TYPES = ("public-pension", "private", "PGBL", "VGBL")
LOAN_TYPES = (
    "personal",
    "payroll-deduction",
    "credit-card",
    "financing",
    "overdraft",
)

# Type labels persisted by the first, Portuguese-labelled release.
LEGACY_TYPE_ALIASES = {
    "renda-fixa": "fixed-income",
    "acoes": "equities",
    "fundos-imobiliarios": "real-estate-fund",
    "titulos-credito": "credit-instrument",
    "residencial": "residential",
    "comercial": "commercial",
    "terreno": "land",
    "fundo-imobiliario": "reit",
    "inss": "public-pension",
    "privada": "private",
    "pgbl": "PGBL",
    "vgbl": "VGBL",
    "pessoal": "personal",
    "consignado": "payroll-deduction",
    "cartao": "credit-card",
    "financiamento": "financing",
    "cheque-especial": "overdraft",
}

ASSET_CLASS_INVESTMENTS = "Investments"
ASSET_CLASS_REAL_ESTATE = "Real estate"
ASSET_CLASS_RETIREMENT = "Retirement"

UPCOMING_BILLS_LIMIT = 5


__all__ = [
    "TRANSACTIONS_KEY",
    "INCOME_KEY",
    "INVESTMENTS_KEY",
    "REAL_ESTATE_KEY",
    "RETIREMENT_KEY",
    "LOANS_KEY",
    "BILLS_KEY",
    "COLLECTION_KEYS",
    "WEEKS_PER_MONTH",
    "MONTHS_PER_YEAR",
    "INCOME_FREQUENCIES",
    "TRANSACTION_KINDS",
    "INVESTMENT_TYPES",
    "REAL_ESTATE_TYPES",
    "RETIREMENT_TYPES",
    "LOAN_TYPES",
    "LEGACY_TYPE_ALIASES",
    "ASSET_CLASS_INVESTMENTS",
    "ASSET_CLASS_REAL_ESTATE",
    "ASSET_CLASS_RETIREMENT",
    "UPCOMING_BILLS_LIMIT",
]
