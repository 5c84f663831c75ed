"""Domain validation helpers.

Raw collections read from storage go through ``validate_records`` before
any aggregation. Invalid records are dropped with a warning so a single bad
entry cannot poison a total.
"""

from collections.abc import Mapping, Sequence
from logging import Logger

from pydantic import ValidationError

from wealth_dashboard.domain.constants import (
    BILLS_KEY,
    INCOME_KEY,
    INVESTMENTS_KEY,
    LOANS_KEY,
    REAL_ESTATE_KEY,
    RETIREMENT_KEY,
    TRANSACTIONS_KEY,
)
from wealth_dashboard.domain.models.records import (
    Bill,
    FinancialCollections,
    FinancialRecord,
    IncomeSource,
    Investment,
    LoanOrDebt,
    RealEstateHolding,
    RetirementPlan,
    Transaction,
)

RECORD_MODELS: dict[str, type[FinancialRecord]] = {
    TRANSACTIONS_KEY: Transaction,
    INCOME_KEY: IncomeSource,
    INVESTMENTS_KEY: Investment,
    REAL_ESTATE_KEY: RealEstateHolding,
    RETIREMENT_KEY: RetirementPlan,
    LOANS_KEY: LoanOrDebt,
    BILLS_KEY: Bill,
}


def validate_records(
    key: str,
    raw_records: Sequence,
    logger: Logger,
) -> tuple[FinancialRecord, ...]:
    """Validate raw JSON records for a collection.

    Args:
        key: Collection key selecting the record model.
        raw_records: Parsed JSON array read from storage.
        logger: Logger used for warnings.

    Returns:
        tuple[FinancialRecord, ...]: Records that passed validation, in
        their input order.

    Raises:
        ValueError: If ``key`` is not a known collection key.
    """
    model = RECORD_MODELS.get(key)
    if model is None:
        raise ValueError(f"Unknown collection key: {key}")

    valid: list[FinancialRecord] = []
    for index, raw in enumerate(raw_records):
        if not isinstance(raw, Mapping):
            logger.warning(
                f"Skipping {key}[{index}]: expected an object, "
                f"got {type(raw).__name__}"
            )
            continue
        try:
            valid.append(model.model_validate(raw))
        except ValidationError as exc:
            logger.warning(
                f"Skipping invalid record {key}[{index}] "
                f"(id={raw.get('id')}): {exc.error_count()} error(s): "
                f"{_describe_errors(exc)}"
            )
    return tuple(valid)


def build_collections(
    raw_by_key: Mapping[str, Sequence],
    logger: Logger,
) -> FinancialCollections:
    """Validate every collection and bundle them into a snapshot.

    Args:
        raw_by_key: Parsed JSON arrays keyed by collection key. Missing
            keys are treated as empty collections.
        logger: Logger used for warnings.

    Returns:
        FinancialCollections: Validated records for every category.
    """

    def _validated(key: str):
        return validate_records(key, raw_by_key.get(key) or [], logger)

    return FinancialCollections(
        transactions=_validated(TRANSACTIONS_KEY),
        income=_validated(INCOME_KEY),
        investments=_validated(INVESTMENTS_KEY),
        real_estate=_validated(REAL_ESTATE_KEY),
        retirement=_validated(RETIREMENT_KEY),
        loans=_validated(LOANS_KEY),
        bills=_validated(BILLS_KEY),
    )


def _describe_errors(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )


__all__ = ["RECORD_MODELS", "validate_records", "build_collections"]
