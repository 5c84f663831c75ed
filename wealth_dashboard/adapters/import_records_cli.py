"""CLI adapter importing a JSON export into the record store.

The export is a JSON object mapping collection keys to arrays of records,
read from the path in ``RECORDS_IMPORT_FILE``.
"""

from decimal import Decimal
import json
import os
from pathlib import Path

from wealth_dashboard.application.use_cases.import_records import (
    ImportRecordsUseCase,
)
from wealth_dashboard.infrastructure.container import build_record_store
from wealth_dashboard.infrastructure.logging.logger import get_app_logger


def _read_export(raw_path: str | None, logger) -> dict | None:
    """Read and parse the export file.

    Args:
        raw_path: Path to the JSON export.
        logger: Logger used for errors.

    Returns:
        dict | None: Parsed export, or None when it cannot be used.
    """
    if not raw_path:
        logger.error("RECORDS_IMPORT_FILE is required to import records.")
        return None
    path = Path(raw_path).expanduser()
    if not path.exists():
        logger.error(f"Import file does not exist at {path}")
        return None
    try:
        payload = json.loads(
            path.read_text(encoding="utf-8"),
            parse_float=Decimal,
        )
    except ValueError as exc:
        logger.error(f"Import file {path} is not valid JSON: {exc}")
        return None
    if not isinstance(payload, dict):
        logger.error(f"Import file {path} must contain a JSON object")
        return None
    return payload


def main() -> None:
    """Run the import use case against the configured record store."""
    logger = get_app_logger()
    payload = _read_export(os.getenv("RECORDS_IMPORT_FILE"), logger)
    if payload is None:
        return

    use_case = ImportRecordsUseCase(build_record_store(), logger=logger)
    result = use_case.execute(payload)

    print(
        f"Imported {result.imported_count} records "
        f"into {len(result.imported)} collections."
    )
    for key, count in result.rejected.items():
        if count:
            print(f"  {key}: {count} invalid record(s) skipped")


if __name__ == "__main__":  # pragma: no cover
    main()
