"""Application ports package."""

from .database import DatabaseEnginePort
from .record_store import ChangeListener, RecordStorePort

__all__ = [
    "ChangeListener",
    "DatabaseEnginePort",
    "RecordStorePort",
]
