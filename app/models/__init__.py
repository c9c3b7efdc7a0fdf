# app/models/__init__.py

from app.models.verification import (
    AccountLabel,
    Bank,
    ClassifiedTransaction,
    ExpenseEntry,
    LineParseWarning,
    OperationalDayRecord,
    RawTransactionRow,
    ReconciliationResult,
    RevenueSummary,
    StatementSummary,
    VerificationReport,
    VerificationStatus,
)
from app.models.invoice import (
    CatalogMatch,
    ExtractedInvoice,
    ExtractedLineItem,
    InventoryMappedItem,
    InvoiceMappingResult,
)
from app.models.errors import ErrorPayload

__all__ = [
    # Verification
    "AccountLabel",
    "Bank",
    "ClassifiedTransaction",
    "ExpenseEntry",
    "LineParseWarning",
    "OperationalDayRecord",
    "RawTransactionRow",
    "ReconciliationResult",
    "RevenueSummary",
    "StatementSummary",
    "VerificationReport",
    "VerificationStatus",
    # Invoice
    "CatalogMatch",
    "ExtractedInvoice",
    "ExtractedLineItem",
    "InventoryMappedItem",
    "InvoiceMappingResult",
    # Errors
    "ErrorPayload",
]
