# app/core/errors.py

"""
Error taxonomy for bank verification and invoice OCR.

Every error carries the actionable payload the dashboard shows:
{error, message, details, troubleshooting}.
"""

from app.models import ErrorPayload


class ServiceError(Exception):
    """Base class for errors returned to the caller as an ErrorPayload."""

    error = "Request failed"
    status_code = 500

    def __init__(
        self,
        message: str,
        details: str = "",
        troubleshooting: list[str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details
        self.troubleshooting = troubleshooting or []

    def to_payload(self) -> dict:
        return ErrorPayload(
            error=self.error,
            message=self.message,
            details=self.details,
            troubleshooting=self.troubleshooting,
        ).model_dump()


class InputValidationError(ServiceError):
    """A required field is missing or malformed."""

    error = "Invalid input"
    status_code = 400


# ============================================
# Bank verification
# ============================================

class VerificationError(ServiceError):
    """Aborts a bank verification. No partial verdict is produced."""

    error = "Bank verification failed"
    status_code = 422


class EmptyStatementError(VerificationError):
    """An uploaded statement has no content."""

    error = "Empty bank statement"
    status_code = 400

    def __init__(self, account: str):
        super().__init__(
            f"Account {account} statement is empty",
            details=f"The uploaded CSV for account {account} contains no text.",
            troubleshooting=[
                f"Re-export the Account {account} statement from online banking as CSV",
                "Check that the file was not truncated during upload",
            ],
        )
        self.account = account


class NoQualifyingTransactionsError(VerificationError):
    """A statement produced no transactions for its account rule."""

    error = "No qualifying transactions found"

    def __init__(self, account: str, rule_label: str, rows_scanned: int):
        super().__init__(
            f"No '{rule_label}' transactions found in the Account {account} statement",
            details=f"Scanned {rows_scanned} data rows without a positive '{rule_label}' entry.",
            troubleshooting=[
                f"Verify Account {account} CSV contains '{rule_label}' transactions",
                "Check that the two statements were not uploaded in swapped slots",
                "Check that the statement covers the selected date range",
                "Transaction dates must use the DD/MM/YYYY format",
            ],
        )
        self.account = account
        self.rule_label = rule_label
        self.rows_scanned = rows_scanned


class ReportFetchError(VerificationError):
    """The daily reports could not be loaded."""

    error = "Failed to fetch daily reports"
    status_code = 502

    def __init__(self, details: str = ""):
        super().__init__(
            "Daily reports for the selected range could not be loaded",
            details=details,
            troubleshooting=[
                "Retry in a few seconds",
                "Check the database connection settings",
            ],
        )


# ============================================
# Invoice OCR
# ============================================

class InvoiceOcrError(ServiceError):
    """Raised while reading an invoice."""

    error = "Invoice OCR failed"
    status_code = 502


class ModelOutputError(InvoiceOcrError):
    """The vision model returned nothing usable. `raw` keeps its text."""

    error = "Failed to parse model JSON"

    def __init__(self, message: str, raw: str = ""):
        super().__init__(
            message,
            details=raw,
            troubleshooting=[
                "Retry with a sharper photo or scan of the invoice",
                "Make sure every page of the invoice is included",
            ],
        )
        self.raw = raw
