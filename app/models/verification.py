# app/models/verification.py

from datetime import date
from enum import Enum
from typing import Optional, Literal
from pydantic import BaseModel, Field


# ============================================
# Banks
# ============================================

class Bank(str, Enum):
    """Banks a verification can be run against."""

    CAIXA_ANGOLA = "Caixa Angola"
    BAI = "BAI"


AccountLabel = Literal["001", "002"]
VerificationStatus = Literal["verified", "mismatch"]


# ============================================
# Operational reports
# ============================================

class ExpenseEntry(BaseModel):
    amount: float = 0


class OperationalDayRecord(BaseModel):
    """One vehicle's reporting for one calendar day."""

    id: Optional[str] = None
    report_date: date
    vehicle_plate: str = ""
    ticket_revenue: float = Field(default=0, ge=0)
    baggage_revenue: float = Field(default=0, ge=0)
    cargo_revenue: float = Field(default=0, ge=0)
    expenses: list[ExpenseEntry] = Field(default_factory=list)
    status: str = "Operational"

    @property
    def gross_revenue(self) -> float:
        return self.ticket_revenue + self.baggage_revenue + self.cargo_revenue

    @property
    def total_expenses(self) -> float:
        return sum(e.amount for e in self.expenses)


class RevenueSummary(BaseModel):
    """Expected net revenue and how it was assembled."""

    bank: Bank
    gross_revenue: float = 0
    total_expenses: float = 0
    total_net_revenue: float = 0
    included_reports: int = 0
    excluded_reports: int = 0
    excluded_revenue: float = 0
    excluded_expenses: float = 0
    reports_missing_expenses: int = 0
    reports_without_plate: int = 0


# ============================================
# Bank statements
# ============================================

class RawTransactionRow(BaseModel):
    """One data line of a bank CSV export."""

    line_number: int
    raw_columns: list[str]
    description: str = ""
    value_text: str = ""


class ClassifiedTransaction(BaseModel):
    """A statement row that matched an account's rule."""

    amount: float = Field(gt=0)
    description: str
    line_number: Optional[int] = None


class LineParseWarning(BaseModel):
    """A CSV line that could not be parsed and was skipped."""

    line_number: int
    line: str
    reason: str


class StatementSummary(BaseModel):
    """Classified transactions found in one uploaded statement."""

    account: AccountLabel
    rule: str
    total: float
    transactions: list[ClassifiedTransaction] = Field(default_factory=list)
    rows_scanned: int = 0
    warnings: list[LineParseWarning] = Field(default_factory=list)


# ============================================
# Verdict
# ============================================

class ReconciliationResult(BaseModel):
    """Bank deposits compared against expected net revenue."""

    date_range: str
    total_net_revenue: float
    account_002_total: float
    account_001_total: float
    bank_total_deposits: float
    status: VerificationStatus
    difference: float
    details: str

    def to_dict(self) -> dict:
        """Convert to the camelCase shape the dashboard consumes."""
        return {
            "dateRange": self.date_range,
            "totalNetRevenue": self.total_net_revenue,
            "account001Total": self.account_001_total,
            "account002Total": self.account_002_total,
            "bankTotalDeposits": self.bank_total_deposits,
            "status": self.status,
            "difference": self.difference,
            "details": self.details,
        }


class VerificationReport(BaseModel):
    """Verdict plus the breakdown that produced it."""

    result: ReconciliationResult
    revenue: RevenueSummary
    account_001: StatementSummary
    account_002: StatementSummary
    ai_explanation: Optional[str] = None

    def to_dict(self) -> dict:
        data = self.result.to_dict()
        data["breakdown"] = {
            "revenue": self.revenue.model_dump(mode="json"),
            "account001": self.account_001.model_dump(mode="json"),
            "account002": self.account_002.model_dump(mode="json"),
        }
        if self.ai_explanation:
            data["aiExplanation"] = self.ai_explanation
        return data
