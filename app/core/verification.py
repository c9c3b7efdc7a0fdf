# app/core/verification.py

"""
Bank deposit verification.

Compares what reached the bank (cash deposits on account 002 plus
TPA settlements on account 001) with the net revenue the operational
reports say should have been deposited.
"""

from datetime import date, datetime
from typing import Iterable
import logging

from app.models import (
    Bank,
    OperationalDayRecord,
    ReconciliationResult,
    VerificationReport,
)
from app.core.revenue import DEFAULT_AGASEKE_PLATES, aggregate_revenue
from app.core.statements import summarize_statement

logger = logging.getLogger(__name__)

# Absolute, in currency units
DEFAULT_TOLERANCE = 1000


def format_amount(value: float) -> str:
    return f"{value:,.2f}"


def format_date_range(start_date: date, end_date: date) -> str:
    return f"{start_date.isoformat()} to {end_date.isoformat()}"


def compare_totals(
    total_net_revenue: float,
    account_002_total: float,
    account_001_total: float,
    date_range: str,
    tolerance: float = DEFAULT_TOLERANCE,
    currency: str = "AOA",
) -> ReconciliationResult:
    """
    Build the verdict.

    verified iff |bank deposits - net revenue| <= tolerance, with the
    difference rounded to cents first.
    """
    bank_total_deposits = account_002_total + account_001_total
    difference = round(bank_total_deposits - total_net_revenue, 2)

    if abs(difference) <= tolerance:
        status = "verified"
        details = (
            f"Verified: bank deposits (Account 001 Electronic: {format_amount(account_001_total)} "
            f"+ Account 002 Cash: {format_amount(account_002_total)} "
            f"= {format_amount(bank_total_deposits)} {currency}) match NET revenue "
            f"{format_amount(total_net_revenue)} {currency} within {format_amount(tolerance)} {currency} "
            f"(difference: {format_amount(difference)} {currency})"
        )
    else:
        status = "mismatch"
        direction = "more" if difference > 0 else "less"
        details = (
            f"Mismatch: bank deposits total {format_amount(bank_total_deposits)} {currency} "
            f"vs NET revenue {format_amount(total_net_revenue)} {currency} "
            f"(difference: {format_amount(abs(difference))} {currency} {direction} than expected, "
            f"tolerance {format_amount(tolerance)} {currency})"
        )

    return ReconciliationResult(
        date_range=date_range,
        total_net_revenue=total_net_revenue,
        account_002_total=account_002_total,
        account_001_total=account_001_total,
        bank_total_deposits=bank_total_deposits,
        status=status,
        difference=difference,
        details=details,
    )


def verify_bank_deposits(
    records: Iterable[OperationalDayRecord],
    bank: Bank,
    start_date: date,
    end_date: date,
    account_001_text: str,
    account_002_text: str,
    agaseke_plates: Iterable[str] = DEFAULT_AGASEKE_PLATES,
    tolerance: float = DEFAULT_TOLERANCE,
    currency: str = "AOA",
) -> VerificationReport:
    """
    Main verification function.

    1. Aggregate expected net revenue from the day reports
    2. Sum TPA settlements from the account 001 statement
    3. Sum cash deposits from the account 002 statement
    4. Compare within the tolerance

    Statement errors propagate: no partial verdict is produced.
    """
    start_time = datetime.now()

    revenue = aggregate_revenue(
        records,
        bank,
        agaseke_plates=agaseke_plates,
        start_date=start_date,
        end_date=end_date,
    )
    account_001 = summarize_statement(account_001_text, "001")
    account_002 = summarize_statement(account_002_text, "002")

    result = compare_totals(
        total_net_revenue=revenue.total_net_revenue,
        account_002_total=account_002.total,
        account_001_total=account_001.total,
        date_range=format_date_range(start_date, end_date),
        tolerance=tolerance,
        currency=currency,
    )

    duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
    logger.info(f"{bank.value} {result.date_range}: {result.status} ({duration_ms} ms). {result.details}")

    return VerificationReport(
        result=result,
        revenue=revenue,
        account_001=account_001,
        account_002=account_002,
    )
