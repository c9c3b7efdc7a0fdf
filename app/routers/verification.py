# app/routers/verification.py

"""
Bank verification routes.

Checks uploaded bank statements against the revenue of the daily
operational reports.
"""

import logging
from typing import Optional
from fastapi import APIRouter, File, Form, UploadFile

from app.config import get_settings
from app.core.errors import InputValidationError, ReportFetchError
from app.core.normalizers import normalize_date
from app.core.verification import verify_bank_deposits
from app.database import get_operational_reports, save_verification_run
from app.integrations import claude
from app.models import Bank

settings = get_settings()
logger = logging.getLogger(__name__)
router = APIRouter()


async def _read_statement(upload: UploadFile) -> str:
    data = await upload.read()
    return data.decode("utf-8", errors="replace")


def _parse_bank(value: str) -> Bank:
    try:
        return Bank(value.strip())
    except ValueError:
        raise InputValidationError(
            f"Unknown bank '{value}'",
            details="Field 'bank' must be one of: " + ", ".join(b.value for b in Bank),
            troubleshooting=["Select the bank from the list"],
        )


def _parse_date(field: str, value: str):
    parsed = normalize_date(value)
    if parsed is None:
        raise InputValidationError(
            f"Invalid date in '{field}': '{value}'",
            details=f"Field '{field}' must be a date in YYYY-MM-DD format.",
            troubleshooting=["Pick the dates with the date picker"],
        )
    return parsed


# ============================================
# Verify Bank Deposits
# ============================================

@router.post("/bank-verification")
async def verify_bank_statements(
    bank: Optional[str] = Form(None),
    start_date: Optional[str] = Form(None, alias="startDate"),
    end_date: Optional[str] = Form(None, alias="endDate"),
    account_001_statement: Optional[UploadFile] = File(None, alias="account001Statement"),
    account_002_statement: Optional[UploadFile] = File(None, alias="account002Statement"),
):
    """
    Verify bank deposits for a date range.

    1. Validates the form fields
    2. Fetches the operational reports for the range
    3. Parses both statements and compares totals
    4. Optionally explains a mismatch with AI
    5. Saves the run
    """
    fields = {
        "bank": bank,
        "startDate": start_date,
        "endDate": end_date,
        "account001Statement": account_001_statement,
        "account002Statement": account_002_statement,
    }
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise InputValidationError(
            "Missing required fields",
            details="Missing: " + ", ".join(missing),
            troubleshooting=[
                "Select a bank and a date range",
                "Upload the Account 001 (electronic) and Account 002 (cash) statements as CSV",
            ],
        )

    selected_bank = _parse_bank(bank)
    start = _parse_date("startDate", start_date)
    end = _parse_date("endDate", end_date)
    if start > end:
        raise InputValidationError(
            "startDate is after endDate",
            details=f"{start.isoformat()} > {end.isoformat()}",
            troubleshooting=["Swap the start and end dates"],
        )

    try:
        records = await get_operational_reports(start, end)
    except Exception as e:
        logger.error(f"Error fetching reports: {e}")
        raise ReportFetchError(details=str(e))

    report = verify_bank_deposits(
        records,
        selected_bank,
        start,
        end,
        account_001_text=await _read_statement(account_001_statement),
        account_002_text=await _read_statement(account_002_statement),
        agaseke_plates=settings.agaseke_plates,
        tolerance=settings.verification_tolerance,
        currency=settings.currency,
    )

    # Explain mismatches with AI if enabled
    if report.result.status == "mismatch" and settings.enable_ai_explanations:
        try:
            report.ai_explanation = await claude.explain_mismatch(report)
        except Exception as e:
            logger.warning(f"AI explanation failed: {e}")
            # Continue without AI - not a critical failure

    if settings.persist_verification_runs:
        try:
            await save_verification_run({
                "bank": selected_bank.value,
                "start_date": start.isoformat(),
                "end_date": end.isoformat(),
                "status": report.result.status,
                "total_net_revenue": report.result.total_net_revenue,
                "account_001_total": report.result.account_001_total,
                "account_002_total": report.result.account_002_total,
                "bank_total_deposits": report.result.bank_total_deposits,
                "difference": report.result.difference,
                "details": report.result.details,
                "breakdown": report.to_dict()["breakdown"],
            })
        except Exception as e:
            logger.warning(f"Failed to persist verification run: {e}")
            # Continue - persistence failure shouldn't fail the whole request

    return [report.to_dict()]
