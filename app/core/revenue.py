# app/core/revenue.py

"""
Expected net revenue from operational day reports.

Net revenue = (ticket + baggage + cargo) - expenses, summed over the
reports of the vehicles whose takings go to the selected bank.
Caixa Angola receives everything except the Agaseke vehicles; BAI
receives everything.
"""

from datetime import date
from typing import Iterable, Optional
import logging

from app.models import Bank, OperationalDayRecord, RevenueSummary
from app.core.normalizers import normalize_plate

logger = logging.getLogger(__name__)

DEFAULT_AGASEKE_PLATES = frozenset({"LDA-25-91-AD", "LDA-25-92-AD", "LDA-25-93-AD"})


def is_agaseke_vehicle(plate: str | None, agaseke_plates: Iterable[str]) -> bool:
    """Plate membership test, ignoring case and separators."""
    normalized = normalize_plate(plate)
    if not normalized:
        return False
    return normalized in {normalize_plate(p) for p in agaseke_plates}


def include_vehicle(bank: Bank, plate: str | None, agaseke_plates: Iterable[str]) -> bool:
    """Whether a vehicle's takings are deposited with the given bank."""
    if bank is Bank.CAIXA_ANGOLA:
        return not is_agaseke_vehicle(plate, agaseke_plates)
    elif bank is Bank.BAI:
        return True
    raise ValueError(f"Unsupported bank: {bank!r}")


def aggregate_revenue(
    records: Iterable[OperationalDayRecord],
    bank: Bank,
    agaseke_plates: Iterable[str] = DEFAULT_AGASEKE_PLATES,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> RevenueSummary:
    """
    Sum revenue and expenses for the included vehicles.

    Expenses of excluded vehicles are never subtracted. Records that are
    not "Operational" or fall outside the optional inclusive date range
    are ignored.
    """
    plates = frozenset(agaseke_plates)
    summary = RevenueSummary(bank=bank)

    for record in records:
        if record.status != "Operational":
            logger.debug(f"Skipping report {record.id}: status {record.status}")
            continue
        if start_date and record.report_date < start_date:
            continue
        if end_date and record.report_date > end_date:
            continue

        if not normalize_plate(record.vehicle_plate):
            # Counted as included: an empty plate is never an Agaseke plate
            summary.reports_without_plate += 1
            logger.warning(f"Report {record.id} ({record.report_date}) has no vehicle plate")

        revenue = record.gross_revenue
        expenses = record.total_expenses

        if include_vehicle(bank, record.vehicle_plate, plates):
            summary.gross_revenue += revenue
            summary.total_expenses += expenses
            summary.included_reports += 1
            if not record.expenses:
                summary.reports_missing_expenses += 1
            logger.debug(
                f"Including {record.vehicle_plate or '<no plate>'} on {record.report_date}: "
                f"revenue={revenue:,.2f} expenses={expenses:,.2f}"
            )
        else:
            summary.excluded_revenue += revenue
            summary.excluded_expenses += expenses
            summary.excluded_reports += 1
            logger.debug(
                f"Excluding Agaseke vehicle {record.vehicle_plate} on {record.report_date}: "
                f"revenue={revenue:,.2f} expenses={expenses:,.2f}"
            )

    summary.total_net_revenue = summary.gross_revenue - summary.total_expenses

    logger.info(
        f"{bank.value}: gross={summary.gross_revenue:,.2f} "
        f"expenses={summary.total_expenses:,.2f} net={summary.total_net_revenue:,.2f} "
        f"({summary.included_reports} reports included, {summary.excluded_reports} excluded)"
    )
    if summary.reports_missing_expenses:
        logger.info(f"{summary.reports_missing_expenses} included reports have no expenses")

    return summary
