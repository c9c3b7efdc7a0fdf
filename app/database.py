# app/database.py

from datetime import date
from functools import lru_cache
import logging

from supabase import create_client, Client

from app.config import get_settings
from app.models import ExpenseEntry, OperationalDayRecord

logger = logging.getLogger(__name__)


@lru_cache()
def get_supabase_admin() -> Client:
    """Admin client (bypasses RLS - server side only)."""
    settings = get_settings()
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


# ============================================
# Database helper functions
# ============================================

def _vehicle_plate(vehicles) -> str:
    """The join comes back as a list or a single object depending on the FK."""
    if isinstance(vehicles, list):
        vehicles = vehicles[0] if vehicles else None
    if isinstance(vehicles, dict):
        return vehicles.get("plate") or ""
    return ""


def report_from_row(row: dict) -> OperationalDayRecord:
    """Convert a daily_reports row (with joins) to an OperationalDayRecord."""
    expenses = [
        ExpenseEntry(amount=float(e.get("amount") or 0))
        for e in row.get("daily_expenses") or []
    ]
    return OperationalDayRecord(
        id=str(row["id"]) if row.get("id") is not None else None,
        report_date=row["report_date"],
        vehicle_plate=_vehicle_plate(row.get("vehicles")),
        ticket_revenue=float(row.get("ticket_revenue") or 0),
        baggage_revenue=float(row.get("baggage_revenue") or 0),
        cargo_revenue=float(row.get("cargo_revenue") or 0),
        expenses=expenses,
        status=row.get("status") or "Operational",
    )


async def get_operational_reports(start_date: date, end_date: date) -> list[OperationalDayRecord]:
    """Operational daily reports in the inclusive range, oldest first."""
    response = (
        get_supabase_admin()
        .table("daily_reports")
        .select("id, report_date, status, ticket_revenue, baggage_revenue, cargo_revenue, vehicles (plate), daily_expenses (amount)")
        .eq("status", "Operational")
        .gte("report_date", start_date.isoformat())
        .lte("report_date", end_date.isoformat())
        .order("report_date")
        .execute()
    )
    rows = response.data or []
    logger.info(f"Fetched {len(rows)} operational reports from {start_date} to {end_date}")
    return [report_from_row(row) for row in rows]


async def list_custom_part_names(limit: int = 5000) -> list[str]:
    """
    Names from the optional custom_parts table.

    The table may not exist; that is not an error, the list is just empty.
    """
    try:
        response = get_supabase_admin().table("custom_parts").select("name, item_name").limit(limit).execute()
    except Exception as e:
        logger.info(f"Custom parts unavailable: {e}")
        return []

    names = []
    for row in response.data or []:
        name = row.get("name") or row.get("item_name")
        if isinstance(name, str) and name:
            names.append(name)
    return names


async def save_verification_run(run: dict) -> dict | None:
    """Save a bank verification run."""
    response = get_supabase_admin().table("verification_runs").insert(run).execute()
    return response.data[0] if response.data else None
