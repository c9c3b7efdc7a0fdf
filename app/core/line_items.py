# app/core/line_items.py

from typing import Iterable

from app.models import (
    ExtractedInvoice,
    ExtractedLineItem,
    InventoryMappedItem,
    InvoiceMappingResult,
)
from app.core.invoice_extraction import line_total_cost, line_unit_cost
from app.core.matching import MATCH_THRESHOLD, dedupe_candidates, match_catalog_name

UNKNOWN_ITEM_NAME = "Unknown"


def map_line_item(
    item: ExtractedLineItem,
    invoice_date: str,
    candidates: list[str],
    threshold: float = MATCH_THRESHOLD,
    unique: bool = False,
) -> InventoryMappedItem:
    """Build the inventory record for one extracted line."""
    total_cost = line_total_cost(item)
    match = match_catalog_name(item.description, candidates, threshold, unique=unique)

    return InventoryMappedItem(
        date=invoice_date,
        item_name=match.name if match else (item.description or UNKNOWN_ITEM_NAME),
        description=item.description,
        quantity=item.quantity,
        amount_unit=line_unit_cost(item, total_cost),
        total_cost=total_cost,
    )


def map_invoice(
    invoice: ExtractedInvoice,
    candidates: Iterable[str],
    threshold: float = MATCH_THRESHOLD,
) -> InvoiceMappingResult:
    """Map every extracted line against one deduplicated candidate list."""
    names = dedupe_candidates(candidates)
    return InvoiceMappingResult(
        invoice_date=invoice.invoice_date,
        items=[
            map_line_item(item, invoice.invoice_date, names, threshold, unique=True)
            for item in invoice.items
        ],
    )
