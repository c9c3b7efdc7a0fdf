# app/core/invoice_extraction.py

"""
Defensive reading of the OCR model's invoice JSON.

The model already applies discounts and IVA per line; nothing here
re-derives tax. Every numeric field is untrusted and coerced to a
documented default instead of propagating NaN or negatives:

- quantity                         -> 1 if missing or not positive
- unit_price, total, totals        -> 0 if missing, non-finite or not positive
- iva_rate                         -> 0 if missing, non-finite or negative
"""

from typing import Any
import json
import logging

from app.models import ExtractedInvoice, ExtractedLineItem
from app.core.errors import ModelOutputError
from app.core.normalizers import coerce_positive, parse_amount

logger = logging.getLogger(__name__)


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ``` / ```json fence if the model added one."""
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else ""
    if text.endswith("```"):
        text = text.rsplit("```", 1)[0]
    return text.strip()


def coerce_line_item(raw: dict) -> ExtractedLineItem:
    description = raw.get("description")
    iva_rate = parse_amount(raw.get("iva_rate"))

    return ExtractedLineItem(
        description=description.strip() if isinstance(description, str) else "",
        quantity=coerce_positive(raw.get("quantity"), 1),
        unit_price=coerce_positive(raw.get("unit_price"), 0),
        total=coerce_positive(raw.get("total"), 0),
        iva_rate=iva_rate if iva_rate is not None and iva_rate >= 0 else 0,
        iva_amount=coerce_positive(raw.get("iva_amount"), 0),
        total_excl_tax=coerce_positive(raw.get("total_excl_tax"), 0),
        total_incl_tax=coerce_positive(raw.get("total_incl_tax"), 0),
    )


def parse_model_output(text: str | None) -> ExtractedInvoice:
    """
    Parse the model's response text into an ExtractedInvoice.

    Raises ModelOutputError (with the raw text attached) when the output
    is empty or not a JSON object.
    """
    if not text or not text.strip():
        raise ModelOutputError("Empty model output", raw=text or "")

    try:
        data: Any = json.loads(strip_code_fences(text))
    except json.JSONDecodeError as e:
        raise ModelOutputError(f"Model output is not valid JSON: {e.msg}", raw=text) from e

    if not isinstance(data, dict):
        raise ModelOutputError("Model output is not a JSON object", raw=text)

    invoice_date = data.get("invoice_date")
    raw_items = data.get("items")
    if not isinstance(raw_items, list):
        logger.warning("Model output has no items list")
        raw_items = []

    items = []
    for index, raw in enumerate(raw_items):
        if not isinstance(raw, dict):
            logger.warning(f"Skipping invoice item {index}: not an object")
            continue
        items.append(coerce_line_item(raw))

    return ExtractedInvoice(
        invoice_date=invoice_date.strip() if isinstance(invoice_date, str) else "",
        items=items,
    )


def line_total_cost(item: ExtractedLineItem) -> float:
    """Tax-inclusive total, else plain total, else 0."""
    if item.total_incl_tax > 0:
        return item.total_incl_tax
    if item.total > 0:
        return item.total
    return 0.0


def line_unit_cost(item: ExtractedLineItem, total_cost: float) -> float:
    """Unit cost from the total when possible, else the model's unit price."""
    if total_cost > 0 and item.quantity > 0:
        return total_cost / item.quantity
    return item.unit_price
