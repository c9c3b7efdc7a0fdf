# app/core/__init__.py

from app.core.verification import verify_bank_deposits, compare_totals
from app.core.revenue import aggregate_revenue, include_vehicle, is_agaseke_vehicle
from app.core.statements import summarize_statement
from app.core.statement_parser import BankStatementParser, split_columns
from app.core.classification import (
    CASH_DEPOSIT_RULE,
    TPA_SETTLEMENT_RULE,
    classify_transaction,
)
from app.core.matching import dice_coefficient, match_catalog_name
from app.core.invoice_extraction import parse_model_output
from app.core.line_items import map_invoice, map_line_item
from app.core.normalizers import (
    normalize_text,
    normalize_plate,
    normalize_date,
    parse_amount,
)

__all__ = [
    "verify_bank_deposits",
    "compare_totals",
    "aggregate_revenue",
    "include_vehicle",
    "is_agaseke_vehicle",
    "summarize_statement",
    "BankStatementParser",
    "split_columns",
    "CASH_DEPOSIT_RULE",
    "TPA_SETTLEMENT_RULE",
    "classify_transaction",
    "dice_coefficient",
    "match_catalog_name",
    "parse_model_output",
    "map_invoice",
    "map_line_item",
    "normalize_text",
    "normalize_plate",
    "normalize_date",
    "parse_amount",
]
