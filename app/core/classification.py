# app/core/classification.py

"""
Transaction classification for bank statements.

Each account has one rule deciding which rows count as revenue:
- Account 002 (cash): "Depósito nº ..." deposit slips
- Account 001 (electronic): "Fecho TPA" card-terminal settlements,
  excluding the commission lines that also mention "Fecho TPA"
"""

import logging
from pydantic import BaseModel, Field

from app.models import AccountLabel, ClassifiedTransaction, RawTransactionRow
from app.core.normalizers import contains_any, parse_positive_amount

logger = logging.getLogger(__name__)


class TransactionRule(BaseModel):
    """Description patterns that qualify a row for an account."""

    name: str
    account: AccountLabel
    label: str
    include: list[str]
    exclude: list[str] = Field(default_factory=list)


CASH_DEPOSIT_RULE = TransactionRule(
    name="cash_deposit",
    account="002",
    label="Depósito",
    include=["depósito n", "deposito n"],
)

TPA_SETTLEMENT_RULE = TransactionRule(
    name="tpa_settlement",
    account="001",
    label="Fecho TPA",
    include=["fecho tpa"],
    exclude=["comissões", "comissoes"],
)

RULES_BY_ACCOUNT: dict[str, TransactionRule] = {
    "001": TPA_SETTLEMENT_RULE,
    "002": CASH_DEPOSIT_RULE,
}


def matches_rule(description: str, rule: TransactionRule) -> bool:
    """Check the description against the rule's include/exclude patterns."""
    if not contains_any(description, rule.include):
        return False
    if rule.exclude and contains_any(description, rule.exclude):
        return False
    return True


def classify_transaction(
    row: RawTransactionRow,
    rule: TransactionRule,
) -> ClassifiedTransaction | None:
    """
    Classify a parsed row.

    Returns a ClassifiedTransaction when the description matches and
    the value is a positive number, None otherwise. Zero, negative and
    unparseable values are rejected rather than summed as 0.
    """
    if not matches_rule(row.description, rule):
        return None

    amount = parse_positive_amount(row.value_text)
    if amount is None:
        logger.debug(
            f"Line {row.line_number}: '{row.description}' matches {rule.name} "
            f"but value '{row.value_text}' is not a positive amount"
        )
        return None

    return ClassifiedTransaction(
        amount=amount,
        description=row.description,
        line_number=row.line_number,
    )
