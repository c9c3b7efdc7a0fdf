# app/core/statements.py

"""
Per-account statement totals.
"""

import logging

from app.models import AccountLabel, ClassifiedTransaction, StatementSummary
from app.core.classification import RULES_BY_ACCOUNT, classify_transaction
from app.core.errors import EmptyStatementError, NoQualifyingTransactionsError
from app.core.statement_parser import BankStatementParser

logger = logging.getLogger(__name__)


def summarize_statement(text: str, account: AccountLabel) -> StatementSummary:
    """
    Parse one statement and sum the transactions its account rule accepts.

    Raises EmptyStatementError for blank input and
    NoQualifyingTransactionsError when nothing qualifies.
    """
    if not text or not text.strip():
        raise EmptyStatementError(account)

    rule = RULES_BY_ACCOUNT[account]
    parser = BankStatementParser(target_fragments=rule.include)

    transactions: list[ClassifiedTransaction] = []
    for row in parser.parse(text):
        classified = classify_transaction(row, rule)
        if classified is not None:
            transactions.append(classified)

    if not transactions:
        logger.error(
            f"Account {account}: no '{rule.label}' transactions in "
            f"{parser.rows_scanned} data rows"
        )
        raise NoQualifyingTransactionsError(account, rule.label, parser.rows_scanned)

    total = sum(t.amount for t in transactions)

    logger.info(
        f"Account {account} ({rule.label}): {len(transactions)} transactions, "
        f"total {total:,.2f}, {len(parser.warnings)} lines skipped"
    )

    return StatementSummary(
        account=account,
        rule=rule.name,
        total=total,
        transactions=transactions,
        rows_scanned=parser.rows_scanned,
        warnings=parser.warnings,
    )
