"""Fold a roster and its expenses into paid / share / net totals per participant."""
import logging
from typing import Iterable, Sequence

from tripsplit.schemas import BalanceSheet, ExpenseRecord

logger = logging.getLogger(__name__)


def split_set(expense: ExpenseRecord, people: Sequence[str]) -> list[str]:
    """Involved participants still on the roster, or the whole roster if none are."""
    members = set(people)
    valid = [name for name in expense.involved if name in members]
    if valid:
        return valid
    if people:
        logger.debug("no valid participants in %r, splitting across roster", expense.description)
    return list(people)


def compute_balances(roster: Iterable[str], expenses: Iterable[ExpenseRecord]) -> BalanceSheet:
    """
    roster: participant names (duplicates collapse, order kept).
    Returns totals keyed by name; net = paid - share (positive = is owed money).
    Shares use real division and are not rounded here.
    """
    people = list(dict.fromkeys(roster))
    if not people:
        return BalanceSheet()

    total_paid = {p: 0.0 for p in people}
    total_share = {p: 0.0 for p in people}

    count = 0
    for e in expenses:
        count += 1
        split_among = split_set(e, people)
        share = e.amount / len(split_among)
        if e.payer in total_paid:
            total_paid[e.payer] += e.amount
        else:
            logger.debug("payer %r is not on the roster, amount %s not credited", e.payer, e.amount)
        for p in split_among:
            total_share[p] += share

    net = {p: total_paid[p] - total_share[p] for p in people}
    logger.debug("computed balances for %d participants over %d expenses", len(people), count)
    return BalanceSheet(total_paid=total_paid, total_share=total_share, net=net)
