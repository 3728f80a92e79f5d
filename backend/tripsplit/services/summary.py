"""Balances, transfers and trip totals for one roster/expense snapshot."""
from typing import Iterable, Sequence

from tripsplit.schemas import ExpenseRecord, ParticipantBalance, SettlementSummary
from tripsplit.services.balance_calculator import compute_balances
from tripsplit.services.settlement_calculator import round_unit, simplify_debts


def summarize(roster: Sequence[str], expenses: Iterable[ExpenseRecord]) -> SettlementSummary:
    expenses = list(expenses)
    sheet = compute_balances(roster, expenses)
    transfers = simplify_debts(sheet.net)

    rows = [
        ParticipantBalance(
            name=name,
            paid=round_unit(sheet.total_paid[name]),
            share=round_unit(sheet.total_share[name]),
            net=round_unit(net),
        )
        for name, net in sheet.net.items()
    ]
    return SettlementSummary(
        participants=list(sheet.net),
        balances=rows,
        transfers=transfers,
        total_spent=sum(e.amount for e in expenses),
        expense_count=len(expenses),
    )
