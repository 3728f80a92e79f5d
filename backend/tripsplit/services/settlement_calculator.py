"""Minimize number of transfers so everyone is settled (who owes whom)."""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Mapping

from tripsplit.schemas import Transfer

logger = logging.getLogger(__name__)

# Balances closer to zero than this are treated as settled.
EPSILON = 0.01


def round_unit(value: float) -> int:
    """Nearest whole ledger unit, halves away from zero."""
    return int(Decimal(str(value)).to_integral_value(rounding=ROUND_HALF_UP))


def simplify_debts(net: Mapping[str, float]) -> list[Transfer]:
    """
    net: participant -> net balance (positive = is owed money, negative = owes money).
    Returns an ordered list of transfers that settles everyone, largest
    imbalances first. Amounts are rounded only when a transfer is emitted;
    a match that rounds to zero is dropped, so every amount is positive.
    """
    debtors = [[name, bal] for name, bal in net.items() if bal < -EPSILON]
    creditors = [[name, bal] for name, bal in net.items() if bal > EPSILON]
    # Stable sorts: equal balances keep the mapping's order.
    debtors.sort(key=lambda x: x[1])
    creditors.sort(key=lambda x: x[1], reverse=True)

    out: list[Transfer] = []
    i, j = 0, 0
    while i < len(debtors) and j < len(creditors):
        d = debtors[i]
        c = creditors[j]
        amount = min(abs(d[1]), c[1])
        if amount > EPSILON:
            rounded = round_unit(amount)
            if rounded > 0:
                out.append(Transfer(from_participant=d[0], to_participant=c[0], amount=rounded))
            else:
                logger.debug("transfer %s -> %s of %.4f rounds to zero, dropped", d[0], c[0], amount)
        d[1] += amount
        c[1] -= amount
        if abs(d[1]) < EPSILON:
            i += 1
        if c[1] < EPSILON:
            j += 1

    residue = sum(abs(bal) for _, bal in debtors[i:]) + sum(bal for _, bal in creditors[j:])
    if residue > EPSILON:
        logger.warning("unsettled residue %.4f after simplification; net balances do not sum to zero", residue)
    return out
