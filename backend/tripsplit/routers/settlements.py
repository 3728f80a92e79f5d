"""Settlements: balances and who owes whom for a roster/expense snapshot."""
import csv
import io
import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse

from tripsplit.schemas import (
    BalanceSheet, SettlementSummary, SimplifyRequest, SnapshotRequest, Transfer,
)
from tripsplit.services.balance_calculator import compute_balances
from tripsplit.services.settlement_calculator import simplify_debts
from tripsplit.services.summary import summarize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settlements", tags=["settlements"])


def _check_roster(data: SnapshotRequest) -> list[str]:
    names = data.roster_names()
    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise HTTPException(status_code=400, detail=f"Duplicate participant: {name}")
        seen.add(name)
    return names


@router.post("/balances", response_model=BalanceSheet)
def get_balances(data: SnapshotRequest):
    roster = _check_roster(data)
    logger.info("balances requested: %d participants, %d expenses", len(roster), len(data.expenses))
    return compute_balances(roster, data.expenses)


@router.post("/simplify", response_model=list[Transfer])
def get_transfers(data: SimplifyRequest):
    logger.info("simplify requested: %d balances", len(data.net))
    return simplify_debts(data.net)


@router.post("/summary", response_model=SettlementSummary)
def get_summary(data: SnapshotRequest):
    roster = _check_roster(data)
    logger.info("summary requested: %d participants, %d expenses", len(roster), len(data.expenses))
    return summarize(roster, data.expenses)


@router.post("/export")
def export_transfers(data: SnapshotRequest):
    roster = _check_roster(data)
    transfers = simplify_debts(compute_balances(roster, data.expenses).net)

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(["From", "To", "Amount"])
    for t in transfers:
        writer.writerow([t.from_participant, t.to_participant, t.amount])

    output.seek(0)
    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=settlement.csv"},
    )
