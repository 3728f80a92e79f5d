"""Pydantic schemas for engine inputs/outputs and request bodies."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, field_validator


# ----- Roster / expenses -----
class Participant(BaseModel):
    name: str = Field(min_length=1)


class ExpenseRecord(BaseModel):
    """One shared expense. ``involved`` may be empty or stale; the engine copes."""

    model_config = ConfigDict(frozen=True)

    amount: FiniteFloat = Field(gt=0)
    payer: str
    involved: list[str] = []
    timestamp: Optional[datetime] = None
    description: str = ""

    @field_validator("involved")
    @classmethod
    def _collapse_duplicates(cls, v: list[str]) -> list[str]:
        return list(dict.fromkeys(v))


# ----- Balances -----
class BalanceSheet(BaseModel):
    """Per-participant totals keyed by name, in roster order. Never rounded."""

    total_paid: dict[str, float] = {}
    total_share: dict[str, float] = {}
    net: dict[str, float] = {}


class ParticipantBalance(BaseModel):
    name: str
    paid: int
    share: int
    net: int


# ----- Settlement -----
class Transfer(BaseModel):
    from_participant: str
    to_participant: str
    amount: int


class SettlementSummary(BaseModel):
    participants: list[str] = []
    balances: list[ParticipantBalance] = []
    transfers: list[Transfer] = []
    total_spent: float
    expense_count: int


# ----- Request bodies -----
class SnapshotRequest(BaseModel):
    roster: list[Participant] = []
    expenses: list[ExpenseRecord] = []

    def roster_names(self) -> list[str]:
        return [p.name for p in self.roster]


class SimplifyRequest(BaseModel):
    net: dict[str, FiniteFloat]
