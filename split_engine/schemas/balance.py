"""Balance schemas"""
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel


class MemberBalance(BaseModel):
    """Balance between one member and a counterparty"""
    member_id: str
    amount: Decimal
    type: Literal["you_owe", "owes_you"]


class BalanceSummary(BaseModel):
    """Summary of a member's overall balance situation"""
    member_id: str
    net_balance: Decimal
    you_owe: Decimal
    owed_to_you: Decimal
    num_people_you_owe: int
    num_people_owe_you: int


class SpendingSummary(BaseModel):
    """Totals over a set of settled transactions"""
    total_spent: Decimal
    personal_spent: Decimal
    shared_spent: Decimal
