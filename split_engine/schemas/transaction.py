"""Transaction snapshot schemas"""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from split_engine.schemas.common import coerce_decimal


class TransactionSnapshot(BaseModel):
    """
    Immutable view of a bank transaction at split time.

    Negative amounts are expenses, positive amounts are refunds and zero is
    a no-op.
    """

    id: str = Field(..., min_length=1)
    amount: Decimal
    category_id: Optional[str] = None
    is_pending: bool = False
    is_transfer: bool = False
    is_personal: bool = False

    model_config = ConfigDict(frozen=True)

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount(cls, v):
        """Convert amount to Decimal"""
        return coerce_decimal(v)

    @property
    def is_excluded(self) -> bool:
        """Pending, transfer and personal transactions are never shared"""
        return self.is_pending or self.is_transfer or self.is_personal

    @property
    def is_expense(self) -> bool:
        return self.amount < 0

    @property
    def is_refund(self) -> bool:
        return self.amount > 0
