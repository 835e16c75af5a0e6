"""Ledger entry and settlement schemas"""
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from split_engine.schemas.common import coerce_decimal


class LedgerEntry(BaseModel):
    """One pairwise record: payee owes payer amount"""

    payer: str = Field(..., min_length=1)
    payee: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0)
    rationale: str

    model_config = ConfigDict(frozen=True)

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount(cls, v):
        """Convert amount to Decimal"""
        return coerce_decimal(v)

    @model_validator(mode="after")
    def validate_distinct_members(self):
        """Validate a member never owes themselves"""
        if self.payer == self.payee:
            raise ValueError(f"Payer and payee must differ, got {self.payer}")
        return self


class Settlement(BaseModel):
    """A real-world payment from one member to another"""

    from_member: str = Field(..., min_length=1)
    to_member: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0)
    method: Optional[str] = None
    reference: Optional[str] = None
    note: Optional[str] = Field(default=None, max_length=500)

    model_config = ConfigDict(frozen=True)

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount(cls, v):
        """Convert amount to Decimal"""
        return coerce_decimal(v)

    @model_validator(mode="after")
    def validate_distinct_members(self):
        """Validate a member never settles with themselves"""
        if self.from_member == self.to_member:
            raise ValueError("Settlement must be between two different members")
        return self


class RecomputeResult(BaseModel):
    """Ledger entries produced by recomputing a batch of transactions"""

    entries_by_transaction: Dict[str, List[LedgerEntry]]
    recomputed_count: int

    @property
    def entries(self) -> List[LedgerEntry]:
        """All entries flattened in transaction order"""
        return [
            entry
            for entries in self.entries_by_transaction.values()
            for entry in entries
        ]
