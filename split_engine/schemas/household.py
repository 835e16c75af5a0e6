"""Household member schemas"""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from split_engine.schemas.common import coerce_decimal


class HouseholdMember(BaseModel):
    """A member of a household, optionally with income or a manual weight"""

    member_id: str = Field(..., min_length=1)
    income_monthly: Optional[Decimal] = Field(default=None, ge=0)
    weight: Optional[Decimal] = Field(default=None, gt=0)

    model_config = ConfigDict(frozen=True)

    @field_validator("income_monthly", "weight", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        """Convert numeric values to Decimal"""
        if v is None:
            return v
        return coerce_decimal(v)
