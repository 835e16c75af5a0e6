"""Split policy schemas"""
from decimal import Decimal
from typing import Annotated, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from split_engine.models.split_mode import SplitMode
from split_engine.schemas.common import MAX_POLICY_ENTRIES, coerce_decimal


class SplitPolicy(BaseModel):
    """
    Rule deciding what fraction of a transaction each member owes.

    Category overrides replace the whole policy when a transaction's
    category matches. Only the top level is searched; overrides carried by
    an override are ignored.
    """

    mode: SplitMode
    weights: Optional[
        Annotated[Dict[str, Decimal], Field(max_length=MAX_POLICY_ENTRIES)]
    ] = None
    overrides_by_category: Dict[str, "SplitPolicy"] = Field(
        default_factory=dict, max_length=MAX_POLICY_ENTRIES
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("weights", mode="before")
    @classmethod
    def convert_weights(cls, v):
        """Convert weights to Decimal, rejecting blank ids and weights <= 0"""
        if v is None:
            return v
        if not isinstance(v, dict):
            raise ValueError("weights must be a mapping of member id to weight")

        converted = {}
        for member_id, weight in v.items():
            if not isinstance(member_id, str) or not member_id:
                raise ValueError(f"Invalid member id in weights: {member_id!r}")
            weight = coerce_decimal(weight)
            if weight <= 0:
                raise ValueError(
                    f"Weight for {member_id} must be positive, got {weight}"
                )
            converted[member_id] = weight
        return converted

    @field_validator("overrides_by_category")
    @classmethod
    def validate_category_ids(cls, v):
        """Validate override category ids are non-empty"""
        for category_id in v:
            if not category_id:
                raise ValueError("Category override id cannot be empty")
        return v

    @classmethod
    def even(cls) -> "SplitPolicy":
        return cls(mode=SplitMode.EVEN)

    @classmethod
    def income_weighted(cls) -> "SplitPolicy":
        return cls(mode=SplitMode.INCOME_WEIGHTED)

    @classmethod
    def custom(cls, weights: Dict[str, Decimal]) -> "SplitPolicy":
        return cls(mode=SplitMode.CUSTOM, weights=weights)

    def with_override(self, category_id: str, policy: "SplitPolicy") -> "SplitPolicy":
        """Return a validated copy of this policy with an override for category_id"""
        overrides = dict(self.overrides_by_category)
        overrides[category_id] = policy
        return SplitPolicy(
            mode=self.mode, weights=self.weights, overrides_by_category=overrides
        )

    def override_for(self, category_id: Optional[str]) -> Optional["SplitPolicy"]:
        """Look up the override registered for category_id, if any"""
        if not category_id:
            return None
        return self.overrides_by_category.get(category_id)
