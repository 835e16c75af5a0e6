"""Custom split strategy"""

from decimal import Decimal
from typing import Dict, List

from split_engine.schemas.household import HouseholdMember
from split_engine.schemas.policy import SplitPolicy
from split_engine.services.split_strategies.base import (BaseWeightStrategy,
                                                         normalize_weights)


class CustomWeightStrategy(BaseWeightStrategy):
    """Strategy for splitting by explicit per-member weights"""

    def raw_weights(
        self, members: List[HouseholdMember], policy: SplitPolicy
    ) -> Dict[str, Decimal]:
        """Return the policy's weight mapping as given, member or not"""
        return dict(policy.weights or {})

    def calculate_weights(
        self, members: List[HouseholdMember], policy: SplitPolicy
    ) -> Dict[str, Decimal]:
        """
        Normalize the whole weight mapping, then look up each member.

        Members missing from the mapping get weight 0 and owe nothing.
        Entries for ids outside the household still count towards the
        total, so member weights can sum to less than 1. The allocator
        hands the unassigned part to the payer as residual.
        """
        normalized = normalize_weights(self.raw_weights(members, policy))
        return {
            member.member_id: normalized.get(member.member_id, Decimal("0"))
            for member in members
        }
