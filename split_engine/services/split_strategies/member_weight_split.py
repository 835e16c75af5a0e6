"""Manual member weight strategy"""

from decimal import Decimal
from typing import Dict, List

from split_engine.schemas.household import HouseholdMember
from split_engine.schemas.policy import SplitPolicy
from split_engine.services.split_strategies.base import BaseWeightStrategy


class MemberWeightStrategy(BaseWeightStrategy):
    """Fallback strategy using each member's manual weight override"""

    def raw_weights(
        self, members: List[HouseholdMember], policy: SplitPolicy
    ) -> Dict[str, Decimal]:
        return {
            member.member_id: member.weight or Decimal("1") for member in members
        }
