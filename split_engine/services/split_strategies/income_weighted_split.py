"""Income-weighted split strategy"""

from decimal import Decimal
from typing import Dict, List

from split_engine.schemas.household import HouseholdMember
from split_engine.schemas.policy import SplitPolicy
from split_engine.services.split_strategies.base import BaseWeightStrategy


class IncomeWeightStrategy(BaseWeightStrategy):
    """Strategy for splitting in proportion to monthly income"""

    def raw_weights(
        self, members: List[HouseholdMember], policy: SplitPolicy
    ) -> Dict[str, Decimal]:
        """
        Use each member's monthly income as their weight.

        Members without income data count as zero, so a household with no
        income data at all fails normalization.
        """
        return {
            member.member_id: member.income_monthly or Decimal("0")
            for member in members
        }
