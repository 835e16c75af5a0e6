"""Base strategy interface"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, List

from split_engine.core.exceptions import ZeroWeightSumError
from split_engine.schemas.household import HouseholdMember
from split_engine.schemas.policy import SplitPolicy
from split_engine.utils.decimal_utils import sum_decimals


def normalize_weights(weights: Dict[str, Decimal]) -> Dict[str, Decimal]:
    """
    Scale raw weights so they sum to 1.

    Args:
        weights: Raw weight per member id

    Returns:
        Normalized weights in the same key order

    Raises:
        ZeroWeightSumError: If the raw weights sum to zero
    """
    total = sum_decimals(weights.values())
    if total == 0:
        raise ZeroWeightSumError(details={"member_ids": list(weights)})

    return {member_id: weight / total for member_id, weight in weights.items()}


class BaseWeightStrategy(ABC):
    """Base class for weight strategies"""

    @abstractmethod
    def raw_weights(
        self, members: List[HouseholdMember], policy: SplitPolicy
    ) -> Dict[str, Decimal]:
        """
        Produce un-normalized weights for a policy.

        Args:
            members: Household members in caller order
            policy: Effective split policy

        Returns:
            Raw weight per member id
        """
        pass

    def calculate_weights(
        self, members: List[HouseholdMember], policy: SplitPolicy
    ) -> Dict[str, Decimal]:
        """Produce weights summing to 1, keyed by member id"""
        return normalize_weights(self.raw_weights(members, policy))
