"""Weight resolution strategies"""

from decimal import Decimal
from typing import Dict, List

from split_engine.core.exceptions import ValidationError
from split_engine.models.split_mode import SplitMode
from split_engine.schemas.household import HouseholdMember
from split_engine.schemas.policy import SplitPolicy
from split_engine.services.split_strategies.base import (BaseWeightStrategy,
                                                         normalize_weights)
from split_engine.services.split_strategies.custom_split import \
    CustomWeightStrategy
from split_engine.services.split_strategies.even_split import \
    EvenWeightStrategy
from split_engine.services.split_strategies.income_weighted_split import \
    IncomeWeightStrategy
from split_engine.services.split_strategies.member_weight_split import \
    MemberWeightStrategy


def get_weight_strategy(policy: SplitPolicy) -> BaseWeightStrategy:
    """
    Get appropriate weight strategy for a policy.

    A custom policy without usable weights falls back to the members'
    manual weights.

    Args:
        policy: Effective split policy

    Returns:
        Instance of appropriate strategy
    """
    if policy.mode == SplitMode.EVEN:
        return EvenWeightStrategy()
    if policy.mode == SplitMode.INCOME_WEIGHTED:
        return IncomeWeightStrategy()
    if policy.mode == SplitMode.CUSTOM and policy.weights:
        return CustomWeightStrategy()
    return MemberWeightStrategy()


def resolve_weights(
    members: List[HouseholdMember], policy: SplitPolicy
) -> Dict[str, Decimal]:
    """
    Resolve a normalized weight for every household member.

    Args:
        members: Household members in caller order
        policy: Effective split policy

    Returns:
        One weight per member id in member order, summing to 1 unless
        custom weights also name ids outside the household

    Raises:
        ValidationError: If member ids are not unique
        ZeroWeightSumError: If all contributing weights are zero
    """
    seen = set()
    for member in members:
        if member.member_id in seen:
            raise ValidationError(f"Duplicate household member: {member.member_id}")
        seen.add(member.member_id)

    return get_weight_strategy(policy).calculate_weights(members, policy)


__all__ = [
    "BaseWeightStrategy",
    "EvenWeightStrategy",
    "IncomeWeightStrategy",
    "CustomWeightStrategy",
    "MemberWeightStrategy",
    "get_weight_strategy",
    "normalize_weights",
    "resolve_weights",
]
