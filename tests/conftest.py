"""Pytest fixtures and configuration"""

from decimal import Decimal

import pytest

from split_engine.schemas.household import HouseholdMember
from split_engine.schemas.policy import SplitPolicy
from split_engine.schemas.transaction import TransactionSnapshot


@pytest.fixture
def alice() -> HouseholdMember:
    """Alice earns $4000 a month"""
    return HouseholdMember(member_id="alice", income_monthly=Decimal("4000"))


@pytest.fixture
def bob() -> HouseholdMember:
    """Bob earns $2000 a month"""
    return HouseholdMember(member_id="bob", income_monthly=Decimal("2000"))


@pytest.fixture
def charlie() -> HouseholdMember:
    """Charlie has no income data"""
    return HouseholdMember(member_id="charlie")


@pytest.fixture
def members(alice, bob):
    """Two-member household"""
    return [alice, bob]


@pytest.fixture
def even_policy() -> SplitPolicy:
    return SplitPolicy.even()


@pytest.fixture
def income_policy() -> SplitPolicy:
    return SplitPolicy.income_weighted()


@pytest.fixture
def make_transaction():
    """Factory for transaction snapshots with sensible defaults"""
    counter = {"n": 0}

    def _make(amount, **kwargs) -> TransactionSnapshot:
        counter["n"] += 1
        kwargs.setdefault("id", f"tx{counter['n']}")
        return TransactionSnapshot(amount=Decimal(str(amount)), **kwargs)

    return _make
