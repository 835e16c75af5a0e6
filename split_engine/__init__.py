"""Household Split Engine - allocate shared household expenses between members."""

__version__ = "1.0.0"

from split_engine.core.exceptions import (AppException, ValidationError,
                                          ZeroWeightSumError)
from split_engine.models.split_mode import SplitMode
from split_engine.schemas.household import HouseholdMember
from split_engine.schemas.ledger import LedgerEntry, RecomputeResult, Settlement
from split_engine.schemas.policy import SplitPolicy
from split_engine.schemas.transaction import TransactionSnapshot
from split_engine.services.balance_service import BalanceService
from split_engine.services.split_service import (SplitService,
                                                 compute_refund_splits,
                                                 compute_splits,
                                                 compute_transaction_splits)
from split_engine.services.split_strategies import resolve_weights
from split_engine.utils.decimal_utils import round_to_cent

__all__ = [
    "AppException",
    "ValidationError",
    "ZeroWeightSumError",
    "SplitMode",
    "HouseholdMember",
    "LedgerEntry",
    "RecomputeResult",
    "Settlement",
    "SplitPolicy",
    "TransactionSnapshot",
    "BalanceService",
    "SplitService",
    "compute_splits",
    "compute_refund_splits",
    "compute_transaction_splits",
    "resolve_weights",
    "round_to_cent",
]
