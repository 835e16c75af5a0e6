"""Split allocation logic"""

import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from split_engine.config import Settings, get_settings
from split_engine.models.split_mode import SplitMode
from split_engine.schemas.household import HouseholdMember
from split_engine.schemas.ledger import LedgerEntry, RecomputeResult
from split_engine.schemas.policy import SplitPolicy
from split_engine.schemas.transaction import TransactionSnapshot
from split_engine.services.split_strategies import resolve_weights
from split_engine.utils.decimal_utils import (CENT, RESIDUAL_TOLERANCE,
                                              round_to_cent, sum_decimals)

logger = logging.getLogger(__name__)

RATIONALES = {
    SplitMode.EVEN: "Even split",
    SplitMode.INCOME_WEIGHTED: "Income-weighted split",
    SplitMode.CUSTOM: "Custom split",
}
REFUND_PREFIX = "Refund: "


def effective_policy(
    transaction: TransactionSnapshot, policy: SplitPolicy
) -> SplitPolicy:
    """Return the category override for the transaction, or the policy itself"""
    return policy.override_for(transaction.category_id) or policy


def rationale_for(policy: SplitPolicy) -> str:
    """Human-readable name of the policy that produced an entry"""
    return RATIONALES.get(policy.mode, "Split")


def _allocate_shares(
    total: Decimal,
    payer_id: str,
    members: List[HouseholdMember],
    policy: SplitPolicy,
) -> Dict[str, Decimal]:
    """
    Split total across members by weight, rounding each share to the cent.

    Whatever is left unassigned is added to the payer's share, so the
    shares always add back up to total. That covers rounding slack and the
    part custom weights give to ids outside the household.
    """
    weights = resolve_weights(members, policy)

    shares: Dict[str, Decimal] = {}
    for member in members:
        shares[member.member_id] = round_to_cent(total * weights[member.member_id])

    residual = total - sum_decimals(shares.values())
    if abs(residual) > RESIDUAL_TOLERANCE:
        shares[payer_id] = shares.get(payer_id, Decimal("0")) + residual

    return shares


def _skip_reason(transaction: TransactionSnapshot) -> Optional[str]:
    if transaction.is_pending:
        return "pending"
    if transaction.is_transfer:
        return "transfer"
    if transaction.is_personal:
        return "personal"
    return None


def compute_splits(
    transaction: TransactionSnapshot,
    payer_id: str,
    members: List[HouseholdMember],
    policy: SplitPolicy,
) -> List[LedgerEntry]:
    """
    Compute who owes the payer what for an expense.

    Pending, transfer and personal transactions, and anything that is not
    strictly negative, produce no entries.

    Args:
        transaction: Transaction to split
        payer_id: Member who paid
        members: Household members in the order entries should be emitted
        policy: Household split policy, possibly with category overrides

    Returns:
        One entry per non-payer member with a positive share

    Raises:
        ZeroWeightSumError: If the effective policy has nothing to weight by
    """
    reason = _skip_reason(transaction)
    if reason:
        logger.debug(f"Skipping {reason} transaction {transaction.id}")
        return []

    if transaction.amount >= 0:
        return []

    policy = effective_policy(transaction, policy)
    shares = _allocate_shares(abs(transaction.amount), payer_id, members, policy)
    rationale = rationale_for(policy)

    splits = []
    for member in members:
        if member.member_id == payer_id:
            continue

        amount_owed = shares[member.member_id]
        if amount_owed > 0:
            splits.append(
                LedgerEntry(
                    payer=payer_id,
                    payee=member.member_id,
                    amount=amount_owed.quantize(CENT),
                    rationale=rationale,
                )
            )

    return splits


def compute_refund_splits(
    transaction: TransactionSnapshot,
    payer_id: str,
    members: List[HouseholdMember],
    policy: SplitPolicy,
) -> List[LedgerEntry]:
    """
    Compute how a refund flows back through the household.

    Shares are computed exactly like an expense, but each non-payer member
    becomes the payer of their entry and the original payer the payee.

    Raises:
        ZeroWeightSumError: If the effective policy has nothing to weight by
    """
    if transaction.amount <= 0:
        return []

    reason = _skip_reason(transaction)
    if reason:
        logger.debug(f"Skipping {reason} refund {transaction.id}")
        return []

    policy = effective_policy(transaction, policy)
    shares = _allocate_shares(transaction.amount, payer_id, members, policy)
    rationale = REFUND_PREFIX + rationale_for(policy)

    splits = []
    for member in members:
        if member.member_id == payer_id:
            continue

        refund_amount = shares[member.member_id]
        if refund_amount > 0:
            splits.append(
                LedgerEntry(
                    payer=member.member_id,
                    payee=payer_id,
                    amount=refund_amount.quantize(CENT),
                    rationale=rationale,
                )
            )

    return splits


def compute_transaction_splits(
    transaction: TransactionSnapshot,
    payer_id: str,
    members: List[HouseholdMember],
    policy: SplitPolicy,
) -> List[LedgerEntry]:
    """Split a transaction as an expense or a refund depending on its sign"""
    if transaction.amount < 0:
        return compute_splits(transaction, payer_id, members, policy)
    if transaction.amount > 0:
        return compute_refund_splits(transaction, payer_id, members, policy)
    return []


class SplitService:
    """Service for household-level split operations"""

    @staticmethod
    def default_policy(settings: Optional[Settings] = None) -> SplitPolicy:
        """
        Build the policy used when a household has not configured one.

        Args:
            settings: Settings to read default_split_mode from

        Returns:
            SplitPolicy with no weights or overrides
        """
        settings = settings or get_settings()
        return SplitPolicy(mode=settings.default_split_mode)

    @staticmethod
    def recompute_splits(
        transactions: Iterable[Tuple[TransactionSnapshot, str]],
        members: List[HouseholdMember],
        policy: SplitPolicy,
    ) -> RecomputeResult:
        """
        Recompute ledger entries for a batch of transactions.

        Every transaction gets an entry list, empty when it is excluded, so
        the caller can replace stored entries wholesale.

        Args:
            transactions: (transaction, payer_id) pairs
            members: Household members
            policy: Household split policy

        Returns:
            RecomputeResult keyed by transaction id in input order

        Raises:
            ZeroWeightSumError: If any transaction cannot be weighted
        """
        entries_by_transaction: Dict[str, List[LedgerEntry]] = {}
        recomputed_count = 0

        for transaction, payer_id in transactions:
            if transaction.is_excluded:
                entries_by_transaction[transaction.id] = []
                continue

            entries_by_transaction[transaction.id] = compute_transaction_splits(
                transaction, payer_id, members, policy
            )
            recomputed_count += 1

        logger.info(
            f"Recomputed {recomputed_count} of {len(entries_by_transaction)} "
            f"transactions"
        )

        return RecomputeResult(
            entries_by_transaction=entries_by_transaction,
            recomputed_count=recomputed_count,
        )
