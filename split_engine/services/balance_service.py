"""Balance calculation logic"""

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, List

from split_engine.schemas.balance import (BalanceSummary, MemberBalance,
                                          SpendingSummary)
from split_engine.schemas.ledger import LedgerEntry, Settlement
from split_engine.schemas.transaction import TransactionSnapshot
from split_engine.utils.decimal_utils import round_to_cent

logger = logging.getLogger(__name__)

# balances[payer][payee] is what payee owes payer
Balances = Dict[str, Dict[str, Decimal]]


class BalanceService:
    """Service for balance calculation operations"""

    @staticmethod
    def build_balances(
        entries: Iterable[LedgerEntry], settlements: Iterable[Settlement] = ()
    ) -> Balances:
        """
        Aggregate ledger entries into gross pairwise balances.

        A settlement from A to B reduces what A owes B.

        Args:
            entries: Ledger entries from any number of transactions
            settlements: Payments already made between members

        Returns:
            Nested mapping payer -> payee -> amount owed
        """
        balances: Balances = defaultdict(lambda: defaultdict(Decimal))

        for entry in entries:
            balances[entry.payer][entry.payee] += entry.amount

        for settlement in settlements:
            balances[settlement.to_member][settlement.from_member] -= settlement.amount

        return {payer: dict(payees) for payer, payees in balances.items()}

    @staticmethod
    def pairwise_balance(balances: Balances, member1_id: str, member2_id: str) -> Decimal:
        """
        Net balance between two members.

        Positive means member2 owes member1, negative means member1 owes
        member2. pairwise_balance(b, x, y) == -pairwise_balance(b, y, x).
        """
        owed_to_1 = balances.get(member1_id, {}).get(member2_id, Decimal("0"))
        owed_to_2 = balances.get(member2_id, {}).get(member1_id, Decimal("0"))
        return round_to_cent(owed_to_1 - owed_to_2)

    @staticmethod
    def get_member_balances(balances: Balances, member_id: str) -> List[MemberBalance]:
        """
        List non-zero net balances between a member and everyone else.

        Args:
            balances: Output of build_balances
            member_id: Member to report for

        Returns:
            MemberBalance per counterparty, largest amount first
        """
        counterparties = set(balances.get(member_id, {}))
        for payer, payees in balances.items():
            if member_id in payees:
                counterparties.add(payer)
        counterparties.discard(member_id)

        member_balances: List[MemberBalance] = []
        for other_id in sorted(counterparties):
            amount = BalanceService.pairwise_balance(balances, member_id, other_id)
            if amount == 0:
                continue

            member_balances.append(
                MemberBalance(
                    member_id=other_id,
                    amount=abs(amount),
                    type="owes_you" if amount > 0 else "you_owe",
                )
            )

        # Sort by amount descending
        member_balances.sort(key=lambda b: b.amount, reverse=True)

        return member_balances

    @staticmethod
    def get_member_summary(balances: Balances, member_id: str) -> BalanceSummary:
        """
        Get balance summary for a member.

        Args:
            balances: Output of build_balances
            member_id: Member to summarize

        Returns:
            BalanceSummary object
        """
        owed_to_you = Decimal("0")
        you_owe = Decimal("0")
        num_people_owe_you = 0
        num_people_you_owe = 0

        for balance in BalanceService.get_member_balances(balances, member_id):
            if balance.type == "owes_you":
                owed_to_you += balance.amount
                num_people_owe_you += 1
            else:  # you_owe
                you_owe += balance.amount
                num_people_you_owe += 1

        return BalanceSummary(
            member_id=member_id,
            net_balance=round_to_cent(owed_to_you - you_owe),
            you_owe=round_to_cent(you_owe),
            owed_to_you=round_to_cent(owed_to_you),
            num_people_you_owe=num_people_you_owe,
            num_people_owe_you=num_people_owe_you,
        )

    @staticmethod
    def summarize_spending(transactions: Iterable[TransactionSnapshot]) -> SpendingSummary:
        """
        Total outflows of settled transactions, split into shared and personal.

        Pending transactions and inflows are ignored. Transfers count like any
        other outflow.
        """
        shared = Decimal("0")
        personal = Decimal("0")

        for transaction in transactions:
            if transaction.is_pending or transaction.amount >= 0:
                continue
            if transaction.is_personal:
                personal += abs(transaction.amount)
            else:
                shared += abs(transaction.amount)

        logger.debug(f"Spending summary: shared={shared} personal={personal}")

        return SpendingSummary(
            total_spent=round_to_cent(shared),
            personal_spent=round_to_cent(personal),
            shared_spent=round_to_cent(shared),
        )
