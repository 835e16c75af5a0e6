"""End-to-end household workflows and scenarios"""

from decimal import Decimal

from split_engine import (
    BalanceService,
    HouseholdMember,
    Settlement,
    SplitPolicy,
    SplitService,
    TransactionSnapshot,
    compute_transaction_splits,
)


class TestMonthOfSharedExpenses:
    """Test a month of transactions from sync to settle-up"""

    def test_split_balance_and_settle(self):
        """
        Complete workflow: split a month of transactions, check balances, settle

        Scenario:
        - Alice earns 4000, Bob earns 2000; household splits by income
        - Dining is overridden to 70/30
        - Alice buys groceries for 150, Bob pays 60 for dinner
        - A 30 grocery refund lands on Alice's card
        - A pending charge, a transfer and a personal purchase are not split
        - Alice settles the difference and both balances return to zero
        """
        members = [
            HouseholdMember(member_id="alice", income_monthly=Decimal("4000")),
            HouseholdMember(member_id="bob", income_monthly=Decimal("2000")),
        ]
        policy = SplitPolicy.income_weighted().with_override(
            "dining", SplitPolicy.custom({"alice": 0.7, "bob": 0.3})
        )
        batch = [
            (TransactionSnapshot(id="groceries", amount=-150, category_id="groceries"), "alice"),
            (TransactionSnapshot(id="dinner", amount=-60, category_id="dining"), "bob"),
            (TransactionSnapshot(id="refund", amount=30, category_id="groceries"), "alice"),
            (TransactionSnapshot(id="pending", amount=-80, is_pending=True), "alice"),
            (TransactionSnapshot(id="transfer", amount=-500, is_transfer=True), "bob"),
            (TransactionSnapshot(id="gadget", amount=-99, is_personal=True), "bob"),
        ]

        # Step 1: Recompute splits for the whole month
        result = SplitService.recompute_splits(batch, members, policy)

        assert result.recomputed_count == 3
        assert [(e.payer, e.payee, e.amount, e.rationale) for e in result.entries] == [
            ("alice", "bob", Decimal("50"), "Income-weighted split"),
            ("bob", "alice", Decimal("42"), "Custom split"),
            ("bob", "alice", Decimal("10"), "Refund: Income-weighted split"),
        ]

        # Step 2: Alice ends up owing Bob the difference
        balances = BalanceService.build_balances(result.entries)
        bob_summary = BalanceService.get_member_summary(balances, "bob")

        # Bob owes 50 for groceries, alice owes 42 for dinner and 10 of refund
        assert bob_summary.owed_to_you == Decimal("2")
        assert bob_summary.net_balance == Decimal("2")

        # Step 3: Alice settles the remaining 2
        settlement = Settlement(from_member="alice", to_member="bob", amount=Decimal("2"))
        balances = BalanceService.build_balances(result.entries, [settlement])

        assert BalanceService.get_member_balances(balances, "alice") == []
        assert BalanceService.get_member_balances(balances, "bob") == []

        # Step 4: Spending summary ignores the pending charge but counts the transfer
        spending = BalanceService.summarize_spending(t for t, _ in batch)
        assert spending.personal_spent == Decimal("99")
        assert spending.shared_spent == Decimal("710")


class TestPolicyChangeRecompute:
    """Test recomputation after the household changes policy"""

    def test_recompute_replaces_entries(self):
        """
        Scenario:
        - Three members split evenly, then switch to income-weighted
        - Recomputing the same transaction yields the new allocation
        """
        members = [
            HouseholdMember(member_id="alice", income_monthly=Decimal("3000")),
            HouseholdMember(member_id="bob", income_monthly=Decimal("2000")),
            HouseholdMember(member_id="charlie", income_monthly=Decimal("1000")),
        ]
        transaction = TransactionSnapshot(id="rent", amount=-1200)

        even = compute_transaction_splits(transaction, "alice", members, SplitPolicy.even())
        weighted = compute_transaction_splits(
            transaction, "alice", members, SplitPolicy.income_weighted()
        )

        assert [(e.payee, e.amount) for e in even] == [
            ("bob", Decimal("400")),
            ("charlie", Decimal("400")),
        ]
        assert [(e.payee, e.amount) for e in weighted] == [
            ("bob", Decimal("400")),
            ("charlie", Decimal("200")),
        ]
