"""Tests for pocketbank.domain.ranking pure functions."""

from decimal import Decimal

from pocketbank.domain.models import Money, Username
from pocketbank.domain.ranking import rank_accounts


class TestRankAccounts:
    """Tests for rank_accounts."""

    def test_orders_by_balance_descending(self) -> None:
        """Should put the richest account first."""
        ranking = rank_accounts(
            {
                Username("alice"): Money(Decimal("10.00")),
                Username("bob"): Money(Decimal("300.00")),
                Username("carol"): Money(Decimal("25.50")),
            }
        )

        assert [row.username for row in ranking] == ["bob", "carol", "alice"]
        assert [row.rank for row in ranking] == [1, 2, 3]

    def test_ties_ordered_by_username(self) -> None:
        """Should break ties alphabetically."""
        ranking = rank_accounts(
            {
                Username("zed"): Money(Decimal("5.00")),
                Username("amy"): Money(Decimal("5.00")),
            }
        )

        assert [row.username for row in ranking] == ["amy", "zed"]

    def test_empty(self) -> None:
        """Should return an empty ranking for no accounts."""
        assert rank_accounts({}) == []
