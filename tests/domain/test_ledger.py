"""Tests for pocketbank.domain.ledger pure functions."""

from decimal import Decimal

import pytest

from pocketbank.domain.errors import BalanceLimitExceeded, InsufficientFunds, InvalidAmount, InvalidRecipient
from pocketbank.domain.ledger import credit, debit, normalize_recipient, plan_transfer
from pocketbank.domain.models import MAX_BALANCE, Money, Username


def money(value: str) -> Money:
    return Money(Decimal(value))


class TestCredit:
    """Tests for credit."""

    def test_adds_amount(self) -> None:
        """Should add the amount to the balance."""
        assert credit(money("1000.00"), money("500.00")) == money("1500.00")

    def test_no_float_drift(self) -> None:
        """Should add tenths exactly."""
        balance = money("0.00")
        for _ in range(10):
            balance = credit(balance, money("0.10"))

        assert balance == money("1.00")

    def test_rejects_zero(self) -> None:
        """Should reject a zero amount."""
        with pytest.raises(InvalidAmount):
            credit(money("10.00"), money("0.00"))

    def test_allows_reaching_ceiling(self) -> None:
        """Should allow a credit that lands exactly on the ceiling."""
        assert credit(money("999999999999.00"), money("0.99")) == MAX_BALANCE

    def test_rejects_passing_ceiling(self) -> None:
        """Should raise BalanceLimitExceeded one cent past the ceiling."""
        with pytest.raises(BalanceLimitExceeded) as exc_info:
            credit(MAX_BALANCE, money("0.01"))

        assert exc_info.value.limit == MAX_BALANCE

    def test_rejects_balance_beyond_decimal_precision(self) -> None:
        """Should reject instead of rounding a sum wider than 28 digits."""
        with pytest.raises(BalanceLimitExceeded):
            credit(money("99999999999999999999999999.99"), money("1.00"))


class TestDebit:
    """Tests for debit."""

    def test_subtracts_amount(self) -> None:
        """Should subtract the amount from the balance."""
        assert debit(money("1000.00"), money("500.00")) == money("500.00")

    def test_allows_exact_balance(self) -> None:
        """Should allow withdrawing the whole balance."""
        assert debit(money("100.00"), money("100.00")) == money("0.00")

    def test_rejects_overdraw(self) -> None:
        """Should raise InsufficientFunds when amount exceeds balance."""
        with pytest.raises(InsufficientFunds) as exc_info:
            debit(money("100.00"), money("500.00"))

        assert exc_info.value.balance == money("100.00")
        assert exc_info.value.amount == money("500.00")

    def test_rejects_negative(self) -> None:
        """Should reject a negative amount."""
        with pytest.raises(InvalidAmount):
            debit(money("100.00"), money("-1.00"))


class TestNormalizeRecipient:
    """Tests for normalize_recipient."""

    def test_strips_whitespace(self) -> None:
        """Should trim the recipient name."""
        assert normalize_recipient(Username("alice"), "  bob ") == "bob"

    def test_rejects_empty(self) -> None:
        """Should reject an empty recipient."""
        with pytest.raises(InvalidRecipient):
            normalize_recipient(Username("alice"), "   ")

    def test_rejects_self(self) -> None:
        """Should reject sending to yourself."""
        with pytest.raises(InvalidRecipient):
            normalize_recipient(Username("alice"), "alice")

    def test_case_sensitive(self) -> None:
        """Should treat usernames differing in case as different accounts."""
        assert normalize_recipient(Username("alice"), "Alice") == "Alice"


class TestPlanTransfer:
    """Tests for plan_transfer."""

    def test_moves_amount(self) -> None:
        """Should debit sender and credit recipient."""
        plan = plan_transfer(money("1000.00"), money("200.00"), money("300.00"))

        assert plan.sender_balance == money("700.00")
        assert plan.recipient_balance == money("500.00")

    @pytest.mark.parametrize(
        "sender,recipient,amount",
        [
            ("1000.00", "200.00", "300.00"),
            ("0.03", "0.00", "0.01"),
            ("99999.99", "12345.67", "99999.99"),
        ],
    )
    def test_conserves_total(self, sender: str, recipient: str, amount: str) -> None:
        """Should keep the sum of both balances unchanged."""
        plan = plan_transfer(money(sender), money(recipient), money(amount))

        assert plan.sender_balance + plan.recipient_balance == money(sender) + money(recipient)

    def test_rejects_overdraw(self) -> None:
        """Should raise InsufficientFunds when sender can't cover amount."""
        with pytest.raises(InsufficientFunds):
            plan_transfer(money("100.00"), money("0.00"), money("100.01"))

    def test_rejects_recipient_over_ceiling(self) -> None:
        """Should raise BalanceLimitExceeded when the recipient is already full."""
        with pytest.raises(BalanceLimitExceeded):
            plan_transfer(money("10.00"), MAX_BALANCE, money("1.00"))
