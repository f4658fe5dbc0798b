"""Pure functions for balance arithmetic.

This module contains the functional core for ledger operations:
- No I/O operations (no database, no console, no locks)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are Decimal with two places (Money type).
Functions raise domain errors instead of returning error strings so the
engine can pass them straight to its caller.
"""

from dataclasses import dataclass
from enum import Enum

from pocketbank.domain.errors import BalanceLimitExceeded, InsufficientFunds, InvalidAmount, InvalidRecipient
from pocketbank.domain.models import MAX_BALANCE, Money, Username


class TransferState(str, Enum):
    """Transfer progress.

    Transitions:
    - VALIDATING -> SENDER_CHECKED: sender exists and can cover the amount
    - SENDER_CHECKED -> RECIPIENT_CHECKED: recipient exists
    - RECIPIENT_CHECKED -> SENDER_DEBITED: sender balance written
    - SENDER_DEBITED -> DONE: recipient balance written
    - any state before SENDER_DEBITED -> REJECTED
    - SENDER_DEBITED -> PARTIAL_FAILURE: recipient write failed
    """

    VALIDATING = "validating"
    SENDER_CHECKED = "sender_checked"
    RECIPIENT_CHECKED = "recipient_checked"
    SENDER_DEBITED = "sender_debited"
    DONE = "done"
    REJECTED = "rejected"
    PARTIAL_FAILURE = "partial_failure"


@dataclass(frozen=True)
class TransferPlan:
    """Immutable pair of post-transfer balances."""

    sender_balance: Money
    recipient_balance: Money


@dataclass(frozen=True)
class TransferReceipt:
    """Immutable result of a completed transfer."""

    sender: Username
    recipient: Username
    amount: Money
    sender_balance: Money
    recipient_balance: Money


def require_positive(amount: Money) -> None:
    """Reject zero and negative amounts.

    Raises:
        InvalidAmount: If amount is not greater than zero.
    """
    if amount <= 0:
        raise InvalidAmount("Amount must be positive")


def credit(balance: Money, amount: Money) -> Money:
    """Calculate the balance after a deposit.

    Args:
        balance: Current balance.
        amount: Amount to add.

    Returns:
        New balance.

    Raises:
        BalanceLimitExceeded: If the new balance would be over MAX_BALANCE.
    """
    require_positive(amount)
    # Compare before adding so an oversized sum is never rounded
    if balance > MAX_BALANCE - amount:
        raise BalanceLimitExceeded(balance, amount, MAX_BALANCE)
    return Money(balance + amount)


def debit(balance: Money, amount: Money) -> Money:
    """Calculate the balance after a withdrawal.

    Args:
        balance: Current balance.
        amount: Amount to take out.

    Returns:
        New balance, never negative.

    Raises:
        InsufficientFunds: If amount is greater than balance.
    """
    require_positive(amount)
    if amount > balance:
        raise InsufficientFunds(balance, amount)
    return Money(balance - amount)


def normalize_recipient(sender: Username, recipient: str) -> Username:
    """Validate a transfer recipient.

    Args:
        sender: Username sending the money.
        recipient: Raw recipient text.

    Returns:
        Recipient username with surrounding whitespace removed.

    Raises:
        InvalidRecipient: If recipient is empty or is the sender.
    """
    name = recipient.strip()
    if not name:
        raise InvalidRecipient("Recipient not specified")
    if name == sender:
        raise InvalidRecipient("Can't transfer money to yourself")
    return Username(name)


def plan_transfer(sender_balance: Money, recipient_balance: Money, amount: Money) -> TransferPlan:
    """Calculate both balances after a transfer.

    The sum of the two balances is the same before and after.

    Raises:
        InsufficientFunds: If amount is greater than sender_balance.
        BalanceLimitExceeded: If the recipient would go over MAX_BALANCE.
    """
    new_sender = debit(sender_balance, amount)
    new_recipient = credit(recipient_balance, amount)
    return TransferPlan(sender_balance=new_sender, recipient_balance=new_recipient)
