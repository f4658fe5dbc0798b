"""Ledger error taxonomy.

Every failing ledger operation raises exactly one of these. Callers can branch
on the class, on ``kind``, or on ``retryable``:

- RejectedOperation subclasses are business-rule failures. Nothing was written.
- Busy and StoreError are infrastructure failures. Nothing was written and the
  caller may try again.
- PartialTransferFailure means the sender was debited but the recipient was not
  credited. It needs manual reconciliation and must never be retried.
"""

from decimal import Decimal
from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable error kinds."""

    INVALID_AMOUNT = "invalid_amount"
    ACCOUNT_NOT_FOUND = "account_not_found"
    RECIPIENT_NOT_FOUND = "recipient_not_found"
    INVALID_RECIPIENT = "invalid_recipient"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    ACCOUNT_EXISTS = "account_exists"
    INVALID_USERNAME = "invalid_username"
    INVALID_PASSWORD = "invalid_password"
    BALANCE_LIMIT_EXCEEDED = "balance_limit_exceeded"
    BUSY = "busy"
    STORE_ERROR = "store_error"
    PARTIAL_TRANSFER_FAILURE = "partial_transfer_failure"


class LedgerError(Exception):
    """Base class for all ledger errors."""

    kind: ErrorKind
    retryable = False


class RejectedOperation(LedgerError):
    """Business-rule rejection. Persisted state is unchanged."""

    # Set by transfers to the last state reached before the rejection
    rejected_at: str | None = None


class InvalidAmount(RejectedOperation):
    """Amount is unparseable, not finite, zero or negative."""

    kind = ErrorKind.INVALID_AMOUNT


class AccountNotFound(RejectedOperation):
    """The acting account does not exist."""

    kind = ErrorKind.ACCOUNT_NOT_FOUND

    def __init__(self, username: str) -> None:
        super().__init__(f"Account '{username}' does not exist")
        self.username = username


class RecipientNotFound(RejectedOperation):
    """The transfer recipient does not exist."""

    kind = ErrorKind.RECIPIENT_NOT_FOUND

    def __init__(self, username: str) -> None:
        super().__init__(f"Recipient '{username}' does not exist")
        self.username = username


class InvalidRecipient(RejectedOperation):
    """Recipient is empty or the same as the sender."""

    kind = ErrorKind.INVALID_RECIPIENT


class InsufficientFunds(RejectedOperation):
    """Amount exceeds the available balance."""

    kind = ErrorKind.INSUFFICIENT_FUNDS

    def __init__(self, balance: Decimal, amount: Decimal) -> None:
        super().__init__(f"Insufficient funds: balance {balance:,.2f}, requested {amount:,.2f}")
        self.balance = balance
        self.amount = amount


class BalanceLimitExceeded(RejectedOperation):
    """Credit would take a balance past the ceiling."""

    kind = ErrorKind.BALANCE_LIMIT_EXCEEDED

    def __init__(self, balance: Decimal, amount: Decimal, limit: Decimal) -> None:
        super().__init__(f"Balance limit exceeded: balance {balance:,.2f} plus {amount:,.2f} is over {limit:,.2f}")
        self.balance = balance
        self.amount = amount
        self.limit = limit


class AccountExists(RejectedOperation):
    """Registration for a username that is already taken."""

    kind = ErrorKind.ACCOUNT_EXISTS

    def __init__(self, username: str) -> None:
        super().__init__(f"Account '{username}' already exists")
        self.username = username


class InvalidUsername(RejectedOperation):
    kind = ErrorKind.INVALID_USERNAME


class InvalidPassword(RejectedOperation):
    kind = ErrorKind.INVALID_PASSWORD


class Busy(LedgerError):
    """Could not lock the accounts involved before the timeout."""

    kind = ErrorKind.BUSY
    retryable = True


class StoreError(LedgerError):
    """The account store failed to read or write."""

    kind = ErrorKind.STORE_ERROR
    retryable = True


class PartialTransferFailure(LedgerError):
    """Sender debited, recipient credit did not apply."""

    kind = ErrorKind.PARTIAL_TRANSFER_FAILURE

    def __init__(
        self,
        sender: str,
        recipient: str,
        amount: Decimal,
        sender_balance: Decimal,
        state: str,
    ) -> None:
        super().__init__(
            f"Transfer of {amount:,.2f} from '{sender}' to '{recipient}' is incomplete: "
            f"sender debited (balance now {sender_balance:,.2f}), recipient credit pending"
        )
        self.sender = sender
        self.recipient = recipient
        self.amount = amount
        self.sender_balance = sender_balance
        self.state = state
