"""Ledger engine: deposit, withdraw and transfer against an account store.

The engine is the imperative shell around the pure functions in
pocketbank.domain.ledger. It parses amounts, takes per-account locks, reads
balances, and writes the results back. Every failure is raised as a
pocketbank.domain.errors.LedgerError subclass.
"""

import logging

from pocketbank.domain.amounts import parse_amount
from pocketbank.domain.errors import (
    AccountNotFound,
    InsufficientFunds,
    PartialTransferFailure,
    RecipientNotFound,
    RejectedOperation,
    StoreError,
)
from pocketbank.domain.ledger import (
    TransferReceipt,
    TransferState,
    credit,
    debit,
    normalize_recipient,
    plan_transfer,
)
from pocketbank.domain.models import Money, Username
from pocketbank.locks import AccountLocks
from pocketbank.store.base import AccountStore

logger = logging.getLogger(__name__)

DEFAULT_LOCK_TIMEOUT = 5.0


class LedgerEngine:
    """Balance operations over an injected store and lock manager."""

    def __init__(
        self,
        store: AccountStore,
        locks: AccountLocks | None = None,
        lock_timeout: float = DEFAULT_LOCK_TIMEOUT,
    ) -> None:
        self.store = store
        self.locks = locks if locks is not None else AccountLocks()
        self.lock_timeout = lock_timeout

    def _read_balance(self, username: Username) -> Money:
        balance = self.store.get_balance(username)
        if balance is None:
            raise AccountNotFound(username)
        return balance

    def balance(self, username: str) -> Money:
        """Get the current balance of an account.

        Raises:
            AccountNotFound: If the account does not exist.
            Busy: If the account stays locked past the timeout.
        """
        user = Username(username)
        with self.locks.hold(user, timeout=self.lock_timeout):
            return self._read_balance(user)

    def deposit(self, username: str, amount_input: str) -> Money:
        """Add money to an account.

        Args:
            username: Account to credit.
            amount_input: Raw amount text, e.g. "1,234.50".

        Returns:
            New balance.

        Raises:
            InvalidAmount: If the amount is unparseable or not positive.
            AccountNotFound: If the account does not exist.
            BalanceLimitExceeded: If the new balance would be over MAX_BALANCE.
            Busy: If the account stays locked past the timeout.
            StoreError: If the store fails.
        """
        amount = parse_amount(amount_input)
        user = Username(username)

        with self.locks.hold(user, timeout=self.lock_timeout):
            new_balance = credit(self._read_balance(user), amount)
            self.store.set_balance(user, new_balance)

        logger.info("Deposited %s to '%s', balance %s", amount, user, new_balance)
        return new_balance

    def withdraw(self, username: str, amount_input: str) -> Money:
        """Take money out of an account.

        Args:
            username: Account to debit.
            amount_input: Raw amount text.

        Returns:
            New balance.

        Raises:
            InvalidAmount: If the amount is unparseable or not positive.
            AccountNotFound: If the account does not exist.
            InsufficientFunds: If the amount exceeds the balance.
            Busy: If the account stays locked past the timeout.
            StoreError: If the store fails.
        """
        amount = parse_amount(amount_input)
        user = Username(username)

        with self.locks.hold(user, timeout=self.lock_timeout):
            new_balance = debit(self._read_balance(user), amount)
            self.store.set_balance(user, new_balance)

        logger.info("Withdrew %s from '%s', balance %s", amount, user, new_balance)
        return new_balance

    def transfer(self, sender: str, amount_input: str, recipient: str) -> TransferReceipt:
        """Move money from one account to another.

        The sender is written before the recipient. If the recipient write
        fails the sender stays debited and PartialTransferFailure is raised
        with the details needed to reconcile by hand.

        Rejections carry the last state reached in ``rejected_at``.

        Args:
            sender: Account to debit.
            amount_input: Raw amount text.
            recipient: Account to credit.

        Returns:
            Receipt with both new balances.

        Raises:
            InvalidAmount: If the amount is unparseable or not positive.
            InvalidRecipient: If the recipient is empty or is the sender.
            AccountNotFound: If the sender does not exist.
            InsufficientFunds: If the amount exceeds the sender's balance.
            RecipientNotFound: If the recipient does not exist.
            BalanceLimitExceeded: If the recipient would go over MAX_BALANCE.
            Busy: If either account stays locked past the timeout.
            StoreError: If the store fails before the sender is debited.
            PartialTransferFailure: If the recipient credit fails after the debit.
        """
        state = TransferState.VALIDATING
        from_user = Username(sender)

        try:
            amount = parse_amount(amount_input)
            to_user = normalize_recipient(from_user, recipient)

            with self.locks.hold(from_user, to_user, timeout=self.lock_timeout):
                sender_balance = self._read_balance(from_user)
                if amount > sender_balance:
                    raise InsufficientFunds(sender_balance, amount)
                state = TransferState.SENDER_CHECKED

                # Existence and balance are separate store calls; both run under the lock
                if not self.store.exists(to_user):
                    raise RecipientNotFound(to_user)
                recipient_balance = self.store.get_balance(to_user)
                if recipient_balance is None:
                    raise RecipientNotFound(to_user)
                state = TransferState.RECIPIENT_CHECKED
                plan = plan_transfer(sender_balance, recipient_balance, amount)

                self.store.set_balance(from_user, plan.sender_balance)
                state = TransferState.SENDER_DEBITED
                logger.debug("Transfer %s -> %s: %s", from_user, to_user, state.value)

                try:
                    self.store.set_balance(to_user, plan.recipient_balance)
                except StoreError as e:
                    state = TransferState.PARTIAL_FAILURE
                    logger.error("Transfer of %s from '%s' to '%s' left incomplete: %s", amount, from_user, to_user, e)
                    raise PartialTransferFailure(
                        sender=from_user,
                        recipient=to_user,
                        amount=amount,
                        sender_balance=plan.sender_balance,
                        state=state.value,
                    ) from e
                state = TransferState.DONE
        except RejectedOperation as e:
            e.rejected_at = state.value
            logger.info(
                "Transfer from '%s' %s at %s: %s", from_user, TransferState.REJECTED.value, state.value, e
            )
            raise

        logger.info("Transferred %s from '%s' to '%s' (%s)", amount, from_user, to_user, state.value)
        return TransferReceipt(
            sender=from_user,
            recipient=to_user,
            amount=amount,
            sender_balance=plan.sender_balance,
            recipient_balance=plan.recipient_balance,
        )
