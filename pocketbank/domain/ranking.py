"""Pure functions for the accounts ranking."""

from dataclasses import dataclass

from pocketbank.domain.models import Money, Username


@dataclass(frozen=True)
class RankedAccount:
    """Immutable ranking row."""

    rank: int
    username: Username
    balance: Money


def rank_accounts(balances: dict[Username, Money]) -> list[RankedAccount]:
    """Rank accounts by balance, highest first.

    Args:
        balances: Dictionary of usernames to balances.

    Returns:
        Ranking rows numbered from 1. Equal balances are ordered by username.
    """
    ordered = sorted(balances.items(), key=lambda item: (-item[1], item[0]))
    return [
        RankedAccount(rank=position, username=username, balance=balance)
        for position, (username, balance) in enumerate(ordered, start=1)
    ]
