"""Domain type definitions for pocketbank.

These NewTypes provide semantic clarity and help with type checking:
- Money: Decimal amount quantized to two places (pounds and pence)
- Username: Unique, immutable account identifier
"""

from decimal import Decimal
from typing import NewType

# Money is held as Decimal to avoid floating point drift
Money = NewType("Money", Decimal)

# Usernames are case-sensitive and never empty
Username = NewType("Username", str)

CENT = Decimal("0.01")
ZERO = Money(Decimal("0.00"))

# Largest balance an account may hold; sums of two stay well inside Decimal precision
MAX_BALANCE = Money(Decimal("999999999999.99"))
