"""Domain objects for the two undo strategies.

- BankAccount: balance with deposit/withdraw and an overdraft floor
- Deposit, Withdraw, Action: the closed set of account actions
- Memento: immutable balance snapshot
- SnapshotAccount: account that navigates its own snapshot history
"""

from .account import OVERDRAFT_LIMIT, BankAccount
from .actions import Action, Deposit, Withdraw, parse_action
from .exceptions import OperationAlreadyApplied, RewindError
from .memento import Memento, SnapshotAccount, utc_now

__all__ = [
    "OVERDRAFT_LIMIT",
    "BankAccount",
    "Action",
    "Deposit",
    "Withdraw",
    "parse_action",
    "Memento",
    "SnapshotAccount",
    "utc_now",
    "RewindError",
    "OperationAlreadyApplied",
]
