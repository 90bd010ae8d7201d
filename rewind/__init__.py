"""Rewind - Command and Memento undo strategies for a bank account.

This module provides the public API for both strategies and the shared
reversible-operation capability.
"""

from .commands import AccountCommand, CommandHistory, Reversible, SnapshotDeposit
from .config import RewindSettings
from .domain import (
    OVERDRAFT_LIMIT,
    Action,
    BankAccount,
    Deposit,
    Memento,
    OperationAlreadyApplied,
    RewindError,
    SnapshotAccount,
    Withdraw,
    parse_action,
)

__all__ = [
    # Inverse-operation strategy
    "BankAccount",
    "OVERDRAFT_LIMIT",
    "Action",
    "Deposit",
    "Withdraw",
    "parse_action",
    "AccountCommand",
    # Snapshot strategy
    "Memento",
    "SnapshotAccount",
    "SnapshotDeposit",
    # Shared capability
    "Reversible",
    "CommandHistory",
    # Errors and settings
    "RewindError",
    "OperationAlreadyApplied",
    "RewindSettings",
]
