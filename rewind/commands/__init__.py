"""Reversible operations and the history that undoes them.

- Reversible: the apply/undo capability shared by both strategies
- AccountCommand: undo by applying the inverse action
- SnapshotDeposit: undo by restoring a snapshot
- CommandHistory: executes operations and undoes them newest first
"""

from .command import AccountCommand
from .history import CommandHistory
from .reversible import Reversible
from .snapshot import SnapshotDeposit

__all__ = [
    "Reversible",
    "AccountCommand",
    "SnapshotDeposit",
    "CommandHistory",
]
