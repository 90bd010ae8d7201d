"""Central test fixtures."""

import pytest

from rewind.commands import CommandHistory
from rewind.domain import BankAccount, SnapshotAccount


@pytest.fixture
def account() -> BankAccount:
    """Create an empty bank account."""
    return BankAccount()


@pytest.fixture
def snapshot_account() -> SnapshotAccount:
    """Create a snapshot account opened with 100."""
    return SnapshotAccount(balance=100)


@pytest.fixture
def history() -> CommandHistory:
    """Create an empty command history."""
    return CommandHistory()


@pytest.fixture(autouse=True)
def clear_rewind_environment(monkeypatch):
    """Keep REWIND_ settings from the outer environment out of tests."""
    for name in (
        "REWIND_LOG_LEVEL",
        "REWIND_COMMAND_OPENING_BALANCE",
        "REWIND_MEMENTO_OPENING_BALANCE",
    ):
        monkeypatch.delenv(name, raising=False)
