"""Console demos of the two undo strategies."""

import logging

from .commands import AccountCommand
from .config import RewindSettings
from .domain import BankAccount, SnapshotAccount


def command_demo(settings: RewindSettings | None = None) -> BankAccount:
    """Run a deposit and an over-limit withdrawal, then undo both."""
    settings = settings or RewindSettings()
    account = BankAccount(balance=settings.command_opening_balance)
    commands = [
        AccountCommand.deposit(account, 100),
        AccountCommand.withdraw(account, 1000),
    ]

    print(account)

    for command in commands:
        command.call()

    print(account)

    for command in reversed(commands):
        command.undo()

    print(account)
    return account


def memento_demo(settings: RewindSettings | None = None) -> SnapshotAccount:
    """Make two deposits, then walk the snapshot history back and forth."""
    settings = settings or RewindSettings()
    account = SnapshotAccount(balance=settings.memento_opening_balance)
    account.deposit(50)
    account.deposit(25)
    print(account)

    account.undo()
    print(f"Undo 1: {account}")
    account.undo()
    print(f"Undo 2: {account}")
    account.redo()
    print(f"Redo 2: {account}")
    return account


def main() -> None:
    settings = RewindSettings()
    logging.basicConfig(level=settings.level, format="%(message)s")
    command_demo(settings)
    memento_demo(settings)
