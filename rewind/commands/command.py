"""Commands that undo by applying the inverse of their action."""

from pydantic import BaseModel, Field
from ulid import ULID

from ..domain import Action, BankAccount, Deposit, OperationAlreadyApplied, Withdraw
from .reversible import Reversible


class AccountCommand(BaseModel, Reversible):
    """A single deposit or withdrawal against a bank account.

    The command remembers whether its action succeeded. Undo only does
    something for a command that succeeded, and then applies the opposite
    action: a deposit is undone by withdrawing the same amount and a
    withdrawal by depositing it. This reverses the operation, not the
    balance, so a sequence of commands has to be undone newest first to get
    back to where it started.

    The account is required. Building a command without one, or with an
    amount that is not positive, raises ``pydantic.ValidationError``.

    Examples:
        >>> account = BankAccount()
        >>> commands = [
        ...     AccountCommand.deposit(account, 100),
        ...     AccountCommand.withdraw(account, 1000),
        ... ]
        >>> [c.call() for c in commands]
        [True, False]
        >>> for c in reversed(commands):
        ...     c.undo()
        >>> account.balance
        0

    Attributes:
        account: The account to act on. Shared, not owned.
        action: What to do to the account.
        succeeded: Whether ``call`` went through and has not been undone.
        executed: Whether ``call`` has run.
        command_id: Unique identifier for this command instance.
    """

    account: BankAccount
    action: Action
    succeeded: bool = False
    executed: bool = False
    command_id: ULID = Field(default_factory=ULID)

    @classmethod
    def deposit(cls, account: BankAccount, amount: int) -> "AccountCommand":
        return cls(account=account, action=Deposit(amount=amount))

    @classmethod
    def withdraw(cls, account: BankAccount, amount: int) -> "AccountCommand":
        return cls(account=account, action=Withdraw(amount=amount))

    def call(self) -> bool:
        """Perform the action against the account.

        Returns:
            Whether the action succeeded. Deposits always do; withdrawals
            fail when they would break the overdraft floor.

        Raises:
            OperationAlreadyApplied: If the command was already called.
        """
        if self.executed:
            raise OperationAlreadyApplied(f"Command {self.command_id} was already called")
        self.executed = True
        self.succeeded = self.action.perform(self.account)
        return self.succeeded

    def apply(self) -> bool:
        return self.call()

    def undo(self) -> None:
        """Apply the inverse action if, and only if, the command succeeded.

        A command is undone at most once; later calls do nothing.
        """
        if not self.succeeded:
            return
        self.action.revert(self.account)
        self.succeeded = False
