"""Reversible deposits that undo by restoring a snapshot."""

from pydantic import BaseModel, Field, PositiveInt
from ulid import ULID

from ..domain import Memento, OperationAlreadyApplied, SnapshotAccount
from .reversible import Reversible


class SnapshotDeposit(BaseModel, Reversible):
    """A deposit into a ``SnapshotAccount`` that undoes by restoring state.

    Applying captures the account's current snapshot before depositing.
    Undoing restores that snapshot, which appends it to the account history
    rather than walking the cursor back. Unlike ``AccountCommand`` the result
    does not depend on undo order: the balance returns to exactly what it was
    before this deposit.

    Attributes:
        account: The snapshot account to deposit into.
        amount: The amount to deposit.
        before: The snapshot current just before ``apply``, or None if the
            deposit has not been applied.
        command_id: Unique identifier for this operation.
    """

    account: SnapshotAccount
    amount: PositiveInt
    before: Memento | None = None
    command_id: ULID = Field(default_factory=ULID)

    @property
    def applied(self) -> bool:
        return self.before is not None

    def apply(self) -> Memento:
        """Deposit into the account.

        Returns:
            The snapshot recorded by the deposit.

        Raises:
            OperationAlreadyApplied: If this deposit was already applied.
        """
        if self.applied:
            raise OperationAlreadyApplied(f"Deposit {self.command_id} was already applied")
        self.before = self.account.current
        return self.account.deposit(self.amount)

    def undo(self) -> None:
        """Restore the snapshot captured by ``apply``. No-op if never applied."""
        self.account.restore(self.before)
