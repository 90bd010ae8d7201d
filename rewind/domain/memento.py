from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing_extensions import Self
from ulid import ULID


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class Memento(BaseModel):
    """Immutable snapshot of an account balance.

    Attributes:
        balance: The balance at the time the snapshot was taken.
        id: Unique identifier for this snapshot.
        taken_at: When the snapshot was taken (UTC).
    """

    model_config = ConfigDict(frozen=True)

    balance: int
    id: ULID = Field(default_factory=ULID)
    taken_at: datetime = Field(default_factory=utc_now)


class SnapshotAccount(BaseModel):
    """An account that records a ``Memento`` on every change.

    Undo and redo move a cursor over the recorded history instead of
    reversing operations, so they always land exactly on a previously seen
    balance. History is never truncated: ``restore`` appends the restored
    snapshot as the newest entry, which leaves any entries that were ahead of
    the cursor reachable only by undoing back past the restored one.

    Examples:
        >>> account = SnapshotAccount(balance=100)
        >>> _ = account.deposit(50)
        >>> _ = account.deposit(25)
        >>> account.undo().balance
        150
        >>> account.redo().balance
        175
        >>> account.redo() is None
        True

    Attributes:
        balance: The current balance.
        history: Every snapshot recorded so far, oldest first.
        cursor: Index into ``history`` of the snapshot matching ``balance``.
    """

    balance: int = 0
    history: list[Memento] = Field(default_factory=list)
    cursor: int = 0

    @model_validator(mode="after")
    def _seed_history(self) -> Self:
        if not self.history:
            self.history.append(Memento(balance=self.balance))
            self.cursor = 0
        if not 0 <= self.cursor < len(self.history):
            raise ValueError(f"cursor {self.cursor} is outside history of {len(self.history)}")
        if self.history[self.cursor].balance != self.balance:
            raise ValueError("balance does not match the snapshot at the cursor")
        return self

    @property
    def current(self) -> Memento:
        """The snapshot at the cursor."""
        return self.history[self.cursor]

    @property
    def can_undo(self) -> bool:
        return self.cursor > 0

    @property
    def can_redo(self) -> bool:
        return self.cursor + 1 < len(self.history)

    def deposit(self, amount: int) -> Memento:
        """Add ``amount`` and record the resulting balance.

        Returns:
            The new snapshot, which can later be handed to ``restore``.
        """
        self.balance += amount
        memento = Memento(balance=self.balance)
        self.history.append(memento)
        self.cursor = len(self.history) - 1
        return memento

    def restore(self, memento: Memento | None) -> None:
        """Return to ``memento``'s balance, recording it as the newest entry.

        Passing None does nothing.
        """
        if memento is None:
            return
        self.balance = memento.balance
        self.history.append(memento)
        self.cursor = len(self.history) - 1

    def undo(self) -> Memento | None:
        """Step back one snapshot.

        Returns:
            The snapshot now current, or None if already at the oldest one.
        """
        if not self.can_undo:
            return None
        self.cursor -= 1
        memento = self.history[self.cursor]
        self.balance = memento.balance
        return memento

    def redo(self) -> Memento | None:
        """Step forward one snapshot.

        Returns:
            The snapshot now current, or None if already at the newest one.
        """
        if not self.can_redo:
            return None
        self.cursor += 1
        memento = self.history[self.cursor]
        self.balance = memento.balance
        return memento

    def __str__(self) -> str:
        return f"balance: {self.balance}"
