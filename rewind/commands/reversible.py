from abc import ABC, abstractmethod
from typing import Any


class Reversible(ABC):
    """An operation that can be applied once and later undone.

    Implementations differ in what undo means. ``AccountCommand`` undoes by
    applying the structural inverse of its action, which is only correct when
    a chain of commands is undone in reverse order. ``SnapshotDeposit`` undoes
    by restoring the snapshot taken before it was applied.
    """

    @abstractmethod
    def apply(self) -> Any:
        pass

    @abstractmethod
    def undo(self) -> None:
        pass
