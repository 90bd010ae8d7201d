import logging
from collections.abc import Iterator

from .reversible import Reversible

LOGGER = logging.getLogger(__name__)


class CommandHistory:
    """Applies reversible operations and undoes them newest first.

    The history only records operations it executed itself. Undone operations
    are forgotten; there is no redo stack.

    Examples:
        >>> from rewind.commands import AccountCommand
        >>> from rewind.domain import BankAccount
        >>> account = BankAccount()
        >>> history = CommandHistory()
        >>> history.execute(AccountCommand.deposit(account, 100))
        True
        >>> history.execute(AccountCommand.withdraw(account, 1000))
        False
        >>> history.undo_all()
        2
        >>> account.balance
        0
    """

    def __init__(self) -> None:
        self._operations: list[Reversible] = []

    def __len__(self) -> int:
        return len(self._operations)

    def __iter__(self) -> Iterator[Reversible]:
        return iter(list(self._operations))

    def execute(self, operation: Reversible) -> object:
        """Apply ``operation`` and record it for undo.

        Returns:
            Whatever the operation's ``apply`` returned.
        """
        result = operation.apply()
        self._operations.append(operation)
        LOGGER.debug("Executed operation", extra=_describe(operation))
        return result

    def undo_last(self) -> Reversible | None:
        """Undo the most recently executed operation.

        Returns:
            The undone operation, or None if there was nothing to undo.
        """
        if not self._operations:
            return None
        operation = self._operations.pop()
        operation.undo()
        LOGGER.debug("Undid operation", extra=_describe(operation))
        return operation

    def undo_all(self) -> int:
        """Undo every recorded operation in reverse order of execution.

        Returns:
            How many operations were undone.
        """
        count = 0
        while self.undo_last() is not None:
            count += 1
        return count


def _describe(operation: Reversible) -> dict[str, str]:
    extra = {"operation_type": type(operation).__name__}
    command_id = getattr(operation, "command_id", None)
    if command_id is not None:
        extra["command_id"] = str(command_id)
    return extra
