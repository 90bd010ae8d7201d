"""Exceptions for the rewind package."""


class RewindError(Exception):
    """Base class for errors raised by rewind."""

    pass


class OperationAlreadyApplied(RewindError):
    """Raised when a single-use reversible operation is applied twice.

    Reversible operations capture what they need for ``undo`` at the moment
    they are applied. Applying one again would overwrite that capture and
    leave the earlier application impossible to reverse.
    """

    pass
