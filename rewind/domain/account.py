import logging

from pydantic import BaseModel, Field

LOGGER = logging.getLogger(__name__)

OVERDRAFT_LIMIT = -500


class BankAccount(BaseModel):
    """A balance that can be deposited into and withdrawn from.

    The balance may go negative but never below ``OVERDRAFT_LIMIT``. An
    account cannot be opened below the floor, and a withdrawal that would
    cross it is refused. Refusals are reported through the return value of
    ``withdraw`` rather than raised, so callers such as ``AccountCommand``
    can record the outcome and decide what undo means.

    Examples:
        >>> account = BankAccount()
        >>> account.deposit(100)
        100
        >>> account.withdraw(1000)
        False
        >>> print(account)
        balance: 100

    Attributes:
        balance: The current balance.
    """

    balance: int = Field(default=0, ge=OVERDRAFT_LIMIT)

    def deposit(self, amount: int) -> int:
        """Add ``amount`` to the balance.

        Args:
            amount: The amount to deposit.

        Returns:
            The balance after the deposit.

        Raises:
            ValueError: If ``amount`` is not positive.
        """
        _check_amount(amount)
        self.balance += amount
        LOGGER.info(
            "Deposited $%s, balance is now %s",
            amount,
            self.balance,
            extra={"amount": amount, "balance": self.balance},
        )
        return self.balance

    def withdraw(self, amount: int) -> bool:
        """Remove ``amount`` from the balance if the overdraft floor allows it.

        Args:
            amount: The amount to withdraw.

        Returns:
            True if the withdrawal went through, False if it would have taken
            the balance below ``OVERDRAFT_LIMIT``. A refused withdrawal leaves
            the balance untouched.

        Raises:
            ValueError: If ``amount`` is not positive.
        """
        _check_amount(amount)
        if self.balance - amount < OVERDRAFT_LIMIT:
            LOGGER.info(
                "Refused withdrawal of $%s, balance stays %s",
                amount,
                self.balance,
                extra={"amount": amount, "balance": self.balance},
            )
            return False

        self.balance -= amount
        LOGGER.info(
            "Withdrew $%s, balance is now %s",
            amount,
            self.balance,
            extra={"amount": amount, "balance": self.balance},
        )
        return True

    def __str__(self) -> str:
        return f"balance: {self.balance}"


def _check_amount(amount: int) -> None:
    if amount <= 0:
        raise ValueError("Amount must be positive")
