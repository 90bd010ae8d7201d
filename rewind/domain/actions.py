"""Account actions as a closed, tagged variant.

An action is either a ``Deposit`` or a ``Withdraw``, each carrying a positive
amount. Because ``Action`` is a discriminated union, there is no way to build
an action the account does not understand: an unknown ``kind`` is rejected
when the action is parsed, not when it is executed.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, TypeAdapter

from .account import BankAccount


class Deposit(BaseModel):
    """Put ``amount`` into an account. Always succeeds."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["deposit"] = "deposit"
    amount: PositiveInt

    def perform(self, account: BankAccount) -> bool:
        account.deposit(self.amount)
        return True

    def revert(self, account: BankAccount) -> None:
        account.withdraw(self.amount)


class Withdraw(BaseModel):
    """Take ``amount`` out of an account, subject to the overdraft floor."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["withdraw"] = "withdraw"
    amount: PositiveInt

    def perform(self, account: BankAccount) -> bool:
        return account.withdraw(self.amount)

    def revert(self, account: BankAccount) -> None:
        account.deposit(self.amount)


Action = Annotated[Deposit | Withdraw, Field(discriminator="kind")]

_ACTION_ADAPTER: TypeAdapter[Deposit | Withdraw] = TypeAdapter(Action)


def parse_action(data: Any) -> Deposit | Withdraw:
    """Build an action from a mapping such as ``{"kind": "deposit", "amount": 5}``.

    Raises:
        pydantic.ValidationError: If ``kind`` is missing or unknown, or the
            amount is not a positive integer.
    """
    return _ACTION_ADAPTER.validate_python(data)
