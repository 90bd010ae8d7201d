import pytest

from rewind.domain import Deposit, Withdraw
from rewind.testing import AccountScenario


def test_scenario_deposit_then_refused_withdraw():
    with AccountScenario() as scenario:
        scenario.given(0).when(
            Deposit(amount=100),
            Withdraw(amount=1000),
        ).should_have_balance(100).should_accept(Deposit(amount=100)).should_refuse(
            Withdraw(amount=1000)
        ).should_undo_to_opening_balance()


def test_scenario_with_action_mappings():
    with AccountScenario(opening_balance=50) as scenario:
        scenario.when(
            {"kind": "withdraw", "amount": 550},
            {"kind": "deposit", "amount": 5},
        ).should_have_balance(-495).should_undo_to_opening_balance()


def test_scenario_undoes_commands_on_exit():
    scenario = AccountScenario(opening_balance=10)
    with scenario:
        scenario.when(Deposit(amount=5))

    assert scenario.commands[0].executed is True
    assert scenario.commands[0].succeeded is False
    assert scenario.account.balance == 10


def test_scenario_unmet_balance_raises():
    with pytest.raises(AssertionError, match="should have balance 99"):
        with AccountScenario() as scenario:
            scenario.when(Deposit(amount=100)).should_have_balance(99)


def test_scenario_unmet_refusal_raises():
    with pytest.raises(AssertionError, match="should refuse"):
        with AccountScenario() as scenario:
            scenario.when(Withdraw(amount=10)).should_refuse(Withdraw(amount=10))


def test_scenario_error_in_block_propagates():
    with pytest.raises(RuntimeError):
        with AccountScenario() as scenario:
            scenario.when(Deposit(amount=1))
            raise RuntimeError("boom")
