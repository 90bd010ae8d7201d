from .account_scenario import AccountScenario

__all__ = [
    "AccountScenario",
]
