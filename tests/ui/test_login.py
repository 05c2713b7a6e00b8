"""UI login scenarios.

Links features/login.feature to the steps in booker_e2e.steps.login_steps.

Run with: pytest tests/ui --live
"""
from pytest_bdd import scenarios

scenarios("login.feature")
