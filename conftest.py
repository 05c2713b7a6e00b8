import pytest

from booker_e2e.config import settings

pytest_plugins = [
    "booker_e2e.fixtures",
    "booker_e2e.steps.login_steps",
]


def pytest_addoption(parser):
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="run tests against the remote booking service and login UI",
    )


def pytest_collection_modifyitems(config, items):
    """Skip ``live`` tests unless --live or E2E_LIVE=1 asks for them."""
    if config.getoption("--live") or settings.run_live:
        return
    skip_live = pytest.mark.skip(reason="needs the remote services: pass --live or set E2E_LIVE=1")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)
