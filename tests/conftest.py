import datetime

import numpy as np
import pytest

from tests.tools import FakeClock


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def clock():
    return FakeClock(start=100.0)


# Get the result of each test
@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


# Print the outcome of each test as it finishes
@pytest.fixture(autouse=True)
def log_test_result(request):
    yield
    end_time = datetime.datetime.now().strftime("%H:%M:%S")
    report = getattr(request.node, "rep_call", None)
    status = report.outcome.upper() if report else "NOT RUN"
    print(f"\n[{status}] {end_time} - {request.node.nodeid}")
