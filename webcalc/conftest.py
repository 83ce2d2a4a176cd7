import pytest
from fastapi.testclient import TestClient

from webcalc.api import SharedCalculator, app, get_calculator
from webcalc.session import Calculator


@pytest.fixture
def calculator():
    return Calculator()


@pytest.fixture
def bindings():
    return {"a": 1.0, "b": 2.0, "c": 3.0, "d": 4.0}


@pytest.fixture
def shared_calculator():
    return SharedCalculator()


@pytest.fixture
def client(shared_calculator):
    app.dependency_overrides[get_calculator] = lambda: shared_calculator
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
