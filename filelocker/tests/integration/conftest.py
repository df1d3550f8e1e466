import os

import pytest

ENV_VARS = ("FILELOCKER_TEST_URL", "FILELOCKER_TEST_LOGIN", "FILELOCKER_TEST_KEY")


def pytest_collection_modifyitems(config: pytest.Config, items: list) -> None:
    missing = not all(os.getenv(name) for name in ENV_VARS)
    if not missing:
        return
    mark_expr = getattr(config.option, "markexpr", "")
    if "integration" in mark_expr:
        return
    skip = pytest.mark.skip(reason=f"{', '.join(ENV_VARS)} not set")
    for item in items:
        if item.get_closest_marker("integration"):
            item.add_marker(skip)


@pytest.fixture(scope="session")
def filelocker_credentials() -> tuple[str, str, str]:
    values = tuple(os.getenv(name) for name in ENV_VARS)
    if not all(values):
        pytest.fail(f"{', '.join(ENV_VARS)} must be set to run integration tests.")
    return values
