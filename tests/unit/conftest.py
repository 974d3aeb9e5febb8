import pytest

import main


@pytest.fixture
def client():
    main.app.config["TESTING"] = True
    main.RUNS.clear()
    with main.app.test_client() as c:
        yield c
    main.RUNS.clear()
