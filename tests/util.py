import json
import os
from contextlib import contextmanager

import pytest

TEST_DIR = os.path.dirname(os.path.abspath(__file__))


@contextmanager
def not_raises(exception, message: str | None = ""):
    try:
        yield
    except exception as e:
        if message == "":
            raise pytest.fail(f"DID RAISE {exception}")  # noqa: B904
        else:
            raise pytest.fail(message.format(exc=e))  # noqa: B904


def read_data(name: str) -> str:
    with open(os.path.join(TEST_DIR, "data", name)) as f:
        return f.read()


def assert_json_eq(expected: str | bytes, actual: str | bytes) -> None:
    assert json.loads(expected) == json.loads(actual)
