from __future__ import annotations

import pytest

from requests_mock import Mocker


@pytest.fixture
def requests_mock():
    with Mocker(case_sensitive=True) as mock:
        yield mock
