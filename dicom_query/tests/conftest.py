import logging
from pathlib import Path

import pytest

from dicom_query.query_reader.query_reader import QueryReader
from dicom_query.tests.utils import RecordingHandler


@pytest.fixture(scope="session")
def fixture_path():
    yield Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def demographics_path(fixture_path):
    yield fixture_path / "demographics.txt"


@pytest.fixture(scope="session")
def mixed_path(fixture_path):
    yield fixture_path / "mixed.txt"


@pytest.fixture
def handler():
    yield RecordingHandler()


@pytest.fixture
def reader(handler):
    yield QueryReader(handler=handler)


@pytest.fixture(scope="module")
def disable_logging():
    logging.disable(logging.CRITICAL)
    yield
    logging.disable(logging.NOTSET)
