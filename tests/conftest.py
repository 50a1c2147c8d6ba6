import pytest

from ipacyr.transcriber import RussianTranscriber


@pytest.fixture
def transcriber():
    return RussianTranscriber()
