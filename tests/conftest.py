import pytest

from twml.config.factory import TwmlConfig
from twml.core.processor import AttributeProcessor, GenerationContext


@pytest.fixture
def config():
    return TwmlConfig()


@pytest.fixture
def context():
    return GenerationContext()


@pytest.fixture
def processor():
    return AttributeProcessor()
