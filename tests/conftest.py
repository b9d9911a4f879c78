import pytest

from flyby.client import FlyByClient
from flyby.settings.authentication import AuthenticationSettings
from flyby.settings.flyby_settings import FlyBySettings


@pytest.fixture
def mock_client():
    """Create a FlyByClient with a fake API key."""
    settings = FlyBySettings(auth=AuthenticationSettings(api_key="test_api_key"))
    return FlyByClient(settings)
