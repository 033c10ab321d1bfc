import pytest

from EntraUserImport.UserImportModels import ImportSettings
from tests.helpers import RecordingReporter


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def settings():
    return ImportSettings(
        tenantId="11111111-2222-3333-4444-555555555555",
        clientId="aaaaaaaa-bbbb-cccc-dddd-eeeeeeeeeeee",
        clientSecret="s3cret%value",
    )
