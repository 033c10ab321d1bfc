"""Tests for the interactive configuration utility."""

from unittest.mock import MagicMock

from EntraUserImport import UserImportConfig, version
from EntraUserImport.UserImport import configFileName, readConfigurationFile
from EntraUserImport.UserImportErrors import AuthError
from EntraUserImport.UserImportModels import ImportSettings

tenantId = "11111111-2222-3333-4444-555555555555"
clientId = "aaaaaaaa-bbbb-cccc-dddd-eeeeeeeeeeee"


def feedInput(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


class TestPrompts:

    def test_guid_retries_until_valid(self, monkeypatch):
        feedInput(monkeypatch, ["not-a-guid", tenantId.upper()])

        assert UserImportConfig.getGuid("Tenant?") == tenantId

    def test_choice_defaults_on_blank(self, monkeypatch):
        feedInput(monkeypatch, [""])

        assert UserImportConfig.getChoice("Cloud?", ("global", "usgov"), "global") == "global"

    def test_choice_retries_until_valid(self, monkeypatch):
        feedInput(monkeypatch, ["moon", "USGOV"])

        assert UserImportConfig.getChoice("Cloud?", ("global", "usgov"), "global") == "usgov"

    def test_secret_prompted_only_for_secret_client(self, monkeypatch):
        secretPrompt = MagicMock(return_value="hidden")
        monkeypatch.setattr("EntraUserImport.UserImportConfig.pwinput.pwinput", secretPrompt)

        feedInput(monkeypatch, [tenantId, "", clientId, "devicecode"])
        settings = UserImportConfig.getSettings()
        assert settings.clientType == "devicecode"
        assert settings.clientSecret == ""
        secretPrompt.assert_not_called()

        feedInput(monkeypatch, [tenantId, "china", clientId, ""])
        settings = UserImportConfig.getSettings()
        assert settings.clientSecret == "hidden"
        assert settings.cloud == "china"


class TestClientTest:

    def test_failed_connection(self, monkeypatch):
        monkeypatch.setattr(
            "EntraUserImport.UserImportConfig.GraphSession.connect",
            MagicMock(side_effect=AuthError("Error getting access token: 401")),
        )

        assert UserImportConfig.performClientTest(ImportSettings(tenantId, clientId, "x"), MagicMock()) is False

    def test_successful_connection(self, monkeypatch):
        monkeypatch.setattr("EntraUserImport.UserImportConfig.GraphSession.connect", MagicMock())

        assert UserImportConfig.performClientTest(ImportSettings(tenantId, clientId, "x"), MagicMock()) is True


class TestWriteConfigFile:

    def test_written_file_is_read_by_import_tool(self, tmp_path, monkeypatch, reporter):
        monkeypatch.chdir(tmp_path)
        settings = ImportSettings(tenantId, clientId, "pa%ss", "secret", "usgov")

        configPath = UserImportConfig.writeConfigFile(version, str(tmp_path), settings)

        assert configPath == str(tmp_path / configFileName)
        assert readConfigurationFile(configFileName, reporter) == settings


class TestMain:

    def test_retries_until_connection_works(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("EntraUserImport.UserImportConfig.pwinput.pwinput", MagicMock(return_value="secret-value"))
        connect = MagicMock(side_effect=[AuthError("bad secret"), MagicMock()])
        monkeypatch.setattr("EntraUserImport.UserImportConfig.GraphSession.connect", connect)
        feedInput(monkeypatch, [tenantId, "", clientId, "", tenantId, "", clientId, ""])

        UserImportConfig.main()

        assert connect.call_count == 2
        assert (tmp_path / configFileName).is_file()
