import pytest


@pytest.fixture
def mock_basic_environment(monkeypatch):
    monkeypatch.setenv("TABLEAU_SERVER_URL", "https://tableau.example.com")
    monkeypatch.setenv("TABLEAU_SITE_ID", "site-1")
    monkeypatch.setenv("TABLEAU_TOKEN", "changeme")


@pytest.fixture
def mock_no_config_files(monkeypatch):
    monkeypatch.setattr("pathlib.Path.is_file", lambda self: False)


@pytest.fixture
def mock_yaml_file_presence(monkeypatch):
    def is_file(self):
        return self.name == "config.yml"

    monkeypatch.setattr("pathlib.Path.is_file", is_file)


@pytest.fixture
def mock_env_file_presence(monkeypatch):
    def is_file(self):
        return self.name == ".env"

    monkeypatch.setattr("pathlib.Path.is_file", is_file)


@pytest.fixture
def mock_yaml_config_settings_read_files(monkeypatch):
    def read_files(_, __, *args, **kwargs):
        return {
            "tableau": {
                "server_url": "https://yaml.example.com",
                "api_version": "3.21",
                "site_id": "yaml-site",
                "token": "yaml-token",
                "timeout": 10,
            },
            "reconciler": {"log_level": "info", "ignore_missing_on_delete": False},
        }

    monkeypatch.setattr(
        "pydantic_settings.YamlConfigSettingsSource._read_files", read_files
    )


@pytest.fixture
def mock_env_config_settings_read_env_files(monkeypatch):
    def _read_env_files(self):
        if self.settings_cls.__name__ == "SettingsLoader":
            return {
                "tableau_server_url": "https://dotenv.example.com",
                "tableau_site_id": "dotenv-site",
                "tableau_token": "dotenv-token",
            }
        return {}

    monkeypatch.setattr(
        "pydantic_settings.DotEnvSettingsSource._load_env_vars", _read_env_files
    )
