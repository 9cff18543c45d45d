"""Configuration models to reach the remote permissions service.

This module defines the configuration of the remote service and of the reconcilers.
It provides a structured way to manage and validate configuration parameters using Pydantic.
"""

import os
from abc import ABC
from copy import deepcopy
from pathlib import Path
from typing import Any, Literal, Self

from permissions_sdk.exceptions import ConfigValidationError
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    ModelWrapValidatorHandler,
    ValidationError,
    create_model,
    model_validator,
)
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


class BaseConfigModel(BaseModel, ABC):
    """Base class for global config models
    To prevent attributes from being modified after initialization.
    """

    model_config = ConfigDict(extra="allow", frozen=True, validate_default=True)


class _TableauConfig(BaseConfigModel):
    """Settings of the remote service.

    Attributes:
        server_url (HttpUrl): The base URL of the server.
        api_version (str): The version of the REST API.
        site_id (str): The ID of the site the projects belong to.
        token (str): The authentication token of the session.
        timeout (float): Timeout of one request, in seconds.
        verify_ssl (bool): Whether to verify the TLS certificate of the server.
    """

    server_url: HttpUrl = Field(
        description="The base URL of the server.",
    )
    api_version: str = Field(
        description="The version of the REST API.",
        default="3.19",
    )
    site_id: str = Field(
        description="The ID of the site the projects belong to.",
    )
    token: str = Field(
        description="The authentication token sent in the X-Tableau-Auth header.",
    )
    timeout: float = Field(
        description="Timeout of one request, in seconds.",
        default=30,
        gt=0,
    )
    verify_ssl: bool = Field(
        description="Whether to verify the TLS certificate of the server.",
        default=True,
    )

    @property
    def api_base_url(self) -> str:
        """Base URL of the site endpoints."""
        return (
            f"{str(self.server_url).rstrip('/')}/api/{self.api_version}"
            f"/sites/{self.site_id}"
        )


class _ReconcilerConfig(BaseConfigModel):
    """Settings of the reconcilers.

    Attributes:
        log_level (Literal): The minimum level of logs to display.
        ignore_missing_on_delete (bool): Whether deleting an already absent grant succeeds.
    """

    log_level: Literal["debug", "info", "warn", "warning", "error"] = Field(
        description="The minimum level of logs to display.",
        default="error",
    )
    ignore_missing_on_delete: bool = Field(
        description="Consider a 404 answered to a delete as a success.",
        default=True,
    )


class _SettingsLoader(BaseSettings):
    model_config = SettingsConfigDict(
        frozen=True,
        extra="allow",
        env_nested_delimiter="_",
        env_nested_max_split=1,
        enable_decoding=False,
    )

    @staticmethod
    def _get_config_yml_file_path() -> Path | None:
        """Locate `config.yml` in the current working directory."""
        config_yml_file_path = Path(os.getcwd()) / "config.yml"
        if config_yml_file_path.is_file():
            return config_yml_file_path
        return None

    @staticmethod
    def _get_dot_env_file_path() -> Path | None:
        """Locate `.env` in the current working directory."""
        dot_env_file_path = Path(os.getcwd()) / ".env"
        if dot_env_file_path.is_file():
            return dot_env_file_path
        return None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customise the sources of settings.

        This method is called by the Pydantic BaseSettings class to determine the order of sources.
        The configuration come in this order either from:
            1. Environment variables
            2. YAML file
            3. .env file
            4. Default values

        If a config.yml file is found, the .env file is ignored.
        """
        config_yml_file_path = cls._get_config_yml_file_path()
        if config_yml_file_path:
            return (
                env_settings,
                YamlConfigSettingsSource(settings_cls, yaml_file=config_yml_file_path),
            )
        dot_env_file_path = cls._get_dot_env_file_path()
        if dot_env_file_path:
            return (
                env_settings,
                DotEnvSettingsSource(settings_cls, env_file=dot_env_file_path),
            )
        return (env_settings,)

    @classmethod
    def build_loader_from_model(
        cls, settings_model: type["PermissionsSettings"]
    ) -> type["_SettingsLoader"]:
        """Build an untyped `_SettingsLoader` subclass mirroring a settings model.

        The resulting model keeps values as-is from configuration sources (YAML values
        as native Python types, environment variables as plain strings), so that
        validation only happens once, in the typed settings model.

        Args:
            settings_model (type[PermissionsSettings]): The typed settings class to mirror.

        Returns:
            type[_SettingsLoader]: A dynamically generated subclass of `_SettingsLoader`
                where all fields accept raw, unvalidated input.
        """

        class SettingsLoader(_SettingsLoader): ...

        model_fields = deepcopy(settings_model.model_fields)
        for field_info in model_fields.values():
            annotation = field_info.annotation
            if annotation and issubclass(annotation, BaseModel):
                fields: dict[str, Any] = {
                    name: (Any, None) for name in annotation.model_fields
                }
                untyped_model = create_model(
                    f"{annotation.__name__}Untyped",
                    __base__=annotation,
                    **fields,
                )
                field_info.annotation = untyped_model
                field_info.default_factory = untyped_model

        SettingsLoader.model_fields = model_fields  # type: ignore
        return SettingsLoader


class PermissionsSettings(BaseConfigModel):
    """Load the global configuration from environment variables, `config.yml` or `.env`.

    Attributes:
        tableau (_TableauConfig): Settings of the remote service.
        reconciler (_ReconcilerConfig): Settings of the reconcilers.

    Examples:
        >>> # TABLEAU_SERVER_URL=https://tableau.example.com
        >>> # TABLEAU_SITE_ID=site-id
        >>> # TABLEAU_TOKEN=changeme
        >>> settings = PermissionsSettings()
        >>> print(settings.tableau.api_base_url)
        https://tableau.example.com/api/3.19/sites/site-id

    Raises:
        permissions_sdk.exceptions.ConfigValidationError: Custom error raised during configuration validation.
    """

    tableau: _TableauConfig = Field(
        default_factory=_TableauConfig,  # type: ignore[arg-type]
        description="Remote service configurations.",
    )
    reconciler: _ReconcilerConfig = Field(
        default_factory=_ReconcilerConfig,
        description="Reconciler configurations.",
    )

    def __init__(self) -> None:
        """Initialize the configuration model and handle validation errors."""
        try:
            super().__init__()
        except ValidationError as e:
            raise ConfigValidationError("Error validating configuration.") from e

    @model_validator(mode="wrap")
    @classmethod
    def _load_config_dict(
        cls, _data: Any, handler: ModelWrapValidatorHandler[Self]
    ) -> Self:
        """Load raw config dict based on fields names.

        Notes:
            - The mode (`"wrap"`) guarantees that this validator is always executed _before_
              the validators defined in child class
            - See `_SettingsLoader.build_loader_from_model` for further details about env/config vars parsing
        """
        settings_loader = _SettingsLoader.build_loader_from_model(cls)

        # Unset values are dropped so that the typed model applies its own defaults
        config_dict: dict[str, Any] = settings_loader().model_dump(exclude_none=True)
        return handler(config_dict)
