# SPDX-License-Identifier: Apache-2.0
"""Client configuration."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from cloud_translator.client.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://translation.googleapis.com/v3beta1"
DEFAULT_LOCATION_ID = "global"


@dataclass
class ClientConfig:
    """Configuration for TranslationClient.

    Attributes:
        project_id: Cloud project id or number.
        location_id: Location of the API resources ("global", "us-central1").
        access_token: OAuth2 bearer token. Surrounding whitespace is ignored.
        api_base_url: API root, without a trailing slash.
        request_timeout: Total seconds per HTTP call. None keeps aiohttp's
            session default.
    """

    project_id: str
    access_token: str
    location_id: str = DEFAULT_LOCATION_ID
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float | None = None

    # Environment variable names read by from_env()
    ENV_VARS: ClassVar[dict[str, str]] = {
        "project_id": "PROJECT_ID",
        "location_id": "LOCATION_ID",
        "access_token": "ACCESS_TOKEN",
        "api_base_url": "TRANSLATE_API_BASE_URL",
    }

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build a configuration from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ).

        Raises:
            ConfigurationError: If the project id or access token is missing.
        """
        env = os.environ if environ is None else environ
        config = cls(
            project_id=env.get(cls.ENV_VARS["project_id"], ""),
            access_token=env.get(cls.ENV_VARS["access_token"], ""),
            location_id=env.get(cls.ENV_VARS["location_id"]) or DEFAULT_LOCATION_ID,
            api_base_url=env.get(cls.ENV_VARS["api_base_url"]) or DEFAULT_API_BASE_URL,
        )
        config.validate()
        logger.debug("Loaded client configuration for %s", config.location_path)
        return config

    def validate(self) -> None:
        """Check required settings.

        Raises:
            ConfigurationError: On a missing or invalid setting.
        """
        if not self.project_id:
            raise ConfigurationError(
                f"Project id is required (set {self.ENV_VARS['project_id']})"
            )
        if not self.access_token or not self.access_token.strip():
            raise ConfigurationError(
                f"Access token is required (set {self.ENV_VARS['access_token']})"
            )
        if not self.location_id:
            raise ConfigurationError("Location id must not be empty")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ConfigurationError(
                f"request_timeout must be positive, got {self.request_timeout}"
            )

    @property
    def base_url(self) -> str:
        """API root with any trailing slash removed."""
        return self.api_base_url.rstrip("/")

    @property
    def location_path(self) -> str:
        """Resource name of the configured location."""
        return f"projects/{self.project_id}/locations/{self.location_id}"
