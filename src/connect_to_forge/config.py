"""Runtime settings for the converter."""

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, PositiveFloat, ValidationError

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "CONNECT_TO_FORGE_"

# A dummy id is required for the 'forge register' command to work.
PLACEHOLDER_APP_ID = "ari:cloud:ecosystem::app/invalid-run-forge-register"
DEFAULT_RUNTIME = "nodejs20.x"
CONNECT_REMOTE_KEY = "connect"

LIMITATIONS_URL = (
    "https://developer.atlassian.com/platform/adopting-forge-from-connect/"
    "limitations-and-differences/#incompatibilities"
)
NEXT_STEPS_URL = (
    "https://developer.atlassian.com/platform/adopting-forge-from-connect/"
    "how-to-adopt/#part-3--register-and-deploy-your-app-to-forge"
)


class ConverterSettings(BaseModel):
    """Tunable values used across the conversion pipeline."""

    app_id: str = Field(
        default=PLACEHOLDER_APP_ID,
        description="Placeholder app id written to app.id until 'forge register'.",
    )
    runtime_name: str = Field(
        default=DEFAULT_RUNTIME,
        description="Forge runtime written to app.runtime.name.",
    )
    unsupported_modules: frozenset[str] = Field(
        default_factory=frozenset,
        description=(
            "Connect module types that Forge cannot host. Each match in a "
            "descriptor produces a warning."
        ),
    )
    http_timeout: PositiveFloat = Field(
        default=30.0,
        description="Timeout in seconds for downloading the descriptor.",
    )
    default_output: str = Field(
        default="manifest.yml",
        description="Manifest path used when --output is not given.",
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ConverterSettings":
        """
        Build settings from CONNECT_TO_FORGE_* environment variables.

        CONNECT_TO_FORGE_UNSUPPORTED_MODULES is a comma separated list.

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        environ = os.environ if environ is None else environ
        values: dict[str, object] = {}

        for field_name in cls.model_fields:
            env_name = f"{ENV_PREFIX}{field_name.upper()}"
            raw = environ.get(env_name)
            if raw is None:
                continue
            if field_name == "unsupported_modules":
                values[field_name] = frozenset(
                    item.strip() for item in raw.split(",") if item.strip()
                )
            else:
                values[field_name] = raw
            logger.debug(f"Setting '{field_name}' overridden by {env_name}")

        try:
            return cls(**values)
        except ValidationError as e:
            first = e.errors()[0]
            field = str(first["loc"][0]) if first["loc"] else None
            raise ConfigurationError(
                f"Invalid environment configuration: {first['msg']}",
                field_name=field,
                actual_value=values.get(field) if field else None,
            ) from e
