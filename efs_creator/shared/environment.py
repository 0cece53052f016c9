"""Fail-fast validation of required environment variables."""

from collections.abc import Mapping
import os

REQUIRED_ENV_VARS = ("APP_NAME", "OWNER", "VPC_ID", "CDK_DEPLOY_REGION", "ENVIRONMENT")


class ConfigurationMissingError(SystemExit):
    """A required environment variable is unset or empty. Exits the program when unhandled."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Missing required environment variable: {name}")
        self.name = name


def check_env_variables(*names: str, environ: Mapping[str, str] | None = None) -> None:
    """Check that each named variable is set and non-empty.

    Stops at the first missing name; names after it are not inspected.
    """
    env = os.environ if environ is None else environ
    for name in names:
        if not env.get(name):
            raise ConfigurationMissingError(name)
