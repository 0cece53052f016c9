"""Stack configuration loaded once from the environment and Pulumi config."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
import os

import pulumi
import pulumi_aws

from efs_creator.shared.environment import REQUIRED_ENV_VARS, check_env_variables

DEFAULT_PERFORMANCE_MODE = "generalPurpose"
DEFAULT_THROUGHPUT_MODE = "bursting"


class DeployEnvironment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    DEMONSTRATION = "demonstration"

    @classmethod
    def parse(cls, raw: str) -> "DeployEnvironment":
        for env in cls:
            if raw == env.value:
                return env
        accepted = ", ".join(e.value for e in cls)
        raise SystemExit(f"Invalid ENVIRONMENT {raw!r}. Accepted values: {accepted}")


@dataclass(frozen=True)
class StackConfig:
    """Resolved configuration for one deployment target. Never mutated after load."""

    app_name: str
    owner: str
    deploy_environment: DeployEnvironment
    vpc_id: str
    deploy_region: str
    performance_mode: str = DEFAULT_PERFORMANCE_MODE
    throughput_mode: str = DEFAULT_THROUGHPUT_MODE
    account: str | None = None
    default_region: str | None = None

    def __post_init__(self) -> None:
        if not self.app_name:
            raise SystemExit("APP_NAME must be non-empty (used as resource prefix)")

    @property
    def resource_prefix(self) -> str:
        return f"{self.app_name}-{self.deploy_environment.value}"

    @property
    def stack_name(self) -> str:
        return f"{self.resource_prefix}-{self.deploy_region}-EfsCreatorStack"

    @property
    def description(self) -> str:
        return (
            f"EfsCreatorStack for {self.app_name} in {self.deploy_region} "
            f"{self.deploy_environment.value}."
        )


def load_stack_config(environ: Mapping[str, str] | None = None) -> StackConfig:
    """Validate required variables, then build StackConfig.

    Mode selectors come from the Pulumi project config (performanceMode,
    throughputMode); they are parsed when the stack is assembled.
    """
    env = os.environ if environ is None else environ
    check_env_variables(*REQUIRED_ENV_VARS, environ=env)

    project_config = pulumi.Config()
    return StackConfig(
        app_name=env["APP_NAME"],
        owner=env["OWNER"],
        deploy_environment=DeployEnvironment.parse(env["ENVIRONMENT"]),
        vpc_id=env["VPC_ID"],
        deploy_region=env["CDK_DEPLOY_REGION"],
        performance_mode=project_config.get("performanceMode") or DEFAULT_PERFORMANCE_MODE,
        throughput_mode=project_config.get("throughputMode") or DEFAULT_THROUGHPUT_MODE,
        account=env.get("CDK_DEFAULT_ACCOUNT") or None,
        default_region=env.get("CDK_DEFAULT_REGION") or None,
    )


def create_aws_provider(config: StackConfig) -> pulumi_aws.Provider:
    """Create AWS provider for the deploy region, pinned to the account when one is set."""
    return pulumi_aws.Provider(
        f"{config.resource_prefix}-aws",
        region=config.deploy_region,
        allowed_account_ids=[config.account] if config.account else None,
    )
