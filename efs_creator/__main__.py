"""
EFS creator: provisions an encrypted EFS file system in an existing VPC.
Reads APP_NAME, OWNER, VPC_ID, CDK_DEPLOY_REGION, ENVIRONMENT from the
environment (or a .env file); tags every resource with environment,
project and owner; exports the security group and file system ids.
"""
from dotenv import load_dotenv
import pulumi

from efs_creator.config import create_aws_provider, load_stack_config
from efs_creator.shared.tags import TagSet, register_tags
from efs_creator.stack import EfsCreatorStack, publish_outputs


def main() -> None:
    load_dotenv()
    config = load_stack_config()

    if config.default_region and config.default_region != config.deploy_region:
        pulumi.log.warn(
            f"CDK_DEFAULT_REGION={config.default_region} differs from "
            f"CDK_DEPLOY_REGION={config.deploy_region}; deploying to {config.deploy_region}"
        )

    register_tags(TagSet.from_config(config))
    aws_provider = create_aws_provider(config)

    stack = EfsCreatorStack(config.stack_name, config, aws_provider)
    pulumi.log.info(stack.description)
    publish_outputs(stack.stack_outputs)


if __name__ == "__main__":
    main()
