"""EFS resource policy: mounts only through a mount target, no anonymous access."""

import json
from typing import Any

import pulumi
import pulumi_aws

from efs_creator.shared.removal import RemovalPolicy, resource_options

MOUNT_TARGET_CONDITION = {
    "Bool": {"elasticfilesystem:AccessedViaMountTarget": "true"},
}


def client_mount_statement() -> dict[str, Any]:
    """Any principal may mount, but only via a mount target inside the VPC."""
    return {
        "Effect": "Allow",
        "Principal": {"AWS": "*"},
        "Action": ["elasticfilesystem:ClientMount"],
        "Condition": MOUNT_TARGET_CONDITION,
    }


def no_anonymous_access_statement() -> dict[str, Any]:
    """Root and write access via a mount target. A policy granting these turns off IAM-less access."""
    return {
        "Effect": "Allow",
        "Principal": {"AWS": "*"},
        "Action": [
            "elasticfilesystem:ClientRootAccess",
            "elasticfilesystem:ClientWrite",
        ],
        "Condition": MOUNT_TARGET_CONDITION,
    }


def build_file_system_policy(
    file_system_arn: str,
    allow_anonymous_access: bool = False,
) -> str:
    """Build the JSON resource policy document for a file system."""
    statements = []
    if not allow_anonymous_access:
        statements.append(no_anonymous_access_statement())
    statements.append(client_mount_statement())
    return json.dumps(
        {
            "Version": "2012-10-17",
            "Statement": [{**s, "Resource": file_system_arn} for s in statements],
        }
    )


def attach_file_system_policy(
    resource_prefix: str,
    file_system: pulumi_aws.efs.FileSystem,
    removal_policy: RemovalPolicy,
    aws_provider: pulumi_aws.Provider,
    allow_anonymous_access: bool = False,
    parent: pulumi.Resource | None = None,
) -> pulumi_aws.efs.FileSystemPolicy:
    """Attach the resource policy to the file system; retained or destroyed with it."""
    return pulumi_aws.efs.FileSystemPolicy(
        f"{resource_prefix}-efsFileSystemPolicy",
        file_system_id=file_system.id,
        policy=file_system.arn.apply(
            lambda arn: build_file_system_policy(arn, allow_anonymous_access)
        ),
        opts=resource_options(removal_policy, provider=aws_provider, parent=parent),
    )
