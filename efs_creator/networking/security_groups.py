"""Security group guarding the EFS mount targets."""

import pulumi
import pulumi_aws

from efs_creator.shared.removal import RemovalPolicy, resource_options


def create_efs_security_group(
    resource_prefix: str,
    vpc_id: str,
    removal_policy: RemovalPolicy,
    aws_provider: pulumi_aws.Provider,
    parent: pulumi.Resource | None = None,
) -> pulumi_aws.ec2.SecurityGroup:
    """Create security group for EFS: no ingress, egress all.

    Consumers add NFS ingress rules against the exported group id.
    """
    return pulumi_aws.ec2.SecurityGroup(
        f"{resource_prefix}-efsSG",
        name=f"{resource_prefix}-efsSG",
        vpc_id=vpc_id,
        description=f"EFS mount targets for {resource_prefix}",
        egress=[
            pulumi_aws.ec2.SecurityGroupEgressArgs(
                protocol="-1",
                from_port=0,
                to_port=0,
                cidr_blocks=["0.0.0.0/0"],
            ),
        ],
        opts=resource_options(removal_policy, provider=aws_provider, parent=parent),
    )
