"""EfsCreatorStack: security group, encrypted EFS, resource policy and exports."""

from dataclasses import dataclass, field
from typing import Any

import pulumi
import pulumi_aws

from efs_creator.config import StackConfig
from efs_creator.iam.policies import attach_file_system_policy
from efs_creator.networking.security_groups import create_efs_security_group
from efs_creator.shared.lookups import lookup_network
from efs_creator.shared.removal import RemovalPolicy, removal_policy_for
from efs_creator.storage.efs import create_efs_filesystem
from efs_creator.storage.modes import parse_performance_mode, parse_throughput_mode


@dataclass
class PublishedOutput:
    """Stack export other stacks read by name."""

    name: str
    value: Any
    description: str


@dataclass
class EfsStackOutputs:
    """Outputs from the EFS stack for Pulumi exports."""

    security_group_id: pulumi.Output[str]
    file_system_id: pulumi.Output[str]
    removal_policy: RemovalPolicy
    published: list[PublishedOutput] = field(default_factory=list)


def provision_efs_stack(
    config: StackConfig,
    aws_provider: pulumi_aws.Provider,
    parent: pulumi.Resource | None = None,
) -> EfsStackOutputs:
    """Provision the EFS stack in dependency order: network, SG, file system, policy, outputs.

    Every failure propagates and aborts the program; nothing is retried.
    """
    prefix = config.resource_prefix
    network = lookup_network(config.vpc_id, aws_provider)
    removal_policy = removal_policy_for(config.deploy_environment)

    efs_sg = create_efs_security_group(
        prefix,
        network.vpc_id,
        removal_policy,
        aws_provider,
        parent=parent,
    )

    performance_mode = parse_performance_mode(config.performance_mode)
    throughput_mode = parse_throughput_mode(config.throughput_mode)

    efs_fs, _mts = create_efs_filesystem(
        resource_prefix=prefix,
        subnet_ids=network.subnet_ids,
        security_group_id=efs_sg.id,
        performance_mode=performance_mode,
        throughput_mode=throughput_mode,
        removal_policy=removal_policy,
        aws_provider=aws_provider,
        parent=parent,
    )
    attach_file_system_policy(
        prefix,
        efs_fs,
        removal_policy,
        aws_provider,
        allow_anonymous_access=False,
        parent=parent,
    )

    return EfsStackOutputs(
        security_group_id=efs_sg.id,
        file_system_id=efs_fs.id,
        removal_policy=removal_policy,
        published=[
            PublishedOutput(
                name=f"{prefix}-efsSG",
                value=efs_sg.id,
                description="The security group id for the EFS file system.",
            ),
            PublishedOutput(
                name=f"{prefix}-efsFileSystemId",
                value=efs_fs.id,
                description="The file system id for the EFS file system.",
            ),
        ],
    )


class EfsCreatorStack(pulumi.ComponentResource):
    """Root of the resource tree for one deployment target."""

    def __init__(
        self,
        name: str,
        config: StackConfig,
        aws_provider: pulumi_aws.Provider,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("efs-creator:index:EfsCreatorStack", name, None, opts)
        self.description = config.description
        self.stack_outputs = provision_efs_stack(config, aws_provider, parent=self)
        self.register_outputs({o.name: o.value for o in self.stack_outputs.published})


def publish_outputs(outputs: EfsStackOutputs) -> None:
    """Register each published output as a Pulumi stack export."""
    for output in outputs.published:
        pulumi.log.info(f"Exporting {output.name}: {output.description}")
        pulumi.export(output.name, output.value)
