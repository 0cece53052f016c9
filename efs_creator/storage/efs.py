"""EFS FileSystem and MountTargets."""

import pulumi
import pulumi_aws

from efs_creator.shared.removal import RemovalPolicy, resource_options
from efs_creator.storage.modes import PerformanceMode, ThroughputMode

# Files not accessed for 90 days move to EFS Infrequent Access.
LIFECYCLE_TRANSITION_TO_IA = "AFTER_90_DAYS"


def create_efs_filesystem(
    resource_prefix: str,
    subnet_ids: list[str],
    security_group_id: pulumi.Output[str],
    performance_mode: PerformanceMode,
    throughput_mode: ThroughputMode,
    removal_policy: RemovalPolicy,
    aws_provider: pulumi_aws.Provider,
    parent: pulumi.Resource | None = None,
) -> tuple[pulumi_aws.efs.FileSystem, list[pulumi_aws.efs.MountTarget]]:
    """Create encrypted EFS filesystem with one mount target per subnet."""
    efs_fs = pulumi_aws.efs.FileSystem(
        f"{resource_prefix}-efsFileSystem",
        creation_token=f"{resource_prefix}-efsFileSystem",
        encrypted=True,
        performance_mode=performance_mode.value,
        throughput_mode=throughput_mode.value,
        lifecycle_policies=[
            pulumi_aws.efs.FileSystemLifecyclePolicyArgs(
                transition_to_ia=LIFECYCLE_TRANSITION_TO_IA,
            ),
        ],
        tags={"Name": f"{resource_prefix}-efsFileSystem"},
        opts=resource_options(removal_policy, provider=aws_provider, parent=parent),
    )
    mount_targets = []
    for i, subnet_id in enumerate(subnet_ids):
        mt = pulumi_aws.efs.MountTarget(
            f"{resource_prefix}-efsMountTarget-{i}",
            file_system_id=efs_fs.id,
            subnet_id=subnet_id,
            security_groups=[security_group_id],
            opts=resource_options(removal_policy, provider=aws_provider, parent=parent),
        )
        mount_targets.append(mt)
    return (efs_fs, mount_targets)
