"""Unit tests for create_efs_filesystem (EFS filesystem, mount targets)."""

from unittest.mock import MagicMock, patch

from efs_creator.shared.removal import RemovalPolicy
from efs_creator.storage.efs import LIFECYCLE_TRANSITION_TO_IA, create_efs_filesystem
from efs_creator.storage.modes import PerformanceMode, ThroughputMode


@patch("efs_creator.storage.efs.pulumi_aws.efs.MountTarget")
@patch("efs_creator.storage.efs.pulumi_aws.efs.FileSystem")
def test_create_efs_filesystem(
    mock_fs: MagicMock,
    mock_mt: MagicMock,
) -> None:
    """File system is encrypted, uses the parsed modes and a fixed 90-day IA transition."""
    mock_fs.return_value.id = "fs-123"
    mock_mt.return_value = MagicMock()

    aws_provider = MagicMock()
    sg_id = MagicMock()

    fs, mts = create_efs_filesystem(
        resource_prefix="acme-production",
        subnet_ids=["subnet-a", "subnet-b"],
        security_group_id=sg_id,
        performance_mode=PerformanceMode.MAX_IO,
        throughput_mode=ThroughputMode.ELASTIC,
        removal_policy=RemovalPolicy.RETAIN,
        aws_provider=aws_provider,
    )

    assert fs.id == "fs-123"
    assert len(mts) == 2

    assert mock_fs.call_args[0][0] == "acme-production-efsFileSystem"
    fs_kw = mock_fs.call_args[1]
    assert fs_kw["encrypted"] is True
    assert fs_kw["creation_token"] == "acme-production-efsFileSystem"
    assert fs_kw["performance_mode"] == "maxIO"
    assert fs_kw["throughput_mode"] == "elastic"
    assert fs_kw["lifecycle_policies"][0].transition_to_ia == "AFTER_90_DAYS"
    assert fs_kw["tags"] == {"Name": "acme-production-efsFileSystem"}
    assert fs_kw["opts"].retain_on_delete is True
    assert fs_kw["opts"].provider is aws_provider


@patch("efs_creator.storage.efs.pulumi_aws.efs.MountTarget")
@patch("efs_creator.storage.efs.pulumi_aws.efs.FileSystem")
def test_create_efs_filesystem_mount_targets(
    mock_fs: MagicMock,
    mock_mt: MagicMock,
) -> None:
    """One mount target per subnet, guarded by the security group, same removal policy."""
    mock_fs.return_value.id = "fs-456"
    sg_id = MagicMock()

    create_efs_filesystem(
        resource_prefix="acme-development",
        subnet_ids=["subnet-1"],
        security_group_id=sg_id,
        performance_mode=PerformanceMode.GENERAL_PURPOSE,
        throughput_mode=ThroughputMode.BURSTING,
        removal_policy=RemovalPolicy.DESTROY,
        aws_provider=MagicMock(),
    )

    assert mock_fs.call_args[1]["opts"].retain_on_delete is False
    assert mock_mt.call_count == 1
    assert mock_mt.call_args[0][0] == "acme-development-efsMountTarget-0"
    mt_kw = mock_mt.call_args[1]
    assert mt_kw["file_system_id"] == "fs-456"
    assert mt_kw["subnet_id"] == "subnet-1"
    assert mt_kw["security_groups"] == [sg_id]
    assert mt_kw["opts"].retain_on_delete is False


def test_lifecycle_transition_is_fixed() -> None:
    assert LIFECYCLE_TRANSITION_TO_IA == "AFTER_90_DAYS"
