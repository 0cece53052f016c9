"""Removal policy: what happens to a resource when it leaves the program."""

from enum import Enum
from typing import Any

import pulumi


class RemovalPolicy(Enum):
    RETAIN = "retain"
    DESTROY = "destroy"


def removal_policy_for(environment: str) -> RemovalPolicy:
    """Production resources are retained on delete; everything else is destroyed."""
    if environment == "production":
        return RemovalPolicy.RETAIN
    return RemovalPolicy.DESTROY


def resource_options(removal_policy: RemovalPolicy, **kwargs: Any) -> pulumi.ResourceOptions:
    """Build ResourceOptions with retain_on_delete set from the removal policy.

    Extra keyword arguments (provider, parent, depends_on, ...) pass through.
    """
    return pulumi.ResourceOptions(
        retain_on_delete=removal_policy is RemovalPolicy.RETAIN,
        **kwargs,
    )
