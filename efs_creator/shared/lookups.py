"""Lookup of the existing VPC the file system is placed into."""

from dataclasses import dataclass

import pulumi
import pulumi_aws


@dataclass
class NetworkHandle:
    """Resolved VPC: id, CIDR and one private subnet per availability zone."""

    vpc_id: str
    vpc_cidr: str
    subnet_ids: list[str]


def lookup_network(
    vpc_id: str,
    aws_provider: pulumi_aws.Provider,
) -> NetworkHandle:
    """Resolve the VPC and pick mount target subnets.

    EFS allows one mount target per availability zone, so the first private
    subnet (by id) of each zone is used. Lookup errors are not caught.
    Does not create any resources.
    """
    vpc = pulumi_aws.ec2.get_vpc(
        id=vpc_id,
        opts=pulumi.InvokeOptions(provider=aws_provider),
    )

    subnets = pulumi_aws.ec2.get_subnets(
        filters=[
            pulumi_aws.ec2.GetSubnetsFilterArgs(name="vpc-id", values=[vpc.id]),
            pulumi_aws.ec2.GetSubnetsFilterArgs(name="map-public-ip-on-launch", values=["false"]),
        ],
        opts=pulumi.InvokeOptions(provider=aws_provider),
    )
    if not subnets.ids:
        raise SystemExit(f"No private subnets found in VPC {vpc_id}")

    by_zone: dict[str, str] = {}
    for subnet_id in sorted(subnets.ids):
        subnet = pulumi_aws.ec2.get_subnet(
            id=subnet_id,
            opts=pulumi.InvokeOptions(provider=aws_provider),
        )
        by_zone.setdefault(subnet.availability_zone, subnet_id)

    return NetworkHandle(
        vpc_id=vpc.id,
        vpc_cidr=vpc.cidr_block,
        subnet_ids=[by_zone[zone] for zone in sorted(by_zone)],
    )
