"""Stack-wide tagging: environment, project and owner on every taggable resource.

Resource definitions never set these tags themselves. A stack transformation
registered once on the Pulumi stack visits each resource as it is declared
and merges the tag set into the resource's ``tags`` property. Resources whose
type has no ``tags`` property are left untouched.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

import pulumi

if TYPE_CHECKING:
    from efs_creator.config import StackConfig

TAGGABLE_TYPES = frozenset(
    {
        "aws:ec2/securityGroup:SecurityGroup",
        "aws:efs/fileSystem:FileSystem",
    }
)


@dataclass(frozen=True)
class TagSet:
    environment: str
    project: str
    owner: str

    @classmethod
    def from_config(cls, config: "StackConfig") -> "TagSet":
        return cls(
            environment=config.deploy_environment.value,
            project=config.app_name,
            owner=config.owner,
        )

    def as_dict(self) -> dict[str, str]:
        return {
            "environment": self.environment,
            "project": self.project,
            "owner": self.owner,
        }


class Taggable(Protocol):
    def apply_tag(self, key: str, value: str) -> None:
        ...


class TaggableProps:
    """Taggable view over a resource's input properties."""

    def __init__(self, props: dict[str, Any]) -> None:
        self.props = props

    def apply_tag(self, key: str, value: str) -> None:
        tags = self.props.get("tags")
        if isinstance(tags, pulumi.Output):
            self.props["tags"] = tags.apply(lambda t: {**(t or {}), key: value})
        else:
            self.props["tags"] = {**(tags or {}), key: value}


class ApplyTags:
    """Stack transformation applying a TagSet to every taggable resource."""

    def __init__(self, tag_set: TagSet) -> None:
        self.tag_set = tag_set

    def visit(self, node: Taggable) -> None:
        for key, value in self.tag_set.as_dict().items():
            node.apply_tag(key, value)

    def __call__(
        self, args: pulumi.ResourceTransformationArgs
    ) -> pulumi.ResourceTransformationResult | None:
        if args.type_ not in TAGGABLE_TYPES:
            return None
        node = TaggableProps(dict(args.props))
        self.visit(node)
        return pulumi.ResourceTransformationResult(node.props, args.opts)


def register_tags(tag_set: TagSet) -> ApplyTags:
    """Register the tag transformation against the whole Pulumi stack."""
    aspect = ApplyTags(tag_set)
    pulumi.runtime.register_stack_transformation(aspect)
    pulumi.log.info(f"Tagging resources with {tag_set.as_dict()}")
    return aspect
