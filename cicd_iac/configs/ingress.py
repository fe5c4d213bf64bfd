"""
Ingress rule schema for the CI host security group.

Each rule opens one port to a list of IPv4 CIDR blocks. Rules come either from
the `ingress_rules` stack config object or from the defaults below.

Dependencies: pydantic
"""

import ipaddress
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cicd_iac.configs.constants import ANY_IPV4, PORTS


class IngressRule(BaseModel):
    """A single inbound port opening."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(
        min_length=1,
        pattern=r"^[a-z0-9][a-z0-9-]*$",
        description="Rule identifier, used in the Pulumi resource name",
    )
    port: int = Field(ge=1, le=65535, description="Port to open")
    protocol: Literal["tcp", "udp"] = Field(default="tcp")
    cidr_blocks: list[str] = Field(
        default_factory=lambda: [ANY_IPV4],
        min_length=1,
        description="Source IPv4 networks",
    )
    description: str | None = None

    @field_validator("cidr_blocks")
    @classmethod
    def _validate_cidr_blocks(cls, value: list[str]) -> list[str]:
        for cidr in value:
            ipaddress.IPv4Network(cidr)
        return value

    @property
    def is_open_to_world(self) -> bool:
        """True when any source block is 0.0.0.0/0."""
        return ANY_IPV4 in self.cidr_blocks


def default_ingress_rules(ssh_cidr: str = ANY_IPV4) -> list[IngressRule]:
    """
    Build the default rule set: SSH, HTTP, HTTPS, Jenkins, SonarQube.

    Args:
        ssh_cidr: Source network allowed to reach port 22

    Returns:
        List of ingress rules
    """
    return [
        IngressRule(name="ssh", port=PORTS["ssh"], cidr_blocks=[ssh_cidr], description="SSH"),
        IngressRule(name="http", port=PORTS["http"], description="HTTP"),
        IngressRule(name="https", port=PORTS["https"], description="HTTPS"),
        IngressRule(name="jenkins", port=PORTS["jenkins"], description="Jenkins web UI"),
        IngressRule(name="sonarqube", port=PORTS["sonarqube"], description="SonarQube web UI"),
    ]


def parse_ingress_rules(raw: list[dict[str, Any]]) -> list[IngressRule]:
    """
    Validate raw ingress rule entries from stack config.

    Args:
        raw: List of mappings with name, port, protocol, cidr_blocks

    Returns:
        Validated ingress rules

    Raises:
        ValueError: If an entry is malformed or rule names repeat
    """
    rules: list[IngressRule] = []
    seen: set[str] = set()

    for index, entry in enumerate(raw):
        label = entry.get("name", f"#{index}") if isinstance(entry, dict) else f"#{index}"
        try:
            rule = IngressRule.model_validate(entry)
        except ValidationError as e:
            raise ValueError(f"Invalid ingress rule '{label}': {e}") from e

        if rule.name in seen:
            raise ValueError(f"Duplicate ingress rule name: {rule.name}")
        seen.add(rule.name)
        rules.append(rule)

    return rules
