"""
Security Group Component for the CI hosts.

One group is shared by Jenkins and SonarQube:
- Ingress: one rule per configured port and source CIDR (SSH, HTTP, HTTPS,
  Jenkins 8080, SonarQube 9000 by default).
- Egress: all traffic, so bootstrap scripts can download packages and
  Jenkins can push to ECR and S3.

Security groups are stateful: replies to allowed inbound requests are
allowed out automatically.
"""

from dataclasses import dataclass
from typing import Sequence

import pulumi
import pulumi_aws as aws

from cicd_iac.configs.constants import ANY_IPV4
from cicd_iac.configs.ingress import IngressRule
from cicd_iac.utils.tags import create_tags


@dataclass
class SecurityGroupOutputs:
    """Output values from security group component."""
    security_group_id: pulumi.Output[str]
    security_group_arn: pulumi.Output[str]


class SecurityGroupComponent(pulumi.ComponentResource):
    """
    Security group for CI servers.

    Ingress is driven by the configured IngressRule list; egress is open.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_id: pulumi.Input[str],
        ingress_rules: Sequence[IngressRule],
        extra_tags: dict[str, str] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        names = [rule.name for rule in ingress_rules]
        duplicates = sorted({rule_name for rule_name in names if names.count(rule_name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate ingress rule names: {', '.join(duplicates)}")

        super().__init__("custom:networking:SecurityGroup", name, None, opts)
        self.environment = environment

        child_opts = pulumi.ResourceOptions(parent=self)

        self.security_group = aws.ec2.SecurityGroup(
            f"{name}-sg",
            description="Security group for Jenkins and SonarQube hosts",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-sg", **(extra_tags or {})),
            opts=child_opts,
        )

        self.ingress_rules: list[aws.vpc.SecurityGroupIngressRule] = []
        self._create_rules(name, ingress_rules, child_opts)

        self.register_outputs({
            "security_group_id": self.security_group.id,
            "security_group_arn": self.security_group.arn,
        })

    def _create_rules(
        self,
        name: str,
        ingress_rules: Sequence[IngressRule],
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create ingress rules per port/CIDR and the open egress rule."""
        for rule in ingress_rules:
            for index, cidr in enumerate(rule.cidr_blocks):
                # Keep the first CIDR's resource name stable when more are appended
                suffix = "" if index == 0 else f"-{index}"
                self.ingress_rules.append(
                    aws.vpc.SecurityGroupIngressRule(
                        f"{name}-ingress-{rule.name}{suffix}",
                        security_group_id=self.security_group.id,
                        ip_protocol=rule.protocol,
                        from_port=rule.port,
                        to_port=rule.port,
                        cidr_ipv4=cidr,
                        description=rule.description or f"{rule.name} from {cidr}",
                        opts=opts,
                    )
                )

        self.egress_rule = aws.vpc.SecurityGroupEgressRule(
            f"{name}-egress-all",
            security_group_id=self.security_group.id,
            ip_protocol="-1",
            cidr_ipv4=ANY_IPV4,
            description="All outbound traffic",
            opts=opts,
        )

    def get_outputs(self) -> SecurityGroupOutputs:
        """Get security group output values."""
        return SecurityGroupOutputs(
            security_group_id=self.security_group.id,
            security_group_arn=self.security_group.arn,
        )
