"""
VPC Component Resource for the CI network.

Steps & Architecture:
1. VPC (10.0.0.0/16 by default): The isolated network container for CI hosts.
2. Internet Gateway (IGW): The VPC's path to and from the internet.
3. Public Subnet (10.0.1.0/24 by default): Jenkins and SonarQube live here and
   receive a public IP at launch so their web UIs are reachable.
4. Route Table: 0.0.0.0/0 -> IGW. Needed both for inbound users and for the
   bootstrap scripts, which pull packages from apt, pkg.jenkins.io and
   binaries.sonarsource.com on first boot.
5. Association: Explicitly links the subnet to the public route table.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from cicd_iac.configs.constants import ANY_IPV4
from cicd_iac.utils.tags import create_tags


@dataclass
class VpcOutputs:
    """Output values from VPC component."""
    vpc_id: pulumi.Output[str]
    public_subnet_id: pulumi.Output[str]
    internet_gateway_id: pulumi.Output[str]
    route_table_id: pulumi.Output[str]


class VpcComponent(pulumi.ComponentResource):
    """
    VPC component with a single public subnet.

    Creates a VPC, internet gateway, public subnet and the route table that
    sends all non-local traffic to the gateway.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_cidr: str,
        public_subnet_cidr: str,
        availability_zone: str | None = None,
        extra_tags: dict[str, str] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:Vpc", name, None, opts)
        self.environment = environment
        self.extra_tags = extra_tags or {}

        child_opts = pulumi.ResourceOptions(parent=self)

        self.vpc = aws.ec2.Vpc(
            f"{name}-vpc",
            cidr_block=vpc_cidr,
            enable_dns_hostnames=True,
            enable_dns_support=True,
            tags=create_tags(environment, f"{name}-vpc", **self.extra_tags),
            opts=child_opts,
        )

        self.igw = aws.ec2.InternetGateway(
            f"{name}-igw",
            vpc_id=self.vpc.id,
            tags=create_tags(environment, f"{name}-igw", **self.extra_tags),
            opts=child_opts,
        )

        self.public_subnet = aws.ec2.Subnet(
            f"{name}-public-subnet",
            vpc_id=self.vpc.id,
            cidr_block=public_subnet_cidr,
            availability_zone=availability_zone,
            map_public_ip_on_launch=True,
            tags=create_tags(environment, f"{name}-public-subnet", **self.extra_tags),
            opts=child_opts,
        )

        self._create_route_table(name, child_opts)

        self.register_outputs({
            "vpc_id": self.vpc.id,
            "public_subnet_id": self.public_subnet.id,
            "internet_gateway_id": self.igw.id,
            "route_table_id": self.public_rt.id,
        })

    def _create_route_table(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create the public route table and attach it to the subnet."""
        self.public_rt = aws.ec2.RouteTable(
            f"{name}-public-rt",
            vpc_id=self.vpc.id,
            routes=[
                aws.ec2.RouteTableRouteArgs(
                    cidr_block=ANY_IPV4,
                    gateway_id=self.igw.id,
                ),
            ],
            tags=create_tags(self.environment, f"{name}-public-rt", **self.extra_tags),
            opts=opts,
        )

        self.public_rt_assoc = aws.ec2.RouteTableAssociation(
            f"{name}-public-rt-assoc",
            subnet_id=self.public_subnet.id,
            route_table_id=self.public_rt.id,
            opts=opts,
        )

    def get_outputs(self) -> VpcOutputs:
        """Get VPC output values."""
        return VpcOutputs(
            vpc_id=self.vpc.id,
            public_subnet_id=self.public_subnet.id,
            internet_gateway_id=self.igw.id,
            route_table_id=self.public_rt.id,
        )
