"""
Base configuration dataclass for environment settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

import ipaddress
from dataclasses import dataclass, field

from cicd_iac.configs.constants import (
    ANY_IPV4,
    ECR_DEFAULTS,
    INSTANCE_TYPES,
    ROOT_VOLUME_SIZE,
    SUBNET_CIDRS,
    VPC_CIDR,
)
from cicd_iac.configs.ingress import IngressRule, default_ingress_rules


@dataclass(frozen=True)
class EnvironmentConfig:
    """
    Environment-specific configuration for infrastructure deployment.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        vpc_cidr: CIDR block for the VPC
        public_subnet_cidr: CIDR block for the public subnet hosting CI servers
        availability_zone: AZ for the public subnet (provider picks when None)
        ami_id: Fixed AMI for CI hosts (latest Ubuntu 22.04 when None)
        jenkins_instance_type: EC2 instance type for Jenkins
        sonarqube_instance_type: EC2 instance type for SonarQube
        key_name: Existing EC2 key pair for SSH access
        ssh_cidr: Source network allowed to reach port 22
        root_volume_size: Root EBS volume size in GB
        ecr_repository_name: Override for the ECR repository name
        ecr_keep_last_images: Images kept by the ECR lifecycle policy
        artifacts_bucket_name: Override for the artifacts bucket name
        ingress_rules: Ports opened on the CI security group
        extra_tags: Tags added on top of the default tag set
    """
    environment: str
    vpc_cidr: str = VPC_CIDR
    public_subnet_cidr: str = SUBNET_CIDRS["public"]
    availability_zone: str | None = None
    ami_id: str | None = None
    jenkins_instance_type: str = INSTANCE_TYPES["jenkins"]
    sonarqube_instance_type: str = INSTANCE_TYPES["sonarqube"]
    key_name: str | None = None
    ssh_cidr: str = ANY_IPV4
    root_volume_size: int = ROOT_VOLUME_SIZE
    ecr_repository_name: str | None = None
    ecr_keep_last_images: int = int(ECR_DEFAULTS["keep_last_images"])
    artifacts_bucket_name: str | None = None
    ingress_rules: tuple[IngressRule, ...] = field(default_factory=lambda: tuple(default_ingress_rules()))
    extra_tags: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        try:
            vpc = ipaddress.IPv4Network(self.vpc_cidr)
            subnet = ipaddress.IPv4Network(self.public_subnet_cidr)
            ipaddress.IPv4Network(self.ssh_cidr)
        except ValueError as e:
            raise ValueError(f"Invalid CIDR block in configuration: {e}") from e

        if not subnet.subnet_of(vpc):
            raise ValueError(
                f"public_subnet_cidr {self.public_subnet_cidr} is not inside vpc_cidr {self.vpc_cidr}"
            )
        if self.root_volume_size < 8:
            raise ValueError(f"root_volume_size must be at least 8 GB, got {self.root_volume_size}")
        if self.ecr_keep_last_images < 1:
            raise ValueError(f"ecr_keep_last_images must be positive, got {self.ecr_keep_last_images}")

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"

    def instance_type_for(self, tool: str) -> str:
        """Get the EC2 instance type for a CI tool."""
        instance_types = {
            "jenkins": self.jenkins_instance_type,
            "sonarqube": self.sonarqube_instance_type,
        }
        if tool not in instance_types:
            raise ValueError(f"Unknown CI tool: {tool}")
        return instance_types[tool]
