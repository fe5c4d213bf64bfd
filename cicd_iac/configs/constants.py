"""
Infrastructure constants for the CI/CD pipeline stack.

Contains CIDR blocks, instance types, ports, and default configurations.
"""

from typing import Final

# Project identifier used in resource names and tags
PROJECT_NAME: Final[str] = "cicd-pipeline"

# VPC Configuration
VPC_CIDR: Final[str] = "10.0.0.0/16"

# Subnet CIDR blocks
SUBNET_CIDRS: Final[dict[str, str]] = {
    "public": "10.0.1.0/24",  # Jenkins + SonarQube hosts
}

# Anywhere on the internet
ANY_IPV4: Final[str] = "0.0.0.0/0"

# EC2 Instance types by CI tool
INSTANCE_TYPES: Final[dict[str, str]] = {
    "jenkins": "t2.medium",
    "sonarqube": "t2.medium",  # SonarQube's embedded Elasticsearch needs >= 2GB
}

# Root volume size in GB
ROOT_VOLUME_SIZE: Final[int] = 20

# Ubuntu 22.04 AMI lookup (bootstrap scripts rely on apt)
UBUNTU_AMI_OWNER: Final[str] = "099720109477"  # Canonical
UBUNTU_AMI_NAME_FILTER: Final[str] = "ubuntu/images/hvm-ssd/ubuntu-jammy-22.04-amd64-server-*"

# Port configurations
PORTS: Final[dict[str, int]] = {
    "ssh": 22,
    "http": 80,
    "https": 443,
    "jenkins": 8080,
    "sonarqube": 9000,
}

# Web UI port per CI tool
TOOL_PORTS: Final[dict[str, int]] = {
    "jenkins": PORTS["jenkins"],
    "sonarqube": PORTS["sonarqube"],
}

# ECR configuration
ECR_DEFAULTS: Final[dict[str, int | str]] = {
    "repository_suffix": "app",
    "keep_last_images": 10,
}

# S3 bucket name suffixes
S3_BUCKET_SUFFIXES: Final[dict[str, str]] = {
    "artifacts": "artifacts",
}

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": PROJECT_NAME,
    "ManagedBy": "pulumi",
}
