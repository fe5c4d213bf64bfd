"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from cicd_iac.configs.base import EnvironmentConfig
from cicd_iac.configs.environment import get_config
from cicd_iac.configs.ingress import IngressRule, default_ingress_rules, parse_ingress_rules
from cicd_iac.configs.constants import (
    VPC_CIDR,
    SUBNET_CIDRS,
    DEFAULT_TAGS,
    INSTANCE_TYPES,
    PORTS,
)

__all__ = [
    "EnvironmentConfig",
    "get_config",
    "IngressRule",
    "default_ingress_rules",
    "parse_ingress_rules",
    "VPC_CIDR",
    "SUBNET_CIDRS",
    "DEFAULT_TAGS",
    "INSTANCE_TYPES",
    "PORTS",
]
