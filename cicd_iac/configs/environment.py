"""
Environment configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import ipaddress

import pulumi

from cicd_iac.configs.base import EnvironmentConfig
from cicd_iac.configs.constants import ANY_IPV4, ECR_DEFAULTS, INSTANCE_TYPES, ROOT_VOLUME_SIZE, SUBNET_CIDRS, VPC_CIDR
from cicd_iac.configs.ingress import default_ingress_rules, parse_ingress_rules


def get_config() -> EnvironmentConfig:
    """
    Load environment configuration from Pulumi stack config.

    Returns:
        EnvironmentConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
        ValueError: If a value is present but malformed
    """
    config = pulumi.Config()

    ssh_cidr = config.get("ssh_cidr") or ANY_IPV4
    try:
        ipaddress.IPv4Network(ssh_cidr)
    except ValueError as e:
        raise ValueError(f"Invalid CIDR block in configuration: {e}") from e

    raw_rules = config.get_object("ingress_rules")
    if raw_rules is None:
        ingress_rules = default_ingress_rules(ssh_cidr)
    elif isinstance(raw_rules, list):
        ingress_rules = parse_ingress_rules(raw_rules)
    else:
        raise ValueError("ingress_rules must be a list of rule objects")

    extra_tags = config.get_object("tags") or {}
    if not isinstance(extra_tags, dict):
        raise ValueError("tags must be a mapping of tag names to values")

    env_config = EnvironmentConfig(
        environment=config.require("environment"),
        vpc_cidr=config.get("vpc_cidr") or VPC_CIDR,
        public_subnet_cidr=config.get("public_subnet_cidr") or SUBNET_CIDRS["public"],
        availability_zone=config.get("availability_zone"),
        ami_id=config.get("ami_id"),
        jenkins_instance_type=config.get("jenkins_instance_type") or INSTANCE_TYPES["jenkins"],
        sonarqube_instance_type=config.get("sonarqube_instance_type") or INSTANCE_TYPES["sonarqube"],
        key_name=config.get("key_name"),
        ssh_cidr=ssh_cidr,
        root_volume_size=int(config.get("root_volume_size") or ROOT_VOLUME_SIZE),
        ecr_repository_name=config.get("ecr_repository_name"),
        ecr_keep_last_images=int(config.get("ecr_keep_last_images") or ECR_DEFAULTS["keep_last_images"]),
        artifacts_bucket_name=config.get("artifacts_bucket_name"),
        ingress_rules=tuple(ingress_rules),
        extra_tags={str(k): str(v) for k, v in extra_tags.items()},
    )

    if env_config.is_production:
        for rule in env_config.ingress_rules:
            if rule.port == 22 and rule.is_open_to_world:
                pulumi.log.warn("SSH is open to 0.0.0.0/0 in production; set ssh_cidr to restrict it")

    return env_config
