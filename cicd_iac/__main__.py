"""
Pulumi program entry point for the CI/CD pipeline infrastructure.

Instantiates all component resources in dependency order:
1. Configuration
2. VPC -> Security Group
3. S3 artifacts bucket, ECR repository
4. IAM role (scoped to the bucket and repository)
5. EC2 instances for Jenkins and SonarQube
"""

import pulumi

from cicd_iac.configs.constants import ECR_DEFAULTS, PROJECT_NAME, S3_BUCKET_SUFFIXES
from cicd_iac.configs.environment import get_config
from cicd_iac.userdata import SUPPORTED_TOOLS
from cicd_iac.utils.naming import ResourceNamer
from cicd_iac.utils.outputs import write_outputs_to_env

# Networking
from cicd_iac.components.networking.vpc import VpcComponent
from cicd_iac.components.networking.security_groups import SecurityGroupComponent

# Security
from cicd_iac.components.security.iam_roles import IamRoleComponent

# Storage
from cicd_iac.components.storage.ecr_repository import EcrRepositoryComponent
from cicd_iac.components.storage.s3_buckets import S3BucketComponent

# Compute
from cicd_iac.components.compute.ec2_instance import Ec2InstanceComponent


def main() -> None:
    """Deploy the CI/CD pipeline infrastructure."""
    config = get_config()
    namer = ResourceNamer(project=PROJECT_NAME, environment=config.environment)
    base_name = namer.name("")
    extra_tags = config.extra_tags
    disposable = not config.is_production

    # --- Layer 1: Networking Foundation ---
    pulumi.log.info("Declaring network layer")
    vpc = VpcComponent(
        name=base_name,
        environment=config.environment,
        vpc_cidr=config.vpc_cidr,
        public_subnet_cidr=config.public_subnet_cidr,
        availability_zone=config.availability_zone,
        extra_tags=extra_tags,
    )
    vpc_outputs = vpc.get_outputs()

    security_group = SecurityGroupComponent(
        name=base_name,
        environment=config.environment,
        vpc_id=vpc_outputs.vpc_id,
        ingress_rules=config.ingress_rules,
        extra_tags=extra_tags,
    )
    sg_outputs = security_group.get_outputs()

    # --- Layer 2: Storage ---
    pulumi.log.info("Declaring storage layer")
    artifacts = S3BucketComponent(
        name=base_name,
        environment=config.environment,
        bucket_name=config.artifacts_bucket_name or namer.bucket_name(S3_BUCKET_SUFFIXES["artifacts"]),
        force_destroy=disposable,
        extra_tags=extra_tags,
    )
    s3_outputs = artifacts.get_outputs()

    ecr_repository = EcrRepositoryComponent(
        name=base_name,
        environment=config.environment,
        repository_name=config.ecr_repository_name or namer.repository_name(str(ECR_DEFAULTS["repository_suffix"])),
        keep_last_images=config.ecr_keep_last_images,
        force_delete=disposable,
        extra_tags=extra_tags,
    )
    ecr_outputs = ecr_repository.get_outputs()

    # --- Layer 3: IAM Role ---
    pulumi.log.info("Declaring IAM layer")
    iam_role = IamRoleComponent(
        name=base_name,
        environment=config.environment,
        repository_arn=ecr_outputs.repository_arn,
        bucket_arn=s3_outputs.bucket_arn,
        extra_tags=extra_tags,
    )
    iam_outputs = iam_role.get_outputs()

    # --- Layer 4: Compute ---
    pulumi.log.info("Declaring compute layer")
    instances = {
        tool: Ec2InstanceComponent(
            name=namer.name(tool),
            environment=config.environment,
            tool=tool,
            instance_type=config.instance_type_for(tool),
            subnet_id=vpc_outputs.public_subnet_id,
            security_group_id=sg_outputs.security_group_id,
            instance_profile_name=iam_outputs.instance_profile_name,
            ami_id=config.ami_id,
            key_name=config.key_name,
            root_volume_size=config.root_volume_size,
            extra_tags=extra_tags,
        )
        for tool in SUPPORTED_TOOLS
    }

    # --- Exports ---
    outputs = {
        "vpc_id": vpc_outputs.vpc_id,
        "public_subnet_id": vpc_outputs.public_subnet_id,
        "security_group_id": sg_outputs.security_group_id,
        "iam_role_arn": iam_outputs.role_arn,
        "instance_profile_name": iam_outputs.instance_profile_name,
        "ecr_repository_url": ecr_outputs.repository_url,
        "artifacts_bucket": s3_outputs.bucket_name,
    }
    for tool, instance in instances.items():
        instance_outputs = instance.get_outputs()
        outputs[f"{tool}_instance_id"] = instance_outputs.instance_id
        outputs[f"{tool}_public_ip"] = instance_outputs.public_ip
        outputs[f"{tool}_url"] = instance_outputs.url

    # Write outputs to .env file for local tooling
    write_outputs_to_env(outputs, "infrastructure.env")

    # Export to Pulumi stack
    for key, value in outputs.items():
        pulumi.export(key, value)


# Execute
main()
