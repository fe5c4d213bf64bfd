"""
IAM role component for CI hosts.

Creates:
- EC2 instance role assumable by ec2.amazonaws.com
- Inline policy scoped to the CI ECR repository and artifacts bucket
- Instance profile attaching the role to Jenkins and SonarQube instances
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from cicd_iac.utils.tags import create_tags


@dataclass
class IamRoleOutputs:
    """Output values from IAM role component."""
    role_arn: pulumi.Output[str]
    role_name: pulumi.Output[str]
    instance_profile_name: pulumi.Output[str]


def build_ci_policy(repository_arn: str, bucket_arn: str) -> str:
    """
    Render the CI host policy document.

    Args:
        repository_arn: ECR repository the CI host pulls from and pushes to
        bucket_arn: S3 bucket holding build artifacts

    Returns:
        JSON policy document
    """
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [
            {
                "Sid": "EcrAuth",
                "Effect": "Allow",
                "Action": ["ecr:GetAuthorizationToken"],
                "Resource": "*",
            },
            {
                "Sid": "EcrPushPull",
                "Effect": "Allow",
                "Action": [
                    "ecr:BatchCheckLayerAvailability",
                    "ecr:BatchGetImage",
                    "ecr:GetDownloadUrlForLayer",
                    "ecr:InitiateLayerUpload",
                    "ecr:UploadLayerPart",
                    "ecr:CompleteLayerUpload",
                    "ecr:PutImage",
                    "ecr:DescribeImages",
                ],
                "Resource": [repository_arn],
            },
            {
                "Sid": "ArtifactsBucketList",
                "Effect": "Allow",
                "Action": ["s3:ListBucket"],
                "Resource": [bucket_arn],
            },
            {
                "Sid": "ArtifactsObjects",
                "Effect": "Allow",
                "Action": [
                    "s3:GetObject",
                    "s3:PutObject",
                    "s3:DeleteObject",
                ],
                "Resource": [f"{bucket_arn}/*"],
            },
            {
                "Sid": "Logs",
                "Effect": "Allow",
                "Action": [
                    "logs:CreateLogGroup",
                    "logs:CreateLogStream",
                    "logs:PutLogEvents",
                ],
                "Resource": ["arn:aws:logs:*:*:*"],
            },
        ],
    })


class IamRoleComponent(pulumi.ComponentResource):
    """
    IAM role and instance profile for CI EC2 instances.

    Follows least-privilege principle with specific resource permissions.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        repository_arn: pulumi.Input[str],
        bucket_arn: pulumi.Input[str],
        extra_tags: dict[str, str] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:IamRole", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        extra_tags = extra_tags or {}

        ec2_assume_policy = json.dumps({
            "Version": "2012-10-17",
            "Statement": [{
                "Effect": "Allow",
                "Principal": {"Service": "ec2.amazonaws.com"},
                "Action": "sts:AssumeRole",
            }],
        })

        self.role = aws.iam.Role(
            f"{name}-ci-role",
            assume_role_policy=ec2_assume_policy,
            description="Role assumed by Jenkins and SonarQube hosts",
            tags=create_tags(environment, f"{name}-ci-role", **extra_tags),
            opts=child_opts,
        )

        self.policy = aws.iam.RolePolicy(
            f"{name}-ci-policy",
            role=self.role.id,
            policy=pulumi.Output.all(repository_arn, bucket_arn).apply(
                lambda arns: build_ci_policy(arns[0], arns[1])
            ),
            opts=child_opts,
        )

        self.instance_profile = aws.iam.InstanceProfile(
            f"{name}-ci-profile",
            role=self.role.name,
            tags=create_tags(environment, f"{name}-ci-profile", **extra_tags),
            opts=child_opts,
        )

        self.register_outputs({
            "role_arn": self.role.arn,
            "role_name": self.role.name,
            "instance_profile_name": self.instance_profile.name,
        })

    def get_outputs(self) -> IamRoleOutputs:
        """Get IAM role output values."""
        return IamRoleOutputs(
            role_arn=self.role.arn,
            role_name=self.role.name,
            instance_profile_name=self.instance_profile.name,
        )
