"""
Pulumi component resources for the CI/CD pipeline infrastructure.

Each submodule provides reusable ComponentResource classes:
- networking: VPC, public subnet, route table, security group
- security: IAM role and instance profile for CI hosts
- compute: EC2 instances for Jenkins and SonarQube
- storage: ECR repository, S3 artifacts bucket
"""
