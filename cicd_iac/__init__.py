"""
Pulumi infrastructure-as-code for the CI/CD pipeline.

This package defines AWS infrastructure including:
- VPC with a public subnet, internet gateway and route table
- Security group opening SSH, HTTP(S), Jenkins and SonarQube ports
- IAM role and instance profile for CI hosts
- EC2 instances for Jenkins and SonarQube, bootstrapped from user data
- ECR repository for CI-built images
- S3 bucket for build artifacts
"""

__version__ = "0.1.0"
