"""CloudFront Origin Access Control constructs and stack for AWS CDK."""
