# Standard Library
from typing import Optional, List

# Third Party
from aws_cdk import (
    Duration,
    RemovalPolicy,
    aws_s3 as s3,
)
from constructs import Construct


class CustomS3Bucket(Construct):
    def __init__(
        self,
        scope: Construct,
        id: str,
        name: Optional[str] = None,
        stack_suffix: Optional[str] = "",
        versioned: Optional[bool] = False,
        lifecycle_rules: Optional[List[s3.LifecycleRule]] = None,
        removal_policy: Optional[RemovalPolicy] = RemovalPolicy.RETAIN,
        **kwargs,
    ) -> None:
        """Custom S3 Bucket Construct for a private CloudFront origin.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        name : Optional[str], optional
            The name of the S3 bucket, by default a name is generated
        stack_suffix : Optional[str], optional
            Suffix to append to the S3 bucket name, by default ""
        versioned : Optional[bool], optional
            Whether the S3 bucket should be versioned, by default False
        lifecycle_rules : Optional[List[s3.LifecycleRule]], optional
            Lifecycle rules for the S3 bucket, by default None
        removal_policy : Optional[RemovalPolicy], optional
            What happens to the bucket when it leaves the stack, by default
            RemovalPolicy.RETAIN
        """
        super().__init__(scope, id, **kwargs)

        # Append stack suffix to name if provided
        if name and stack_suffix:
            name = f"{name}{stack_suffix}"

        # Set default lifecycle rules if not provided
        if lifecycle_rules is None:
            lifecycle_rules = [
                # Abort incomplete multipart uploads rule
                s3.LifecycleRule(
                    id="AbortIncompleteMultipartUploads",
                    enabled=True,
                    abort_incomplete_multipart_upload_after=Duration.days(7),
                ),
            ]

        # Only CloudFront reaches the objects, through the bucket policy
        self.bucket = s3.Bucket(
            self,
            "DefaultBucket",
            bucket_name=name,
            versioned=versioned,
            encryption=s3.BucketEncryption.S3_MANAGED,
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            enforce_ssl=True,
            removal_policy=removal_policy,
            lifecycle_rules=lifecycle_rules,
        )
