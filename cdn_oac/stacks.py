# Standard Library
from typing import Optional

# Third Party
from aws_cdk import (
    Stack,
    CfnOutput,
    aws_cloudfront_origins as origins,
    aws_certificatemanager as acm,
)
from aws_lambda_powertools import Logger
from constructs import Construct

# Local Modules
from cdn_oac.custom_constructs import (
    CustomCdn,
    CustomOriginAccessControl,
    CustomS3Bucket,
)
from cdn_oac.utils import StackConfig, load_stack_config

# Initialize logger
logger = Logger(service="cdn-oac-stack")


class OriginAccessControlStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        config: Optional[StackConfig] = None,
        **kwargs,
    ) -> None:
        """Stack serving a private S3 bucket through CloudFront with OAC.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        construct_id : str
            The ID of the construct.
        config : Optional[StackConfig], optional
            Stack configuration, by default read from the CDK context
        """
        super().__init__(scope, construct_id, **kwargs)

        # region Configuration
        self.config = config or load_stack_config(self.node)
        self.stack_suffix = self.config.stack_suffix.lower()
        logger.info(
            f"Assembling stack {construct_id} with suffix "
            f"'{self.stack_suffix}'"
        )
        # endregion

        # region S3 Bucket
        self.origin_bucket = CustomS3Bucket(
            scope=self,
            id="OriginBucket",
            name=self.config.bucket_name,
            stack_suffix=self.stack_suffix,
        ).bucket
        # endregion

        # region CloudFront Distribution
        certificate = None
        if self.config.certificate_arn:
            certificate = acm.Certificate.from_certificate_arn(
                self, "ImportedCertificate", self.config.certificate_arn
            )

        self.cdn = CustomCdn(
            scope=self,
            id="OriginCdn",
            name="cdn-oac-distribution",
            origin=origins.S3BucketOrigin.with_bucket_defaults(
                self.origin_bucket
            ),
            domain_name=self.config.domain_name,
            certificate=certificate,
            stack_suffix=self.stack_suffix,
        )
        self.distribution = self.cdn.distribution
        # endregion

        # region Origin Access Control
        self.origin_access_control = CustomOriginAccessControl(
            scope=self,
            id="OriginAccessControl",
            distribution=self.distribution,
            origin_access_control_name=self.config.origin_access_control_name,
            description=self.config.origin_access_control_description,
            signing_behavior=self.config.signing_behavior,
        )
        self.cdn.use_origin_access_control(self.origin_access_control)

        # Only this distribution may read from the bucket
        self.origin_bucket.grant_read(self.origin_access_control)
        # endregion

        # region Outputs
        CfnOutput(
            self,
            "OriginAccessControlNameOutput",
            value=self.origin_access_control.origin_access_control_name,
            description="Name of the CloudFront Origin Access Control",
        )
        CfnOutput(
            self,
            "OriginAccessControlIdOutput",
            value=self.origin_access_control.origin_access_control_id,
            description="ID of the CloudFront Origin Access Control",
            export_name=f"cdn-oac-origin-access-control-id{self.stack_suffix}",
        )
        CfnOutput(
            self,
            "DistributionDomainNameOutput",
            value=self.distribution.distribution_domain_name,
            description="Domain name of the CloudFront distribution",
        )
        # endregion
