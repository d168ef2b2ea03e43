"""Unit tests for the cloudfront_distribution module."""

# Third Party
import pytest
from aws_cdk import (
    App,
    Stack,
    aws_s3 as s3,
    aws_cloudfront_origins as origins,
    aws_certificatemanager as acm,
)
from aws_cdk.assertions import Match, Template

# Local Modules
from cdn_oac.custom_constructs import CustomCdn, CustomOriginAccessControl

DISTRIBUTION_TYPE = "AWS::CloudFront::Distribution"


class TestCustomCdn:
    """Test cases for the CustomCdn construct."""

    def setup_method(self):
        """Set up test fixtures before each test method."""
        self.app = App()
        self.stack = Stack(self.app, "TestStack")
        self.bucket = s3.Bucket(self.stack, "Bucket")
        self.origin = origins.S3BucketOrigin.with_bucket_defaults(self.bucket)

    def test_defaults(self):
        """Test the distribution settings and suffixed comment."""
        CustomCdn(
            self.stack,
            "Cdn",
            name="site-cdn",
            origin=self.origin,
            stack_suffix="-dev",
        )

        Template.from_stack(self.stack).has_resource_properties(
            DISTRIBUTION_TYPE,
            {
                "DistributionConfig": {
                    "Comment": "site-cdn-dev",
                    "DefaultRootObject": "index.html",
                    "PriceClass": "PriceClass_100",
                    "DefaultCacheBehavior": {
                        "Compress": True,
                        "ViewerProtocolPolicy": "redirect-to-https",
                    },
                    "Aliases": Match.absent(),
                }
            },
        )

    def test_custom_domain(self):
        """Test that a custom domain is rendered as an alias."""
        certificate = acm.Certificate.from_certificate_arn(
            self.stack,
            "Certificate",
            "arn:aws:acm:us-east-1:123456789012:certificate/abc-123",
        )

        CustomCdn(
            self.stack,
            "Cdn",
            name="site-cdn",
            origin=self.origin,
            domain_name="cdn.example.com",
            certificate=certificate,
        )

        Template.from_stack(self.stack).has_resource_properties(
            DISTRIBUTION_TYPE,
            {"DistributionConfig": {"Aliases": ["cdn.example.com"]}},
        )

    def test_domain_without_certificate_raises(self):
        """Test that a domain name requires a certificate."""
        with pytest.raises(ValueError):
            CustomCdn(
                self.stack,
                "Cdn",
                name="site-cdn",
                origin=self.origin,
                domain_name="cdn.example.com",
            )

    def test_use_origin_access_control(self):
        """Test that the origin is signed with the OAC id."""
        cdn = CustomCdn(self.stack, "Cdn", name="site-cdn", origin=self.origin)
        oac = CustomOriginAccessControl(
            self.stack, "Oac", distribution=cdn.distribution
        )

        cdn.use_origin_access_control(oac)

        oac_logical_id = self.stack.get_logical_id(oac.node.default_child)
        Template.from_stack(self.stack).has_resource_properties(
            DISTRIBUTION_TYPE,
            {
                "DistributionConfig": {
                    "Origins": [
                        {
                            "OriginAccessControlId": {
                                "Fn::GetAtt": [oac_logical_id, "Id"]
                            },
                            "S3OriginConfig": {"OriginAccessIdentity": ""},
                        }
                    ]
                }
            },
        )

    def test_use_origin_access_control_negative_index(self):
        """Test that a negative origin index is rejected."""
        cdn = CustomCdn(self.stack, "Cdn", name="site-cdn", origin=self.origin)
        oac = CustomOriginAccessControl(
            self.stack, "Oac", distribution=cdn.distribution
        )

        with pytest.raises(ValueError):
            cdn.use_origin_access_control(oac, origin_index=-1)

    def test_use_origin_access_control_index_past_last_origin(self):
        """Test that an index beyond the distribution's origins is rejected
        and leaves the template untouched."""
        cdn = CustomCdn(self.stack, "Cdn", name="site-cdn", origin=self.origin)
        oac = CustomOriginAccessControl(
            self.stack, "Oac", distribution=cdn.distribution
        )

        with pytest.raises(ValueError):
            cdn.use_origin_access_control(oac, origin_index=3)

        distributions = Template.from_stack(self.stack).find_resources(
            DISTRIBUTION_TYPE
        )
        (distribution,) = distributions.values()
        origins = distribution["Properties"]["DistributionConfig"]["Origins"]
        assert len(origins) == 1
        assert "OriginAccessControlId" not in origins[0]
