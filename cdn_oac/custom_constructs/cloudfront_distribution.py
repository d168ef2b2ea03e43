# Standard Library
from typing import Optional

# Third Party
from aws_cdk import (
    aws_cloudfront as cloudfront,
    aws_certificatemanager as acm,
)
from constructs import Construct

# Local Modules
from cdn_oac.custom_constructs.origin_access_control import (
    CustomOriginAccessControl,
)


class CustomCdn(Construct):
    def __init__(
        self,
        scope: Construct,
        id: str,
        name: str,
        origin: cloudfront.IOrigin,
        domain_name: Optional[str] = None,
        certificate: Optional[acm.ICertificate] = None,
        stack_suffix: Optional[str] = "",
        default_root_object: Optional[str] = "index.html",
    ) -> None:
        """Custom CloudFront Distribution Construct for AWS CDK.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        name : str
            The name of the CloudFront distribution, used as its comment.
        origin : cloudfront.IOrigin
            The origin for the default behavior of the distribution.
        domain_name : Optional[str], optional
            Custom domain name for the distribution, by default None
        certificate : Optional[acm.ICertificate], optional
            Certificate for the custom domain name, by default None
        stack_suffix : Optional[str], optional
            Suffix to append to the CloudFront distribution name, by default ""
        default_root_object : Optional[str], optional
            The default root object for the CloudFront distribution, by default "index.html"
        """
        super().__init__(scope, id)

        # Append stack suffix to name if provided
        if stack_suffix:
            name = f"{name}{stack_suffix}"

        # A custom domain is only usable together with a certificate
        if bool(domain_name) != bool(certificate):
            raise ValueError(
                "domain_name and certificate must be provided together"
            )

        # The distribution config holds the origins in this order
        self.origins = [origin]

        self.distribution = cloudfront.Distribution(
            self,
            id,
            default_root_object=default_root_object,
            default_behavior=cloudfront.BehaviorOptions(
                origin=origin,
                viewer_protocol_policy=(
                    cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS
                ),
                allowed_methods=(
                    cloudfront.AllowedMethods.ALLOW_GET_HEAD_OPTIONS
                ),
                cached_methods=(
                    cloudfront.CachedMethods.CACHE_GET_HEAD_OPTIONS
                ),
                compress=True,
            ),
            domain_names=[domain_name] if domain_name else None,
            certificate=certificate,
            comment=name,
            price_class=cloudfront.PriceClass.PRICE_CLASS_100,
        )

    def use_origin_access_control(
        self,
        origin_access_control: CustomOriginAccessControl,
        origin_index: int = 0,
    ) -> None:
        """Sign requests to one of the distribution's origins with an OAC.

        Parameters
        ----------
        origin_access_control : CustomOriginAccessControl
            The OAC whose id is attached to the origin.
        origin_index : int, optional
            Position of the origin in the distribution config, by default 0

        Raises
        ------
        ValueError
            If ``origin_index`` does not point at an origin of the
            distribution.
        """
        if not 0 <= origin_index < len(self.origins):
            raise ValueError(
                f"origin_index must be between 0 and {len(self.origins) - 1}, "
                f"got {origin_index}"
            )

        cfn_distribution = self.distribution.node.default_child
        origin_path = f"DistributionConfig.Origins.{origin_index}"
        cfn_distribution.add_property_override(
            f"{origin_path}.OriginAccessControlId",
            origin_access_control.origin_access_control_id,
        )
        # OAC and the legacy origin access identity are mutually exclusive
        cfn_distribution.add_property_override(
            f"{origin_path}.S3OriginConfig.OriginAccessIdentity", ""
        )
