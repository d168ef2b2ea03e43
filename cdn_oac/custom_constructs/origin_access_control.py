# Standard Library
from typing import Optional, Union

# Third Party
import jsii
from aws_cdk import (
    ArnFormat,
    Names,
    Resource,
    Stack,
    aws_iam as iam,
    aws_cloudfront as cloudfront,
)
from aws_lambda_powertools import Logger
from constructs import Construct

# Local Modules
from cdn_oac.models import OriginAccessControlProps
from cdn_oac.utils import OriginType, SigningBehavior, SigningProtocol

# Initialize logger
logger = Logger(service="cdn-oac-origin-access-control")

# CloudFormation limit for OriginAccessControlConfig.Name
MAX_NAME_LENGTH = 64


@jsii.implements(iam.IGrantable)
class CustomOriginAccessControl(Resource):
    def __init__(
        self,
        scope: Construct,
        id: str,
        distribution: cloudfront.IDistribution,
        origin_access_control_name: Optional[str] = None,
        description: Optional[str] = None,
        origin_type: Optional[Union[OriginType, str]] = None,
        signing_behavior: Optional[Union[SigningBehavior, str]] = None,
        signing_protocol: Optional[Union[SigningProtocol, str]] = None,
    ) -> None:
        """Custom CloudFront Origin Access Control (OAC) Construct for AWS CDK.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        distribution : cloudfront.IDistribution
            The distribution that uses this OAC to sign requests to its origin.
        origin_access_control_name : Optional[str], optional
            A name to identify the OAC, by default a name is generated
        description : Optional[str], optional
            A description of the OAC, by default None
        origin_type : Optional[Union[OriginType, str]], optional
            The type of origin this OAC is for, by default OriginType.s3
        signing_behavior : Optional[Union[SigningBehavior, str]], optional
            Which requests CloudFront signs, by default SigningBehavior.always
        signing_protocol : Optional[Union[SigningProtocol, str]], optional
            How CloudFront signs requests, by default SigningProtocol.sigv4
        """
        # An empty name means "generate one", same as omitting it
        origin_access_control_name = origin_access_control_name or None

        super().__init__(scope, id, physical_name=origin_access_control_name)

        self.props = OriginAccessControlProps(
            distribution=distribution,
            origin_access_control_name=origin_access_control_name,
            description=description,
            origin_type=origin_type,
            signing_behavior=signing_behavior,
            signing_protocol=signing_protocol,
        )

        name = origin_access_control_name or Names.unique_resource_name(
            self, max_length=MAX_NAME_LENGTH
        )
        self.config = self.props.resolve(name)
        logger.debug(
            f"Resolved origin access control {self.node.path}: "
            f"{self.config.model_dump(by_alias=True)}"
        )

        # Create the CloudFront Origin Access Control
        resource = cloudfront.CfnOriginAccessControl(
            self,
            "Resource",
            origin_access_control_config=self.config.to_cfn_property(),
        )

        # `Ref` on this resource type returns the id, so the name is taken
        # from the resolved config instead
        self.origin_access_control_name = self.config.name
        self.origin_access_control_id = resource.attr_id

        # CloudFront may only use this OAC on behalf of the given distribution
        self._grant_principal = iam.ServicePrincipal(
            "cloudfront.amazonaws.com",
            conditions={
                "StringEquals": {
                    "AWS:SourceArn": self._distribution_arn(distribution),
                },
            },
        )

    @classmethod
    def from_props(
        cls,
        scope: Construct,
        id: str,
        props: OriginAccessControlProps,
    ) -> "CustomOriginAccessControl":
        """Create the construct from an ``OriginAccessControlProps`` model.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        props : OriginAccessControlProps
            The properties of the OAC.

        Returns
        -------
        CustomOriginAccessControl
            The created construct.
        """
        return cls(
            scope,
            id,
            distribution=props.distribution,
            origin_access_control_name=props.origin_access_control_name,
            description=props.description,
            origin_type=props.origin_type,
            signing_behavior=props.signing_behavior,
            signing_protocol=props.signing_protocol,
        )

    @property
    def grant_principal(self) -> iam.IPrincipal:
        """The CloudFront service principal scoped to the distribution."""
        return self._grant_principal

    def _distribution_arn(self, distribution: cloudfront.IDistribution) -> str:
        return Stack.of(self).format_arn(
            service="cloudfront",
            region="",
            resource="distribution",
            resource_name=distribution.distribution_id,
            arn_format=ArnFormat.SLASH_RESOURCE_NAME,
        )
