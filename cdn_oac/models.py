# Standard Library
from typing import Any, Optional

# Third Party
from aws_cdk import aws_cloudfront as cloudfront
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

# Local Modules
from cdn_oac.utils import OriginType, SigningBehavior, SigningProtocol


class OriginAccessControlConfig(BaseModel):
    """Resolved configuration of a CloudFront origin access control.

    Dumping with ``by_alias=True`` gives the attribute names CloudFormation
    uses for ``OriginAccessControlConfig``.

    Attributes:
        description: Description of the origin access control, if any.
        name: Name of the origin access control.
        origin_access_control_origin_type: Type of origin being signed for.
        signing_behavior: Which requests CloudFront signs.
        signing_protocol: Protocol used to sign requests.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        use_enum_values=True,
        alias_generator=to_camel,
    )

    description: Optional[str] = None
    name: str
    origin_access_control_origin_type: OriginType
    signing_behavior: SigningBehavior
    signing_protocol: SigningProtocol

    def to_cfn_property(
        self,
    ) -> cloudfront.CfnOriginAccessControl.OriginAccessControlConfigProperty:
        """Convert to the L1 property type of ``CfnOriginAccessControl``."""
        return cloudfront.CfnOriginAccessControl.OriginAccessControlConfigProperty(
            description=self.description,
            name=self.name,
            origin_access_control_origin_type=(
                self.origin_access_control_origin_type
            ),
            signing_behavior=self.signing_behavior,
            signing_protocol=self.signing_protocol,
        )


class OriginAccessControlProps(BaseModel):
    """Properties of a CloudFront origin access control.

    Attributes:
        distribution: The distribution that uses the origin access control to
            sign requests to its origin.
        origin_access_control_name: Name of the origin access control. A name
            is generated when omitted.
        description: Description of the origin access control.
        origin_type: Type of origin, ``S3`` when omitted.
        signing_behavior: Which requests CloudFront signs, ``always`` when
            omitted.
        signing_protocol: Protocol used to sign requests, ``sigv4`` when
            omitted.
    """

    model_config = ConfigDict(frozen=True)

    # cloudfront.IDistribution; jsii interfaces can't be checked with isinstance
    distribution: Any = Field(
        ..., description="Distribution that uses the origin access control"
    )
    origin_access_control_name: Optional[str] = Field(
        None, description="Name of the origin access control"
    )
    description: Optional[str] = Field(
        None, description="Description of the origin access control"
    )
    origin_type: OriginType = Field(
        OriginType.s3, description="Type of origin being signed for"
    )
    signing_behavior: SigningBehavior = Field(
        SigningBehavior.always, description="Which requests CloudFront signs"
    )
    signing_protocol: SigningProtocol = Field(
        SigningProtocol.sigv4, description="Protocol used to sign requests"
    )

    @field_validator("distribution")
    @classmethod
    def _distribution_required(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("distribution is required")
        return value

    @field_validator(
        "origin_type", "signing_behavior", "signing_protocol", mode="before"
    )
    @classmethod
    def _none_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        # An explicit None means "use the default", same as omitting the key
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    def resolve(self, name: str) -> OriginAccessControlConfig:
        """Resolve the properties into an origin access control config.

        Parameters
        ----------
        name : str
            The final name of the origin access control, either
            ``origin_access_control_name`` or a generated one.

        Returns
        -------
        OriginAccessControlConfig
            The configuration with every enum field set.
        """
        return OriginAccessControlConfig(
            description=self.description,
            name=name,
            origin_access_control_origin_type=self.origin_type,
            signing_behavior=self.signing_behavior,
            signing_protocol=self.signing_protocol,
        )
