"""Stack configuration read from CDK context values."""

# Standard Library
from typing import Optional

# Third Party
from aws_lambda_powertools import Logger
from constructs import Node
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Local Modules
from cdn_oac.utils.enums import SigningBehavior

# Initialize logger
logger = Logger(service="cdn-oac-config")


class StackConfig(BaseModel):
    """Configuration for the origin access control stack.

    Attributes:
        stack_suffix: Suffix appended to resource names, e.g. "-dev".
        bucket_name: Base name of the origin bucket.
        origin_access_control_name: Name of the origin access control.
        origin_access_control_description: Description of the origin access
            control.
        signing_behavior: Which requests CloudFront signs.
        domain_name: Custom domain name for the distribution.
        certificate_arn: ACM certificate ARN for the custom domain.
    """

    model_config = ConfigDict(frozen=True)

    stack_suffix: str = Field("", description="Suffix for resource names")
    bucket_name: Optional[str] = Field(
        None, description="Base name of the origin bucket"
    )
    origin_access_control_name: Optional[str] = Field(
        None, description="Name of the origin access control"
    )
    origin_access_control_description: Optional[str] = Field(
        None, description="Description of the origin access control"
    )
    signing_behavior: SigningBehavior = Field(
        SigningBehavior.always, description="Which requests CloudFront signs"
    )
    domain_name: Optional[str] = Field(
        None, description="Custom domain name for the distribution"
    )
    certificate_arn: Optional[str] = Field(
        None, description="ACM certificate ARN for the custom domain"
    )


def load_stack_config(node: Node) -> StackConfig:
    """Build a ``StackConfig`` from the context values of a construct node.

    Keys that are not set in the context keep their defaults.

    Parameters
    ----------
    node : Node
        The construct node whose context is read.

    Returns
    -------
    StackConfig
        The validated stack configuration.

    Raises
    ------
    ValidationError
        If a context value has the wrong type or an unknown enum value.
    """
    values = {}
    for key in StackConfig.model_fields:
        value = node.try_get_context(key)
        if value is not None:
            values[key] = value

    try:
        config = StackConfig(**values)
    except ValidationError as e:
        logger.exception(f"Invalid stack configuration in CDK context: {e}")
        raise e

    logger.debug(f"Loaded stack configuration: {config.model_dump()}")
    return config
