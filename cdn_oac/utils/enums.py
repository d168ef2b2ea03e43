# Standard Library
from enum import Enum


class OriginType(str, Enum):
    """Enumeration of origin types an origin access control can sign for.

    Attributes:
        s3: An S3 bucket origin.
    """

    s3 = "S3"


class SigningBehavior(str, Enum):
    """Enumeration of which requests CloudFront signs.

    Attributes:
        always: Sign all requests sent to the origin.
        never: Sign no requests, effectively disabling origin access control.
        no_override: Sign only when the viewer did not send an
            ``Authorization`` header.
    """

    always = "always"
    never = "never"
    no_override = "no-override"


class SigningProtocol(str, Enum):
    """Enumeration of protocols CloudFront uses to sign origin requests.

    Attributes:
        sigv4: AWS Signature Version 4.
    """

    sigv4 = "sigv4"
