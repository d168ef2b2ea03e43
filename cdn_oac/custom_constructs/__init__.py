"""This module provides custom constructs for serving a private S3 bucket
through CloudFront with Origin Access Control.

The constructs included in this module are:
- CustomCdn: CloudFront distribution with secure defaults.
- CustomOriginAccessControl: CloudFront Origin Access Control with enum
  defaults and a grant principal scoped to one distribution.
- CustomS3Bucket: Private S3 bucket to use as the origin.
"""

from .cloudfront_distribution import CustomCdn
from .origin_access_control import CustomOriginAccessControl
from .s3_bucket import CustomS3Bucket

__all__ = [
    "CustomCdn",
    "CustomOriginAccessControl",
    "CustomS3Bucket",
]
