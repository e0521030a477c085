"""CloudFront distribution in front of the asset bucket."""

from aws_cdk import Annotations, Stack, Token
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct

# CloudFront only accepts ACM certificates issued in this region
CLOUDFRONT_CERTIFICATE_REGION = "us-east-1"


class AssetDistribution(Construct):
  """HTTPS-only, read-only CloudFront distribution with the bucket as origin."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    certificate: acm.ICertificate,
    domain_name: str,
  ) -> None:
    super().__init__(scope, id)

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        origin=origins.S3BucketOrigin.with_bucket_defaults(bucket),
        compress=True,
        allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD_OPTIONS,
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
      ),
      domain_names=[domain_name],
      certificate=certificate,
      minimum_protocol_version=cloudfront.SecurityPolicyProtocol.TLS_V1_2_2021,
    )

    region = Stack.of(self).region
    if not Token.is_unresolved(region) and region != CLOUDFRONT_CERTIFICATE_REGION:
      Annotations.of(self).add_warning_v2(
        "asset-store:certificate-region",
        f"Certificate is issued in {region}; CloudFront requires "
        f"{CLOUDFRONT_CERTIFICATE_REGION}",
      )
