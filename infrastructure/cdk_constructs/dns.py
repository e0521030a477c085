"""Route 53 alias records for the distribution."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct


class AliasRecords(Construct):
  """Alias records pointing a subdomain at a CloudFront distribution."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    hosted_zone: route53.IHostedZone,
    record_name: str,
    distribution: cloudfront.IDistribution,
    include_ipv6: bool = False,
  ) -> None:
    super().__init__(scope, id)

    target = route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution))

    self.a_record = route53.ARecord(
      self,
      "ARecord",
      zone=hosted_zone,
      record_name=record_name,
      target=target,
    )

    self.aaaa_record = None
    if include_ipv6:
      self.aaaa_record = route53.AaaaRecord(
        self,
        "AaaaRecord",
        zone=hosted_zone,
        record_name=record_name,
        target=target,
      )
