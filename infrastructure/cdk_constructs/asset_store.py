"""Composite construct for the complete asset store."""

from collections.abc import Sequence

from aws_cdk import CfnOutput, RemovalPolicy
from constructs import Construct

from infrastructure.graph import ResourceGraph

from .certificate import DnsValidatedCertificate
from .distribution import AssetDistribution
from .dns import AliasRecords
from .hosted_zone import HostedZoneLookup
from .storage import AssetBucket


class AssetStoreConstruct(Construct):
  """Static assets served over HTTPS from ``<asset_subdomain>.<domain_name>``.

  Creates:
  - Lookup of the existing Route 53 hosted zone for the domain
  - ACM certificate for the domain and its wildcard (DNS validated)
  - Public-read S3 bucket for the assets
  - CloudFront distribution with the bucket as origin
  - Route 53 alias record for the asset subdomain
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    asset_subdomain: str = "assets",
    bucket_name: str | None = None,
    hosted_zone_id: str | None = None,
    removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
    include_ipv6: bool = False,
    cors_origins: Sequence[str] = (),
  ) -> None:
    super().__init__(scope, id)

    self.asset_domain = f"{asset_subdomain}.{domain_name}"

    graph = ResourceGraph()
    graph.add(
      "zone",
      lambda _: HostedZoneLookup(
        self,
        "Zone",
        domain_name=domain_name,
        hosted_zone_id=hosted_zone_id,
      ),
    )
    graph.add(
      "certificate",
      lambda deps: DnsValidatedCertificate(
        self,
        "Certificate",
        domain_name=domain_name,
        hosted_zone=deps["zone"].hosted_zone,
        removal_policy=removal_policy,
      ),
      depends_on=["zone"],
    )
    graph.add(
      "bucket",
      lambda _: AssetBucket(
        self,
        "Storage",
        bucket_name=bucket_name,
        removal_policy=removal_policy,
        cors_origins=cors_origins,
      ),
    )
    graph.add(
      "distribution",
      lambda deps: AssetDistribution(
        self,
        "Distribution",
        bucket=deps["bucket"].bucket,
        certificate=deps["certificate"].certificate,
        domain_name=self.asset_domain,
      ),
      depends_on=["bucket", "certificate"],
    )
    graph.add(
      "record",
      lambda deps: AliasRecords(
        self,
        "Dns",
        hosted_zone=deps["zone"].hosted_zone,
        record_name=self.asset_domain,
        distribution=deps["distribution"].distribution,
        include_ipv6=include_ipv6,
      ),
      depends_on=["zone", "distribution"],
    )

    resources = graph.build()
    self.construction_order = list(resources)

    self.zone: HostedZoneLookup = resources["zone"]
    self.certificate: DnsValidatedCertificate = resources["certificate"]
    self.bucket: AssetBucket = resources["bucket"]
    self.distribution: AssetDistribution = resources["distribution"]
    self.dns: AliasRecords = resources["record"]

    # Outputs
    CfnOutput(
      self,
      "BucketName",
      value=self.bucket.bucket.bucket_name,
      description="S3 bucket name",
    )
    CfnOutput(
      self,
      "DistributionId",
      value=self.distribution.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
    CfnOutput(
      self,
      "DistributionDomainName",
      value=self.distribution.distribution.distribution_domain_name,
      description="CloudFront distribution domain name",
    )
    CfnOutput(
      self,
      "AssetUrl",
      value=f"https://{self.asset_domain}",
      description="Public URL of the asset store",
    )
    CfnOutput(
      self,
      "HostedZoneId",
      value=self.zone.hosted_zone.hosted_zone_id,
      description="Route 53 hosted zone ID",
    )
