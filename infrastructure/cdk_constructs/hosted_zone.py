"""Route 53 hosted zone resolution."""

from aws_cdk import aws_route53 as route53
from constructs import Construct


class HostedZoneLookup(Construct):
  """Reference to an existing Route 53 hosted zone (never created here)."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    hosted_zone_id: str | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.domain_name = domain_name

    if hosted_zone_id:
      self.hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
        self,
        "HostedZone",
        hosted_zone_id=hosted_zone_id,
        zone_name=domain_name,
      )
    else:
      # Requires a stack with a concrete account and region
      self.hosted_zone = route53.HostedZone.from_lookup(
        self,
        "HostedZone",
        domain_name=domain_name,
      )
