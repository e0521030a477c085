"""CDK stack for a single asset store."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from infrastructure.cdk_constructs import AssetStoreConstruct
from infrastructure.config import AssetStoreConfig


class AssetStoreStack(cdk.Stack):
  """Stack for a single asset store."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    store_config: AssetStoreConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.store = AssetStoreConstruct(
      self,
      "AssetStore",
      domain_name=store_config.domain,
      asset_subdomain=store_config.asset_subdomain,
      bucket_name=store_config.bucket_name,
      hosted_zone_id=store_config.hosted_zone_id,
      removal_policy=store_config.removal_policy,
      include_ipv6=store_config.include_ipv6,
      cors_origins=store_config.cors_origins,
    )

    cdk.Tags.of(self).add("Project", "asset-store")
    cdk.Tags.of(self).add("Domain", store_config.domain)
    if store_config.owner:
      cdk.Tags.of(self).add("Owner", store_config.owner)
