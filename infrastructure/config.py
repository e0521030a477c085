"""Configuration loader for asset store deployments."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from aws_cdk import RemovalPolicy

logger = logging.getLogger(__name__)

REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
  "snapshot": RemovalPolicy.SNAPSHOT,
}


@dataclass
class AssetStoreConfig:
  """Configuration for a single asset store."""

  domain: str
  asset_subdomain: str = "assets"
  bucket_name: str | None = None
  hosted_zone_id: str | None = None
  account: str | None = None
  region: str = "us-east-1"
  removal_policy: RemovalPolicy = RemovalPolicy.DESTROY
  include_ipv6: bool = False
  cors_origins: list[str] = field(default_factory=list)
  owner: str | None = None

  @property
  def asset_domain(self) -> str:
    """Fully qualified domain the assets are served from."""
    return f"{self.asset_subdomain}.{self.domain}"


def parse_removal_policy(value: str | RemovalPolicy) -> RemovalPolicy:
  """Convert a removal policy name (retain, destroy, snapshot) to the enum."""
  if isinstance(value, RemovalPolicy):
    return value
  try:
    return REMOVAL_POLICIES[value.lower()]
  except KeyError:
    raise ValueError(
      f"Unknown removal_policy {value!r}, expected one of {sorted(REMOVAL_POLICIES)}"
    ) from None


@dataclass
class Config:
  """Asset store deployments."""

  stores: list[AssetStoreConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "asset_stores.yaml") -> "Config":
    """Load configuration from YAML file."""
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    defaults = data.get("defaults") or {}
    stores: list[AssetStoreConfig] = []

    for index, store_data in enumerate(data.get("stores") or []):
      # Merge defaults with store-specific config
      merged = {**defaults, **store_data}

      if not merged.get("domain"):
        raise ValueError(f"stores[{index}] is missing 'domain' in {path}")

      stores.append(
        AssetStoreConfig(
          domain=merged["domain"],
          asset_subdomain=merged.get("asset_subdomain", "assets"),
          bucket_name=merged.get("bucket_name"),
          hosted_zone_id=merged.get("hosted_zone_id"),
          account=_optional_str(merged.get("account")),
          region=merged.get("region", "us-east-1"),
          removal_policy=parse_removal_policy(merged.get("removal_policy", "destroy")),
          include_ipv6=merged.get("include_ipv6", False),
          cors_origins=_string_list(merged.get("cors_origins"), "cors_origins"),
          owner=merged.get("owner"),
        )
      )

    logger.info("Loaded %d asset store(s) from %s", len(stores), path)
    return cls(stores=stores)


def _string_list(value: object, name: str) -> list[str]:
  """Accept a single string or a list of strings."""
  if value is None:
    return []
  if isinstance(value, str):
    return [value]
  if isinstance(value, list) and all(isinstance(v, str) for v in value):
    return list(value)
  raise ValueError(f"{name} must be a string or a list of strings, got {value!r}")


def _optional_str(value: object) -> str | None:
  # YAML reads an all-digit account id as an int
  return None if value is None else str(value)
