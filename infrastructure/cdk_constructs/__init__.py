"""CDK constructs for asset store infrastructure."""

from .asset_store import AssetStoreConstruct
from .certificate import DnsValidatedCertificate
from .distribution import AssetDistribution
from .dns import AliasRecords
from .hosted_zone import HostedZoneLookup
from .storage import AssetBucket

__all__ = [
  "AliasRecords",
  "AssetBucket",
  "AssetDistribution",
  "AssetStoreConstruct",
  "DnsValidatedCertificate",
  "HostedZoneLookup",
]
