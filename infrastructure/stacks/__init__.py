"""CDK stacks for asset store infrastructure."""

from .asset_store_stack import AssetStoreStack

__all__ = ["AssetStoreStack"]
