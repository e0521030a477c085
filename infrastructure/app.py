#!/usr/bin/env python3
"""CDK application entry point for asset store infrastructure."""

import logging
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from infrastructure.config import AssetStoreConfig, Config
from infrastructure.stacks.asset_store_stack import AssetStoreStack

logger = logging.getLogger(__name__)


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def stack_name_for(store: AssetStoreConfig) -> str:
  """Stack name derived from the asset domain."""
  return f"AssetStore-{store.asset_domain.replace('.', '-')}"


def build_app(app: cdk.App, config: Config) -> list[AssetStoreStack]:
  """Declare one stack per configured asset store inside ``app``."""
  stacks: list[AssetStoreStack] = []
  caller_account: str | None = None

  for store in config.stores:
    account = store.account
    if account is None:
      # Hosted zone lookups need an explicit account
      if caller_account is None:
        caller_account = get_account_id()
      account = caller_account

    stack_name = stack_name_for(store)
    logger.info(
      "Declaring %s for %s in %s/%s",
      stack_name,
      store.asset_domain,
      account,
      store.region,
    )
    stacks.append(
      AssetStoreStack(
        app,
        stack_name,
        store_config=store,
        env=cdk.Environment(
          account=account,
          region=store.region,
        ),
        description=f"Asset store infrastructure for {store.asset_domain}",
      )
    )

  return stacks


def main() -> None:
  """Create CDK app with a stack for each configured asset store."""
  logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

  app = cdk.App()

  # Load configuration
  config_path = app.node.try_get_context("config") or "asset_stores.yaml"
  config = Config.from_yaml(Path(config_path))

  build_app(app, config)

  app.synth()


if __name__ == "__main__":
  main()
