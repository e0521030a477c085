"""Pytest fixtures for CDK construct tests."""

import aws_cdk as cdk
import pytest

ACCOUNT = "123456789012"
HOSTED_ZONE_ID = "Z0123456789EXAMPLE"


def hosted_zone_context(
  domain_name: str = "example.com",
  region: str = "us-east-1",
  hosted_zone_id: str = HOSTED_ZONE_ID,
) -> dict[str, dict[str, str]]:
  """Context entry answering a HostedZone.from_lookup without calling AWS."""
  key = f"hosted-zone:account={ACCOUNT}:domainName={domain_name}:region={region}"
  return {key: {"Id": f"/hostedzone/{hosted_zone_id}", "Name": f"{domain_name}."}}


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App with the example.com zone lookup cached."""
  return cdk.App(context=hosted_zone_context())


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(
    app,
    "TestStack",
    env=cdk.Environment(account=ACCOUNT, region="us-east-1"),
  )
