"""S3 bucket holding the public assets."""

from collections.abc import Sequence

from aws_cdk import RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct


class AssetBucket(Construct):
  """S3 bucket readable by anyone through its bucket policy.

  ACLs are blocked and disabled, so public read can only come from the
  policy statement added by ``public_read_access``.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_name: str | None = None,
    removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
    cors_origins: Sequence[str] = (),
  ) -> None:
    super().__init__(scope, id)

    cors = None
    if cors_origins:
      cors = [
        s3.CorsRule(
          allowed_methods=[s3.HttpMethods.GET, s3.HttpMethods.HEAD],
          allowed_origins=list(cors_origins),
          allowed_headers=["*"],
        )
      ]

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      bucket_name=bucket_name,
      public_read_access=True,
      block_public_access=s3.BlockPublicAccess(
        block_public_acls=True,
        ignore_public_acls=True,
        block_public_policy=False,
        restrict_public_buckets=False,
      ),
      object_ownership=s3.ObjectOwnership.BUCKET_OWNER_ENFORCED,
      cors=cors,
      removal_policy=removal_policy,
      auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
    )
