"""
S3 site storage: bucket, website configuration, OAI-gated policy, site objects.

This component creates the S3 bucket that holds the site assets, attaches
index/error document rules, and creates a CloudFront Origin Access Identity
(OAI). The bucket policy grants ``s3:GetObject`` to that identity only, so
objects are read through CloudFront and never directly. Every regular file in
the local content directory becomes one ``BucketObject`` keyed by its file
name. Outputs (``bucket_name``, ``bucket_regional_domain_name``, ``oai_path``)
are ``Output[str]`` so the CDN component can use the bucket as its origin.
"""

import pulumi
import pulumi_aws as aws

from components._helpers import bucket_read_policy, list_site_files

ID: str = "staticsite:aws:SiteStorage"


class SiteStorage(pulumi.ComponentResource):
    """
    S3 bucket with website rules, OAI read policy, and uploaded site content.

    Resources: Bucket, BucketWebsiteConfigurationV2, OriginAccessIdentity,
    BucketPolicy, and one BucketObject per content file.
    """

    def __init__(
        self,
        name: str,
        content_dir: str,
        index_document: str = "index.html",
        error_document: str = "error.html",
        oai_comment: str = "OAI for accessing S3 bucket",
        opts: pulumi.ResourceOptions | None = None,
    ):
        """
        Create the bucket, its website configuration, OAI, policy and objects.

        Args:
            name: Pulumi resource name for the bucket and related resources.
            content_dir: Local directory whose direct files are uploaded.
            index_document: Website index document suffix.
            error_document: Website error document key.
            oai_comment: Comment on the origin access identity.
            opts: Options for the component itself.

        Raises:
            SiteContentError: If content_dir is missing or holds an
                unreadable file. Raised before any child resource is declared.

        Outputs (set on self, registered for the component):
            bucket_name: Engine-assigned bucket name.
            bucket_arn: Bucket ARN (used as the CDN origin id).
            bucket_regional_domain_name: Origin domain for CloudFront.
            oai_path: CloudFront access identity path for the S3 origin.
        """
        # Read the directory first: a bad content dir must not leave a
        # half-declared component behind.
        files, skipped = list_site_files(content_dir)

        super().__init__(ID, name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.bucket = aws.s3.Bucket(
            resource_name=name,
            opts=child_opts,
        )

        self.website = aws.s3.BucketWebsiteConfigurationV2(
            resource_name=f"{name}-website",
            bucket=self.bucket.bucket,
            index_document=aws.s3.BucketWebsiteConfigurationV2IndexDocumentArgs(
                suffix=index_document,
            ),
            error_document=aws.s3.BucketWebsiteConfigurationV2ErrorDocumentArgs(
                key=error_document,
            ),
            opts=child_opts,
        )

        # Identity only CloudFront can assume; the policy below trusts it alone.
        self.oai = aws.cloudfront.OriginAccessIdentity(
            resource_name=f"{name}-oai",
            comment=oai_comment,
            opts=child_opts,
        )

        # Both values are only known after apply; the policy is composed once
        # both have resolved.
        self.policy = aws.s3.BucketPolicy(
            resource_name=f"{name}-policy",
            bucket=self.bucket.bucket,
            policy=pulumi.Output.all(self.bucket.bucket, self.oai.iam_arn).apply(
                lambda args: bucket_read_policy(args[0], args[1])
            ),
            opts=child_opts,
        )

        for entry in skipped:
            pulumi.log.warn(
                f"skipping non-file entry in {content_dir}: {entry}",
                resource=self,
            )

        self.objects: list[aws.s3.BucketObject] = []
        for site_file in files:
            pulumi.log.debug(
                f"declaring object {site_file.key} ({site_file.content_type or 'no content type'})",
                resource=self,
            )
            self.objects.append(
                aws.s3.BucketObject(
                    resource_name=f"{name}-{site_file.key}",
                    bucket=self.bucket.id,
                    key=site_file.key,
                    source=pulumi.FileAsset(site_file.path),
                    # None leaves the field unset rather than defaulting it.
                    content_type=site_file.content_type,
                    opts=child_opts,
                )
            )

        self.bucket_name: pulumi.Output[str] = self.bucket.bucket
        self.bucket_arn: pulumi.Output[str] = self.bucket.arn
        self.bucket_regional_domain_name: pulumi.Output[str] = (
            self.bucket.bucket_regional_domain_name
        )
        self.oai_path: pulumi.Output[str] = self.oai.cloudfront_access_identity_path
        self.register_outputs(
            {
                "bucket_name": self.bucket_name,
                "bucket_arn": self.bucket_arn,
                "bucket_regional_domain_name": self.bucket_regional_domain_name,
                "oai_path": self.oai_path,
            }
        )
