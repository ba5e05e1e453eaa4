"""
AWS CloudFront distribution in front of the site bucket.

The S3 origin is gated by the Origin Access Identity from the storage
component, so the bucket itself is never publicly readable. The cache
behaviour is a fixed policy: GET/HEAD/OPTIONS allowed, GET/HEAD cached, HTTPS
forced, no query strings or cookies forwarded, TTLs 0/3600/86400. Outputs
(``domain_name``, ``hosted_zone_id``) are ``Output[str]`` so the DNS component
can alias a record to the distribution.
"""

import pulumi
import pulumi_aws as aws

ID: str = "staticsite:aws:SiteCdn"

ALLOWED_METHODS: list[str] = ["GET", "HEAD", "OPTIONS"]
CACHED_METHODS: list[str] = ["GET", "HEAD"]

# Seconds. Used by tests and callers to assert on the cache policy.
DEFAULT_CACHE_TTLS: dict[str, int] = {
    "min_ttl": 0,
    "default_ttl": 3600,
    "max_ttl": 86400,
}

PRICE_CLASSES: tuple[str, ...] = ("PriceClass_100", "PriceClass_200", "PriceClass_All")


class SiteCdn(pulumi.ComponentResource):
    """
    CloudFront distribution with one OAI-gated S3 origin (HTTPS, default cert).

    Resources: Distribution.
    """

    def __init__(
        self,
        name: str,
        origin_id: pulumi.Input[str],
        origin_domain_name: pulumi.Input[str],
        origin_access_identity: pulumi.Input[str],
        default_root_object: str = "index.html",
        price_class: str = "PriceClass_100",
        opts: pulumi.ResourceOptions | None = None,
    ):
        """
        Create the CloudFront distribution.

        Args:
            name: Pulumi resource name for the distribution.
            origin_id: Origin id, also the default behaviour's target (the
                bucket ARN).
            origin_domain_name: Bucket regional domain name.
            origin_access_identity: OAI CloudFront access identity path.
            default_root_object: Object served for the bare domain.
            price_class: One of PRICE_CLASSES.
            opts: Options for the component itself.

        Outputs (set on self, registered for the component):
            domain_name: Distribution FQDN (alias record target).
            hosted_zone_id: Route 53 zone id of the distribution.
            url: HTTPS URL of the distribution.
        """
        if price_class not in PRICE_CLASSES:
            raise ValueError(f"unknown price class: {price_class}")

        super().__init__(ID, name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        origins = [
            aws.cloudfront.DistributionOriginArgs(
                origin_id=origin_id,
                domain_name=origin_domain_name,
                s3_origin_config=aws.cloudfront.DistributionOriginS3OriginConfigArgs(
                    origin_access_identity=origin_access_identity,
                ),
            )
        ]

        # ForwardedValues is required by the API when not using a cache policy.
        forwarded_values = aws.cloudfront.DistributionDefaultCacheBehaviorForwardedValuesArgs(
            query_string=False,
            cookies=aws.cloudfront.DistributionDefaultCacheBehaviorForwardedValuesCookiesArgs(
                forward="none",
            ),
        )
        default_cache_behavior = aws.cloudfront.DistributionDefaultCacheBehaviorArgs(
            target_origin_id=origin_id,
            viewer_protocol_policy="redirect-to-https",
            allowed_methods=ALLOWED_METHODS,
            cached_methods=CACHED_METHODS,
            forwarded_values=forwarded_values,
            **DEFAULT_CACHE_TTLS,
        )

        restrictions = aws.cloudfront.DistributionRestrictionsArgs(
            geo_restriction=aws.cloudfront.DistributionRestrictionsGeoRestrictionArgs(
                restriction_type="none",
            ),
        )

        viewer_certificate = aws.cloudfront.DistributionViewerCertificateArgs(
            cloudfront_default_certificate=True,
        )

        self.distribution = aws.cloudfront.Distribution(
            resource_name=name,
            enabled=True,
            origins=origins,
            default_root_object=default_root_object,
            default_cache_behavior=default_cache_behavior,
            price_class=price_class,
            restrictions=restrictions,
            viewer_certificate=viewer_certificate,
            opts=child_opts,
        )

        self.domain_name: pulumi.Output[str] = self.distribution.domain_name
        self.hosted_zone_id: pulumi.Output[str] = self.distribution.hosted_zone_id
        self.url: pulumi.Output[str] = pulumi.Output.concat(
            "https://", self.distribution.domain_name
        )
        self.register_outputs(
            {
                "domain_name": self.domain_name,
                "hosted_zone_id": self.hosted_zone_id,
                "url": self.url,
            }
        )
