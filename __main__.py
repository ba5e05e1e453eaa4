"""
Static website on AWS - IaC entrypoint.

Wires three ComponentResources using Pulumi config and output chaining:

- **Storage**: S3 bucket with website rules, uploaded content, and a policy
  that lets only the CloudFront Origin Access Identity read objects.
- **CDN**: CloudFront distribution with the bucket as its OAI-gated origin.
- **DNS**: Route 53 hosted zone and an alias A record to the distribution.
  Caller must delegate the domain to the zone name servers.

Stack exports: bucket_name, cdn_url, cdn_https_url, name_servers, site_fqdn.
"""

import pulumi

from components import SiteCdn, SiteDns, SiteStorage
from config import StackConfig


def main():
    """
    Build storage, CDN and DNS components and export stack outputs.

    Reads config, uploads the content directory, chains the bucket into the
    distribution origin and the distribution into the alias record, and
    exports the bucket name, CDN domain and zone name servers.
    """
    config = StackConfig.from_pulumi_config(pulumi.Config())
    pulumi.log.info(
        f"declaring site {config.subdomain or '@'}.{config.domain_name} "
        f"from {config.content_dir}"
    )

    storage = SiteStorage(
        name="site",
        content_dir=config.content_dir,
        index_document=config.index_document,
        error_document=config.error_document,
        oai_comment=config.oai_comment,
    )

    cdn = SiteCdn(
        name="cdn",
        origin_id=storage.bucket_arn,
        origin_domain_name=storage.bucket_regional_domain_name,
        origin_access_identity=storage.oai_path,
        default_root_object=config.index_document,
        price_class=config.price_class,
    )

    dns = SiteDns(
        name="dns",
        domain_name=config.domain_name,
        subdomain=config.subdomain,
        target_domain_name=cdn.domain_name,
        target_hosted_zone_id=cdn.hosted_zone_id,
    )

    for output_name, value in [
        ("bucket_name", storage.bucket_name),
        ("cdn_url", cdn.domain_name),
        ("cdn_https_url", cdn.url),
        ("name_servers", dns.name_servers),
        ("site_fqdn", dns.fqdn),
    ]:
        pulumi.export(output_name, value)


if __name__ == "__main__":
    main()
