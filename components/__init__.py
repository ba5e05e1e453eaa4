"""
Static website infrastructure components.

Each concern is encapsulated in its own ComponentResource for clear ownership,
testability, and reuse. Use from the Pulumi entrypoint (e.g. __main__.py) with
config and output chaining:

- **SiteStorage**: S3 bucket, website rules, OAI read policy and uploaded
  content; exposes the bucket origin and OAI path for the CDN.
- **SiteCdn**: CloudFront distribution; exposes domain_name and
  hosted_zone_id for DNS.
- **SiteDns**: Route 53 zone + alias A record; accepts the distribution's
  domain name and zone id (str or Output[str]) and exposes name_servers.
"""

from components.cdn import SiteCdn
from components.dns import SiteDns
from components.storage import SiteStorage

__all__ = ["SiteCdn", "SiteDns", "SiteStorage"]
