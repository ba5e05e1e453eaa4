"""
Route 53 hosted zone and alias A record for the site.

This component creates a hosted zone for a domain and one alias ``A`` record
(``www.<domain>`` by default) pointing at a CloudFront distribution. The
record is always an alias, never a value-based A record, and target health
evaluation is disabled.

After deployment, the domain must be delegated at the registrar to the zone's
name servers (exposed as ``name_servers``).
"""

import pulumi
import pulumi_aws as aws

from components._helpers import record_name

ID = "staticsite:aws:SiteDns"

# Alias target may be known now (str) or only after the distribution is
# created (pulumi.Output[str]).
AliasTarget = str | pulumi.Output[str]


class SiteDns(pulumi.ComponentResource):
    """
    Route 53 hosted zone with one alias A record to a CloudFront distribution.
    """

    def __init__(
        self,
        name: str,
        domain_name: str,
        target_domain_name: AliasTarget,
        target_hosted_zone_id: AliasTarget,
        subdomain: str = "www",
        opts: pulumi.ResourceOptions | None = None,
    ):
        """
        Create the hosted zone and alias record.

        Args:
            name: Pulumi resource name (used for zone and record naming).
            domain_name: Domain for the zone (e.g. "example.com").
            target_domain_name: Alias target, e.g. CloudFront's domain_name.
            target_hosted_zone_id: Zone id of the alias target, e.g.
                CloudFront's hosted_zone_id.
            subdomain: Leading label of the record; empty for the apex.
            opts: Options for the component itself.

        Outputs (set on self, registered for the component):
            name_servers: Zone name servers; delegate the domain to these at
                the registrar.
            fqdn: Record name the alias was created for.
        """
        super().__init__(ID, name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.zone = aws.route53.Zone(
            resource_name=f"{name}-zone",
            name=domain_name,
            opts=child_opts,
        )

        self.fqdn: str = record_name(domain_name, subdomain)
        self.record = aws.route53.Record(
            resource_name=f"{name}-alias",
            zone_id=self.zone.id,
            name=self.fqdn,
            type="A",
            aliases=[
                aws.route53.RecordAliasArgs(
                    name=target_domain_name,
                    zone_id=target_hosted_zone_id,
                    evaluate_target_health=False,
                )
            ],
            opts=child_opts,
        )

        self.name_servers: pulumi.Output[list[str]] = self.zone.name_servers
        self.register_outputs({"name_servers": self.name_servers, "fqdn": self.fqdn})
