"""
Route53 DNS: hosted zone, alias records and optional parent-zone delegation.

This component creates a hosted zone for the site domain and two A alias
records (zone apex and ``www``) pointing at a CloudFront distribution. It is
designed to be wired with outputs from the StaticSite component: pass the
distribution's ``domain_name`` and ``hosted_zone_id`` as ``Output[str]``.

Non-prod stacks serve a subdomain of the prod domain. For those, pass
``parent_zone_id`` and the component also writes an NS record into the
parent zone that delegates the subdomain to the new zone's name servers.
Prod is delegated at the registrar instead, so ``delegation`` is None there.
"""

import pulumi
import pulumi_aws as aws

from components._helpers import stack_tags

ID = "throttlehead:aws:SiteDns"

# Alias target may be known now (str) or only after the distribution is
# created (pulumi.Output[str]).
AliasTarget = str | pulumi.Output[str]

DELEGATION_TTL: int = 300


class SiteDns(pulumi.ComponentResource):
    """
    Hosted zone with apex and www alias records to a CloudFront distribution.

    Apex record: ``<domain_name>`` → distribution (name "").
    www record: ``www.<domain_name>`` → distribution.
    Delegation (if parent_zone_id given): NS ``<domain_name>`` in the parent
    zone → zone name servers (TTL 300).
    """

    def __init__(
        self,
        name: str,
        domain_name: str,
        environment: str,
        project: str,
        alias_target: AliasTarget,
        alias_zone_id: AliasTarget,
        parent_zone_id: pulumi.Input[str] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ):
        """
        Create the hosted zone, alias records and delegation record.

        Args:
            name: Pulumi resource name for the component itself.
            domain_name: Zone name (e.g. "staging.throttlehead.dev"); also the
                logical name of the zone and the delegation record.
            environment: Stack name; used for the zone tag.
            project: Project name; used for the zone tag key.
            alias_target: Distribution domain name the records resolve to.
            alias_zone_id: Distribution hosted zone ID.
            parent_zone_id: Zone to write the NS delegation into, or None.
            opts: Options for the component (e.g. provider, parent).

        Outputs (set on self, registered for the component):
            zone_id: Hosted zone id.
            name_servers: Zone name servers.
            root_record_name: Name of the apex record.
            www_record_name: Name of the www record.
        """
        super().__init__(ID, name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.zone = aws.route53.Zone(
            resource_name=domain_name,
            name=domain_name,
            comment=f"Hosted zone for {domain_name}",
            tags=stack_tags(project, environment),
            opts=child_opts,
        )

        aliases = [
            aws.route53.RecordAliasArgs(
                name=alias_target,
                zone_id=alias_zone_id,
                evaluate_target_health=True,
            )
        ]

        # Empty name targets the zone apex.
        self.root_record = aws.route53.Record(
            resource_name="base",
            zone_id=self.zone.zone_id,
            name="",
            type="A",
            aliases=aliases,
            opts=child_opts,
        )
        self.www_record = aws.route53.Record(
            resource_name="www",
            zone_id=self.zone.zone_id,
            name="www",
            type="A",
            aliases=aliases,
            opts=child_opts,
        )

        self.delegation: aws.route53.Record | None = None
        if parent_zone_id is not None:
            self.delegation = aws.route53.Record(
                resource_name=domain_name,
                zone_id=parent_zone_id,
                name=domain_name,
                type="NS",
                ttl=DELEGATION_TTL,
                records=self.zone.name_servers,
                opts=child_opts,
            )

        self.zone_id: pulumi.Output[str] = self.zone.id
        self.name_servers: pulumi.Output[list[str]] = self.zone.name_servers
        self.root_record_name: pulumi.Output[str] = self.root_record.name
        self.www_record_name: pulumi.Output[str] = self.www_record.name
        self.register_outputs(
            {
                "zone_id": self.zone_id,
                "name_servers": self.name_servers,
                "root_record_name": self.root_record_name,
                "www_record_name": self.www_record_name,
            }
        )
