"""
Whole-site topology: wires StaticSite, SiteDns and the optional SiteDatabase
for one stack and returns the values to export.

Kept apart from __main__ so the full declaration can be built under Pulumi
mocks. Takes a config.StackConfig; the prod/non-prod and database branches
come from it alone, so the same config always declares the same resources.
"""

from typing import TYPE_CHECKING

import pulumi

from components.aws import StaticSite
from components.database import SiteDatabase
from components.dns import SiteDns

if TYPE_CHECKING:
    from config import StackConfig


def declare_stack(
    config: "StackConfig",
) -> dict[str, pulumi.Output]:
    """
    Declare the site resources for config and return the stack exports.

    Exports: s3BucketWebId, route53WebHostedZoneId, s3DistributionId,
    route53WebRecordName, route53WebWwwRecordName and, with the database,
    rdsInstanceId.
    """
    environment = config.environment

    site = StaticSite(
        name=f"site-{environment}",
        environment=environment,
        project=config.project,
        ssl_cert_arn=config.ssl_cert_arn,
        cnames=config.cnames,
    )

    # Distribution outputs become the alias targets.
    dns = SiteDns(
        name=f"dns-{environment}",
        domain_name=config.domain.full_domain,
        environment=environment,
        project=config.project,
        alias_target=site.distribution_domain_name,
        alias_zone_id=site.distribution_hosted_zone_id,
        parent_zone_id=config.domain.parent_zone_id,
    )

    exports = {
        "s3BucketWebId": site.bucket_id,
        "route53WebHostedZoneId": dns.zone_id,
        "s3DistributionId": site.distribution_id,
        "route53WebRecordName": dns.root_record_name,
        "route53WebWwwRecordName": dns.www_record_name,
    }

    if config.include_database:
        database = SiteDatabase(
            name=f"db-{environment}",
            environment=environment,
            project=config.project,
            password=config.rds_password,
        )
        exports["rdsInstanceId"] = database.instance_id

    return exports
