"""
Throttle Head web - static website IaC entrypoint.

Wires the site components using Pulumi config and output chaining (see
components.stack.declare_stack):

- **StaticSite**: S3 website bucket, index page and CloudFront distribution.
  The distribution domain name and hosted zone id are passed to SiteDns as
  alias targets.
- **SiteDns**: Route53 zone for the stack's domain (``throttlehead.dev`` on
  prod, ``<stack>.throttlehead.dev`` elsewhere) with apex and www records.
  Non-prod stacks also delegate their subdomain from ``parentZoneId``.
- **SiteDatabase**: RDS instance, only when ``includeDatabase`` is set.

Stack exports: s3BucketWebId, s3DistributionId, route53WebHostedZoneId,
route53WebRecordName, route53WebWwwRecordName and, with the database,
rdsInstanceId.
"""

import pulumi

from components import declare_stack
from config import StackConfig


def main():
    """
    Declare the site for the current stack and export its identifiers.

    Reads config for the current stack, logs the derived domain and aliases,
    declares the components and exports the resource identifiers.
    """
    config = StackConfig.from_pulumi_config(
        pulumi.Config(),
        environment=pulumi.get_stack(),
        project=pulumi.get_project(),
    )
    domain = config.domain

    pulumi.log.info(f"Web domain: {domain.base_domain}")
    pulumi.log.info(f"Web full domain: {domain.full_domain}")
    pulumi.log.info(f"Web route 53 hosted zone name: {domain.full_domain}")
    pulumi.log.info(f"Cnames: {','.join(config.cnames)}")

    for output_name, value in declare_stack(config).items():
        pulumi.export(output_name, value)


if __name__ == "__main__":
    main()
