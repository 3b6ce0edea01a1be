"""
Static website infrastructure components.

Each concern is encapsulated in its own ComponentResource for clear
ownership, testability, and reuse. Use from the Pulumi entrypoint (e.g.
__main__.py) with config and output chaining:

- **StaticSite**: S3 website bucket + index page + CloudFront; exposes
  distribution_domain_name and distribution_hosted_zone_id for DNS.
- **SiteDns**: Route53 zone + apex/www alias records + optional NS
  delegation in a parent zone; accepts the distribution outputs.
- **SiteDatabase**: optional RDS MySQL instance.
- **declare_stack**: wires the three for one stack and returns its exports.
"""

from components.aws import StaticSite
from components.database import SiteDatabase
from components.dns import SiteDns
from components.stack import declare_stack

__all__ = ["SiteDatabase", "SiteDns", "StaticSite", "declare_stack"]
