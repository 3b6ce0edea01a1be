"""
Stack configuration loaded from pulumi.Config().

Provides a typed, immutable view of stack settings. Settings are read from
Pulumi config (e.g. Pulumi.<stack>.yaml or pulumi config set); the
environment and project come from the Pulumi stack and project names. Used by
__main__.main() to derive the site domain, name resources and decide whether
the parent-zone delegation record and the database are declared.

Missing required keys raise pulumi.ConfigMissingError naming the key. Values
are otherwise passed through unchecked (cnames, certificate ARN, zone id).
"""

from dataclasses import dataclass

import pulumi

from components._helpers import BASE_DOMAIN, full_domain, is_prod


@dataclass(frozen=True)
class DomainConfig:
    """
    Domain derived from the environment.

    Attributes:
        base_domain: Apex domain shared by all environments.
        full_domain: Domain served by this stack; equal to base_domain on
            prod, "<environment>.<base_domain>" otherwise.
        is_prod: Whether this is the prod stack.
        parent_zone_id: Route53 zone holding the NS delegation for
            full_domain. None exactly when is_prod.
    """

    base_domain: str
    full_domain: str
    is_prod: bool
    parent_zone_id: pulumi.Input[str] | None = None


def resolve_domain(
    environment: str,
    parent_zone_id: pulumi.Input[str] | None = None,
) -> DomainConfig:
    """
    Derive the DomainConfig for an environment.

    Non-prod environments are subdomains and need the parent zone to delegate
    from; prod ignores parent_zone_id.

    Raises:
        pulumi.ConfigMissingError: non-prod environment without parent_zone_id.
    """
    if is_prod(environment):
        return DomainConfig(
            base_domain=BASE_DOMAIN,
            full_domain=full_domain(environment),
            is_prod=True,
        )
    if parent_zone_id is None:
        raise pulumi.ConfigMissingError("parentZoneId", True)
    return DomainConfig(
        base_domain=BASE_DOMAIN,
        full_domain=full_domain(environment),
        is_prod=False,
        parent_zone_id=parent_zone_id,
    )


@dataclass(frozen=True)
class StackConfig:
    """
    Stack configuration from Pulumi config.

    Attributes:
        environment: Stack name; selects domain and resource naming.
        project: Pulumi project name, used for the inventory tag key.
        ssl_cert_arn: ACM certificate bound to the distribution (sslCertArn,
            required).
        cnames: CloudFront aliases, in order (cnames, required JSON list).
        domain: Derived domain; holds parentZoneId (required secret on
            non-prod stacks).
        include_database: Whether to declare the RDS instance
            (includeDatabase, optional, default false).
        rds_password: Master password for the RDS instance (rdsPassword,
            required secret when include_database).
    """

    environment: str
    project: str
    ssl_cert_arn: str
    cnames: tuple[str, ...]
    domain: DomainConfig
    include_database: bool = False
    rds_password: pulumi.Input[str] | None = None

    @classmethod
    def from_pulumi_config(
        cls,
        config: pulumi.Config,
        environment: str,
        project: str,
    ) -> "StackConfig":
        """
        Build StackConfig from pulumi.Config().

        parentZoneId is read only on non-prod stacks and rdsPassword only when
        includeDatabase is set, so prod stacks without a database need neither.
        """
        ssl_cert_arn = config.require("sslCertArn")
        cnames = tuple(config.require_object("cnames"))

        parent_zone_id = None
        if not is_prod(environment):
            parent_zone_id = config.require_secret("parentZoneId")
        domain = resolve_domain(environment, parent_zone_id)

        include_database = bool(config.get_bool("includeDatabase"))
        rds_password = (
            config.require_secret("rdsPassword") if include_database else None
        )

        return cls(
            environment=environment,
            project=project,
            ssl_cert_arn=ssl_cert_arn,
            cnames=cnames,
            domain=domain,
            include_database=include_database,
            rds_password=rds_password,
        )
