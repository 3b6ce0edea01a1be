"""
Pure helpers for domain derivation, resource naming and tagging. Testable
without Pulumi runtime.

Used by config.resolve_domain (full_domain, is_prod), the StaticSite component
(bucket_name, distribution_name, stack_tags) and the SiteDatabase component
(database_name). No Pulumi types; all functions accept and return plain
Python types so they can be unit-tested without a Pulumi stack.
"""

BASE_DOMAIN: str = "throttlehead.dev"
PROD_ENVIRONMENT: str = "prod"


def is_prod(
    environment: str,
) -> bool:
    """
    Whether the environment is the prod stack, the only one served from the
    base domain itself.
    """
    return environment == PROD_ENVIRONMENT


def full_domain(
    environment: str,
    base_domain: str = BASE_DOMAIN,
) -> str:
    """
    Return the site domain for an environment.

    Prod serves the base domain itself; every other environment gets its own
    subdomain (e.g. "staging.throttlehead.dev"), delegated from the parent
    zone.
    """
    if is_prod(environment):
        return base_domain
    return f"{environment}.{base_domain}"


def bucket_name(
    environment: str,
) -> str:
    """
    Bucket logical and physical name, e.g. "throttle-head-web-staging".

    S3 names are global, so the environment suffix keeps stacks sharing one
    account from colliding.
    """
    return f"throttle-head-web-{environment}"


def distribution_name(
    environment: str,
) -> str:
    """
    CloudFront distribution logical name, e.g. "throttle-head-web-acl-staging".
    """
    return f"throttle-head-web-acl-{environment}"


def stack_tags(
    project: str,
    environment: str,
) -> dict[str, str]:
    """
    Single inventory tag applied to every taggable resource.

    Key is "<project>-stack", value the environment, e.g.
    {"throttle-head-web-stack": "staging"}.
    """
    return {f"{project}-stack": environment}


def database_name(
    environment: str,
) -> str:
    """
    Logical RDS database name, e.g. "ThrottleHeadStaging".

    Only the first character of the environment is upper-cased; the rest is
    kept as-is. No sanitizing: RDS rejects names it does not accept.
    """
    return f"ThrottleHead{environment[:1].upper()}{environment[1:]}"
