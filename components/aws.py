"""
AWS static hosting: S3 bucket + index page + CloudFront distribution.

This component creates a public-read S3 bucket with website hosting, uploads
the single index page into it, and fronts it with a CloudFront distribution
bound to an ACM certificate (SNI only) under the configured aliases. Outputs
(``distribution_domain_name``, ``distribution_hosted_zone_id``) are
``Output[str]`` so the DNS component can point its alias records at the
distribution.

The CDN policy is fixed and does not depend on config: it lives in the
module constants below so tests and callers can assert on it.
"""

from pathlib import Path
from typing import Sequence

import pulumi
import pulumi_aws as aws

from components._helpers import bucket_name, distribution_name, stack_tags

ID: str = "throttlehead:aws:StaticSite"

INDEX_DOCUMENT: str = "index.html"
ERROR_DOCUMENT: str = "404.html"

# Uploaded verbatim as the bucket's index.html.
DEFAULT_INDEX_ASSET: Path = (
    Path(__file__).resolve().parent.parent / "assets" / "hello-world.html"
)

ALLOWED_METHODS: list[str] = ["GET", "HEAD", "OPTIONS"]
CACHED_METHODS: list[str] = ["GET", "HEAD"]

# Seconds.
CACHE_TTL: dict[str, int] = {
    "min_ttl": 0,
    "default_ttl": 86400,
    "max_ttl": 432000,
}

PRICE_CLASS: str = "PriceClass_100"

# Both missing (404) and forbidden (403, what S3 returns for unknown keys)
# are served as the site's 404 page.
ERROR_PAGE_PATH: str = f"/{ERROR_DOCUMENT}"
ERROR_CACHING_MIN_TTL: int = 300
REWRITTEN_ERROR_CODES: list[int] = [404, 403]


class StaticSite(pulumi.ComponentResource):
    """
    Public S3 website bucket + index object + CloudFront (ACM cert, HTTPS).

    Resources: Bucket, BucketObject, Distribution. Bucket and distribution
    are named after the environment so stacks sharing one account do not
    collide.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        project: str,
        ssl_cert_arn: pulumi.Input[str],
        cnames: Sequence[str],
        index_asset: Path | str = DEFAULT_INDEX_ASSET,
        opts: pulumi.ResourceOptions | None = None,
    ):
        """
        Create the bucket, upload the index page and create the distribution.

        Args:
            name: Pulumi resource name for the component itself.
            environment: Stack name; used for child resource names and tags.
            project: Project name; used for the tag key.
            ssl_cert_arn: ACM certificate ARN for the distribution.
            cnames: Distribution aliases, used verbatim and in order.
            index_asset: Local HTML file uploaded as index.html.
            opts: Options for the component (e.g. provider, parent).

        Outputs (set on self, registered for the component):
            bucket_id: S3 bucket id.
            distribution_id: CloudFront distribution id.
            distribution_domain_name: Distribution FQDN (alias record target).
            distribution_hosted_zone_id: Route53 hosted zone ID of the
                distribution (alias record zone).
        """
        super().__init__(ID, name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        tags = stack_tags(project, environment)

        # Physical name matches the logical one so the bucket is recognisable
        # in the console.
        self.bucket_name = bucket_name(environment)
        self.bucket = aws.s3.Bucket(
            resource_name=self.bucket_name,
            bucket=self.bucket_name,
            acl="public-read",
            website=aws.s3.BucketWebsiteArgs(
                index_document=INDEX_DOCUMENT,
                error_document=ERROR_DOCUMENT,
            ),
            tags=tags,
            opts=child_opts,
        )

        self.index_object = aws.s3.BucketObject(
            resource_name=INDEX_DOCUMENT,
            bucket=self.bucket.id,
            acl="public-read",
            content_type="text/html",
            source=pulumi.FileAsset(str(index_asset)),
            opts=child_opts,
        )

        # Origin id is the bucket id; the cache behavior targets it.
        origins = [
            aws.cloudfront.DistributionOriginArgs(
                domain_name=self.bucket.bucket_regional_domain_name,
                origin_id=self.bucket.id,
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
            target_origin_id=self.bucket.id,
            viewer_protocol_policy="redirect-to-https",
            allowed_methods=ALLOWED_METHODS,
            cached_methods=CACHED_METHODS,
            compress=True,
            forwarded_values=forwarded_values,
            **CACHE_TTL,
        )

        geo_restriction = aws.cloudfront.DistributionRestrictionsGeoRestrictionArgs(
            restriction_type="none",
        )
        restrictions = aws.cloudfront.DistributionRestrictionsArgs(
            geo_restriction=geo_restriction,
        )

        viewer_certificate = aws.cloudfront.DistributionViewerCertificateArgs(
            acm_certificate_arn=ssl_cert_arn,
            ssl_support_method="sni-only",
        )

        custom_error_responses = [
            aws.cloudfront.DistributionCustomErrorResponseArgs(
                error_code=code,
                error_caching_min_ttl=ERROR_CACHING_MIN_TTL,
                response_code=404,
                response_page_path=ERROR_PAGE_PATH,
            )
            for code in REWRITTEN_ERROR_CODES
        ]

        self.distribution_name = distribution_name(environment)
        self.distribution = aws.cloudfront.Distribution(
            resource_name=self.distribution_name,
            enabled=True,
            is_ipv6_enabled=True,
            comment="Cloudfront distro for throttledhead web",
            default_root_object=INDEX_DOCUMENT,
            aliases=list(cnames),
            origins=origins,
            default_cache_behavior=default_cache_behavior,
            price_class=PRICE_CLASS,
            restrictions=restrictions,
            viewer_certificate=viewer_certificate,
            custom_error_responses=custom_error_responses,
            tags=tags,
            opts=child_opts,
        )

        self.bucket_id: pulumi.Output[str] = self.bucket.id
        self.distribution_id: pulumi.Output[str] = self.distribution.id
        self.distribution_domain_name: pulumi.Output[str] = (
            self.distribution.domain_name
        )
        self.distribution_hosted_zone_id: pulumi.Output[str] = (
            self.distribution.hosted_zone_id
        )
        self.register_outputs(
            {
                "bucket_id": self.bucket_id,
                "distribution_id": self.distribution_id,
                "distribution_domain_name": self.distribution_domain_name,
                "distribution_hosted_zone_id": self.distribution_hosted_zone_id,
            }
        )
