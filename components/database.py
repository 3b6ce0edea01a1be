"""
AWS RDS: a single small MySQL instance for the site.

Declared only by stacks that set ``includeDatabase``. Engine, class,
storage and parameter group are fixed; the database name is derived from the
environment (e.g. "ThrottleHeadStaging") and the master password comes from
the ``rdsPassword`` secret.
"""

import pulumi
import pulumi_aws as aws

from components._helpers import database_name, stack_tags

ID: str = "throttlehead:aws:SiteDatabase"

# Fixed instance settings. Used by tests to assert on the declared instance.
RDS_INSTANCE_SETTINGS: dict[str, object] = {
    "engine": "mysql",
    "engine_version": "8.0",
    "instance_class": "db.t3.micro",
    "allocated_storage": 10,
    "parameter_group_name": "default.mysql8.0",
    "skip_final_snapshot": True,
}

MASTER_USERNAME: str = "root"


class SiteDatabase(pulumi.ComponentResource):
    """
    RDS MySQL instance with a per-environment database name.

    Resources: Instance.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        project: str,
        password: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ):
        super().__init__(ID, name, None, opts)

        self.db_name = database_name(environment)
        self.instance = aws.rds.Instance(
            resource_name=f"{name}-rds",
            db_name=self.db_name,
            username=MASTER_USERNAME,
            password=password,
            tags=stack_tags(project, environment),
            opts=pulumi.ResourceOptions(parent=self),
            **RDS_INSTANCE_SETTINGS,
        )

        self.instance_id: pulumi.Output[str] = self.instance.id
        self.register_outputs({"instance_id": self.instance_id})
