from unittest import TestCase

from iscsiha.common.reports import codes as report_codes
from iscsiha.lib.cluster.resource import (
    Resource,
    ResourceGroup,
)
from iscsiha.lib.cluster.resource_type import ResourceType
from iscsiha.lib.commands import constraint as lib

from iscsiha_test.tools import fixture
from iscsiha_test.tools.assertions import assert_raise_library_error
from iscsiha_test.tools.command_env import EnvAssist

RBD = Resource("RBD_disk1", ResourceType.RBD)
GROUP = ResourceGroup("g1")
COLOCATION_ID = "colocation-RBD_disk1-g1-INFINITY"
ORDER_ID = "order-RBD_disk1-g1-mandatory"


class ConstraintIds(TestCase):
    def test_colocation(self):
        self.assertEqual(
            COLOCATION_ID, lib.colocation_constraint_id("RBD_disk1", "g1")
        )

    def test_order(self):
        self.assertEqual(ORDER_ID, lib.order_constraint_id("RBD_disk1", "g1"))


class Colocation(TestCase):
    def setUp(self):
        self.env_assist = EnvAssist(self)

    def test_create(self):
        self.env_assist.runner.pcs(
            [
                "constraint",
                "colocation",
                "add",
                "RBD_disk1",
                "with",
                "g1",
                "INFINITY",
                f"id={COLOCATION_ID}",
            ]
        )
        self.assertEqual(
            COLOCATION_ID,
            lib.constrain_resource_to_group(
                self.env_assist.get_env(), RBD, GROUP
            ),
        )
        self.env_assist.assert_reports(
            [
                fixture.info(
                    report_codes.CONSTRAINT_CREATED,
                    constraint_id=COLOCATION_ID,
                )
            ]
        )

    def test_remove_uses_created_id(self):
        self.env_assist.runner.pcs(["constraint", "remove", COLOCATION_ID])
        lib.unconstrain_resource_from_group(
            self.env_assist.get_env(), "RBD_disk1", "g1"
        )
        self.env_assist.assert_reports(
            [
                fixture.info(
                    report_codes.CONSTRAINT_REMOVED,
                    constraint_id=COLOCATION_ID,
                )
            ]
        )

    def test_remove_failure(self):
        self.env_assist.runner.pcs(
            ["constraint", "remove", COLOCATION_ID],
            stderr=f"Error: Unable to find constraint - '{COLOCATION_ID}'",
            returncode=1,
        )
        assert_raise_library_error(
            lambda: lib.unconstrain_resource_from_group(
                self.env_assist.get_env(), "RBD_disk1", "g1"
            ),
            fixture.error(
                report_codes.PCS_COMMAND_ERROR,
                command=f"/usr/sbin/pcs constraint remove {COLOCATION_ID}",
                reason=(
                    f"Error: Unable to find constraint - '{COLOCATION_ID}'"
                ),
            ),
        )
        self.env_assist.assert_reports([])


class Order(TestCase):
    def setUp(self):
        self.env_assist = EnvAssist(self)

    def test_create(self):
        self.env_assist.runner.pcs(
            [
                "constraint",
                "order",
                "start",
                "RBD_disk1",
                "then",
                "g1",
                f"id={ORDER_ID}",
            ]
        )
        self.assertEqual(
            ORDER_ID,
            lib.order_resource_before_group(
                self.env_assist.get_env(), RBD, GROUP
            ),
        )
        self.env_assist.assert_reports(
            [fixture.info(report_codes.CONSTRAINT_CREATED, constraint_id=ORDER_ID)]
        )

    def test_create_then_remove_by_resource_name(self):
        self.env_assist.runner.pcs(
            [
                "constraint",
                "order",
                "start",
                "RBD_disk1",
                "then",
                "g1",
                f"id={ORDER_ID}",
            ]
        ).pcs(["constraint", "remove", ORDER_ID])
        env = self.env_assist.get_env()
        constraint_id = lib.order_resource_before_group(env, RBD, GROUP)
        lib.remove_resource_from_order_group(env, RBD.name, GROUP.name)
        self.assertEqual(ORDER_ID, constraint_id)

    def test_remove(self):
        self.env_assist.runner.pcs(["constraint", "remove", ORDER_ID])
        lib.remove_resource_from_order_group(
            self.env_assist.get_env(), "RBD_disk1", "g1"
        )
        self.env_assist.assert_reports(
            [fixture.info(report_codes.CONSTRAINT_REMOVED, constraint_id=ORDER_ID)]
        )
