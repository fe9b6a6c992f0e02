from unittest import TestCase

from iscsiha import settings
from iscsiha.lib.cluster.resource import (
    Resource,
    ResourceGroup,
)
from iscsiha.lib.cluster.resource_type import ResourceType
from iscsiha.lib.cluster.snapshot import ResourceSnapshotCache

from iscsiha_test.tools.custom_mock import get_runner_mock as get_runner
from iscsiha_test.tools.fixture_pcs import (
    group,
    primitive,
    resources_config,
)

CONFIG = resources_config(
    [
        primitive("RBD_disk1", "rbd", pool="rbd", name="disk1"),
        primitive("G_VIP_", "IPaddr2", ip="10.0.0.1"),
        primitive("G_TARGET_", "iSCSITarget"),
        primitive("LOOSE_TARGET_", "iSCSITarget"),
        primitive("dummy", "Dummy"),
        primitive("G_PB_OFF", "portblock", action="unblock"),
    ],
    [group("G", ["G_VIP_", "G_TARGET_", "dummy", "G_PB_OFF"])],
)


class Get(TestCase):
    def test_load(self):
        runner = get_runner(CONFIG)
        self.assertEqual(
            [
                Resource("RBD_disk1", ResourceType.RBD),
                Resource("G_VIP_", ResourceType.VIP, ResourceGroup("G")),
                Resource("G_TARGET_", ResourceType.TARGET, ResourceGroup("G")),
                Resource(
                    "G_PB_OFF", ResourceType.PORTBLOCK_OFF, ResourceGroup("G")
                ),
            ],
            ResourceSnapshotCache().get(runner),
        )
        runner.run.assert_called_once_with(
            [
                settings.pcs_exec,
                "resource",
                "config",
                "--output-format",
                "json",
            ],
            superuser=False,
        )

    def test_loaded_once(self):
        runner = get_runner(CONFIG)
        cache = ResourceSnapshotCache()
        first = cache.get(runner)
        second = cache.get(runner)
        self.assertEqual(1, runner.run.call_count)
        self.assertIs(first, second)
        self.assertTrue(cache.is_loaded)

    def test_invalidate(self):
        runner = get_runner(CONFIG)
        cache = ResourceSnapshotCache()
        cache.get(runner)
        cache.invalidate()
        self.assertFalse(cache.is_loaded)
        cache.get(runner)
        self.assertEqual(2, runner.run.call_count)

    def test_get_by_name(self):
        runner = get_runner(CONFIG)
        cache = ResourceSnapshotCache()
        self.assertEqual(
            Resource("G_VIP_", ResourceType.VIP, ResourceGroup("G")),
            cache.get_by_name(runner, "G_VIP_"),
        )
        self.assertIsNone(cache.get_by_name(runner, "dummy"))
        self.assertEqual(1, runner.run.call_count)

    def test_get_group_members(self):
        runner = get_runner(CONFIG)
        self.assertEqual(
            ["G_VIP_", "G_TARGET_", "G_PB_OFF"],
            [
                resource.name
                for resource in ResourceSnapshotCache().get_group_members(
                    runner, "G"
                )
            ],
        )


class Patching(TestCase):
    def setUp(self):
        self.runner = get_runner(CONFIG)
        self.cache = ResourceSnapshotCache()
        self.cache.get(self.runner)

    def names(self):
        return [resource.name for resource in self.cache.get(self.runner)]

    def test_append(self):
        self.cache.append(Resource("new", ResourceType.LUN))
        self.assertEqual(
            ["RBD_disk1", "G_VIP_", "G_TARGET_", "G_PB_OFF", "new"],
            self.names(),
        )

    def test_remove_by_name(self):
        self.cache.remove_by_name("G_VIP_")
        self.assertEqual(["RBD_disk1", "G_TARGET_", "G_PB_OFF"], self.names())

    def test_remove_by_group(self):
        self.cache.remove_by_group("G")
        self.assertEqual(["RBD_disk1"], self.names())

    def test_set_group(self):
        self.cache.set_group("RBD_disk1", ResourceGroup("G2"))
        self.assertEqual(
            ResourceGroup("G2"),
            self.cache.get_by_name(self.runner, "RBD_disk1").resource_group,
        )

    def test_ungroup(self):
        self.cache.set_group("G_VIP_", None)
        self.assertIsNone(
            self.cache.get_by_name(self.runner, "G_VIP_").resource_group
        )

    def test_ungroup_target_drops_it(self):
        self.cache.set_group("G_TARGET_", None)
        self.assertEqual(["RBD_disk1", "G_VIP_", "G_PB_OFF"], self.names())

    def test_not_loaded_is_not_patched(self):
        cache = ResourceSnapshotCache()
        cache.append(Resource("new", ResourceType.LUN))
        cache.remove_by_name("G_VIP_")
        self.assertFalse(cache.is_loaded)
