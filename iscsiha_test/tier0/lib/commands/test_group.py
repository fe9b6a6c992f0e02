from unittest import TestCase

from iscsiha.common.reports import codes as report_codes
from iscsiha.lib.cluster.resource import (
    Resource,
    ResourceGroup,
)
from iscsiha.lib.cluster.resource_type import ResourceType
from iscsiha.lib.commands import group as lib
from iscsiha.lib.commands.resource import fetch_resource_by_name
from iscsiha.lib.errors import RemoteQueryError

from iscsiha_test.tools import fixture
from iscsiha_test.tools.command_env import EnvAssist
from iscsiha_test.tools.fixture_pcs import (
    group,
    primitive,
    resources_config,
)


def _members(*type_list):
    return [
        Resource(f"m{i}", resource_type, ResourceGroup("G"))
        for i, resource_type in enumerate(type_list)
    ]


class FindInsertBefore(TestCase):
    # order: PORTBLOCK_ON 1, VIP 2, TARGET 3, LUN 4, PORTBLOCK_OFF 5
    members = _members(
        ResourceType.PORTBLOCK_ON, ResourceType.VIP, ResourceType.LUN
    )

    def test_in_the_middle(self):
        self.assertEqual(
            "m2",
            lib.find_insert_before(
                Resource("new", ResourceType.TARGET), self.members
            ).name,
        )

    def test_append(self):
        self.assertIsNone(
            lib.find_insert_before(
                Resource("new", ResourceType.PORTBLOCK_OFF), self.members
            )
        )

    def test_tie_goes_before(self):
        self.assertEqual(
            "m1",
            lib.find_insert_before(
                Resource("new", ResourceType.VIP), self.members
            ).name,
        )

    def test_tie_first_of_same_order(self):
        members = _members(
            ResourceType.PORTBLOCK_ON, ResourceType.LUN, ResourceType.LUN
        )
        self.assertEqual(
            "m1",
            lib.find_insert_before(
                Resource("new", ResourceType.LUN), members
            ).name,
        )

    def test_unsorted_members(self):
        members = _members(
            ResourceType.PORTBLOCK_OFF, ResourceType.LUN, ResourceType.VIP
        )
        self.assertEqual(
            "m1",
            lib.find_insert_before(
                Resource("new", ResourceType.TARGET), members
            ).name,
        )

    def test_empty_group(self):
        self.assertIsNone(
            lib.find_insert_before(Resource("new", ResourceType.VIP), [])
        )


CONFIG = resources_config(
    [
        primitive("G_PB_ON", "portblock", action="block"),
        primitive("G_VIP_", "IPaddr2"),
        primitive("G_LUN", "iSCSILogicalUnit"),
        primitive("other_VIP_", "IPaddr2"),
    ],
    [group("G", ["G_PB_ON", "G_VIP_", "G_LUN"]), group("O", ["other_VIP_"])],
)


class AddResourceToGroup(TestCase):
    def setUp(self):
        self.env_assist = EnvAssist(self)
        self.group = ResourceGroup("G")

    def test_before(self):
        resource = Resource("G_TARGET_", ResourceType.TARGET)
        (
            self.env_assist.runner.resources_config(CONFIG).pcs(
                [
                    "resource",
                    "group",
                    "add",
                    "G",
                    "--before",
                    "G_LUN",
                    "G_TARGET_",
                ]
            )
        )
        lib.add_resource_to_group(
            self.env_assist.get_env(), resource, self.group
        )
        self.assertEqual(self.group, resource.resource_group)
        self.env_assist.assert_reports(
            [
                fixture.info(
                    report_codes.RESOURCE_GROUP_MEMBER_ADDED,
                    resource_id="G_TARGET_",
                    group_id="G",
                    before_id="G_LUN",
                )
            ]
        )

    def test_append(self):
        resource = Resource("G_PB_OFF", ResourceType.PORTBLOCK_OFF)
        (
            self.env_assist.runner.resources_config(CONFIG).pcs(
                ["resource", "group", "add", "G", "G_PB_OFF"]
            )
        )
        lib.add_resource_to_group(
            self.env_assist.get_env(), resource, self.group
        )
        self.env_assist.assert_reports(
            [
                fixture.info(
                    report_codes.RESOURCE_GROUP_MEMBER_ADDED,
                    resource_id="G_PB_OFF",
                    group_id="G",
                    before_id=None,
                )
            ]
        )

    def test_new_group(self):
        resource = Resource("N_VIP_", ResourceType.VIP)
        (
            self.env_assist.runner.resources_config(CONFIG).pcs(
                ["resource", "group", "add", "N", "N_VIP_"]
            )
        )
        lib.add_resource_to_group(
            self.env_assist.get_env(), resource, ResourceGroup("N")
        )
        self.assertEqual(ResourceGroup("N"), resource.resource_group)

    def test_cached_resource_moved(self):
        (
            self.env_assist.runner.resources_config(CONFIG).pcs(
                [
                    "resource",
                    "group",
                    "add",
                    "G",
                    "--before",
                    "G_LUN",
                    "other_VIP_",
                ]
            )
        )
        env = self.env_assist.get_env()
        resource = Resource("other_VIP_", ResourceType.VIP, ResourceGroup("O"))
        lib.add_resource_to_group(env, resource, self.group)
        self.assertEqual(
            self.group, fetch_resource_by_name(env, "other_VIP_").resource_group
        )

    def test_failure(self):
        resource = Resource("G_PB_OFF", ResourceType.PORTBLOCK_OFF)
        (
            self.env_assist.runner.resources_config(CONFIG).pcs(
                ["resource", "group", "add", "G", "G_PB_OFF"],
                stderr="Error: unable to add",
                returncode=1,
            )
        )
        self.assertRaises(
            RemoteQueryError,
            lambda: lib.add_resource_to_group(
                self.env_assist.get_env(), resource, self.group
            ),
        )
        self.assertIsNone(resource.resource_group)


class RemoveResourceFromGroup(TestCase):
    def setUp(self):
        self.env_assist = EnvAssist(self)

    def test_success(self):
        (
            self.env_assist.runner.resources_config(CONFIG).pcs(
                ["resource", "ungroup", "G", "G_VIP_"]
            )
        )
        env = self.env_assist.get_env()
        fetch_resource_by_name(env, "G_VIP_")
        lib.remove_resource_from_group(env, "G", "G_VIP_")
        self.assertIsNone(fetch_resource_by_name(env, "G_VIP_").resource_group)
        self.env_assist.assert_reports(
            [
                fixture.info(
                    report_codes.RESOURCE_GROUP_MEMBER_REMOVED,
                    resource_id="G_VIP_",
                    group_id="G",
                )
            ]
        )

    def test_cache_not_loaded(self):
        self.env_assist.runner.pcs(["resource", "ungroup", "G", "G_VIP_"])
        env = self.env_assist.get_env()
        lib.remove_resource_from_group(env, "G", "G_VIP_")
        self.assertFalse(env.resource_cache.is_loaded)
