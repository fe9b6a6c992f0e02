from textwrap import dedent
from unittest import TestCase

from iscsiha.lib.pacemaker import status

from iscsiha_test.tools.fixture_pcs import STATUS_TEXT


class ParseLocateOutput(TestCase):
    def test_running(self):
        self.assertEqual(
            "node2",
            status.parse_locate_output("resource A is running on: node2\n"),
        )

    def test_case_insensitive(self):
        self.assertEqual(
            "node2",
            status.parse_locate_output("resource A IS RUNNING ON: node2"),
        )

    def test_first_node_wins(self):
        self.assertEqual(
            "node1",
            status.parse_locate_output(
                "resource A is running on: node1\n"
                "resource A is running on: node2\n"
            ),
        )

    def test_not_running(self):
        self.assertIsNone(
            status.parse_locate_output("resource A is NOT running\n")
        )

    def test_empty(self):
        self.assertIsNone(status.parse_locate_output(""))


class ParseGroupNodeFromStatus(TestCase):
    def test_minimal(self):
        self.assertEqual(
            "node3",
            status.parse_group_node_from_status(
                "* Resource Group: g1: \n * rbd_g1 ... Started node3", "g1"
            ),
        )

    def test_full_status(self):
        self.assertEqual(
            "node3", status.parse_group_node_from_status(STATUS_TEXT, "g1")
        )
        self.assertEqual(
            "node2", status.parse_group_node_from_status(STATUS_TEXT, "g3")
        )

    def test_stopped_group_does_not_take_next_group_node(self):
        self.assertIsNone(status.parse_group_node_from_status(STATUS_TEXT, "g2"))
        self.assertIsNone(status.parse_group_node_from_status(STATUS_TEXT, "g0"))

    def test_group_not_in_status(self):
        self.assertIsNone(
            status.parse_group_node_from_status(STATUS_TEXT, "missing")
        )

    def test_group_id_is_not_a_regexp(self):
        text = dedent(
            """\
            * Resource Group: g.1:
              * a (ocf:heartbeat:Dummy): Stopped
            * Resource Group: gx1:
              * b (ocf:heartbeat:Dummy): Started node1
            """
        )
        self.assertIsNone(status.parse_group_node_from_status(text, "g.1"))

    def test_group_id_prefix_does_not_match(self):
        text = dedent(
            """\
            * Resource Group: g10:
              * a (ocf:heartbeat:Dummy): Started node1
            """
        )
        self.assertIsNone(status.parse_group_node_from_status(text, "g1"))

    def test_first_started_member(self):
        text = dedent(
            """\
            * Resource Group: g1:
              * a (ocf:heartbeat:Dummy): Stopped
              * b (ocf:heartbeat:Dummy): Started node2
              * c (ocf:heartbeat:Dummy): Started node1
            """
        )
        self.assertEqual(
            "node2", status.parse_group_node_from_status(text, "g1")
        )
