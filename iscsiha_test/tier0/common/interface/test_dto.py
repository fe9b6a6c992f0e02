from unittest import TestCase

from iscsiha.common.interface.dto import (
    PayloadConversionError,
    from_dict,
)
from iscsiha.common.pacemaker.resource import (
    GroupDto,
    ResourcesConfigDto,
)


class FromDict(TestCase):
    def test_unknown_keys_ignored(self):
        self.assertEqual(
            GroupDto(id="G", member_ids=["A", "B"]),
            from_dict(
                GroupDto,
                {"id": "G", "member_ids": ["A", "B"], "description": None},
            ),
        )

    def test_unknown_keys_strict(self):
        self.assertRaises(
            PayloadConversionError,
            lambda: from_dict(
                GroupDto,
                {"id": "G", "member_ids": [], "description": None},
                strict=True,
            ),
        )

    def test_missing_key(self):
        self.assertRaises(
            PayloadConversionError, lambda: from_dict(GroupDto, {"id": "G"})
        )

    def test_wrong_type(self):
        self.assertRaises(
            PayloadConversionError,
            lambda: from_dict(GroupDto, {"id": 1, "member_ids": []}),
        )

    def test_not_an_object(self):
        self.assertRaises(
            PayloadConversionError,
            lambda: from_dict(ResourcesConfigDto, ["primitives"]),
        )
