import unittest

from ec_blocks import ECBlockGroup, ECBlockSpec
from error_correction import ErrorCorrection
from exceptions import MalformedTableError, VersionOutOfRangeError
from version import Version


def make_version_1() -> Version:
    return Version(
        1,
        {
            ErrorCorrection.HIGH: ECBlockGroup(17, (ECBlockSpec(1, 9),)),
            ErrorCorrection.LOW: ECBlockGroup(7, (ECBlockSpec(1, 19),)),
            ErrorCorrection.MEDIUM: ECBlockGroup(10, (ECBlockSpec(1, 16),)),
            ErrorCorrection.QUARTILE: ECBlockGroup(13, (ECBlockSpec(1, 13),)),
        },
    )


class TestVersionMethods(unittest.TestCase):
    def test_accessors(self):
        version = make_version_1()
        self.assertEqual(1, version.get_version_number())
        self.assertEqual(21, version.get_dimension())
        self.assertEqual(26, version.get_total_codewords())
        self.assertEqual(13, version.get_data_codewords(ErrorCorrection.QUARTILE))
        self.assertEqual(17, version.get_ec_block_group(ErrorCorrection.HIGH).get_ec_codewords_per_block())

    def test_groups_in_protection_order(self):
        version = make_version_1()
        self.assertEqual(list(ErrorCorrection), list(version.get_ec_block_groups()))

    def test_groups_are_read_only(self):
        version = make_version_1()
        groups = version.get_ec_block_groups()
        with self.assertRaises(TypeError):
            groups[ErrorCorrection.LOW] = ECBlockGroup(1, (ECBlockSpec(1, 1),))  # type: ignore[index]
        with self.assertRaises(AttributeError):
            version._version_number = 2

    def test_missing_level(self):
        self.assertRaises(
            MalformedTableError,
            lambda: Version(1, {ErrorCorrection.LOW: ECBlockGroup(7, (ECBlockSpec(1, 19),))}),
        )

    def test_rejects_out_of_range_number(self):
        groups = make_version_1().get_ec_block_groups()
        self.assertRaises(VersionOutOfRangeError, lambda: Version(0, groups))
        self.assertRaises(VersionOutOfRangeError, lambda: Version(41, groups))
        self.assertEqual(40, Version(40, groups).get_version_number())

    def test_str_and_equality(self):
        self.assertEqual("1", str(make_version_1()))
        self.assertEqual(make_version_1(), make_version_1())
        self.assertEqual(hash(make_version_1()), hash(make_version_1()))
        self.assertNotEqual(make_version_1(), 1)
