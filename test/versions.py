"""
SemanticVersion tests: lenient parsing and total ordering.

The ordering is lexicographic over (major, minor, patch); a higher major
decides the comparison regardless of the lower fields.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from optscan import SemanticVersion


class TestParsing(TestCase):

    def testFullVersion(self):
        version = SemanticVersion.parse("2.8.3")
        self.assertEqual((version.major, version.minor, version.patch), (2, 8, 3))

    def testMissingFieldsAreZero(self):
        self.assertEqual(SemanticVersion.parse("2.8"), SemanticVersion(2, 8, 0))
        self.assertEqual(SemanticVersion.parse("2"), SemanticVersion(2, 0, 0))
        self.assertEqual(SemanticVersion.parse(""), SemanticVersion())

    def testLeadingAndTrailingDots(self):
        self.assertEqual(SemanticVersion.parse(".5"), SemanticVersion(0, 5, 0))
        self.assertEqual(SemanticVersion.parse("2."), SemanticVersion(2, 0, 0))
        self.assertEqual(SemanticVersion.parse("2.1."), SemanticVersion(2, 1, 0))

    def testScanStopsAtFirstBadField(self):
        self.assertEqual(SemanticVersion.parse("1.x.3"), SemanticVersion(1, 0, 0))
        self.assertEqual(SemanticVersion.parse("1.2.3-beta"), SemanticVersion(1, 2, 3))
        self.assertEqual(SemanticVersion.parse("v1.2.3"), SemanticVersion())

    def testConstructorValidation(self):
        with self.assertRaises(TypeError):
            SemanticVersion(1.0, 2, 3)
        with self.assertRaises(ValueError):
            SemanticVersion(1, -2, 3)
        with self.assertRaises(TypeError):
            SemanticVersion.parse(123)

    def testStr(self):
        self.assertEqual(str(SemanticVersion.parse("2.8")), "2.8.0")
        self.assertEqual(repr(SemanticVersion(1, 2, 3)), "SemanticVersion(1, 2, 3)")


class TestOrdering(TestCase):

    def testHigherOrderFieldDecides(self):
        self.assertLess(SemanticVersion(1, 9, 9), SemanticVersion(2, 0, 0))
        self.assertFalse(SemanticVersion(2, 0, 0) < SemanticVersion(1, 9, 9))
        self.assertFalse(SemanticVersion(2, 0, 5) < SemanticVersion(1, 3, 9))

    def testLessOrEqual(self):
        self.assertLessEqual(SemanticVersion(1, 2, 3), SemanticVersion(1, 2, 3))
        self.assertLessEqual(SemanticVersion(1, 2, 9), SemanticVersion(1, 3, 0))
        self.assertFalse(SemanticVersion(1, 3, 0) <= SemanticVersion(1, 2, 9))

    def testGreaterComparisons(self):
        self.assertGreater(SemanticVersion(0, 0, 2), SemanticVersion(0, 0, 1))
        self.assertGreaterEqual(SemanticVersion(3, 0, 0), SemanticVersion(2, 99, 99))

    def testEqualityAndHashing(self):
        self.assertEqual(SemanticVersion(1, 2, 3), SemanticVersion.parse("1.2.3"))
        self.assertEqual(len({SemanticVersion(1, 2, 3), SemanticVersion.parse("1.2.3")}), 1)
        self.assertNotEqual(SemanticVersion(1, 2, 3), "1.2.3")

    def testSorting(self):
        versions = [SemanticVersion.parse(text) for text in ("2.0.0", "1.10.0", "1.2.10", "1.2.9")]
        self.assertEqual([str(version) for version in sorted(versions)], ["1.2.9", "1.2.10", "1.10.0", "2.0.0"])


if __name__ == "__main__":
    unittest.main()
