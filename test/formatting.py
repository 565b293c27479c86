"""
Accumulator tests: comma-joined reporting of non-zero values.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from optscan import Accumulator


class TestAccumulator(TestCase):

    def testFirstValueHasNoSeparator(self):
        had = Accumulator()
        self.assertFalse(had)
        self.assertEqual(had(3), "3")
        self.assertTrue(had)

    def testLaterValuesAreCommaSeparated(self):
        had = Accumulator()
        line = had(2, " errors") + had(0, " warnings") + had(1, " notes")
        self.assertEqual(line, "2 errors, 1 notes")

    def testFalsyValuesPrintNothing(self):
        had = Accumulator()
        for value in (0, 0.0, "", None):
            self.assertEqual(had(value, " things"), "")
        self.assertFalse(had)

    def testReset(self):
        had = Accumulator()
        had(1)
        had.reset()
        self.assertFalse(had)
        self.assertEqual(had(2.5, "s"), "2.5s")


if __name__ == "__main__":
    unittest.main()
