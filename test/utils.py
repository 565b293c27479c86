"""
Tests for the Unset sentinel and the string helpers.

This module verifies semantic guarantees of the `UnsetType` sentinel:
- Singleton identity (single instance per interpreter process).
- Falsy semantics and representation.
- Copying, deep copying, pickling, and thread safety properties.
- Finality (type cannot be subclassed).
and the behavior of coalesce(), beginswith() and split().
"""
import copy
import pickle
import unittest
from threading import Thread, Lock
from unittest import TestCase

from optscan.utils import *


class TestUnset(TestCase):
    """
    Test suite for the `UnsetType` singleton.
    """

    def setUp(self) -> None:
        self.unset: UnsetType = UnsetType()

    def testSingleton(self) -> None:
        """
        The constructor returns the same object reference on every call.
        """
        self.assertIs(self.unset, UnsetType())
        self.assertIs(Unset, self.unset)

    def testRepr(self) -> None:
        self.assertEqual(repr(self.unset), "Unset")

    def testFalsely(self) -> None:
        self.assertFalse(bool(self.unset))

    def testNotEqualToNoneOrFalse(self) -> None:
        """
        Falsy does not imply equality with other falsy values (None/False).
        """
        self.assertNotEqual(self.unset, None)
        self.assertNotEqual(self.unset, False)  # noqa: E712

    def testCopyDeepcopyPreserveSingleton(self) -> None:
        self.assertIs(copy.copy(self.unset), self.unset)
        self.assertIs(copy.deepcopy(self.unset), self.unset)

    def testPickleRoundTrip(self) -> None:
        restored: UnsetType = pickle.loads(pickle.dumps(self.unset))
        self.assertIs(restored, self.unset)

    def testThreadSafetySingleton(self) -> None:
        """
        Concurrent constructions return the same instance.
        """
        results: list[UnsetType] = []
        lock: Lock = Lock()

        def worker():
            instance = UnsetType()
            with lock:
                results.append(instance)

        threads: list[Thread] = [Thread(target=worker) for _ in range(16)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertTrue(results)
        for instance in results:
            self.assertIs(instance, self.unset)

    def testFinalClass(self) -> None:
        with self.assertRaises(TypeError):
            type("UnsetSubtype", (UnsetType,), {})

    def testUnionAnnotations(self) -> None:
        self.assertEqual(Unset | int, UnsetType | int)
        self.assertEqual(str | Unset, str | UnsetType)


class TestHelpers(TestCase):

    def testCoalesce(self) -> None:
        self.assertEqual(coalesce("name", "fallback"), "name")
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce(0, 1), 0)
        self.assertIsNone(coalesce(Unset))

    def testBeginswith(self) -> None:
        self.assertTrue(beginswith("-Ggecode", "-G"))
        self.assertTrue(beginswith("-G", "-G"))
        self.assertTrue(beginswith("anything", ""))
        self.assertFalse(beginswith("-G", "-Gx"))
        self.assertFalse(beginswith("--solver", "-s"))
        with self.assertRaises(TypeError):
            beginswith(b"-G", "-G")

    def testSplit(self) -> None:
        self.assertEqual(split("-a -abbrev"), ["-a", "-abbrev"])
        self.assertEqual(split("  -a \t --all\n"), ["-a", "--all"])
        self.assertEqual(split(""), [])
        self.assertEqual(split("   "), [])
        with self.assertRaises(TypeError):
            split(None)


if __name__ == '__main__':
    unittest.main()
