"""
Configuration module behavioral tests (immutability and accessors).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import copy
import unittest
from collections.abc import Mapping
from unittest import TestCase

from feroxargs import ResolvedConfiguration, parse
from feroxargs.feroxbuster import CATALOG


class TestResolvedConfiguration(TestCase):
    """Mapping behavior of the parse result."""

    def setUp(self):
        self.configuration = parse(CATALOG, "-u http://127.1 -x pdf,js -t 10 -vv -q".split())

    def testIsMapping(self):
        self.assertIsInstance(self.configuration, Mapping)
        self.assertEqual(len(self.configuration), 5)

    def testValuesFrozen(self):
        self.assertEqual(self.configuration["extensions"], ("pdf", "js"))
        self.assertEqual(self.configuration["url"], ("http://127.1",))
        self.assertEqual(self.configuration["threads"], "10")
        self.assertEqual(self.configuration["verbosity"], 2)
        self.assertIs(self.configuration["quiet"], True)

    def testKeysInCatalogOrder(self):
        self.assertEqual(list(self.configuration), ["url", "threads", "verbosity", "quiet", "extensions"])

    def testReadOnly(self):
        with self.assertRaises(TypeError):
            self.configuration["threads"] = "20"  # type: ignore[index]
        with self.assertRaises(AttributeError):
            self.configuration.anything = 1
        with self.assertRaises(AttributeError):
            del self.configuration._values

    def testCopiesAreSelf(self):
        self.assertIs(copy.copy(self.configuration), self.configuration)
        self.assertIs(copy.deepcopy(self.configuration), self.configuration)

    def testBoundToCatalog(self):
        self.assertIs(self.configuration.catalog, CATALOG)

    def testRepr(self):
        self.assertTrue(repr(self.configuration).startswith("resolved-configuration({'url': ('http://127.1',)"))

    def testUndeclaredValuesRejected(self):
        with self.assertRaises(KeyError):
            ResolvedConfiguration(CATALOG, {"nope": True})


class TestConfigurationAccessors(TestCase):
    """is_present / value_of / values_of / occurrences_of."""

    def setUp(self):
        self.configuration = parse(CATALOG, "-u http://a http://b -o out.txt -vvv -k".split())

    def testIsPresent(self):
        self.assertTrue(self.configuration.is_present("url"))
        self.assertFalse(self.configuration.is_present("stdin"))
        with self.assertRaises(KeyError):
            self.configuration.is_present("nope")

    def testValueOf(self):
        self.assertEqual(self.configuration.value_of("output"), "out.txt")
        self.assertEqual(self.configuration.value_of("url"), "http://a")
        self.assertIsNone(self.configuration.value_of("threads"))
        with self.assertRaises(TypeError):
            self.configuration.value_of("insecure")

    def testValuesOf(self):
        self.assertEqual(self.configuration.values_of("url"), ("http://a", "http://b"))
        self.assertEqual(self.configuration.values_of("output"), ("out.txt",))
        self.assertEqual(self.configuration.values_of("extensions"), ())
        with self.assertRaises(TypeError):
            self.configuration.values_of("insecure")

    def testOccurrencesOf(self):
        self.assertEqual(self.configuration.occurrences_of("verbosity"), 3)
        self.assertEqual(self.configuration.occurrences_of("insecure"), 1)
        self.assertEqual(self.configuration.occurrences_of("quiet"), 0)
        with self.assertRaises(TypeError):
            self.configuration.occurrences_of("url")

    def testUnknownNames(self):
        with self.assertRaises(KeyError):
            self.configuration.value_of("nope")
        with self.assertRaises(KeyError):
            self.configuration.occurrences_of("nope")


if __name__ == '__main__':
    unittest.main()
