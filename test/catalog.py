"""
Catalog module behavioral tests (declaration, finalization, lookups, defects).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from feroxargs import ArgumentSpec, Arity, Catalog, Required, RequiredUnless, ConflictsWith, SchemaDefect
from feroxargs.utils import Unset


def sample():
    return Catalog("tool", "0.1.0", "someone", "does things", "EPILOG")


class TestCatalogMetadata(TestCase):
    """Program metadata sanitization."""

    def testMetadataTrimmed(self):
        catalog = Catalog("  tool ", " 0.1.0 ")
        self.assertEqual(catalog.name, "tool")
        self.assertEqual(catalog.version, "0.1.0")
        self.assertIsNone(catalog.author)

    def testEpilogKeptVerbatim(self):
        catalog = Catalog("tool", epilog="  indented\n    text\n  ")
        self.assertEqual(catalog.epilog, "  indented\n    text\n  ")

    def testNameRequired(self):
        with self.assertRaises(TypeError):
            Catalog(Unset)
        with self.assertRaises(ValueError):
            Catalog("   ")

    def testDelimiterChecked(self):
        self.assertEqual(Catalog("tool", delimiter=";").delimiter, ";")
        for delimiter in ("", ",,", " ", "-"):
            with self.subTest(delimiter=delimiter), self.assertRaises(ValueError):
                Catalog("tool", delimiter=delimiter)


class TestCatalogDeclare(TestCase):
    """Append-only declaration and its defects."""

    def testDeclarationOrderKept(self):
        catalog = sample()
        catalog.declare(ArgumentSpec("beta", "b"))
        catalog.declare(ArgumentSpec("alpha", "a"))
        catalog.finalize()
        self.assertEqual([spec.name for spec in catalog.all()], ["beta", "alpha", "help", "version"])

    def testDuplicateNameIsDefect(self):
        catalog = sample()
        catalog.declare(ArgumentSpec("quiet", "q"))
        with self.assertRaises(SchemaDefect):
            catalog.declare(ArgumentSpec("quiet", Unset, "quiet"))

    def testDuplicateShortIsDefect(self):
        catalog = sample()
        catalog.declare(ArgumentSpec("quiet", "q"))
        with self.assertRaises(SchemaDefect):
            catalog.declare(ArgumentSpec("query", "q", "query", arity=Arity.ONE))

    def testDuplicateLongIsDefect(self):
        catalog = sample()
        catalog.declare(ArgumentSpec("quiet", Unset, "quiet"))
        with self.assertRaises(SchemaDefect):
            catalog.declare(ArgumentSpec("silent", "s", "quiet"))

    def testDeclareAfterFinalizeIsDefect(self):
        catalog = sample().finalize()
        with self.assertRaises(SchemaDefect):
            catalog.declare(ArgumentSpec("late", "l"))

    def testDeclareRejectsForeignObjects(self):
        with self.assertRaises(TypeError):
            sample().declare("quiet")

    def testSchemaDefectIsAssertion(self):
        self.assertTrue(issubclass(SchemaDefect, AssertionError))


class TestCatalogFinalize(TestCase):
    """Built-ins, reference checks and conflict mirroring."""

    def testBuiltinsAppended(self):
        catalog = sample().finalize()
        self.assertEqual(catalog.resolve("-h").name, "help")
        self.assertEqual(catalog.resolve("--version").name, "version")
        self.assertEqual(catalog.resolve("-V").name, "version")

    def testBuiltinSpellingsYieldToDeclared(self):
        catalog = Catalog.build([ArgumentSpec("host", "h", "host", arity=Arity.ONE)], "tool")
        self.assertEqual(catalog.resolve("-h").name, "host")
        self.assertEqual(catalog.lookup("help").forms, ("--help",))

    def testDeclaredHelpKept(self):
        own = ArgumentSpec("help", Unset, "help", help="Custom help")
        catalog = Catalog.build([own], "tool")
        self.assertIs(catalog.lookup("help"), own)

    def testUndeclaredReferenceIsDefect(self):
        with self.assertRaises(SchemaDefect):
            Catalog.build([ArgumentSpec("url", "u", constraints=(RequiredUnless("stdin"),))], "tool")
        with self.assertRaises(SchemaDefect):
            Catalog.build([ArgumentSpec("url", "u", constraints=(ConflictsWith("stdin"),))], "tool")

    def testConflictsMirrored(self):
        catalog = Catalog.build([
            ArgumentSpec("url", "u", arity=Arity.MANY),
            ArgumentSpec("stdin", Unset, "stdin", constraints=(ConflictsWith("url"),)),
        ], "tool")
        self.assertEqual(catalog.constraints("url"), (ConflictsWith("stdin"),))
        self.assertEqual(catalog.constraints("stdin"), (ConflictsWith("url"),))

    def testOwnConstraintsFirst(self):
        catalog = Catalog.build([
            ArgumentSpec("url", "u", arity=Arity.MANY, constraints=(RequiredUnless("stdin"),)),
            ArgumentSpec("stdin", Unset, "stdin", constraints=(ConflictsWith("url"),)),
        ], "tool")
        self.assertEqual(catalog.constraints("url"), (RequiredUnless("stdin"), ConflictsWith("stdin")))

    def testConflictingRequiredIsDefect(self):
        with self.assertRaises(SchemaDefect):
            Catalog.build([
                ArgumentSpec("left", "l", constraints=(Required(),)),
                ArgumentSpec("right", "r", constraints=(Required(), ConflictsWith("left"))),
            ], "tool")

    def testFinalizeIsIdempotent(self):
        catalog = sample().finalize()
        self.assertIs(catalog.finalize(), catalog)
        self.assertEqual(len(catalog), 2)


class TestCatalogLookups(TestCase):
    """Read access once finalized."""

    def setUp(self):
        self.catalog = Catalog.build([
            ArgumentSpec("threads", "t", "threads", arity=Arity.ONE),
            ArgumentSpec("quiet", "q", "quiet"),
        ], "tool")

    def testLookupAndResolve(self):
        self.assertIs(self.catalog.lookup("threads"), self.catalog.resolve("-t"))
        self.assertIs(self.catalog.resolve("--threads"), self.catalog.resolve("-t"))

    def testUnknownRaisesKeyError(self):
        with self.assertRaises(KeyError):
            self.catalog.lookup("thread")
        with self.assertRaises(KeyError):
            self.catalog.resolve("--thread")
        with self.assertRaises(KeyError):
            self.catalog.constraints("thread")

    def testUseBeforeFinalizeIsDefect(self):
        catalog = sample()
        catalog.declare(ArgumentSpec("quiet", "q"))
        for call in (catalog.all, lambda: catalog.lookup("quiet"), lambda: catalog.resolve("-q")):
            with self.subTest(call=call), self.assertRaises(SchemaDefect):
                call()

    def testContainerProtocol(self):
        self.assertIn("quiet", self.catalog)
        self.assertNotIn("loud", self.catalog)
        self.assertEqual([spec.name for spec in self.catalog], ["threads", "quiet", "help", "version"])

    def testViewsAreReadOnly(self):
        with self.assertRaises(TypeError):
            self.catalog.forms["-x"] = self.catalog.lookup("quiet")
        self.assertIsInstance(self.catalog.specs, tuple)


if __name__ == '__main__':
    unittest.main()
