"""
feroxbuster argument table tests.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from feroxargs import Arity, ConflictsWith, RequiredUnless
from feroxargs.feroxbuster import CATALOG, EPILOG, SPECS, main


class TestFeroxbusterTable(TestCase):
    """The static table is complete and consistent."""

    def testDeclarationOrder(self):
        self.assertEqual([spec.name for spec in CATALOG.all()], [
            "wordlist", "url", "threads", "depth", "timeout", "verbosity", "proxy",
            "statuscodes", "quiet", "output", "useragent", "redirects", "insecure",
            "extensions", "headers", "norecursion", "addslash", "stdin", "sizefilters",
            "help", "version",
        ])

    def testSpellings(self):
        expected = {
            "wordlist": ("-w", "--wordlist"),
            "timeout": ("-T", "--timeout"),
            "headers": ("-H", "--headers"),
            "stdin": ("--stdin",),
            "sizefilters": ("-S", "--sizefilter"),
            "help": ("-h", "--help"),
            "version": ("-V", "--version"),
        }
        for name, forms in expected.items():
            with self.subTest(name=name):
                self.assertEqual(CATALOG.lookup(name).forms, forms)

    def testArities(self):
        many = {spec.name for spec in SPECS if spec.arity is Arity.MANY}
        self.assertEqual(many, {"url", "statuscodes", "extensions", "headers", "sizefilters"})
        self.assertTrue(all(CATALOG.lookup(name).delimited for name in many))
        self.assertTrue(CATALOG.lookup("verbosity").counted)

    def testConstraints(self):
        self.assertEqual(CATALOG.lookup("url").constraints, (RequiredUnless("stdin"),))
        self.assertEqual(CATALOG.lookup("stdin").constraints, (ConflictsWith("url"),))

    def testDefaultsDocumented(self):
        self.assertEqual(CATALOG.lookup("threads").default, "50")
        self.assertEqual(CATALOG.lookup("depth").default, "4")
        self.assertEqual(CATALOG.lookup("statuscodes").default, "200 204 301 302 307 308 401 403 405")

    def testEpilogExamples(self):
        self.assertTrue(EPILOG.startswith("NOTE:\n"))
        self.assertIn("./feroxbuster -u http://127.1 -x pdf -x js,html -x php txt json,docx", EPILOG)
        self.assertIn("Ludicrous speed... go!", EPILOG)

    def testMainParses(self):
        configuration = main(["-u", "http://127.1", "-t", "200"], colorful=False)
        self.assertEqual(configuration.value_of("threads"), "200")


if __name__ == '__main__':
    unittest.main()
