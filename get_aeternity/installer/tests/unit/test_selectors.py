#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""unit tests for network and database variant normalization."""

import unittest

from get_aeternity.aeternity_constants import DbVariant, Network
from get_aeternity.installer.core.selectors import normalize_network, normalize_variant
from get_aeternity.installer.utils.exceptions import InstallerError, ValidationError


class TestNormalizeNetwork(unittest.TestCase):
    def test_synonyms_map_to_canonical_values(self):
        for raw, expected in (
            ("mainnet", Network.MAINNET),
            ("MainNet", Network.MAINNET),
            (" mainnet ", Network.MAINNET),
            ("testnet", Network.UAT),
            ("TESTNET", Network.UAT),
            ("uat", Network.UAT),
            ("Uat", Network.UAT),
        ):
            with self.subTest(raw=raw):
                self.assertIs(normalize_network(raw), expected)

    def test_enum_passes_through(self):
        self.assertIs(normalize_network(Network.UAT), Network.UAT)

    def test_rejects_unknown_networks(self):
        for raw in ("", "main", "devnet", "ae_mainnet", "local"):
            with self.subTest(raw=raw):
                with self.assertRaises(ValidationError) as ctx:
                    normalize_network(raw)
                self.assertEqual(ctx.exception.name, "NETWORK")
                self.assertIsInstance(ctx.exception, InstallerError)

    def test_host_label_and_network_id(self):
        self.assertEqual(Network.MAINNET.host_label, "mainnet")
        self.assertEqual(Network.UAT.host_label, "testnet")
        self.assertEqual(Network.MAINNET.network_id, "ae_mainnet")
        self.assertEqual(Network.UAT.network_id, "ae_uat")


class TestNormalizeVariant(unittest.TestCase):
    def test_accepts_full_and_light(self):
        self.assertIs(normalize_variant("full"), DbVariant.FULL)
        self.assertIs(normalize_variant("LIGHT"), DbVariant.LIGHT)
        self.assertIs(normalize_variant(DbVariant.LIGHT), DbVariant.LIGHT)

    def test_rejects_other_values(self):
        for raw in ("", "archive", "fullnode", "lite"):
            with self.subTest(raw=raw):
                with self.assertRaises(ValidationError) as ctx:
                    normalize_variant(raw)
                self.assertEqual(ctx.exception.name, "DB_VARIANT")

    def test_indexing_follows_variant(self):
        self.assertTrue(DbVariant.FULL.indexing_enabled)
        self.assertFalse(DbVariant.LIGHT.indexing_enabled)


if __name__ == "__main__":
    unittest.main()
