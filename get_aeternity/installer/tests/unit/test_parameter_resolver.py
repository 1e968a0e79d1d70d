#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""unit tests for merging environment, flags and prompts into InstallConfig."""

import dataclasses
import os
import unittest

from get_aeternity.aeternity_constants import (
    DEFAULT_AETERNITY_YAML_URL,
    DEFAULT_COMPOSE_URL,
    ELIXIR_ERL_OPTIONS_DEFAULT,
    DbVariant,
    Network,
)
from get_aeternity.installer.core.install_config import HostLayout
from get_aeternity.installer.core.parameter_resolver import (
    DOWNLOAD_QUESTION,
    EnvironmentInputs,
    resolve_install_config,
)
from get_aeternity.installer.core.size_probe import RemoteArtifactDescriptor
from get_aeternity.installer.tests.mock.test_framework import MockUI
from get_aeternity.installer.ui import SilentInstallerUI
from get_aeternity.installer.utils.exceptions import ValidationError

BASE = "https://aeternity-database-backups.s3.eu-central-1.amazonaws.com"
CWD = os.path.abspath(os.sep + os.path.join("opt", "aeternity"))


def unknown_prober(url):
    return RemoteArtifactDescriptor(url=url)


def sized_prober(url):
    return RemoteArtifactDescriptor(url=url, byte_size=4 * 1024**3)


class TestEnvironmentInputs(unittest.TestCase):
    def test_defaults(self):
        env = EnvironmentInputs.from_environ({})
        self.assertIsNone(env.network)
        self.assertEqual(env.variant, "full")
        self.assertTrue(env.download_node)
        self.assertTrue(env.download_mdw)
        self.assertTrue(env.run_now)
        self.assertEqual(env.manifest_url, DEFAULT_COMPOSE_URL)
        self.assertEqual(env.config_template_url, DEFAULT_AETERNITY_YAML_URL)
        self.assertEqual(env.elixir_erl_options, ELIXIR_ERL_OPTIONS_DEFAULT)

    def test_empty_template_url_selects_packaged_template(self):
        env = EnvironmentInputs.from_environ({"COMPOSE_URL": "", "AETERNITY_YAML_URL": " "})
        self.assertIsNone(env.manifest_url)
        self.assertIsNone(env.config_template_url)

    def test_empty_values_count_as_unset(self):
        env = EnvironmentInputs.from_environ({"NETWORK": "", "TARBALL_URL": "", "DOWNLOAD_NODE_DB": ""})
        self.assertIsNone(env.network)
        self.assertIsNone(env.node_archive_override)
        self.assertTrue(env.download_node)

    def test_bad_boolean(self):
        with self.assertRaises(ValidationError) as ctx:
            EnvironmentInputs.from_environ({"DOWNLOAD_MDW_DB": "sometimes"})
        self.assertEqual(ctx.exception.name, "DOWNLOAD_MDW_DB")


class TestResolveNonInteractive(unittest.TestCase):
    def test_mainnet_full_defaults(self):
        config = resolve_install_config(SilentInstallerUI(), environ={}, cwd=CWD, prober=unknown_prober)
        self.assertIs(config.network, Network.MAINNET)
        self.assertIs(config.variant, DbVariant.FULL)
        self.assertEqual(config.node_archive_url, f"{BASE}/main_v1_full_latest.tar.zst")
        self.assertEqual(config.mdw_archive_url, f"{BASE}/mdw_main_latest.tar.zst")
        self.assertEqual(config.install_dir, CWD)
        self.assertTrue(config.download_node and config.download_mdw)
        self.assertTrue(config.start_after)
        self.assertTrue(config.non_interactive)

    def test_environment_overrides(self):
        config = resolve_install_config(
            SilentInstallerUI(),
            environ={
                "NETWORK": "testnet",
                "DB_VARIANT": "light",
                "INSTALL_DIR": "/srv/ae",
                "TARBALL_URL": "/backups/node.tar.zst",
                "DOWNLOAD_MDW_DB": "false",
                "RUN_NOW": "no",
            },
            cwd=CWD,
            prober=unknown_prober,
        )
        self.assertIs(config.network, Network.UAT)
        self.assertIs(config.variant, DbVariant.LIGHT)
        self.assertEqual(config.install_dir, os.path.abspath("/srv/ae"))
        self.assertEqual(config.node_archive_url, "/backups/node.tar.zst")
        self.assertEqual(config.mdw_archive_url, f"{BASE}/mdw_uat_latest.tar.zst")
        self.assertTrue(config.download_node)
        self.assertFalse(config.download_mdw)
        self.assertFalse(config.start_after)

    def test_no_start_flag_wins(self):
        config = resolve_install_config(
            SilentInstallerUI(), no_start=True, environ={"RUN_NOW": "true"}, cwd=CWD, prober=unknown_prober
        )
        self.assertFalse(config.start_after)

    def test_invalid_network_is_fatal(self):
        with self.assertRaises(ValidationError):
            resolve_install_config(SilentInstallerUI(), environ={"NETWORK": "devnet"}, cwd=CWD, prober=unknown_prober)

    def test_config_is_frozen(self):
        config = resolve_install_config(SilentInstallerUI(), environ={}, cwd=CWD, prober=unknown_prober)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.network = Network.UAT


class TestResolveInteractive(unittest.TestCase):
    def test_prompts_for_dir_and_network(self):
        ui = MockUI({"Install directory": "/data/ae", "Network (mainnet|testnet)": "testnet"})
        config = resolve_install_config(ui, environ={}, cwd=CWD, prober=sized_prober)
        self.assertEqual(ui.prompts("ask_string"), ["Install directory", "Network (mainnet|testnet)"])
        self.assertIs(config.network, Network.UAT)
        self.assertEqual(config.install_dir, os.path.abspath("/data/ae"))
        self.assertFalse(config.non_interactive)

    def test_network_from_environment_not_prompted(self):
        ui = MockUI()
        resolve_install_config(ui, environ={"NETWORK": "uat"}, cwd=CWD, prober=unknown_prober)
        self.assertEqual(ui.prompts("ask_string"), ["Install directory"])

    def test_install_dir_default_from_environment(self):
        ui = MockUI()
        resolve_install_config(ui, environ={"INSTALL_DIR": "/srv/ae"}, cwd=CWD, prober=unknown_prober)
        self.assertIn(("ask_string", "Install directory", "/srv/ae"), ui.called_methods)

    def test_sizes_and_estimate_displayed(self):
        ui = MockUI()
        resolve_install_config(ui, environ={}, cwd=CWD, prober=sized_prober)
        text = ui.displayed_text()
        self.assertIn("Node DB: ", text)
        self.assertIn("(4.00 GB)", text)
        self.assertIn("Combined compressed size: 8.00 GB", text)
        self.assertIn("20.00 GB", text)

    def test_unknown_sizes_displayed(self):
        ui = MockUI()
        resolve_install_config(ui, environ={}, cwd=CWD, prober=unknown_prober)
        text = ui.displayed_text()
        self.assertEqual(text.count("(unknown)"), 2)
        self.assertNotIn("Recommended free disk space", text)

    def test_declining_download_disables_both_but_keeps_urls(self):
        ui = MockUI({DOWNLOAD_QUESTION: False})
        config = resolve_install_config(ui, environ={}, cwd=CWD, prober=unknown_prober)
        self.assertEqual(ui.prompts("ask_yes_no"), [DOWNLOAD_QUESTION])
        self.assertFalse(config.download_node)
        self.assertFalse(config.download_mdw)
        self.assertEqual(config.node_archive_url, f"{BASE}/main_v1_full_latest.tar.zst")

    def test_accepting_download_enables_both_archives(self):
        ui = MockUI({DOWNLOAD_QUESTION: True})
        config = resolve_install_config(
            ui,
            environ={"DOWNLOAD_MDW_DB": "false", "DOWNLOAD_NODE_DB": "false", "NETWORK": "mainnet"},
            cwd=CWD,
            prober=unknown_prober,
        )
        self.assertTrue(config.download_node)
        self.assertTrue(config.download_mdw)

    def test_layout_follows_network_label(self):
        ui = MockUI({"Install directory": "/data/ae"})
        layout = HostLayout.from_config(resolve_install_config(ui, environ={"NETWORK": "uat"}, cwd=CWD, prober=unknown_prober))
        root = os.path.abspath("/data/ae")
        self.assertEqual(layout.data_root, os.path.join(root, "data", "testnet"))
        self.assertEqual(layout.app_root, os.path.join(root, "app", "testnet"))
        self.assertEqual(layout.service_config_path, os.path.join(root, "app", "testnet", "aeternity.yaml"))
        self.assertEqual(layout.mdw_db_dir, os.path.join(root, "data", "testnet", "mdw.db"))


if __name__ == "__main__":
    unittest.main()
