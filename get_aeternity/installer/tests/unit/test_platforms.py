#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""unit tests for platform command execution and zstd detection."""

import subprocess
import unittest
from unittest.mock import patch

from get_aeternity.installer.platforms.linux import LinuxInstaller


class TestRunProcess(unittest.TestCase):
    @patch("get_aeternity.installer.platforms.base.subprocess.run")
    def test_command_list_passed_through(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(["tar", "--help"], 0, stdout="usage\n  --zstd\n", stderr="")
        result = LinuxInstaller().run_process(["tar", "--help"], cwd="/tmp", stderr=False)
        self.assertEqual(mock_run.call_args[0][0], ["tar", "--help"])
        self.assertEqual(mock_run.call_args[1]["cwd"], "/tmp")
        self.assertTrue(result.ok)
        self.assertEqual(result.output, ["usage", "  --zstd"])

    @patch("get_aeternity.installer.platforms.base.subprocess.run", side_effect=FileNotFoundError)
    def test_missing_executable(self, mock_run):
        result = LinuxInstaller().run_process(["unzstd", "-f"])
        self.assertEqual(result.returncode, 127)
        self.assertIn("unzstd -f", result.output[0])

    @patch("get_aeternity.installer.platforms.base.subprocess.run")
    def test_gnu_tar_zstd_detection(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(["tar"], 0, stdout="  -z, --gzip\n", stderr="")
        self.assertFalse(LinuxInstaller().tar_supports_zstd())
        mock_run.return_value = subprocess.CompletedProcess(["tar"], 0, stdout="      --zstd\n", stderr="")
        self.assertTrue(LinuxInstaller().tar_supports_zstd())


if __name__ == "__main__":
    unittest.main()
