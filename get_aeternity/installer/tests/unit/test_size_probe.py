#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""unit tests for HEAD-based archive size probing and the free-space estimate."""

import unittest
from unittest.mock import patch

import requests

from get_aeternity.aeternity_utils import GIB, MIB
from get_aeternity.installer.core.size_probe import (
    RemoteArtifactDescriptor,
    describe_remote_artifact,
    estimate_required_space,
    probe_content_length,
)
from get_aeternity.installer.tests.mock.test_framework import fake_response
from get_aeternity.installer.utils.exceptions import ProbeError

URL = "https://example.org/main_v1_full_latest.tar.zst"


class TestProbeContentLength(unittest.TestCase):
    @patch("get_aeternity.installer.core.size_probe.requests.head")
    def test_reads_content_length(self, mock_head):
        mock_head.return_value = fake_response(headers={"Content-Length": "123456"})
        self.assertEqual(probe_content_length(URL), 123456)
        args, kwargs = mock_head.call_args
        self.assertEqual(args[0], URL)
        self.assertTrue(kwargs["allow_redirects"])

    @patch("get_aeternity.installer.core.size_probe.requests.head")
    def test_s3_url_probed_over_https(self, mock_head):
        mock_head.return_value = fake_response(headers={"Content-Length": "1"})
        probe_content_length("s3://bucket/key.tar.zst")
        self.assertEqual(mock_head.call_args[0][0], "https://bucket.s3.amazonaws.com/key.tar.zst")

    @patch("get_aeternity.installer.core.size_probe.requests.head")
    def test_failures_raise_probe_error(self, mock_head):
        for response in (
            fake_response(status_code=404, headers={"Content-Length": "10"}),
            fake_response(headers={}),
            fake_response(headers={"Content-Length": "abc"}),
            fake_response(headers={"Content-Length": "0"}),
        ):
            mock_head.return_value = response
            with self.subTest(status=response.status_code, headers=response.headers):
                with self.assertRaises(ProbeError):
                    probe_content_length(URL)

    @patch("get_aeternity.installer.core.size_probe.requests.head")
    def test_transport_error_raises_probe_error(self, mock_head):
        mock_head.side_effect = requests.ConnectionError("unreachable")
        with self.assertRaises(ProbeError):
            probe_content_length(URL)

    @patch("get_aeternity.installer.core.size_probe.requests.head")
    def test_local_path_is_not_probed(self, mock_head):
        with self.assertRaises(ProbeError):
            probe_content_length("/srv/node.tar.zst")
        mock_head.assert_not_called()


class TestDescribeRemoteArtifact(unittest.TestCase):
    @patch("get_aeternity.installer.core.size_probe.requests.head")
    def test_unknown_on_failure(self, mock_head):
        mock_head.side_effect = requests.Timeout("slow")
        artifact = describe_remote_artifact(URL)
        self.assertIsNone(artifact.byte_size)
        self.assertEqual(artifact.human_readable_size, "unknown")

    @patch("get_aeternity.installer.core.size_probe.requests.head")
    def test_known_size(self, mock_head):
        mock_head.return_value = fake_response(headers={"Content-Length": str(3 * GIB)})
        artifact = describe_remote_artifact(URL)
        self.assertEqual(artifact.byte_size, 3 * GIB)
        self.assertEqual(artifact.human_readable_size, "3.00 GB")


class TestEstimateRequiredSpace(unittest.TestCase):
    def test_sum_and_multiplier(self):
        estimate = estimate_required_space(
            RemoteArtifactDescriptor("a", 1000),
            RemoteArtifactDescriptor("b", 333),
        )
        self.assertEqual(estimate.total_bytes, 1333)
        self.assertEqual(estimate.required_bytes, round(1333 * 2.5))

    def test_unknown_size_gives_no_estimate(self):
        known = RemoteArtifactDescriptor("a", 10 * GIB)
        unknown = RemoteArtifactDescriptor("b")
        self.assertIsNone(estimate_required_space(known, unknown))
        self.assertIsNone(estimate_required_space(unknown, known))
        self.assertIsNone(estimate_required_space(unknown, unknown))

    def test_human_units(self):
        estimate = estimate_required_space(
            RemoteArtifactDescriptor("a", 200 * MIB),
            RemoteArtifactDescriptor("b", 200 * MIB),
        )
        self.assertEqual(estimate.total_human, "400.00 MB")
        self.assertEqual(estimate.required_human, "1000.00 MB")


if __name__ == "__main__":
    unittest.main()
