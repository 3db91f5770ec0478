"""Tests for permission gate strategies and platform selection."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirpicker.permissions import (
    PromptPermissionGate,
    ReadableRootGate,
    StaticPermissionGate,
    select_permission_gate,
)


class PermissionGateTests(unittest.TestCase):
    def test_static_gate_reports_fixed_answer(self) -> None:
        answers: list[bool] = []
        gate = StaticPermissionGate(granted=False)

        gate.request_access(answers.append)

        self.assertFalse(gate.check_granted())
        self.assertEqual(answers, [False])

    def test_readable_root_gate_checks_storage_root(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            answers: list[bool] = []

            self.assertTrue(ReadableRootGate(root).check_granted())
            self.assertFalse(ReadableRootGate(root / "missing").check_granted())
            with mock.patch("dirpicker.permissions.os.access", return_value=False):
                ReadableRootGate(root).request_access(answers.append)

            self.assertEqual(answers, [False])

    def test_prompt_gate_follows_live_host_check(self) -> None:
        prompts: list = []
        answers: list[bool] = []
        host = {"granted": False}
        gate = PromptPermissionGate(check=lambda: host["granted"], prompt=prompts.append)

        gate.request_access(answers.append)
        self.assertEqual(answers, [])

        host["granted"] = True
        prompts[0](True)
        self.assertEqual(answers, [True])
        self.assertTrue(gate.check_granted())

        host["granted"] = False
        self.assertFalse(gate.check_granted())

    def test_prompt_gate_denial_is_not_remembered_as_grant(self) -> None:
        prompts: list = []
        answers: list[bool] = []
        gate = PromptPermissionGate(check=lambda: False, prompt=prompts.append)

        gate.request_access(answers.append)
        prompts[0](False)

        self.assertEqual(answers, [False])
        self.assertFalse(gate.check_granted())


class SelectPermissionGateTests(unittest.TestCase):
    def test_windows_uses_static_grant(self) -> None:
        gate = select_permission_gate(platform="win32")

        self.assertIsInstance(gate, StaticPermissionGate)
        self.assertTrue(gate.check_granted())

    def test_posix_uses_readable_root(self) -> None:
        gate = select_permission_gate(platform="linux", storage_root=Path("/srv/storage"))

        self.assertIsInstance(gate, ReadableRootGate)
        self.assertEqual(gate.storage_root, Path("/srv/storage"))

    def test_posix_default_root_matches_navigator_preferred_root(self) -> None:
        with mock.patch.dict("os.environ", {"EXTERNAL_STORAGE": "/storage/emulated/0"}):
            gate = select_permission_gate(platform="linux")

        self.assertIsInstance(gate, ReadableRootGate)
        self.assertEqual(gate.storage_root, Path("/storage/emulated/0"))

    def test_host_prompt_takes_precedence(self) -> None:
        gate = select_permission_gate(platform="android", check=lambda: True, prompt=lambda callback: None)

        self.assertIsInstance(gate, PromptPermissionGate)
        self.assertTrue(gate.check_granted())
        self.assertIsInstance(select_permission_gate(platform="win32", prompt=lambda callback: None), PromptPermissionGate)


if __name__ == "__main__":
    unittest.main()
