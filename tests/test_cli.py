#!/usr/bin/env python3
"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

CLI tests for the `bin/hyperskin-*.py` scripts.

Each script runs in a subprocess with HOME, HYPERSKIN_HOME and LOCALAPPDATA
pointed at a temporary directory so nothing outside it is touched.
"""
import json
import os
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path
from textwrap import dedent


REPO_ROOT = os.path.normpath(os.path.join(os.path.dirname(__file__), ".."))
SCRIPTS = [
    "hyperskin-claude.py",
    "hyperskin-hyper.py",
    "hyperskin-mcp.py",
    "hyperskin-strip-comments.py",
    "hyperskin-theme.py",
    "hyperskin-wt.py",
]


class CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.env = dict(os.environ)
        self.env.update({
            "PYTHONPATH": REPO_ROOT,
            "HOME": str(self.tmp),
            "USERPROFILE": str(self.tmp),
            "HYPERSKIN_HOME": str(self.tmp / "data"),
            "LOCALAPPDATA": str(self.tmp / "local"),
        })
        self.env.pop("HYPERSKIN_DEBUG", None)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def run_script(self, name: str, *args: str, input_text: str | None = None) -> subprocess.CompletedProcess:
        """Run bin/NAME with ARGS and return the completed process (text mode)."""
        cmd = [sys.executable, os.path.join(REPO_ROOT, "bin", name), *args]
        return subprocess.run(
            cmd,
            input=input_text,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            env=self.env,
            cwd=str(self.tmp),
        )


class HelpAndUsageTests(CliTestCase):
    def test_help_exits_zero(self) -> None:
        for name in SCRIPTS:
            with self.subTest(script=name):
                proc = self.run_script(name, "--help")
                self.assertEqual(proc.returncode, 0, proc.stderr)
                self.assertIn("usage:", proc.stdout)

    def test_bad_arguments_exit_one(self) -> None:
        for name in SCRIPTS:
            with self.subTest(script=name):
                proc = self.run_script(name, "--no-such-option")
                self.assertEqual(proc.returncode, 1, proc.stderr)
                self.assertIn("error:", proc.stderr)


class StripCommentsCliTests(CliTestCase):
    def test_strips_and_checks(self) -> None:
        payload = dedent(
            """
            {
                // comment
                "url": "https://example.com", /* block */
                "list": [1, 2,],
            }
            """
        )
        proc = self.run_script("hyperskin-strip-comments.py", "--check", input_text=payload)
        self.assertEqual(proc.returncode, 0, proc.stderr)
        self.assertEqual(json.loads(proc.stdout), {"url": "https://example.com", "list": [1, 2]})

    def test_squeeze_removes_blank_lines(self) -> None:
        proc = self.run_script("hyperskin-strip-comments.py", "--squeeze", input_text='// header\n{\n// x\n"a": 1\n}\n')
        self.assertEqual(proc.returncode, 0, proc.stderr)
        self.assertEqual(proc.stdout, '{\n"a": 1\n}\n')

    def test_check_fails_on_invalid_json(self) -> None:
        proc = self.run_script("hyperskin-strip-comments.py", "--check", input_text="{ 'a': 1 }")
        self.assertEqual(proc.returncode, 2)
        self.assertIn("invalid JSON", proc.stderr)


class WtCliTests(CliTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.settings = self.tmp / "settings.json"
        self.settings.write_text(
            '{\n  // managed\n  "copyOnSelect": false,\n  "profiles": {"list": [{"name": "pwsh"}]},\n  "schemes": [],\n}\n',
            encoding="utf-8",
        )

    def test_path_defaults_to_stable_install(self) -> None:
        proc = self.run_script("hyperskin-wt.py", "path")
        self.assertEqual(proc.returncode, 0, proc.stderr)
        self.assertIn("Microsoft.WindowsTerminal_8wekyb3d8bbwe", proc.stdout)

    def test_set_path_is_remembered(self) -> None:
        proc = self.run_script("hyperskin-wt.py", "set-path", str(self.settings))
        self.assertEqual(proc.returncode, 0, proc.stderr)
        proc = self.run_script("hyperskin-wt.py", "path")
        self.assertEqual(proc.stdout.strip(), str(self.settings))

    def test_set_global_and_read(self) -> None:
        proc = self.run_script("hyperskin-wt.py", "--path", str(self.settings), "set-global", "copyOnSelect", "true")
        self.assertEqual(proc.returncode, 0, proc.stderr)
        proc = self.run_script("hyperskin-wt.py", "--path", str(self.settings), "read")
        self.assertEqual(proc.returncode, 0, proc.stderr)
        data = json.loads(proc.stdout)
        self.assertIs(data["globals"]["copyOnSelect"], True)
        self.assertEqual(data["profiles"]["list"], [{"name": "pwsh"}])

    def test_set_global_rejects_unmanaged_key(self) -> None:
        proc = self.run_script("hyperskin-wt.py", "--path", str(self.settings), "set-global", "$schema", "x")
        self.assertEqual(proc.returncode, 1)

    def test_incomplete_scheme_fails(self) -> None:
        proc = self.run_script("hyperskin-wt.py", "--path", str(self.settings), "add-scheme", '{"name": "Half"}')
        self.assertEqual(proc.returncode, 2)
        self.assertIn("missing field", proc.stderr)

    def test_history_off(self) -> None:
        proc = self.run_script("hyperskin-wt.py", "--path", str(self.settings), "history", "off", "--size", "5")
        self.assertEqual(proc.returncode, 0, proc.stderr)
        data = json.loads(self.settings.read_text(encoding="utf-8"))
        self.assertEqual(data["profiles"]["list"][0]["historySize"], 9001)

    def test_history_on_defaults_to_stored_size(self) -> None:
        proc = self.run_script("hyperskin-wt.py", "--path", str(self.settings), "history", "on")
        self.assertEqual(proc.returncode, 0, proc.stderr)
        data = json.loads(self.settings.read_text(encoding="utf-8"))
        self.assertEqual(data["profiles"]["defaults"]["historySize"], 9001)

    def test_write_merges_config(self) -> None:
        config = {"globals": {"copyOnSelect": True}, "profiles": {"list": [{"name": "bash"}]}}
        proc = self.run_script("hyperskin-wt.py", "--path", str(self.settings), "write", "-", input_text=json.dumps(config))
        self.assertEqual(proc.returncode, 0, proc.stderr)
        data = json.loads(self.settings.read_text(encoding="utf-8"))
        self.assertIs(data["copyOnSelect"], True)
        self.assertEqual(data["profiles"]["list"], [{"name": "bash"}])

    def test_write_rejects_non_object(self) -> None:
        for config in ("[1, 2]", '{"profiles": {"list": [null]}}'):
            with self.subTest(config=config):
                proc = self.run_script("hyperskin-wt.py", "--path", str(self.settings), "write", config)
                self.assertEqual(proc.returncode, 2)

    def test_non_object_profile_fails(self) -> None:
        self.settings.write_text('{"profiles": {"list": [42]}}', encoding="utf-8")
        proc = self.run_script("hyperskin-wt.py", "--path", str(self.settings), "profiles")
        self.assertEqual(proc.returncode, 2)
        self.assertIn("profiles.list[0] is not a JSON object", proc.stderr)

    def test_unparseable_settings_fail(self) -> None:
        self.settings.write_text("{ broken", encoding="utf-8")
        proc = self.run_script("hyperskin-wt.py", "--path", str(self.settings), "read")
        self.assertEqual(proc.returncode, 2)
        self.assertEqual(self.settings.read_text(encoding="utf-8"), "{ broken")


class HyperCliTests(CliTestCase):
    def test_read_defaults_and_set(self) -> None:
        proc = self.run_script("hyperskin-hyper.py", "read")
        self.assertEqual(proc.returncode, 0, proc.stderr)
        self.assertEqual(json.loads(proc.stdout)["config"]["fontSize"], 14)

        proc = self.run_script("hyperskin-hyper.py", "set", "colors.red", "#ff0000")
        self.assertEqual(proc.returncode, 0, proc.stderr)
        text = (self.tmp / ".hyper.js").read_text(encoding="utf-8")
        self.assertTrue(text.startswith("module.exports = {\n"))
        self.assertIn("red: '#ff0000'", text)

    def test_plugins(self) -> None:
        proc = self.run_script("hyperskin-hyper.py", "plugins", "hyper-snazzy", "hypercwd")
        self.assertEqual(proc.returncode, 0, proc.stderr)
        proc = self.run_script("hyperskin-hyper.py", "plugins")
        self.assertEqual(json.loads(proc.stdout), ["hyper-snazzy", "hypercwd"])

    def test_debug_output_goes_to_stderr(self) -> None:
        proc = self.run_script("hyperskin-hyper.py", "--debug", "--color", "never", "read")
        self.assertEqual(proc.returncode, 0, proc.stderr)
        self.assertIn("[DEBUG:1:hyper]", proc.stderr)
        json.loads(proc.stdout)


class McpCliTests(CliTestCase):
    def test_add_list_toggle_remove(self) -> None:
        proc = self.run_script("hyperskin-mcp.py", "add", "--env", "A=1", "fs", "npx", "--", "-y", "server-fs")
        self.assertEqual(proc.returncode, 0, proc.stderr)

        proc = self.run_script("hyperskin-mcp.py", "add", "fs", "npx")
        self.assertEqual(proc.returncode, 2)
        self.assertIn('MCP server "fs" already exists', proc.stderr)

        proc = self.run_script("hyperskin-mcp.py", "toggle", "fs", "off")
        self.assertEqual(proc.returncode, 0, proc.stderr)

        proc = self.run_script("hyperskin-mcp.py", "list")
        servers = json.loads(proc.stdout)
        self.assertEqual(
            servers,
            [{"name": "fs", "command": "npx", "args": ["-y", "server-fs"], "env": {"A": "1"}, "enabled": False}],
        )

        proc = self.run_script("hyperskin-mcp.py", "remove", "fs")
        self.assertEqual(proc.returncode, 0, proc.stderr)
        proc = self.run_script("hyperskin-mcp.py", "remove", "fs")
        self.assertEqual(proc.returncode, 2)
        self.assertIn('MCP server "fs" not found', proc.stderr)

    def test_rename(self) -> None:
        self.run_script("hyperskin-mcp.py", "add", "old", "cmd")
        proc = self.run_script("hyperskin-mcp.py", "update", "old", "--name", "new")
        self.assertEqual(proc.returncode, 0, proc.stderr)
        self.assertEqual(json.loads(proc.stdout)["name"], "new")
        data = json.loads((self.tmp / ".claude" / "claude_desktop_config.json").read_text(encoding="utf-8"))
        self.assertEqual(list(data["mcpServers"]), ["new"])


class ClaudeCliTests(CliTestCase):
    def test_set_get_model(self) -> None:
        proc = self.run_script("hyperskin-claude.py", "set", "includeCoAuthoredBy", "false")
        self.assertEqual(proc.returncode, 0, proc.stderr)
        proc = self.run_script("hyperskin-claude.py", "get", "includeCoAuthoredBy")
        self.assertEqual(proc.stdout.strip(), "false")

        proc = self.run_script("hyperskin-claude.py", "model", "not-a-model")
        self.assertEqual(proc.returncode, 2)
        self.assertIn("Invalid model: not-a-model", proc.stderr)

        proc = self.run_script("hyperskin-claude.py", "model", "claude-opus-4-6")
        self.assertEqual(proc.returncode, 0, proc.stderr)
        proc = self.run_script("hyperskin-claude.py", "read")
        self.assertEqual(json.loads(proc.stdout), {"includeCoAuthoredBy": False, "model": "claude-opus-4-6"})

    def test_get_unknown_key(self) -> None:
        proc = self.run_script("hyperskin-claude.py", "get", "nope")
        self.assertEqual(proc.returncode, 2)
        self.assertIn('Setting "nope" not found', proc.stderr)


class ThemeCliTests(CliTestCase):
    def test_import_and_apply(self) -> None:
        preset = {"name": "Mono", "hyperConfig": {"foregroundColor": "#eee"}}
        proc = self.run_script("hyperskin-theme.py", "import", "-", input_text=json.dumps(preset))
        self.assertEqual(proc.returncode, 0, proc.stderr)
        theme_id = json.loads(proc.stdout)["id"]

        proc = self.run_script("hyperskin-theme.py", "apply", theme_id, "hyper")
        self.assertEqual(proc.returncode, 0, proc.stderr)
        self.assertIn("foregroundColor: '#eee'", (self.tmp / ".hyper.js").read_text(encoding="utf-8"))

        proc = self.run_script("hyperskin-theme.py", "apply", theme_id, "windows-terminal")
        self.assertEqual(proc.returncode, 2)

        proc = self.run_script("hyperskin-theme.py", "apply", "missing", "hyper")
        self.assertEqual(proc.returncode, 2)
        self.assertIn('Theme with id "missing" not found', proc.stderr)

    def test_builtins_export_and_apply(self) -> None:
        proc = self.run_script("hyperskin-theme.py", "builtins")
        self.assertEqual(proc.returncode, 0, proc.stderr)
        ids = [t["id"] for t in json.loads(proc.stdout)]
        self.assertIn("builtin-dracula", ids)

        proc = self.run_script("hyperskin-theme.py", "list")
        self.assertEqual(json.loads(proc.stdout), [])

        proc = self.run_script("hyperskin-theme.py", "export", "builtin-dracula", "--output", "dracula.json")
        self.assertEqual(proc.returncode, 0, proc.stderr)
        exported = json.loads((self.tmp / "dracula.json").read_text(encoding="utf-8"))
        self.assertEqual(exported["name"], "Dracula")

        settings = self.tmp / "settings.json"
        settings.write_text("{}", encoding="utf-8")
        proc = self.run_script("hyperskin-theme.py", "apply", "builtin-dracula", "windows-terminal", "--path", str(settings))
        self.assertEqual(proc.returncode, 0, proc.stderr)
        self.assertEqual([s["name"] for s in json.loads(settings.read_text(encoding="utf-8"))["schemes"]], ["Dracula"])

        proc = self.run_script("hyperskin-theme.py", "delete", "builtin-dracula")
        self.assertEqual(proc.returncode, 2)
        self.assertIn("Cannot delete built-in themes", proc.stderr)

        proc = self.run_script("hyperskin-theme.py", "export", "missing")
        self.assertEqual(proc.returncode, 2)


if __name__ == "__main__":
    unittest.main()
