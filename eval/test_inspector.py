"""Tests for the repository inspectors (in-memory and git-backed)."""
import shutil
import subprocess
import unittest.mock as mock

import pytest

from launchready.checks import testing
from launchready.inspector import (
    MAX_LISTED_FILES, MAX_SEARCH_LINES, GitInspector, Inspector, MemoryInspector, shell_quote,
)
from launchready.models import AuditConfig


# ── shell_quote ─────────────────────────────────────────────────────


def test_shell_quote_wraps_in_single_quotes():
    assert shell_quote("https://example.com") == "'https://example.com'"


def test_shell_quote_escapes_embedded_quotes():
    assert shell_quote("it's") == "'it'\\''s'"


def test_shell_quote_neutralizes_metacharacters():
    quoted = shell_quote("x; rm -rf / $(id)")
    assert quoted.startswith("'") and quoted.endswith("'")
    assert quoted[1:-1] == "x; rm -rf / $(id)"


# ── MemoryInspector ─────────────────────────────────────────────────


def test_memory_list_filters_by_regex_and_scope():
    insp = MemoryInspector({
        "src/auth.ts": "",
        "src/app.ts": "",
        ".github/workflows/ci.yml": "",
        "docs/ci.yml": "",
    })
    assert insp.list_tracked_files(r"auth") == ["src/auth.ts"]
    assert insp.list_tracked_files(r"\.ya?ml$", ".github/workflows") == [
        ".github/workflows/ci.yml",
    ]


def test_memory_list_invalid_regex_is_empty():
    insp = MemoryInspector({"a.ts": ""})
    assert insp.list_tracked_files("*auth*.ts") == []


def test_memory_list_caps_results():
    insp = MemoryInspector({f"f{i}.ts": "" for i in range(150)})
    assert len(insp.list_tracked_files(r"\.ts$")) == MAX_LISTED_FILES


def test_memory_search_uses_globs_and_caps_lines():
    insp = MemoryInspector({
        "src/a.ts": "\n".join("retry()" for _ in range(80)),
        "README.md": "retry",
    })
    ts_hits = insp.search_content("retry", "*.ts")
    assert len(ts_hits) == MAX_SEARCH_LINES
    assert all(h.startswith("src/a.ts:") for h in ts_hits)
    assert insp.search_content("retry", ("*.md",)) == ["README.md:retry"]


def test_memory_untracked_files_exist_but_are_not_searched():
    insp = MemoryInspector({"app.py": ""}, untracked={".env": "password=x"})
    assert insp.file_exists(".env")
    assert insp.read_file(".env") == "password=x"
    assert insp.search_content("password", "*") == []


def test_memory_directory_exists():
    insp = MemoryInspector({".github/workflows/ci.yml": "on: push"})
    assert insp.file_exists(".github/workflows")
    assert not insp.file_exists(".gitlab-ci.yml")


def test_memory_history_keywords():
    assert MemoryInspector(history=["+api_key: abc"]).secrets_in_history()
    assert not MemoryInspector(history=["+hello"]).secrets_in_history()


# ── GitInspector fail-soft ──────────────────────────────────────────


def test_git_missing_binary_yields_empty(tmp_path):
    insp = GitInspector(str(tmp_path))
    with mock.patch("subprocess.run", side_effect=FileNotFoundError("git")):
        assert insp.list_tracked_files(r".") == []
        assert insp.search_content("x", "*") == []
        assert insp.secrets_in_history() is False


def test_git_timeout_yields_empty(tmp_path):
    insp = GitInspector(str(tmp_path))
    with mock.patch("subprocess.run",
                    side_effect=subprocess.TimeoutExpired(cmd="git", timeout=30)):
        assert insp.search_content("x", "*") == []


def test_git_read_missing_file_is_none(tmp_path):
    insp = GitInspector(str(tmp_path))
    assert insp.read_file("README.md") is None
    assert insp.file_exists("README.md") is False


def test_git_read_binary_file_is_none(tmp_path):
    (tmp_path / "blob.md").write_bytes(b"\xff\xfe\x00bad")
    assert GitInspector(str(tmp_path)).read_file("blob.md") is None


def test_git_search_passes_pattern_as_single_argument(tmp_path):
    completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="a.ts:x\n", stderr="")
    insp = GitInspector(str(tmp_path))
    with mock.patch("subprocess.run", return_value=completed) as run:
        insp.search_content("it's; echo pwned", ("*.ts", "*.py"))
    argv = run.call_args.args[0]
    assert argv[:5] == ["git", "grep", "-E", "-I", "-e"]
    assert argv[5] == "it's; echo pwned"
    assert argv[-2:] == ["*.ts", "*.py"]
    assert "shell" not in run.call_args.kwargs


# ── GitInspector against a real repository ──────────────────────────


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def _git(cwd, *args):
    subprocess.run(
        ["git", "-c", "user.name=Audit", "-c", "user.email=audit@example.com", *args],
        cwd=cwd, check=True, capture_output=True,
    )


@requires_git
def test_git_not_a_repository(tmp_path):
    (tmp_path / "auth.ts").write_text("login()")
    insp = GitInspector(str(tmp_path))
    assert insp.list_tracked_files(r"auth") == []
    assert insp.search_content("login", "*.ts") == []
    assert insp.secrets_in_history() is False


@requires_git
def test_git_tracked_files_and_search(tmp_path):
    _git(tmp_path, "init", "-q")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "auth.ts").write_text("export function login() {}\n")
    (tmp_path / "notes.ts").write_text("login\n")  # never added
    _git(tmp_path, "add", "src/auth.ts")
    _git(tmp_path, "commit", "-q", "-m", "init")

    insp = GitInspector(str(tmp_path))
    assert insp.list_tracked_files(r"\.ts$") == ["src/auth.ts"]
    hits = insp.search_content("function login", "*.ts")
    assert hits == ["src/auth.ts:export function login() {}"]
    assert insp.secrets_in_history() is False


@requires_git
def test_git_history_finds_removed_secret(tmp_path):
    _git(tmp_path, "init", "-q")
    cfg = tmp_path / "config.py"
    cfg.write_text("DB = 'x'\npassword = 'hunter2'\n")
    _git(tmp_path, "add", "config.py")
    _git(tmp_path, "commit", "-q", "-m", "add config")
    cfg.write_text("DB = 'x'\n")
    _git(tmp_path, "commit", "-q", "-am", "remove secret")

    insp = GitInspector(str(tmp_path))
    assert insp.search_content("password", "*.py") == []
    assert insp.secrets_in_history() is True


@requires_git
def test_git_lists_non_ascii_paths_unquoted(tmp_path):
    _git(tmp_path, "init", "-q")
    (tmp_path / "café.test.ts").write_text("it('works', () => {});\n", encoding="utf-8")
    _git(tmp_path, "add", "café.test.ts")
    _git(tmp_path, "commit", "-q", "-m", "init")

    insp = GitInspector(str(tmp_path))
    assert insp.list_tracked_files(r"\.test\.ts$") == ["café.test.ts"]
    assert insp.read_file("café.test.ts") == "it('works', () => {});\n"


@requires_git
def test_git_finds_integration_tests_in_nested_python_tests(tmp_path):
    _git(tmp_path, "init", "-q")
    (tmp_path / "tests").mkdir()
    (tmp_path / "tests" / "test_api.py").write_text("def test_integration_test():\n    pass\n")
    _git(tmp_path, "add", "tests/test_api.py")
    _git(tmp_path, "commit", "-q", "-m", "init")

    messages = [f.message for f in
                testing.check(GitInspector(str(tmp_path)), AuditConfig()).category.findings]
    assert "Limited test coverage (1 test files)" in messages
    assert "Integration tests detected" in messages


def test_git_ls_files_output_is_nul_separated(tmp_path):
    completed = subprocess.CompletedProcess(
        args=[], returncode=0, stdout="src/auth.ts\0café.test.ts\0", stderr="")
    insp = GitInspector(str(tmp_path))
    with mock.patch("subprocess.run", return_value=completed) as run:
        assert insp.list_tracked_files(r"\.ts$") == ["src/auth.ts", "café.test.ts"]
    assert run.call_args.args[0] == ["git", "ls-files", "-z", "--", "."]


# ── Inspector contract ──────────────────────────────────────────────


def test_incomplete_inspector_cannot_be_created():
    class ListingOnly(Inspector):
        def list_tracked_files(self, pattern, scope_dir="."):
            return []

    with pytest.raises(TypeError):
        ListingOnly()
