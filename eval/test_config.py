"""Tests for environment-derived configuration."""
import os

import pytest

from launchready.config import DEFAULT_AUDIENCE, env_flag, from_env


@pytest.mark.parametrize("value,expected", [
    ("true", True),
    ("TRUE", False),
    ("1", False),
    ("yes", False),
    ("", False),
    (None, False),
])
def test_only_exact_true_enables_flag(value, expected):
    assert env_flag(value) is expected


def test_defaults_from_empty_environment(tmp_path):
    cfg = from_env({}, repo_path=str(tmp_path))
    assert cfg.repo_path == str(tmp_path)
    assert cfg.deployment_url is None
    assert cfg.intended_audience == DEFAULT_AUDIENCE
    assert not (cfg.handles_pii or cfg.handles_payments or cfg.handles_secrets)


def test_reads_every_variable():
    cfg = from_env({
        "DEPLOYMENT_URL": "https://app.example.com",
        "INTENDED_AUDIENCE": "customers",
        "HANDLES_PII": "true",
        "HANDLES_PAYMENTS": "true",
        "HANDLES_SECRETS": "false",
    }, repo_path=".")
    assert cfg.deployment_url == "https://app.example.com"
    assert cfg.intended_audience == "customers"
    assert cfg.handles_pii and cfg.handles_payments
    assert not cfg.handles_secrets


def test_empty_url_means_not_provided():
    assert from_env({"DEPLOYMENT_URL": ""}, repo_path=".").deployment_url is None


def test_repo_path_defaults_to_cwd():
    assert from_env({}).repo_path == os.path.abspath(os.getcwd())
