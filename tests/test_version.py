"""Tests for lvlog._version — PEP 440 compliance and version parsing."""

import re

import lvlog
from lvlog._version import (
    MAJOR, MINOR, PATCH,
    PIP_VERSION,
    VERSION,
    get_base_version,
    get_pip_version,
)


def test_base_version_format():
    """Base version should be MAJOR.MINOR.PATCH[-PHASE]."""
    base = get_base_version()
    assert re.match(r"^\d+\.\d+\.\d+(-\w+)?$", base), \
        f"Unexpected base version format: {base}"


def test_base_version_matches_components():
    assert get_base_version().startswith(f"{MAJOR}.{MINOR}.{PATCH}")


def test_pip_version_pep440():
    """PIP version must be PEP 440 compliant (no hyphens, proper pre-release)."""
    pip_ver = get_pip_version()
    assert "-" not in pip_ver, f"PEP 440 forbids hyphens in version: {pip_ver}"
    assert re.match(r"^\d+\.\d+\.\d+((a|b|rc)\d+)?$", pip_ver), pip_ver


def test_constants_match_functions():
    assert VERSION == get_base_version()
    assert PIP_VERSION == get_pip_version()


def test_package_exports_version():
    assert lvlog.__version__ == VERSION
    assert lvlog.__app_name__ == "lvlog"
