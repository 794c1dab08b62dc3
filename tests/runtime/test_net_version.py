"""Tests for .NET SDK version resolution.

Each source is exercised alone, then in combination to pin the priority
order: global.json > TargetFramework > configured default.
"""

import json
import logging
from pathlib import Path

import pytest

from dockgen.runtime.net.version import (
    resolve_net_version,
    version_from_global_json,
    version_from_project_files,
)
from dockgen.runtime.versions import extract_major_minor

DEFAULT = "8.0"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _global_json(tmp_path: Path, payload) -> Path:
    text = payload if isinstance(payload, str) else json.dumps(payload)
    (tmp_path / "global.json").write_text(text, encoding="utf-8")
    return tmp_path


def _csproj(tmp_path: Path, name: str, tfm: str) -> Path:
    (tmp_path / name).write_text(f"""\
<Project Sdk="Microsoft.NET.Sdk.Web">
  <PropertyGroup>
    <TargetFramework>{tfm}</TargetFramework>
    <Nullable>enable</Nullable>
  </PropertyGroup>
</Project>
""", encoding="utf-8")
    return tmp_path


# ---------------------------------------------------------------------------
# Major.minor truncation
# ---------------------------------------------------------------------------

class TestExtractMajorMinor:
    @pytest.mark.parametrize("raw, expected", [
        ("8.0.103", "8.0"),
        ("7.0.5", "7.0"),
        ("9.0.100-preview.1.24101.2", "9.0"),
        ("6.0", "6.0"),
        ("8", "8"),
    ])
    def test_truncation(self, raw, expected):
        assert extract_major_minor(raw) == expected


# ---------------------------------------------------------------------------
# global.json
# ---------------------------------------------------------------------------

class TestGlobalJson:
    def test_sdk_version_truncated(self, tmp_path):
        _global_json(tmp_path, {"sdk": {"version": "8.0.103"}})
        assert resolve_net_version(tmp_path, DEFAULT) == "8.0"

    def test_global_json_source_is_logged(self, tmp_path, caplog):
        _global_json(tmp_path, {"sdk": {"version": "8.0.103"}})
        with caplog.at_level(logging.INFO):
            resolve_net_version(tmp_path, DEFAULT)
        assert "Detected .NET SDK version from global.json: 8.0" in caplog.messages
        assert "TargetFramework" not in caplog.text

    def test_global_json_beats_project_file(self, tmp_path):
        _global_json(tmp_path, {"sdk": {"version": "6.0.400", "rollForward": "latestFeature"}})
        _csproj(tmp_path, "App.csproj", "net7.0")
        assert resolve_net_version(tmp_path, DEFAULT) == "6.0"

    @pytest.mark.parametrize("payload", [
        "{not json",
        "[1, 2, 3]",
        {"sdk": {"version": ""}},
        {"sdk": {"version": 8}},
        {"sdk": "8.0.100"},
        {"msbuild-sdks": {"Foo": "1.0"}},
    ])
    def test_unusable_global_json_is_absent(self, tmp_path, payload):
        _global_json(tmp_path, payload)
        assert version_from_global_json(tmp_path) is None

    def test_malformed_global_json_falls_through_to_project_file(self, tmp_path):
        _global_json(tmp_path, "{ \"sdk\": ")
        _csproj(tmp_path, "App.csproj", "net7.0")
        assert resolve_net_version(tmp_path, DEFAULT) == "7.0"

    def test_malformed_global_json_logs_warning(self, tmp_path, caplog):
        _global_json(tmp_path, "{oops")
        with caplog.at_level(logging.WARNING):
            resolve_net_version(tmp_path, DEFAULT)
        assert "global.json" in caplog.text

    def test_global_json_directory_is_ignored(self, tmp_path):
        (tmp_path / "global.json").mkdir()
        assert resolve_net_version(tmp_path, DEFAULT) == DEFAULT


# ---------------------------------------------------------------------------
# TargetFramework scan
# ---------------------------------------------------------------------------

class TestTargetFramework:
    def test_version_from_csproj(self, tmp_path):
        _csproj(tmp_path, "Api.csproj", "net7.0")
        assert resolve_net_version(tmp_path, DEFAULT) == "7.0"

    def test_reports_source_file(self, tmp_path):
        _csproj(tmp_path, "Api.fsproj", "net6.0")
        assert version_from_project_files(tmp_path) == ("Api.fsproj", "6.0")

    def test_project_file_source_is_logged(self, tmp_path, caplog):
        _csproj(tmp_path, "App.csproj", "net7.0")
        with caplog.at_level(logging.INFO):
            resolve_net_version(tmp_path, DEFAULT)
        assert "Detected .NET TargetFramework from App.csproj: 7.0" in caplog.messages
        assert "default LTS" not in caplog.text

    def test_csproj_scanned_before_fsproj(self, tmp_path):
        _csproj(tmp_path, "A.fsproj", "net6.0")
        _csproj(tmp_path, "Z.csproj", "net9.0")
        assert resolve_net_version(tmp_path, DEFAULT) == "9.0"

    def test_file_without_marker_is_skipped(self, tmp_path):
        _csproj(tmp_path, "A.csproj", "netstandard2.0")
        _csproj(tmp_path, "B.csproj", "net7.0")
        assert resolve_net_version(tmp_path, DEFAULT) == "7.0"

    def test_plural_target_frameworks_not_matched(self, tmp_path):
        (tmp_path / "Multi.csproj").write_text(
            "<Project><PropertyGroup>"
            "<TargetFrameworks>net6.0;net8.0</TargetFrameworks>"
            "</PropertyGroup></Project>",
            encoding="utf-8",
        )
        assert resolve_net_version(tmp_path, DEFAULT) == DEFAULT

    def test_framework_with_platform_suffix_not_matched(self, tmp_path):
        _csproj(tmp_path, "Desktop.csproj", "net8.0-windows")
        assert version_from_project_files(tmp_path) is None


# ---------------------------------------------------------------------------
# Default fallback
# ---------------------------------------------------------------------------

class TestDefault:
    def test_empty_directory_uses_default(self, tmp_path):
        assert resolve_net_version(tmp_path, DEFAULT) == "8.0"

    def test_injected_default_is_used(self, tmp_path):
        assert resolve_net_version(tmp_path, "10.0") == "10.0"

    def test_default_is_logged_at_info(self, tmp_path, caplog):
        with caplog.at_level(logging.INFO):
            resolve_net_version(tmp_path, DEFAULT)
        assert "Using default LTS: 8.0" in caplog.text
        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]
