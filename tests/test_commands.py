"""Tests for the management commands."""
import json
from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from sealer.config.hydrator import HydrationResult
from sealer.config.records import ServiceConfig
from sealer.errors import RemoteReadError
from sealer_app.management.commands import check_config

from tests.conftest import ZERO_KEY_B64


def _result(secret):
    return HydrationResult(
        record=ServiceConfig(secret_app_key=secret, favorite_color="teal"),
        assigned=("secret_app_key", "favorite_color"),
        missing=("locale",),
    )


class TestCheckConfig:

    def test_reports_fields_without_values(self, monkeypatch):
        monkeypatch.setattr(check_config, "load_configuration", lambda settings: _result(ZERO_KEY_B64))
        out = StringIO()
        call_command("check_config", stdout=out)

        output = out.getvalue()
        assert ZERO_KEY_B64 not in output
        assert "teal" not in output
        report = json.loads(output[: output.rindex("}") + 1])
        assert report["assigned"] == ["secret_app_key", "favorite_color"]
        assert report["missing"] == ["locale"]
        assert report["unbound"] == ["unmodeled_value_1", "unmodeled_value_2"]
        assert "secret key is usable" in output

    def test_config_path_override(self, monkeypatch):
        seen = {}

        def fake_load(settings):
            seen["path"] = settings.config_path
            return _result(ZERO_KEY_B64)

        monkeypatch.setattr(check_config, "load_configuration", fake_load)
        call_command("check_config", "--config-path", "/other/app", stdout=StringIO())
        assert seen["path"] == "/other/app"

    def test_unusable_key_fails(self, monkeypatch):
        monkeypatch.setattr(check_config, "load_configuration", lambda settings: _result(""))
        with pytest.raises(CommandError, match="unset"):
            call_command("check_config", stdout=StringIO())

    def test_remote_failure_fails(self, monkeypatch):
        def failing(settings):
            raise RemoteReadError("unreachable")

        monkeypatch.setattr(check_config, "load_configuration", failing)
        with pytest.raises(CommandError):
            call_command("check_config", stdout=StringIO())


class TestGenerateOpenapi:

    def test_writes_document(self, tmp_path):
        target = tmp_path / "docs" / "openapi.json"
        call_command("generate_openapi", "--output", str(target), "--server-url", "https://sealer.example", stdout=StringIO())

        spec = json.loads(target.read_text(encoding="utf-8"))
        assert spec["servers"][0]["url"] == "https://sealer.example"
        assert "/api/unseal" in spec["paths"]
