"""Tests for parameter maps and configuration hydration."""
import logging
import time
from dataclasses import dataclass
from types import SimpleNamespace

import pytest

from sealer.config import hydrator as hydrator_module
from sealer.config.hydrator import fetch_parameters, hydrate, normalize_namespace
from sealer.config.records import SERVICE_CONFIG_MAP, ParameterBinding, ParameterMap, ServiceConfig
from sealer.errors import ConfigurationError, RemoteReadError
from sealer.storage.parameters import ListRequest, ParameterKind

from tests.conftest import NAMESPACE, FailingParameterReader, PagedParameterReader, entry


@dataclass(frozen=True)
class AlphaRecord:
    a: str = ""
    b: str = ""


ALPHA_MAP = ParameterMap(AlphaRecord, [ParameterBinding("a", "alpha")])


@dataclass(frozen=True)
class MixedRecord:
    name: str = ""
    port: int = 0


@dataclass
class NoDefaultRecord:
    name: str


class TestNamespace:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("example-app", "example-app/"),
            ("/team/staging/app", "/team/staging/app/"),
            ("/team/staging/app/", "/team/staging/app/"),
            ("/team/staging/app///", "/team/staging/app/"),
            ("/", "/"),
        ],
    )
    def test_trailing_separator(self, raw, expected):
        assert normalize_namespace(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_empty_namespace_rejected(self, raw):
        with pytest.raises(ConfigurationError):
            normalize_namespace(raw)


class TestParameterMap:

    def test_unbound_fields(self):
        assert ALPHA_MAP.unbound_fields == ("b",)
        assert [binding.field for binding in ALPHA_MAP] == ["a"]

    def test_service_config_bindings(self):
        paths = {binding.field: binding.path for binding in SERVICE_CONFIG_MAP}
        assert paths == {
            "secret_app_key": "secretKey",
            "favorite_color": "favoriteColor",
            "locale": "preferences/locale",
        }
        assert SERVICE_CONFIG_MAP.unbound_fields == ("unmodeled_value_1", "unmodeled_value_2")

    @pytest.mark.parametrize("path", ["", "/", "//"])
    def test_empty_path_rejected(self, path):
        with pytest.raises(ConfigurationError):
            ParameterBinding("a", path)

    def test_unknown_field_rejected(self):
        with pytest.raises(ConfigurationError):
            ParameterMap(AlphaRecord, [ParameterBinding("missing", "alpha")])

    def test_non_string_field_rejected(self):
        with pytest.raises(ConfigurationError):
            ParameterMap(MixedRecord, [ParameterBinding("port", "port")])

    def test_duplicate_binding_rejected(self):
        with pytest.raises(ConfigurationError):
            ParameterMap(AlphaRecord, [ParameterBinding("a", "alpha"), ParameterBinding("a", "beta")])

    def test_field_without_default_rejected(self):
        with pytest.raises(ConfigurationError):
            ParameterMap(NoDefaultRecord, [ParameterBinding("name", "name")])

    def test_non_dataclass_rejected(self):
        with pytest.raises(ConfigurationError):
            ParameterMap(dict, [])


class TestHydrate:

    def test_selective_hydration(self):
        reader = PagedParameterReader([[entry("alpha", "x"), entry("beta", "y"), entry("b", "z")]])
        result = hydrate(ALPHA_MAP, reader, NAMESPACE)

        assert result.record == AlphaRecord(a="x", b="")
        assert result.assigned == ("a",)
        assert result.missing == ()
        assert result.skipped == ()

    def test_type_mismatch_skipped(self):
        reader = PagedParameterReader([[entry("alpha", "x,y", ParameterKind.STRING_LIST)]])
        result = hydrate(ALPHA_MAP, reader, NAMESPACE)

        assert result.record.a == ""
        assert result.skipped == ("a",)
        assert result.assigned == ()

    def test_unknown_kind_skipped(self):
        reader = PagedParameterReader([[entry("alpha", "x", "Binary")]])
        result = hydrate(ALPHA_MAP, reader, NAMESPACE)
        assert result.skipped == ("a",)

    def test_secure_string_assigned(self):
        reader = PagedParameterReader([[entry("alpha", "s3cr3t", ParameterKind.SECURE_STRING)]])
        assert hydrate(ALPHA_MAP, reader, NAMESPACE).record.a == "s3cr3t"

    def test_plain_string_kind_name_accepted(self):
        reader = PagedParameterReader([[entry("alpha", "x", "String")]])
        assert hydrate(ALPHA_MAP, reader, NAMESPACE).record.a == "x"

    def test_value_copied_verbatim(self):
        reader = PagedParameterReader([[entry("alpha", "  padded value\n")]])
        assert hydrate(ALPHA_MAP, reader, NAMESPACE).record.a == "  padded value\n"

    def test_missing_parameter_logged_not_raised(self, caplog):
        reader = PagedParameterReader([[entry("beta", "y")]])
        with caplog.at_level(logging.INFO, logger="sealer.config"):
            result = hydrate(ALPHA_MAP, reader, NAMESPACE)

        assert result.record.a == ""
        assert result.missing == ("a",)
        assert any("alpha" in record.getMessage() for record in caplog.records)

    def test_values_never_logged(self, caplog):
        reader = PagedParameterReader([[entry("alpha", "do-not-log-me")]])
        with caplog.at_level(logging.DEBUG, logger="sealer"):
            hydrate(ALPHA_MAP, reader, NAMESPACE)
        assert all("do-not-log-me" not in record.getMessage() for record in caplog.records)

    def test_pagination_completeness(self):
        reader = PagedParameterReader(
            [
                [entry("secretKey", "a2V5", ParameterKind.SECURE_STRING)],
                [entry("favoriteColor", "blue")],
                [entry("preferences/locale", "pt_BR")],
            ]
        )
        result = hydrate(SERVICE_CONFIG_MAP, reader, NAMESPACE)

        assert [token for _, token in reader.calls] == [None, "page-1", "page-2"]
        assert result.record == ServiceConfig(secret_app_key="a2V5", favorite_color="blue", locale="pt_BR")
        assert result.assigned == ("secret_app_key", "favorite_color", "locale")

    def test_namespace_normalized_before_lookup(self):
        reader = PagedParameterReader([[entry("alpha", "x")]])
        result = hydrate(ALPHA_MAP, reader, NAMESPACE.rstrip("/"))

        request, _ = reader.calls[0]
        assert request.path == NAMESPACE
        assert request.recursive is True
        assert request.with_decryption is True
        assert result.record.a == "x"

    def test_page_size_passed_through(self):
        reader = PagedParameterReader([[]])
        hydrate(ALPHA_MAP, reader, NAMESPACE, page_size=10)
        request, _ = reader.calls[0]
        assert request.max_results == 10

    def test_namespace_without_leading_separator(self):
        reader = PagedParameterReader([[entry("alpha", "x", namespace="/example-app/")]])
        assert hydrate(ALPHA_MAP, reader, "example-app").record.a == "x"

    def test_remote_failure_propagates(self):
        reader = FailingParameterReader(RemoteReadError("unreachable"))
        with pytest.raises(RemoteReadError):
            hydrate(ALPHA_MAP, reader, NAMESPACE)

    def test_record_is_read_only(self):
        reader = PagedParameterReader([[entry("alpha", "x")]])
        record = hydrate(ALPHA_MAP, reader, NAMESPACE).record
        with pytest.raises(AttributeError):
            record.a = "y"


class TestFetchParameters:

    def test_indexes_relative_names(self):
        reader = PagedParameterReader([[entry("alpha", "x")], [entry("nested/beta", "y")]])
        indexed = fetch_parameters(reader, ListRequest(path=NAMESPACE))
        assert set(indexed) == {"alpha", "nested/beta"}
        assert indexed["nested/beta"].value == "y"

    def test_expired_deadline_raises(self):
        reader = PagedParameterReader([[entry("alpha", "x")]])
        with pytest.raises(RemoteReadError):
            fetch_parameters(reader, ListRequest(path=NAMESPACE), deadline=time.monotonic() - 1)
        assert reader.calls == []

    def test_deadline_stops_multi_page_read(self, monkeypatch):
        clock = {"now": 100.0}
        monkeypatch.setattr(hydrator_module, "time", SimpleNamespace(monotonic=lambda: clock["now"]))

        class SlowReader(PagedParameterReader):
            def list_under(self, request, next_token=None):
                page = super().list_under(request, next_token)
                clock["now"] += 10.0
                return page

        reader = SlowReader([[entry("alpha", "x")], [entry("beta", "y")], [entry("gamma", "z")]])
        with pytest.raises(RemoteReadError, match="1 page"):
            fetch_parameters(reader, ListRequest(path=NAMESPACE), deadline=105.0)
        assert [token for _, token in reader.calls] == [None]
