"""Shared fixtures: Django setup, an in-memory parameter reader and a runtime."""
import base64
import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "sealer_site.settings")
os.environ.setdefault("SEALER_ENVIRONMENT", "test")
os.environ.setdefault("SEALER_DJANGO_SECRET_KEY", "sealer-test-secret-key")

import django  # noqa: E402

django.setup()

from django.test.utils import setup_test_environment  # noqa: E402

setup_test_environment()

import pytest  # noqa: E402

from sealer.bootstrap import bootstrap, install_runtime  # noqa: E402
from sealer.config.settings import Settings  # noqa: E402
from sealer.crypto import EnvelopeCipher  # noqa: E402
from sealer.storage.parameters import ParameterKind, ParameterPage, RemoteEntry  # noqa: E402

NAMESPACE = "/category-team/staging/example-app/2018-08-25.1/"
CONTEXT = b"example-service-envelope"
ZERO_KEY_B64 = base64.b64encode(bytes(32)).decode("ascii")


class PagedParameterReader:
    """Serve pre-built pages, chaining them with continuation tokens."""

    def __init__(self, pages):
        self.pages = [tuple(page) for page in pages] or [()]
        self.calls = []

    def list_under(self, request, next_token=None):
        self.calls.append((request, next_token))
        index = 0 if next_token is None else int(next_token.rsplit("-", 1)[1])
        following = index + 1
        token = f"page-{following}" if following < len(self.pages) else None
        return ParameterPage(entries=self.pages[index], next_token=token)


class FailingParameterReader:
    def __init__(self, error):
        self.error = error

    def list_under(self, request, next_token=None):
        raise self.error


def entry(name, value, kind=ParameterKind.STRING, namespace=NAMESPACE):
    return RemoteEntry(name=f"{namespace}{name}", value=value, kind=kind)


@pytest.fixture
def zero_key():
    return bytes(32)


@pytest.fixture
def cipher(zero_key):
    return EnvelopeCipher(zero_key, CONTEXT)


@pytest.fixture
def app_settings():
    return Settings(config_path=NAMESPACE, auth_context=CONTEXT.decode("ascii"), max_body_bytes=1024)


@pytest.fixture
def runtime(app_settings):
    reader = PagedParameterReader(
        [
            [
                entry("secretKey", ZERO_KEY_B64, ParameterKind.SECURE_STRING),
                entry("favoriteColor", "teal"),
            ],
            [entry("preferences/locale", "en_US")],
        ]
    )
    installed = bootstrap(app_settings, reader=reader)
    yield installed
    install_runtime(None)
