import pytest

collect_ignore = []

try:
    import requests  # NOQA
except ImportError:
    collect_ignore.append('tests/transport/requests')


@pytest.fixture(autouse=True)
def clean_sentry_environment(monkeypatch):
    for name in ('SENTRY_DSN', 'SENTRY_RELEASE', 'SENTRY_ENVIRONMENT'):
        monkeypatch.delenv(name, raising=False)
