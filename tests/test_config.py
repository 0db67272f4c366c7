import pytest
from pydantic import ValidationError

from postnl.config import Settings


@pytest.fixture(autouse=True)
def clear_postnl_env(monkeypatch):
    monkeypatch.delenv("POSTNL_DOMAIN_NAMESPACE", raising=False)
    monkeypatch.delenv("POSTNL_NAMESPACE_OVERRIDES", raising=False)


def test_defaults() -> None:
    config = Settings(_env_file=None)

    assert config.domain_namespace == "http://postnl.nl/"
    assert config.namespace_overrides == {}


def test_domain_namespace_from_env(monkeypatch) -> None:
    monkeypatch.setenv("POSTNL_DOMAIN_NAMESPACE", "http://sandbox.postnl.nl/")

    assert Settings(_env_file=None).domain_namespace == "http://sandbox.postnl.nl/"


def test_overrides_from_json_env(monkeypatch) -> None:
    monkeypatch.setenv("POSTNL_NAMESPACE_OVERRIDES", '{"Location": "http://a.test/", "Timeframe": "http://b.test/"}')

    config = Settings(_env_file=None)

    assert config.namespace_overrides == {"Location": "http://a.test/", "Timeframe": "http://b.test/"}


def test_overrides_from_pairs_env(monkeypatch) -> None:
    monkeypatch.setenv("POSTNL_NAMESPACE_OVERRIDES", "Location=http://a.test/, Timeframe=http://b.test/")

    config = Settings(_env_file=None)

    assert config.namespace_overrides == {"Location": "http://a.test/", "Timeframe": "http://b.test/"}


def test_overrides_from_env_file(tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("POSTNL_NAMESPACE_OVERRIDES=Barcode=http://c.test/\n", encoding="utf-8")

    config = Settings(_env_file=env_file)

    assert config.namespace_overrides == {"Barcode": "http://c.test/"}


def test_malformed_override_pairs_are_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, namespace_overrides="Location")


def test_blank_domain_namespace_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, domain_namespace="   ")
