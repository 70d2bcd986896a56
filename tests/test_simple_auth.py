"""Tests for the static credential check."""

import pytest

from core import constants
from core.simple_auth import hash_password, verify_login


@pytest.fixture(autouse=True)
def credentials(monkeypatch):
    monkeypatch.setattr(constants, "APP_USERNAME", "admin")
    monkeypatch.setattr(constants, "APP_PASSWORD", "123456")


class TestVerifyLogin:
    def test_accepts_configured_credentials(self):
        assert verify_login("admin", "123456")

    def test_surrounding_spaces_in_username_are_ignored(self):
        assert verify_login("  admin ", "123456")

    def test_rejects_wrong_password(self):
        assert not verify_login("admin", "654321")

    def test_rejects_wrong_username(self):
        assert not verify_login("Admin", "123456")

    def test_rejects_empty_input(self):
        assert not verify_login("", "")
        assert not verify_login(None, None)


def test_hash_password_is_sha256_hex():
    digest = hash_password("123456")
    assert len(digest) == 64
    assert digest == hash_password("123456")


def test_non_ascii_username_is_rejected_not_raised():
    assert not verify_login("joão", "123456")
