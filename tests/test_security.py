"""
Tests for the Credential Store (password hashing)
"""

import pytest

from book_tracker.exceptions import ComparisonError, HashingError
from book_tracker.services import security
from book_tracker.services.security import hash_password, verify_password


class TestHashPassword:

    def test_hash_is_bcrypt_with_cost_10(self):
        hashed = hash_password("pw1")

        assert hashed.startswith("$2b$10$")
        assert "pw1" not in hashed

    def test_hash_is_salted(self):
        assert hash_password("pw1") != hash_password("pw1")

    def test_backend_failure_raises_hashing_error(self, monkeypatch):
        def broken_hash(secret):
            raise ValueError("backend exploded")

        monkeypatch.setattr(security.pwd_context, "hash", broken_hash)

        with pytest.raises(HashingError):
            hash_password("pw1")


class TestVerifyPassword:

    @pytest.mark.parametrize("plaintext", ["pw1", "", "correct horse battery staple", "pässwörd"])
    def test_verify_accepts_own_hash(self, plaintext):
        assert verify_password(plaintext, hash_password(plaintext)) is True

    @pytest.mark.parametrize("other", ["pw2", "PW1", "pw1 ", ""])
    def test_verify_rejects_other_password(self, other):
        assert verify_password(other, hash_password("pw1")) is False

    def test_malformed_hash_raises_comparison_error(self):
        """A broken stored hash is an error, not a wrong password."""
        with pytest.raises(ComparisonError):
            verify_password("pw1", "not-a-bcrypt-hash")
