"""Unit tests for PasswordHashingService."""

import pytest

from warden_auth import HashingError, InvalidInputError
from warden_auth.services import PasswordHashingService


class TestPasswordHashing:
    """Tests for password hashing and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=4)

    def test_hash_returns_bcrypt_bytes(self):
        """Test that hashing yields a bcrypt byte string."""
        password_hash = self.service.hash("pw123")

        assert isinstance(password_hash, bytes)
        assert password_hash.startswith(b"$2b$04$")

    def test_hash_is_salted(self):
        """Test that the same password hashes differently each time."""
        assert self.service.hash("pw123") != self.service.hash("pw123")

    def test_verify_correct_password(self):
        password_hash = self.service.hash("pw123")

        assert self.service.verify("pw123", password_hash) is True

    def test_verify_wrong_password(self):
        password_hash = self.service.hash("pw123")

        assert self.service.verify("pw124", password_hash) is False

    def test_verify_empty_password_is_false(self):
        password_hash = self.service.hash("pw123")

        assert self.service.verify("", password_hash) is False

    def test_verify_unicode_password(self):
        """Test that non-ASCII passwords round trip."""
        password_hash = self.service.hash("pässwörd-密码")

        assert self.service.verify("pässwörd-密码", password_hash)
        assert not self.service.verify("passwort-密码", password_hash)

    def test_hash_empty_password_raises(self):
        with pytest.raises(InvalidInputError, match="empty"):
            self.service.hash("")

    def test_hash_password_over_72_bytes_raises(self):
        """Test that bcrypt's input limit is enforced, not silently truncated."""
        with pytest.raises(InvalidInputError, match="72 bytes"):
            self.service.hash("a" * 73)

    def test_hash_password_of_exactly_72_bytes(self):
        password = "a" * 72
        password_hash = self.service.hash(password)

        assert self.service.verify(password, password_hash)

    def test_verify_overlong_password_is_false(self):
        password_hash = self.service.hash("a" * 72)

        assert self.service.verify("a" * 73, password_hash) is False

    def test_verify_malformed_hash_raises(self):
        with pytest.raises(HashingError):
            self.service.verify("pw123", b"not-a-bcrypt-hash")


class TestPasswordHashingConfig:
    def test_default_rounds(self):
        assert PasswordHashingService().rounds == 12
