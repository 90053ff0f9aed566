"""Tests for bcrypt password hashing."""

import pytest


class TestPasswordHasher:
    """Tests for hash and verify."""

    def test_hash_verifies(self, hasher):
        """Test that a password verifies against its own hash."""
        digest = hasher.hash("correct horse")
        assert hasher.verify("correct horse", digest) is True

    def test_other_password_rejected(self, hasher):
        """Test that a different password does not verify."""
        digest = hasher.hash("correct horse")
        assert hasher.verify("battery staple", digest) is False

    def test_salt_differs_per_call(self, hasher):
        """Test that hashing the same password twice gives different digests."""
        assert hasher.hash("secret") != hasher.hash("secret")

    def test_digest_does_not_contain_password(self, hasher):
        assert "secret" not in hasher.hash("secret")

    def test_work_factor_is_encoded(self, hasher):
        """Test that the configured cost is part of the digest."""
        assert hasher.hash("secret").startswith("$2b$04$")

    @pytest.mark.parametrize("digest", ["", "garbage", "$2b$10$tooshort", "$2b$04$" + "x" * 60])
    def test_malformed_hash_returns_false(self, hasher, digest):
        """Test that malformed digests never raise."""
        assert hasher.verify("secret", digest) is False


class TestPasswordHasherAsync:
    """Tests for the thread-offloaded variants."""

    @pytest.mark.asyncio
    async def test_hash_and_verify_async(self, hasher):
        digest = await hasher.hash_async("secret")
        assert await hasher.verify_async("secret", digest) is True
        assert await hasher.verify_async("wrong", digest) is False
