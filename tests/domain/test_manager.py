"""Unit tests for the Manager entity."""

import pytest

from ims.domain.exceptions import AuthenticationFailedError, HashingError, ValidationError
from ims.domain.model.manager import Manager

FAST_ITERATIONS = 1_000


class TestManagerCreate:

    def test_password_is_hashed(self):
        m = Manager.create("boss@example.com", "s3cret", iterations=FAST_ITERATIONS)
        assert m.password != "s3cret"
        assert m.password.startswith("pbkdf2:sha256:1000$")

    def test_email_is_normalized(self):
        m = Manager.create("  Boss@Example.COM ", "s3cret", iterations=FAST_ITERATIONS)
        assert m.email == "boss@example.com"

    def test_same_password_gets_different_salt(self):
        a = Manager.create("a@example.com", "s3cret", iterations=FAST_ITERATIONS)
        b = Manager.create("b@example.com", "s3cret", iterations=FAST_ITERATIONS)
        assert a.password != b.password

    @pytest.mark.parametrize("email", ["", "not-an-email"])
    def test_invalid_email_rejected(self, email):
        with pytest.raises(ValidationError, match="email"):
            Manager.create(email, "s3cret", iterations=FAST_ITERATIONS)

    def test_empty_password_rejected(self):
        with pytest.raises(ValidationError, match="password"):
            Manager.create("boss@example.com", "", iterations=FAST_ITERATIONS)


class TestManagerPasswords:

    def test_correct_password_accepted(self):
        m = Manager.create("boss@example.com", "s3cret", iterations=FAST_ITERATIONS)
        m.check_password("s3cret")

    def test_wrong_password_rejected(self):
        m = Manager.create("boss@example.com", "s3cret", iterations=FAST_ITERATIONS)
        with pytest.raises(AuthenticationFailedError):
            m.check_password("guess")

    def test_unreadable_stored_hash_rejected(self):
        m = Manager(id="1", email="boss@example.com", password="plaintext")
        with pytest.raises(AuthenticationFailedError):
            m.check_password("plaintext")

    def test_hashing_failure_raises_hashing_error(self):
        m = Manager(id="1", email="boss@example.com", password="s3cret")
        with pytest.raises(HashingError):
            m.hash_password(0)
        assert m.password == "s3cret"
