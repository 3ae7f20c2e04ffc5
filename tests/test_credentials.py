"""
Tests for the demo credential table
"""

import pytest

from auth.credentials import DEMO_ACCOUNTS, find_seed, match_credentials
from models.user import Role
from samples import SEEDS


class TestDemoAccounts:
    def test_one_account_per_role(self):
        assert len(DEMO_ACCOUNTS) == 6
        assert {a.role for a in DEMO_ACCOUNTS} == set(Role)

    def test_passwords_are_not_stored_in_plaintext(self):
        for account in DEMO_ACCOUNTS:
            assert account.password_hash.startswith("$pbkdf2-sha256$")


class TestMatchCredentials:
    @pytest.mark.parametrize("email,password,role", SEEDS)
    def test_seed_matches(self, email, password, role):
        account = match_credentials(email, password)
        assert account is not None
        assert account.role == role

    def test_wrong_password(self):
        assert match_credentials("admin@railway.gov.in", "admin124") is None

    def test_password_is_case_sensitive(self):
        assert match_credentials("admin@railway.gov.in", "ADMIN123") is None

    def test_email_is_case_sensitive(self):
        assert match_credentials("Admin@railway.gov.in", "admin123") is None

    def test_unknown_email(self):
        assert match_credentials("nobody@railway.gov.in", "admin123") is None


class TestFindSeed:
    def test_known_email(self):
        seed = find_seed("den@railway.gov.in")
        assert seed.name == "DEN User"
        assert seed.role == Role.DEN

    def test_unknown_email(self):
        assert find_seed("someone@example.com") is None
