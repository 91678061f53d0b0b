"""Tests for the JSON-file user repository."""

import pytest

from storefront.domain.exceptions import ConflictError
from storefront.domain.model.user import User
from storefront.infrastructure.persistence.json_user_repository import JsonUserRepository


@pytest.fixture
def repo(tmp_path):
    return JsonUserRepository(tmp_path / "users.json")


class TestJsonUserRepository:

    def test_round_trip(self, repo):
        user = User.register("ana@example.com", "hash", "Ana")
        repo.add(user)
        assert repo.get_by_id(user.id) == user

    def test_lookup_by_email_ignores_case(self, repo):
        user = User.register("Ana@Example.com", "hash")
        repo.add(user)
        assert repo.get_by_email("ana@example.COM").id == user.id

    def test_duplicate_email_conflicts(self, repo):
        repo.add(User.register("ana@example.com", "hash"))
        with pytest.raises(ConflictError):
            repo.add(User.register("ANA@example.com", "hash2"))

    def test_conflict_leaves_file_unchanged(self, repo, tmp_path):
        repo.add(User.register("ana@example.com", "hash"))
        before = (tmp_path / "users.json").read_text()
        with pytest.raises(ConflictError):
            repo.add(User.register("ana@example.com", "hash2"))
        assert (tmp_path / "users.json").read_text() == before

    def test_unknown_user(self, repo):
        assert repo.get_by_id("nobody") is None
        assert repo.get_by_email("nobody@example.com") is None
