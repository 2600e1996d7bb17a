from __future__ import annotations

import pytest

from services import identity
from utils import errors


def test_register_hashes_password_and_assigns_user_role(store):
    user = identity.register(
        store, username="alice", email="Alice@X.com ", password="secret123", department="Safety",
    )

    assert user.id
    assert user.email == "alice@x.com"
    assert user.role == "user"
    assert user.password_hash != "secret123"
    assert user.password_hash.startswith("$2")


def test_register_duplicate_email_conflicts(store, user):
    with pytest.raises(errors.Conflict):
        identity.register(
            store, username="alice2", email="ALICE@x.com", password="other123", department="Ops",
        )


def test_login_succeeds_with_correct_password(store, user):
    assert identity.authenticate(store, "alice@x.com", "secret123").id == user.id


def test_login_fails_with_wrong_password(store, user):
    with pytest.raises(errors.Unauthorized):
        identity.authenticate(store, "alice@x.com", "wrong-password")


def test_login_fails_for_unknown_email(store):
    with pytest.raises(errors.Unauthorized):
        identity.authenticate(store, "nobody@x.com", "secret123")


def test_get_user_missing_is_not_found(store):
    with pytest.raises(errors.NotFound):
        identity.get_user(store, "missing")


def test_register_rejects_unknown_role(store):
    with pytest.raises(errors.ValidationError):
        identity.register(
            store, username="eve", email="eve@x.com", password="secret123", department="IT", role="root",
        )
