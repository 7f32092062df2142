"""User schema validation — camelCase wire format, strict scalars, patch semantics.

Invariants:
    - CreateUser requires name and userPreference
    - PatchUser: absent = unchanged, null allowed only for email/address
    - Unknown fields rejected
"""

import pytest
from pydantic import ValidationError

from storefront.schemas.user import CreateUser, PatchUser


def test_create_user_reads_camel_case():
    user = CreateUser.model_validate(
        {"name": "A", "userPreference": {"receiveEmail": True}},
    )
    assert user.name == "A"
    assert user.user_preference.receive_email is True
    assert user.email is None


def test_create_user_requires_preference():
    with pytest.raises(ValidationError):
        CreateUser.model_validate({"name": "A"})


def test_create_user_rejects_empty_and_long_names():
    pref = {"receiveEmail": True}
    with pytest.raises(ValidationError):
        CreateUser.model_validate({"name": "", "userPreference": pref})
    with pytest.raises(ValidationError):
        CreateUser.model_validate({"name": "x" * 31, "userPreference": pref})


def test_receive_email_must_be_boolean():
    with pytest.raises(ValidationError):
        CreateUser.model_validate(
            {"name": "A", "userPreference": {"receiveEmail": "true"}},
        )


def test_name_must_be_string():
    with pytest.raises(ValidationError):
        CreateUser.model_validate(
            {"name": 5, "userPreference": {"receiveEmail": True}},
        )


def test_unknown_fields_rejected():
    with pytest.raises(ValidationError):
        CreateUser.model_validate(
            {"name": "A", "age": 3, "userPreference": {"receiveEmail": True}},
        )


def test_patch_user_changes_only_sent_fields():
    patch = PatchUser.model_validate({"name": "B"})
    assert patch.changes(exclude={"user_preference"}) == {"name": "B"}


def test_patch_user_allows_clearing_email():
    patch = PatchUser.model_validate({"email": None})
    assert patch.changes() == {"email": None}


def test_patch_user_rejects_null_name():
    with pytest.raises(ValidationError, match="name cannot be null"):
        PatchUser.model_validate({"name": None})


def test_patch_user_rejects_null_preference():
    with pytest.raises(ValidationError, match="userPreference cannot be null"):
        PatchUser.model_validate({"userPreference": None})


def test_patch_user_preference_must_be_complete():
    with pytest.raises(ValidationError):
        PatchUser.model_validate({"userPreference": {}})
