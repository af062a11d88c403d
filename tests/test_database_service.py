# /tests/test_database_service.py

import pytest

from app.services.database_service import DatabaseService


def test_requires_a_session():
    with pytest.raises(ValueError):
        DatabaseService(db_session=None)


def test_add_and_get_user(db_service):
    created = db_service.add_user({"email": "db@example.com", "password": "hash", "display_name": "DB"})

    assert db_service.get_user_by_id(created.id).email == "db@example.com"
    assert db_service.get_user_by_email("db@example.com").id == created.id
    assert db_service.get_user_by_email("nobody@example.com") is None


def test_chat_history_is_append_only_and_scoped(db_service):
    user = db_service.add_user({"email": "chat@example.com", "password": "hash", "display_name": "Chat"})
    other = db_service.add_user({"email": "other@example.com", "password": "hash", "display_name": "Other"})
    for i in range(3):
        db_service.add_chat_message({"user_id": user.id, "role": "user", "message": f"m{i}"})
    db_service.add_chat_message({"user_id": other.id, "role": "user", "message": "not mine"})

    history = db_service.get_recent_chat_messages(user.id, limit=10)

    assert [m.message for m in history] == ["m0", "m1", "m2"]
    assert not hasattr(db_service, "delete_chat_message")


def test_update_missing_article_returns_none(db_service):
    assert db_service.update_article("missing", {"title": "x"}) is None
    assert db_service.delete_article("missing") is False
