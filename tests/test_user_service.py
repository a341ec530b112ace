from __future__ import annotations

from user_management_api.app.core.errors import EmailAlreadyExists, UserNotFound
from user_management_api.app.core.store import User
from user_management_api.app.schemas.user import UserCreate, UserPartialUpdate
from user_management_api.app.services.user_service import UserService


def _create(service: UserService, name: str = "Alice", email: str = "alice@example.com", age: int = 25) -> User:
    result = service.create_user(UserCreate(name=name, email=email, age=age))
    assert isinstance(result, User)
    return result


def test_get_all_users_empty(service: UserService) -> None:
    assert service.get_all_users() == []


def test_get_all_users_returns_created(service: UserService) -> None:
    _create(service)
    _create(service, "Bob", "bob@example.com", 30)

    names = [u.name for u in service.get_all_users()]

    assert names == ["Alice", "Bob"]


def test_create_user_assigns_positive_id(service: UserService) -> None:
    user = _create(service)

    assert user.id > 0
    assert (user.name, user.email, user.age) == ("Alice", "alice@example.com", 25)


def test_create_user_with_duplicate_email(service: UserService) -> None:
    _create(service)

    result = service.create_user(UserCreate(name="Bob", email="alice@example.com", age=30))

    assert result == EmailAlreadyExists("alice@example.com")
    assert "alice@example.com" in result.message
    assert len(service.get_all_users()) == 1


def test_get_user_by_id(service: UserService) -> None:
    user = _create(service)

    assert service.get_user_by_id(user.id) is user


def test_get_user_by_id_never_created(service: UserService) -> None:
    result = service.get_user_by_id(123)

    assert result == UserNotFound(123)
    assert result.message == "User with id 123 not found."


def test_update_user_overwrites_fields(service: UserService) -> None:
    user = _create(service)

    result = service.update_user(user.id, UserCreate(name="Alicia", email="alicia@example.com", age=31))

    assert isinstance(result, User)
    assert result.id == user.id
    assert (result.name, result.email, result.age) == ("Alicia", "alicia@example.com", 31)
    assert service.get_user_by_id(user.id).email == "alicia@example.com"


def test_update_user_missing(service: UserService) -> None:
    result = service.update_user(7, UserCreate(name="Ghost", email="ghost@example.com", age=50))

    assert result == UserNotFound(7)
    assert service.get_all_users() == []


def test_update_user_to_other_users_email(service: UserService) -> None:
    _create(service)
    bob = _create(service, "Bob", "bob@example.com", 30)

    result = service.update_user(bob.id, UserCreate(name="Bob", email="alice@example.com", age=30))

    assert result == EmailAlreadyExists("alice@example.com")
    assert service.get_user_by_id(bob.id).email == "bob@example.com"


def test_update_user_keeping_own_email(service: UserService) -> None:
    user = _create(service)

    result = service.update_user(user.id, UserCreate(name="Alice", email="alice@example.com", age=26))

    assert isinstance(result, User)
    assert result.age == 26


def test_update_checks_email_before_existence(service: UserService) -> None:
    _create(service)

    result = service.update_user(99, UserCreate(name="X", email="alice@example.com", age=1))

    assert isinstance(result, EmailAlreadyExists)


def test_partial_update_age_only(service: UserService) -> None:
    user = _create(service)

    result = service.partial_update_user(user.id, UserPartialUpdate(age=40))

    assert isinstance(result, User)
    assert (result.name, result.email, result.age) == ("Alice", "alice@example.com", 40)


def test_partial_update_null_is_ignored(service: UserService) -> None:
    user = _create(service)

    result = service.partial_update_user(user.id, UserPartialUpdate(name=None, email="new@example.com"))

    assert isinstance(result, User)
    assert result.name == "Alice"
    assert result.email == "new@example.com"


def test_partial_update_email_collision(service: UserService) -> None:
    _create(service)
    bob = _create(service, "Bob", "bob@example.com", 30)

    result = service.partial_update_user(bob.id, UserPartialUpdate(email="alice@example.com"))

    assert result == EmailAlreadyExists("alice@example.com")


def test_partial_update_missing(service: UserService) -> None:
    assert service.partial_update_user(5, UserPartialUpdate(age=3)) == UserNotFound(5)


def test_partial_update_checks_email_before_existence(service: UserService) -> None:
    _create(service)

    result = service.partial_update_user(99, UserPartialUpdate(email="alice@example.com"))

    assert result == EmailAlreadyExists("alice@example.com")


def test_partial_update_keeping_own_email(service: UserService) -> None:
    user = _create(service)

    result = service.partial_update_user(user.id, UserPartialUpdate(email="alice@example.com", age=30))

    assert isinstance(result, User)
    assert (result.email, result.age) == ("alice@example.com", 30)


def test_delete_then_get(service: UserService) -> None:
    user = _create(service)

    assert service.delete_user(user.id) is None
    assert service.get_user_by_id(user.id) == UserNotFound(user.id)


def test_delete_nonexistent_keeps_collection_size(service: UserService) -> None:
    _create(service)
    _create(service, "Bob", "bob@example.com", 30)

    result = service.delete_user(999)

    assert result == UserNotFound(999)
    assert len(service.get_all_users()) == 2


def test_email_freed_after_delete(service: UserService) -> None:
    user = _create(service)
    service.delete_user(user.id)

    again = _create(service)

    assert again.id == user.id + 1
