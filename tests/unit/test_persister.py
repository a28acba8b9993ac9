"""Unit tests for SQLAlchemyPersister."""

import pytest
from sqlalchemy import func, inspect, select
from sqlalchemy.exc import IntegrityError

from src.core.fixtures import SQLAlchemyPersister
from src.core.fixtures.interfaces import Persister
from src.models import ContactInfo, UserModel


@pytest.fixture
def persister(session):
    return SQLAlchemyPersister(session)


def make_user(name: str) -> UserModel:
    return UserModel(username=name, email=f"{name}@example.com")


class TestIdentity:
    def test_satisfies_protocol(self, persister):
        assert isinstance(persister, Persister)

    def test_mapped_entity_has_identity(self, persister):
        assert persister.has_identity(make_user("admin")) is True

    def test_value_objects_have_no_identity(self, persister):
        assert persister.has_identity(ContactInfo(city="Москва")) is False
        assert persister.has_identity({"city": "Москва"}) is False


class TestLifecycle:
    def test_persist_skips_value_objects(self, persister, session):
        contact = ContactInfo(city="Москва")
        user = make_user("admin")
        user.contact = contact

        persister.persist([contact, user])

        assert session.scalar(select(func.count()).select_from(UserModel)) == 1
        assert user.id is not None

    def test_persist_rolls_back_on_error(self, persister, session):
        persister.persist([make_user("admin")])

        with pytest.raises(IntegrityError):
            persister.persist([make_user("admin")])

        assert session.scalar(select(func.count()).select_from(UserModel)) == 1

    def test_detach_and_merge(self, persister, session, session_factory):
        user = make_user("admin")
        persister.persist([user])

        persister.detach(user)

        assert inspect(user).detached
        assert user.username == "admin"

        other = session_factory()
        try:
            merged = SQLAlchemyPersister(other).merge(user)
            assert merged is not user
            assert merged in other
            assert merged.id == user.id
        finally:
            other.close()

    def test_detach_ignores_value_objects_and_detached(self, persister):
        user = make_user("admin")
        persister.persist([user])
        persister.detach(user)

        persister.detach(user)
        persister.detach(ContactInfo(city="Москва"))

        assert inspect(user).detached

    def test_merge_returns_value_object_unchanged(self, persister):
        contact = ContactInfo(city="Москва")

        assert persister.merge(contact) is contact

    def test_without_commit_changes_stay_in_transaction(self, session, session_factory):
        persister = SQLAlchemyPersister(session, commit=False)
        persister.persist([make_user("admin")])

        other = session_factory()
        try:
            assert other.scalar(select(func.count()).select_from(UserModel)) == 0
        finally:
            other.close()
            session.rollback()

    def test_expired_objects_are_refreshed_before_detach(self, engine):
        from sqlalchemy.orm import Session

        with Session(engine, expire_on_commit=True) as session:
            persister = SQLAlchemyPersister(session)
            user = make_user("admin")
            persister.persist([user])

            persister.detach(user)

            assert user.username == "admin"

    def test_commit_does_not_refresh_unrelated_objects(self, engine):
        from sqlalchemy.orm import Session

        with Session(engine, expire_on_commit=True) as session:
            other = make_user("other")
            session.add(other)
            session.commit()

            SQLAlchemyPersister(session).persist([make_user("admin")])

            assert inspect(other).expired_attributes
