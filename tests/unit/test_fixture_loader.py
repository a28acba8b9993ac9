"""Unit tests for the FixtureLoader orchestrator.

Tests cover:
- Unknown loader key and missing session errors
- Reference table updates across load calls
- Detaching loaded objects and re-merging on a new session
- Processor hooks: order, single use per load
"""

from typing import Any, Dict, List

import pytest
from sqlalchemy import func, inspect, select
from sqlalchemy.exc import IntegrityError

from src.core.exceptions import (PersistenceNotConfiguredError,
                                 ReferenceNotFoundError, UnknownLoaderError)
from src.core.fixtures import FixtureLoader, YamlFixtureLoader
from src.models import ContactInfo, UserModel

USERS = """
src.models.v1.users.ContactInfo:
  contact_admin:
    phone: "+70000000000"
    city: Москва

src.models.v1.users.UserModel:
  user_admin:
    username: admin
    email: admin@example.com
    contact: "@contact_admin"
  user{1..2}:
    username: "user<current()>"
    email: "user<current()>@example.com"
"""


class RecordingProcessor:
    """Процессор, записывающий вызовы хуков."""

    def __init__(self, calls: List[tuple]):
        self.calls = calls

    def pre_process(self, obj: Any) -> None:
        self.calls.append(("pre", obj))

    def post_process(self, obj: Any) -> None:
        self.calls.append(("post", obj))


@pytest.fixture
def loader(session):
    loader = FixtureLoader({"yaml": YamlFixtureLoader()})
    loader.set_session(session)
    return loader


@pytest.fixture
def users_file(write_fixture):
    return write_fixture("users.yml", USERS)


class TestLoaderErrors:
    """Ошибки оркестратора."""

    def test_missing_yaml_loader_raises_unknown_loader(self, session):
        loader = FixtureLoader({})
        loader.set_session(session)

        with pytest.raises(UnknownLoaderError) as exc_info:
            loader.load([])

        assert exc_info.value.key == "yaml"
        assert "yaml" in str(exc_info.value)
        assert isinstance(exc_info.value, ValueError)

    def test_get_loader_returns_registered_loader(self):
        yaml_loader = YamlFixtureLoader()
        loader = FixtureLoader({"yaml": yaml_loader})

        assert loader.get_loader("yaml") is yaml_loader
        with pytest.raises(UnknownLoaderError):
            loader.get_loader("json")

    def test_load_without_session(self, users_file):
        loader = FixtureLoader({"yaml": YamlFixtureLoader()})

        with pytest.raises(PersistenceNotConfiguredError):
            loader.load([users_file])

    def test_failed_load_keeps_previous_references(self, loader, users_file, write_fixture):
        references = dict(loader.load([users_file]))
        broken = write_fixture(
            "broken.yml",
            """
            src.models.v1.users.UserModel:
              user_broken:
                username: broken
                email: broken@example.com
                contact: "@missing_contact"
            """,
        )

        with pytest.raises(ReferenceNotFoundError):
            loader.load([broken])

        assert loader.references == references

    def test_rolled_back_objects_do_not_leak_into_next_load(
        self, loader, users_file, write_fixture, session
    ):
        references = dict(loader.load([users_file]))
        duplicate = write_fixture(
            "duplicate.yml",
            """
            src.models.v1.users.UserModel:
              user_dup:
                username: admin
                email: dup@example.com
            """,
        )

        with pytest.raises(IntegrityError):
            loader.load([duplicate])

        assert loader.load([]) == references
        assert "user_dup" not in loader.get_loader("yaml").get_references()
        assert session.scalar(select(func.count()).select_from(UserModel)) == 3


class TestLoaderReferences:
    """Таблица ссылок и жизненный цикл объектов."""

    def test_empty_file_list_returns_table_unchanged(self, loader, users_file):
        references = loader.load([users_file])
        snapshot = dict(references)

        result = loader.load([])

        assert result == snapshot

    def test_loaded_names_map_to_detached_instances(self, loader, users_file, session):
        references = loader.load([users_file])

        assert list(references) == ["contact_admin", "user_admin", "user1", "user2"]
        for name in ("user_admin", "user1", "user2"):
            assert inspect(references[name]).detached
            assert references[name] not in session
        assert references["user_admin"].contact == ContactInfo("+70000000000", "Москва")
        assert session.scalar(select(func.count()).select_from(UserModel)) == 3

    def test_reload_overwrites_reference(self, loader, users_file, write_fixture):
        loader.load([users_file])
        redefined = write_fixture(
            "redefined.yml",
            """
            src.models.v1.users.UserModel:
              user1:
                username: renamed
                email: renamed@example.com
            """,
        )

        references = loader.load([redefined])

        assert list(references).count("user1") == 1
        assert references["user1"].username == "renamed"
        assert len(references) == 4

    def test_later_load_can_reference_earlier_objects(self, loader, users_file, write_fixture):
        loader.load([users_file])
        templates = write_fixture(
            "templates.yml",
            """
            src.models.v1.templates.TemplateModel:
              template_admin:
                title: Шаблон
                category: hardware
                author: "@user_admin"
            """,
        )

        references = loader.load([templates])

        assert references["template_admin"].author_id == references["user_admin"].id

    def test_set_session_merges_only_identity_references(
        self, loader, users_file, session_factory
    ):
        old = dict(loader.load([users_file]))
        new_session = session_factory()

        try:
            loader.set_session(new_session)

            merged_user = loader.references["user_admin"]
            assert merged_user is not old["user_admin"]
            assert merged_user in new_session
            assert merged_user.username == "admin"
            # Value object передаётся без изменений
            assert loader.references["contact_admin"] is old["contact_admin"]
            assert loader.get_loader("yaml").get_references() == loader.references
        finally:
            new_session.close()

    def test_set_session_propagates_logger_and_persister(self, session):
        yaml_loader = YamlFixtureLoader()
        loader = FixtureLoader({"yaml": yaml_loader})

        loader.set_session(session)

        assert yaml_loader.persister is loader.persister
        assert yaml_loader.logger is loader.logger

    def test_providers_passed_to_file_loader(self, loader, write_fixture):
        providers: List[Dict[str, Any]] = [{"domain": lambda: "corp.example"}]
        loader.set_providers(providers)
        path = write_fixture(
            "provided.yml",
            """
            src.models.v1.users.UserModel:
              user_corp:
                username: corp
                email: "corp@<domain()>"
            """,
        )

        references = loader.load([path])

        assert loader.get_loader("yaml").providers == providers
        assert references["user_corp"].email == "corp@corp.example"


class TestLoaderProcessors:
    """Хуки процессоров."""

    def test_pre_and_post_called_once_per_object(self, loader, users_file):
        calls: List[tuple] = []
        loader.add_processor(RecordingProcessor(calls))

        references = loader.load([users_file])

        objects = [references[name] for name in references]
        assert calls == [("pre", obj) for obj in objects] + [("post", obj) for obj in objects]

    def test_pre_process_runs_before_persist(self, loader, users_file):
        seen_ids = []

        class IdProcessor:
            def pre_process(self, obj):
                if isinstance(obj, UserModel):
                    seen_ids.append(("pre", obj.id))

            def post_process(self, obj):
                if isinstance(obj, UserModel):
                    seen_ids.append(("post", obj.id))

        loader.add_processor(IdProcessor())
        loader.load([users_file])

        assert [value for stage, value in seen_ids if stage == "pre"] == [None] * 3
        assert all(value is not None for stage, value in seen_ids if stage == "post")

    def test_processors_cleared_after_load(self, loader, users_file, write_fixture):
        calls: List[tuple] = []
        loader.add_processor(RecordingProcessor(calls))
        loader.load([users_file])
        calls.clear()
        more = write_fixture(
            "more.yml",
            """
            src.models.v1.users.UserModel:
              user_more:
                username: more
                email: more@example.com
            """,
        )

        loader.load([more])

        assert calls == []
        assert loader.processors == []
