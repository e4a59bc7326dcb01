import pytest

from fetshub.db.mapping import project_to_record, record_to_project
from fetshub.models.project import ChangeLogEntry, ItemType, Project, ProjectStatus


def test_sparse_record_gets_defaults() -> None:
    project = record_to_project({"id": 42})
    assert project.id == "42"
    assert project.name == "Untitled Project"
    assert project.status is ProjectStatus.IDEA
    assert project.item_type is ItemType.APP
    assert project.tech_stack == []
    assert project.change_history == []
    assert project.git_state is None


def test_empty_record_is_rejected() -> None:
    with pytest.raises(ValueError, match="invalid project data"):
        record_to_project({})
    with pytest.raises(ValueError):
        record_to_project(None)


def test_malformed_lists_are_replaced() -> None:
    project = record_to_project(
        {"id": "x", "name": "x", "tech_stack": "React", "change_history": {"bad": True}}
    )
    assert project.tech_stack == []
    assert project.change_history == []


def test_record_uses_storage_shape() -> None:
    project = Project(
        id="x",
        name="X",
        status="Legacy",
        change_history=[ChangeLogEntry(author="Ana", reason="first")],
    )
    record = project_to_record(project)
    assert record["status"] == "Legacy"
    assert record["website_url"] == ""
    assert record["item_type"] == "app"
    assert record["change_history"][0]["reason"] == "first"

    restored = record_to_project(record)
    assert restored.website_url is None
    assert restored.status == "Legacy"
    assert restored.change_history[0].author == "Ana"


def test_string_dates_are_parsed() -> None:
    project = record_to_project({"id": "x", "created_at": "2024-01-02T00:00:00Z"})
    assert project.created_at == 1_704_153_600_000


def test_unreadable_fields_fall_back() -> None:
    project = record_to_project(
        {
            "id": "x",
            "item_type": "folder",
            "git_state": {
                "remote_url": "https://git/x.git",
                "status": "clean",
                "pending_changes": 3,
                "commits": [{"message": "m", "author": "a"}],
            },
            "change_history": [{"author": "Ana", "reason": "kept"}, {"author": "Bo"}],
        }
    )
    assert project.item_type is ItemType.APP
    assert project.git_state is None
    assert [entry.reason for entry in project.change_history] == ["kept"]


def test_record_without_id_is_rejected() -> None:
    with pytest.raises(KeyError):
        record_to_project({"name": "orphan"})
