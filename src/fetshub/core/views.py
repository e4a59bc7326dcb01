"""Derived catalog views: category, search, and status grouping."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import dataclass, field
from enum import Enum

from fetshub.models.project import ItemType, Project, ProjectStatus

INTERNAL_PRODUCT_PREFIX = "fets"
OTHER_BUCKET = "Other"
STATUS_DISPLAY_ORDER = (
    ProjectStatus.COMPLETED,
    ProjectStatus.IN_PROGRESS,
    ProjectStatus.IDEA,
    ProjectStatus.ARCHIVED,
)


class Category(str, Enum):
    """Navigation sections of the dashboard."""

    HOME = "Home"
    RESOURCES = "Resources"
    MY_LIST = "My List"
    FETS_APPS = "FETS Apps"
    SOP = "SOP"


def filter_by_category(
    projects: Iterable[Project],
    category: Category,
    my_list_ids: Collection[str] = (),
) -> list[Project]:
    if category is Category.HOME:
        return [project for project in projects if project.is_app]
    if category is Category.RESOURCES:
        return [project for project in projects if project.item_type is ItemType.FILE]
    if category is Category.MY_LIST:
        return [project for project in projects if project.id in my_list_ids]
    if category is Category.FETS_APPS:
        return [
            project
            for project in projects
            if project.is_app
            and project.id.startswith(INTERNAL_PRODUCT_PREFIX)
        ]
    return []


def matches_query(project: Project, query: str) -> bool:
    needle = query.lower()
    return (
        needle in project.name.lower()
        or needle in project.description.lower()
        or any(needle in tag.lower() for tag in project.tech_stack)
        or needle in project.files.lower()
    )


def search_projects(projects: Iterable[Project], query: str) -> list[Project]:
    """Case-insensitive substring search; an empty query keeps everything."""
    if not query:
        return list(projects)
    return [project for project in projects if matches_query(project, query)]


def group_by_status(projects: Iterable[Project]) -> dict[str, list[Project]]:
    """Stable partition into display-ordered status buckets.

    The four known statuses always have a bucket; ``Other`` appears only when a
    record carries an unrecognized status.
    """
    grouped: dict[str, list[Project]] = {status.value: [] for status in STATUS_DISPLAY_ORDER}
    for project in projects:
        key = project.status.value if isinstance(project.status, ProjectStatus) else None
        if key is None:
            grouped.setdefault(OTHER_BUCKET, []).append(project)
        else:
            grouped[key].append(project)
    return grouped


def derive_view(
    projects: Iterable[Project],
    *,
    category: Category,
    query: str = "",
    my_list_ids: Collection[str] = (),
) -> list[Project]:
    return search_projects(filter_by_category(projects, category, my_list_ids), query)


@dataclass(slots=True)
class UserCollections:
    """Per-session "My List" and liked project ids, in insertion order."""

    my_list: list[str] = field(default_factory=list)
    liked: list[str] = field(default_factory=list)

    def toggle_my_list(self, project_id: str) -> bool:
        """Flip membership; returns whether the id is now listed."""
        return _toggle(self.my_list, project_id)

    def toggle_like(self, project_id: str) -> bool:
        return _toggle(self.liked, project_id)

    def forget(self, project_id: str) -> None:
        for ids in (self.my_list, self.liked):
            if project_id in ids:
                ids.remove(project_id)


def _toggle(ids: list[str], project_id: str) -> bool:
    if project_id in ids:
        ids.remove(project_id)
        return False
    ids.append(project_id)
    return True
