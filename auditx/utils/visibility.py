from __future__ import annotations

from typing import Iterable, List, Optional

from auditx.models.project import Project

SEARCH_FIELDS = ("title", "team_name", "leader_name")


def matches_search(project: Project, search: Optional[str]) -> bool:
    if not search:
        return True
    needle = search.lower()
    return any(needle in (getattr(project, f) or "").lower() for f in SEARCH_FIELDS)


def can_see(role: str, requester_id: str, project: Project) -> bool:
    if role == "admin":
        return True
    if role == "mentor":
        return project.mentor_id == requester_id
    # students and unknown roles get nothing from the bulk listing
    return False


def filter_visible(
    role: str,
    requester_id: str,
    projects: Iterable[Project],
    search: Optional[str] = None,
) -> List[Project]:
    """
    Role-scoped view of the project collection.

    admin  -> everything
    mentor -> only projects assigned to them
    other  -> empty list (students list their own work via /projects/me)

    Both predicates are per-record, so applying search and role together is
    the same as applying them in any order.
    """
    return [
        p for p in projects
        if can_see(role, requester_id, p) and matches_search(p, search)
    ]
