# auditx/utils/assignment.py
from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, List, Optional, Tuple

from auditx.models.project import Project
from auditx.models.user import User

logger = logging.getLogger(__name__)


def _norm(s: str | None) -> str:
    return (s or "").lower()


def mentor_load(mentor_id: str, projects: Iterable[Project]) -> int:
    """Number of projects currently carrying this mentor's id (evaluated or not)."""
    return sum(1 for p in projects if p.mentor_id == mentor_id)


def load_table(projects: Iterable[Project]) -> Counter:
    """mentor_id -> load for every mentor that has at least one project."""
    return Counter(p.mentor_id for p in projects if p.mentor_id)


def eligible_mentors(course_code: str, users: Iterable[User]) -> List[User]:
    """
    Mentors allowed to take a project for `course_code`.
    A mentor without a course is never eligible; matching ignores case.
    """
    wanted = _norm(course_code)
    if not wanted:
        return []
    return [
        u for u in users
        if u.role == "mentor" and u.course_code and _norm(u.course_code) == wanted
    ]


def rank_mentors(
    course_code: str,
    users: Iterable[User],
    projects: Iterable[Project],
) -> List[Tuple[User, int]]:
    """
    Eligible mentors ordered the way the engine picks them:
      1) ascending load (counted over ALL projects, not only this course);
      2) ties broken by display name, plain case-sensitive string order
         (then by id, so equal names never depend on input order).
    """
    loads = load_table(projects)
    ranked = [(m, loads.get(m.id, 0)) for m in eligible_mentors(course_code, users)]
    ranked.sort(key=lambda pair: (pair[1], pair[0].name, pair[0].id))
    return ranked


def assign_mentor(
    course_code: str,
    users: Iterable[User],
    projects: Iterable[Project],
) -> Optional[str]:
    """
    Round-robin pick of the least-loaded eligible mentor.

    Pure function of its inputs: the caller passes a fresh snapshot on every
    submission. Returns None when nobody teaches the course; the project is
    then stored unassigned and an admin assigns it by hand.
    """
    ranked = rank_mentors(course_code, users, list(projects))
    if not ranked:
        logger.warning("No eligible mentor for course %s", course_code)
        return None

    mentor, load = ranked[0]
    logger.info("Course %s -> mentor %s (%s), load before %d", course_code, mentor.id, mentor.name, load)
    return mentor.id
