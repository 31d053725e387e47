"""
Unit tests for the role-scoped project visibility filter
"""
import pytest

from auditx.models import Project
from auditx.utils.visibility import filter_visible, matches_search


@pytest.fixture
def projects():
    return [
        Project(id="p1", student_id="s1", mentor_id="m1", title="Smart Attendance", team_name="Alpha", leader_name="Ravi"),
        Project(id="p2", student_id="s2", mentor_id="m2", title="Library Portal", team_name="Beta", leader_name="Meera"),
        Project(id="p3", student_id="s3", mentor_id="m1", title="Crop Advisor", team_name="Gamma", leader_name="Arjun"),
        Project(id="p4", student_id="s4", mentor_id=None, title="Chat Bot", team_name="Delta", leader_name="Kiran"),
    ]


def ids(items):
    return [p.id for p in items]


class TestRoles:
    def test_admin_sees_everything(self, projects):
        assert ids(filter_visible("admin", "a1", projects)) == ["p1", "p2", "p3", "p4"]

    def test_mentor_sees_only_assigned(self, projects):
        assert ids(filter_visible("mentor", "m1", projects)) == ["p1", "p3"]
        assert ids(filter_visible("mentor", "m2", projects)) == ["p2"]

    def test_mentors_never_see_each_others_projects(self, projects):
        for me in ("m1", "m2", "m3"):
            visible = filter_visible("mentor", me, projects)
            assert all(p.mentor_id == me for p in visible)

    def test_unassigned_project_hidden_from_mentors(self, projects):
        assert "p4" not in ids(filter_visible("mentor", "m1", projects))

    @pytest.mark.parametrize("role", ["student", "guest", "", "ADMIN"])
    def test_other_roles_get_nothing(self, projects, role):
        assert filter_visible(role, "s1", projects) == []


class TestSearch:
    def test_search_matches_title_team_and_leader(self, projects):
        assert ids(filter_visible("admin", "a1", projects, search="portal")) == ["p2"]
        assert ids(filter_visible("admin", "a1", projects, search="GAMMA")) == ["p3"]
        assert ids(filter_visible("admin", "a1", projects, search="kir")) == ["p4"]

    def test_search_combines_with_role(self, projects):
        assert ids(filter_visible("mentor", "m1", projects, search="a")) == ["p1", "p3"]
        assert filter_visible("mentor", "m2", projects, search="crop") == []

    def test_order_of_predicates_does_not_matter(self, projects):
        searched_first = [p for p in projects if matches_search(p, "ar")]
        a = filter_visible("mentor", "m1", searched_first)
        b = filter_visible("mentor", "m1", projects, search="ar")
        assert ids(a) == ids(b)

    def test_empty_search_is_ignored(self, projects):
        assert len(filter_visible("admin", "a1", projects, search="")) == 4
