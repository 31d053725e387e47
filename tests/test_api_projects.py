"""
API tests for project submission and listing
"""
from auditx.models import Project

from conftest import auth, submission


class TestSubmitEndpoint:
    def test_round_robin_over_http(self, client, make_user):
        asha = make_user("Asha", role="mentor", course_code="CS-1")
        zeno = make_user("Zeno", role="mentor", course_code="CS-1")

        picks = []
        for n in range(4):
            student = make_user(f"Student {n}")
            r = client.post("/api/projects/", json=submission("CS-1"), headers=auth(student))
            assert r.status_code == 201, r.text
            picks.append(r.json()["mentor_id"])

        assert picks == [asha.id, zeno.id, asha.id, zeno.id]

    def test_no_eligible_mentor_is_not_an_error(self, client, make_user):
        student = make_user("Ravi")
        r = client.post("/api/projects/", json=submission("EMPTY-1"), headers=auth(student))
        assert r.status_code == 201
        assert r.json()["mentor_id"] is None

    def test_duplicate_submission(self, client, make_user):
        student = make_user("Ravi")
        assert client.post("/api/projects/", json=submission("X"), headers=auth(student)).status_code == 201

        r = client.post("/api/projects/", json=submission("X"), headers=auth(student))
        assert r.status_code == 400
        assert r.json()["detail"] == "You have already submitted a project for X"

        assert client.post("/api/projects/", json=submission("Y"), headers=auth(student)).status_code == 201

    def test_missing_fields_are_rejected(self, client, make_user):
        student = make_user("Ravi")
        body = submission("X")
        del body["repo_link"]
        assert client.post("/api/projects/", json=body, headers=auth(student)).status_code == 422

    def test_requires_token(self, client):
        assert client.post("/api/projects/", json=submission("X")).status_code == 401
        assert client.get("/api/projects/", headers={"Authorization": "Bearer nobody"}).status_code == 401

    def test_only_students_submit(self, client, make_user, db):
        make_user("Asha", role="mentor", course_code="CS-1")
        for role in ("mentor", "admin"):
            user = make_user(f"User {role}", role=role, course_code="CS-1")
            r = client.post("/api/projects/", json=submission("CS-1"), headers=auth(user))
            assert r.status_code == 403
        assert db.query(Project).count() == 0


class TestListEndpoint:
    def test_listing_is_role_scoped(self, client, make_user, make_project):
        s1, s2 = make_user("Ravi"), make_user("Meera")
        m1 = make_user("Asha", role="mentor", course_code="CS-1")
        m2 = make_user("Zeno", role="mentor", course_code="CS-1")
        admin = make_user("Root", role="admin")
        p1 = make_project(s1, "CS-1", mentor=m1, title="Smart Attendance")
        p2 = make_project(s2, "CS-1", mentor=m2, title="Library Portal")

        def listed(user, **params):
            r = client.get("/api/projects/", headers=auth(user), params=params)
            assert r.status_code == 200
            return sorted(p["id"] for p in r.json())

        assert listed(admin) == sorted([p1.id, p2.id])
        assert listed(m1) == [p1.id]
        assert listed(m2) == [p2.id]
        assert listed(s1) == []
        assert listed(admin, search="library") == [p2.id]
        assert listed(m1, search="library") == []

    def test_my_projects_include_evaluation(self, client, make_user, make_project):
        student = make_user("Ravi")
        mentor = make_user("Asha", role="mentor", course_code="CS-1")
        graded = make_project(student, "CS-1", mentor=mentor)
        make_project(student, "CS-2")

        marks = {"viva": 20, "code_quality": 15, "logic": 18, "architecture": 10, "innovation": 12}
        r = client.post("/api/evaluations/", json={"project_id": graded.id, "marks": marks}, headers=auth(mentor))
        assert r.status_code == 201

        r = client.get("/api/projects/me", headers=auth(student))
        assert r.status_code == 200
        by_course = {p["course_code"]: p for p in r.json()}
        assert by_course["CS-1"]["evaluation"]["total"] == 75
        assert by_course["CS-2"]["evaluation"] is None

    def test_my_projects_empty_is_404(self, client, make_user):
        r = client.get("/api/projects/me", headers=auth(make_user("Ravi")))
        assert r.status_code == 404

    def test_get_by_id(self, client, make_user, make_project):
        student = make_user("Ravi")
        project = make_project(student, "CS-1")
        r = client.get(f"/api/projects/{project.id}", headers=auth(student))
        assert r.status_code == 200
        assert r.json()["title"] == project.title
        assert client.get("/api/projects/missing", headers=auth(student)).status_code == 404
