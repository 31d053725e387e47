class PortalError(Exception):
    """Base class for domain errors raised by the portal services."""
    pass


class DuplicateSubmission(PortalError):
    def __init__(self, course_code: str):
        self.course_code = course_code
        super().__init__(f"You have already submitted a project for {course_code}")


class ProjectNotFound(PortalError):
    def __init__(self, project_id: str):
        self.project_id = project_id
        super().__init__("Project not found")


class MentorNotFound(PortalError):
    def __init__(self, mentor_id: str):
        self.mentor_id = mentor_id
        super().__init__("Mentor not found")


class ConflictError(PortalError):
    """A concurrent write won the race (unique constraint rejected ours)."""
    pass
