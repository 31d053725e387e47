from auditx.models.user import User, ROLES
from auditx.models.course import Course
from auditx.models.project import Project
from auditx.models.evaluation import Evaluation
from auditx.models.notification import Notification
from auditx.models.schedule import EvaluationPeriod, VivaSession
