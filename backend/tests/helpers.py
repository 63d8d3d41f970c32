"""Small helpers shared by test modules."""

from academic_schedule.models.user import User
from academic_schedule.services.authorization import CallerContext


def caller_for(user: User) -> CallerContext:
    return CallerContext(user_id=user.id, role=user.role)


def headers_for(user: User) -> dict:
    return {"X-User-Id": user.id}
