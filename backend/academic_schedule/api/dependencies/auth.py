# backend/academic_schedule/api/dependencies/auth.py
"""
Caller identification.

Authentication happens upstream: the gateway verifies the credentials and
forwards the user id in a header (``X-User-Id`` by default). Here the id is
resolved to an active user and turned into a CallerContext.
"""

import logging

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from ...core.config import settings
from ...core.exceptions import UnauthorizedException
from ...services.academic_directory import SqlAcademicDirectory
from ...services.authorization import CallerContext
from .database import get_db

logger = logging.getLogger(__name__)


def get_current_caller(request: Request, db: Session = Depends(get_db)) -> CallerContext:
    """
    Resolve the calling user from the identity header.

    Raises:
        HTTPException: 401 when the header is missing or names no active user
    """
    user_id = (request.headers.get(settings.user_id_header) or "").strip()
    if not user_id:
        raise UnauthorizedException(
            "Missing caller identity", code="UNAUTHENTICATED"
        ).to_http_exception()

    user = SqlAcademicDirectory(db).get_user(user_id)
    if user is None:
        logger.info(f"Rejected request from unknown or inactive user {user_id}")
        raise UnauthorizedException(
            "Unknown or inactive user", code="UNAUTHENTICATED"
        ).to_http_exception()

    return CallerContext(user_id=user.id, role=user.role)
