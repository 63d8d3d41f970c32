# backend/academic_schedule/services/authorization.py
"""
Authorization policy.

Every decision is a lookup in one rule table keyed by
``(caller role, action, target)``, where the target is SELF when the
caller is the professor being acted on and OTHER otherwise. Anything not
listed is denied.
"""

from dataclasses import dataclass
from enum import Enum
import logging
from typing import FrozenSet, Optional, Tuple

from ..core.enums import RoleName
from ..core.exceptions import PermissionDeniedException

logger = logging.getLogger(__name__)


class Action(str, Enum):
    READ_SHIFT_CONFIGURATION = "READ_SHIFT_CONFIGURATION"
    MANAGE_SHIFT_CONFIGURATION = "MANAGE_SHIFT_CONFIGURATION"
    LIST_SLOTS = "LIST_SLOTS"
    CREATE_AVAILABILITY = "CREATE_AVAILABILITY"
    UPDATE_AVAILABILITY = "UPDATE_AVAILABILITY"
    DELETE_AVAILABILITY = "DELETE_AVAILABILITY"
    READ_AVAILABILITY = "READ_AVAILABILITY"
    LIST_AVAILABILITY = "LIST_AVAILABILITY"


class Target(str, Enum):
    SELF = "SELF"
    OTHER = "OTHER"


@dataclass(frozen=True)
class CallerContext:
    """The authenticated user making the request."""

    user_id: str
    role: RoleName

    @property
    def is_self_service(self) -> bool:
        return self.role == RoleName.PROFESSOR


_ANY_TARGET = (Target.SELF, Target.OTHER)
_AVAILABILITY_WRITES = (
    Action.CREATE_AVAILABILITY,
    Action.UPDATE_AVAILABILITY,
    Action.DELETE_AVAILABILITY,
)
_AVAILABILITY_READS = (Action.READ_AVAILABILITY, Action.LIST_AVAILABILITY)


def _rules(
    roles: Tuple[RoleName, ...], actions: Tuple[Action, ...], targets: Tuple[Target, ...]
) -> FrozenSet[Tuple[RoleName, Action, Target]]:
    return frozenset(
        (role, action, target) for role in roles for action in actions for target in targets
    )


ACCESS_RULES: FrozenSet[Tuple[RoleName, Action, Target]] = (
    # Everyone may see the configuration and the slots it produces
    _rules(
        tuple(RoleName),
        (Action.READ_SHIFT_CONFIGURATION, Action.LIST_SLOTS),
        _ANY_TARGET,
    )
    | _rules((RoleName.DIRECTOR, RoleName.ADMIN), (Action.MANAGE_SHIFT_CONFIGURATION,), _ANY_TARGET)
    # Professors manage their own availability only
    | _rules((RoleName.PROFESSOR,), _AVAILABILITY_WRITES + _AVAILABILITY_READS, (Target.SELF,))
    | _rules(
        (RoleName.DIRECTOR, RoleName.ADMIN),
        _AVAILABILITY_WRITES + _AVAILABILITY_READS,
        _ANY_TARGET,
    )
    | _rules((RoleName.COORDINATOR,), _AVAILABILITY_READS, _ANY_TARGET)
)


class AuthorizationPolicy:
    """Evaluates the access rule table. Default is deny."""

    def __init__(self, rules: FrozenSet[Tuple[RoleName, Action, Target]] = ACCESS_RULES):
        self.rules = rules

    @staticmethod
    def target_for(caller: CallerContext, professor_id: Optional[str]) -> Target:
        return Target.SELF if professor_id == caller.user_id else Target.OTHER

    def is_allowed(
        self, caller: CallerContext, action: Action, professor_id: Optional[str] = None
    ) -> bool:
        return (caller.role, action, self.target_for(caller, professor_id)) in self.rules

    def require(
        self, caller: CallerContext, action: Action, professor_id: Optional[str] = None
    ) -> None:
        """
        Raise unless ``caller`` may perform ``action``.

        Args:
            caller: The requesting user
            action: What is being attempted
            professor_id: The professor whose data is touched, if any

        Raises:
            PermissionDeniedException: The rule table has no matching entry
        """
        if not self.is_allowed(caller, action, professor_id):
            logger.warning(
                f"Denied {action.value} for user {caller.user_id} ({caller.role.value}) "
                f"on professor {professor_id}"
            )
            raise PermissionDeniedException(action.value)

    @staticmethod
    def resolve_professor_id(caller: CallerContext, requested_id: Optional[str]) -> Optional[str]:
        """Professors always act on themselves, whatever id they sent."""
        if caller.is_self_service:
            return caller.user_id
        return requested_id


authorization_policy = AuthorizationPolicy()
