"""
Explicit per-request session context.

Views build a ``SessionContext`` from the authenticated request and pass it to
whatever needs to know who is acting; nothing reads ambient session state.
Token expiry is handled at the authentication boundary (simplejwt raises
``InvalidToken`` which DRF turns into a 401) before a view runs.
"""
from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from rest_framework.permissions import BasePermission, SAFE_METHODS

from .models import User


@dataclass(frozen=True)
class SessionContext:
    user_id: Optional[int]
    username: str = ''
    email: str = ''
    role: str = ''
    permissions: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_admin(self):
        return self.role == User.ROLE_ADMIN

    def has_permission(self, code):
        return code in self.permissions

    @classmethod
    def for_user(cls, user):
        if user is None or not user.is_authenticated:
            return cls(user_id=None)
        return cls(
            user_id=user.pk,
            username=user.username,
            email=user.email or '',
            role=user.role,
            permissions=frozenset(user.get_app_permissions()),
        )


def session_context(request):
    """Build (once per request) the SessionContext for ``request.user``"""
    context = getattr(request, '_session_context', None)
    if context is None:
        context = SessionContext.for_user(getattr(request, 'user', None))
        request._session_context = context
    return context


def require_permission(code, allow_read=False):
    """
    DRF permission class requiring the application permission ``code``.

    With ``allow_read`` safe methods pass for any authenticated user and only
    writes are checked.

    Usage:
        @permission_classes([IsAuthenticated, require_permission('MANAGE_ORDERS')])
    """
    class HasAppPermission(BasePermission):
        message = 'Insufficient permissions'

        def has_permission(self, request, view):
            if allow_read and request.method in SAFE_METHODS:
                return True
            return session_context(request).has_permission(code)

    HasAppPermission.__name__ = f'Has{code.title().replace("_", "")}'
    return HasAppPermission
