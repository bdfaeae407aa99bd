"""
DRF permissions for the lending dashboard.

Reading is open to every signed-in staff member; changing lending state
needs an account that can lend.
"""
from rest_framework import permissions


def _signed_in(request):
    return bool(request.user and request.user.is_authenticated)


class IsLibrarian(permissions.BasePermission):
    """Only librarians, for reads and writes alike."""

    message = 'Only librarians can perform this action.'

    def has_permission(self, request, view):
        return _signed_in(request) and request.user.can_lend


class IsLibrarianOrReadOnly(permissions.BasePermission):
    """Any staff member may read; only librarians may lend or return."""

    message = 'Only librarians can perform this action.'

    def has_permission(self, request, view):
        if not _signed_in(request):
            return False
        return request.method in permissions.SAFE_METHODS or request.user.can_lend
