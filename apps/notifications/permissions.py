from rest_framework.permissions import BasePermission


class IsNotificationOwnerOrStaff(BasePermission):
    """
    Allow access to ``/users/{user_id}/notifications/...`` only for that
    user or for staff.
    """

    message = 'You can only access your own notifications.'

    def has_permission(self, request, view):
        user_id = view.kwargs.get('user_id')
        if user_id is None:
            return False
        return request.user.is_staff or str(request.user.id) == str(user_id)
