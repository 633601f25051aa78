import pytest
from django.urls import reverse
from rest_framework import status
from apps.notifications.models import Notification
from apps.notifications.services import notify, get_user_notifications


# =============================================================================
# List Notifications
# =============================================================================

@pytest.mark.django_db
class TestListNotifications:
    """Tests for GET /api/v1/notification/users/{user_id}/notifications/"""

    def test_list_own_notifications(self, notified_client, notified_user, notification):
        url = reverse('notifications:user-notifications', kwargs={'user_id': notified_user.id})
        response = notified_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total'] == 1
        assert response.data['notifications'][0]['notification_id'] == str(notification.id)
        assert response.data['notifications'][0]['is_read'] is False

    def test_list_newest_first(self, notified_client, notified_user, notification):
        newer = notify(user=notified_user, title='Newer', message='Second one')
        url = reverse('notifications:user-notifications', kwargs={'user_id': notified_user.id})
        response = notified_client.get(url)

        ids = [n['notification_id'] for n in response.data['notifications']]
        assert ids == [str(newer.id), str(notification.id)]

    def test_filter_unread(self, notified_client, notified_user, notification):
        read = notify(user=notified_user, title='Old', message='Already seen')
        read.is_read = True
        read.save()

        url = reverse('notifications:user-notifications', kwargs={'user_id': notified_user.id})
        response = notified_client.get(url, {'is_read': 'false'})

        assert response.data['total'] == 1
        assert response.data['notifications'][0]['notification_id'] == str(notification.id)

    def test_cannot_list_someone_elses(self, stranger_client, notified_user, notification):
        url = reverse('notifications:user-notifications', kwargs={'user_id': notified_user.id})
        response = stranger_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_staff_can_list_any_user(self, staff_client, notified_user, notification):
        url = reverse('notifications:user-notifications', kwargs={'user_id': notified_user.id})
        response = staff_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total'] == 1

    def test_unauthenticated(self, api_client, notified_user):
        url = reverse('notifications:user-notifications', kwargs={'user_id': notified_user.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Create Notification
# =============================================================================

@pytest.mark.django_db
class TestCreateNotification:
    """Tests for POST /api/v1/notification/notifications/"""

    def test_staff_creates_notification(self, staff_client, notified_user):
        url = reverse('notifications:notification-create')
        data = {
            'user_id': str(notified_user.id),
            'title': 'Maintenance',
            'message': 'We will be down tonight',
        }
        response = staff_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['category'] == 'system'
        assert Notification.objects.filter(user=notified_user, title='Maintenance').exists()

    def test_regular_user_cannot_create(self, stranger_client, notified_user):
        url = reverse('notifications:notification-create')
        data = {'user_id': str(notified_user.id), 'title': 'Spam', 'message': 'Spam'}
        response = stranger_client.post(url, data)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not Notification.objects.filter(title='Spam').exists()

    def test_unknown_user(self, staff_client):
        url = reverse('notifications:notification-create')
        data = {
            'user_id': '00000000-0000-0000-0000-000000000000',
            'title': 'Hello',
            'message': 'Nobody home',
        }
        response = staff_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# Mark Read
# =============================================================================

@pytest.mark.django_db
class TestMarkRead:
    """Tests for POST .../notifications/{id}/read/"""

    def test_mark_read(self, notified_client, notified_user, notification):
        url = reverse('notifications:notification-read', kwargs={
            'user_id': notified_user.id,
            'notification_id': notification.id,
        })
        response = notified_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        notification.refresh_from_db()
        assert notification.is_read is True
        assert notification.read_at is not None

    def test_mark_read_unknown(self, notified_client, notified_user):
        url = reverse('notifications:notification-read', kwargs={
            'user_id': notified_user.id,
            'notification_id': '00000000-0000-0000-0000-000000000000',
        })
        response = notified_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()['error'] == 'Notification not found'

    def test_cannot_mark_other_users_notification(self, stranger_client, stranger, notification):
        # Addressing the notification through the stranger's own path
        url = reverse('notifications:notification-read', kwargs={
            'user_id': stranger.id,
            'notification_id': notification.id,
        })
        response = stranger_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        notification.refresh_from_db()
        assert notification.is_read is False


@pytest.mark.django_db
def test_get_user_notifications_service(notified_user, stranger, notification):
    notify(user=stranger, title='Other', message='Not yours')

    assert list(get_user_notifications(user_id=notified_user.id)) == [notification]
