"""
Notifications app.

In-app notifications for users. Other apps create them through
``apps.notifications.services.notify`` when something relevant happens
(rental requested, rental status changed, new message).
"""
