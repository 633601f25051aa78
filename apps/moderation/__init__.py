"""Moderation app: staff actions on users and product listings."""
