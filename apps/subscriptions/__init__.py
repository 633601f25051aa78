"""Subscriptions app: plans, user subscriptions and usage counters."""
