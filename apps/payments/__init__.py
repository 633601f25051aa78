"""Payments app: stored payment methods, payment intents and transactions."""
