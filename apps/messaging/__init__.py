"""Messaging app: one conversation per rental between renter and owner."""
