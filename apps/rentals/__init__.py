"""Rentals app: booking requests, availability and the rental lifecycle."""
