"""Products app: categories, tags and rentable product listings."""
