"""Core infrastructure: authorization, auth, database, errors and logging."""
