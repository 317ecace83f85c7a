"""
Shared infrastructure: settings, database access, logging and the
exception types mapped to HTTP responses.
"""
