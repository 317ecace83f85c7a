"""
Repository layer.

Repositories own the SQL for a table and map rows to schema objects.
Services receive a repository instance through their constructor.
"""
