"""
Service layer abstraction.

Each service encapsulates business logic for a domain and talks to the
database only through a repository, so API handlers never see SQL.
"""
