"""Application queries for user management."""

from roster.application.queries.user_queries import GetUserQuery, ListUsersQuery

__all__ = [
    "GetUserQuery",
    "ListUsersQuery",
]
