"""Resolver package for GraphQL schema.

Each module holds the root and field resolvers for one entity. Resolvers take
the storage gateway from the request context and issue one gateway call each.
"""

# Intentionally empty; functions are defined in sibling modules.
