"""Resolver package for GraphQL schema.

Each function takes the strawberry ``Info`` of the request and reads or
writes the data store found in its context.
"""

# Intentionally empty; functions are defined in sibling modules.
