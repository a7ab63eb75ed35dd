"""
GraphQL layer: type graph, field resolvers, root operations and schema composition.
"""
