"""Domain layer: the Type contract, meta descriptors, and immutable instances.

This layer depends only on stdlib, pydantic (via errors) and the utility layer.
It must never import from combinators, update, plugins, or config at module level.
"""
