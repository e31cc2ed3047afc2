"""
Boundary layer.

Adapters for external collaborators: vector index, model providers and
conversation memory.
"""
