"""
Boundary layer.

Adapters to external systems: the vector store HTTP API and embedding providers.
"""
