"""Service layer — business logic over the catalog.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
