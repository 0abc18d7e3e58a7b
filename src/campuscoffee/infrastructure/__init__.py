"""Infrastructure layer — database, repositories, and the OSM API client.

This layer depends on stdlib, third-party libs (SQLAlchemy, httpx), and
the domain layer's models and errors. It must never import from
services, commands, or output.
"""
