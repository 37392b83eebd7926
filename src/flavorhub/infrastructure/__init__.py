"""Infrastructure layer — database, repository, clock.

This layer depends on stdlib and third-party libs (SQLAlchemy, Alembic).
Only :mod:`flavorhub.infrastructure.cookbook` may import from domain, and
nothing here imports from services, commands, or output.
"""
