"""BaseService — common foundation for flavorhub services.

Every service receives a :class:`Cookbook` at construction time. The
Cookbook provides the recipe repository, the clock, and transactional
access to the database. Services own their transaction boundaries via
``self._cookbook.transaction()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flavorhub.infrastructure.cookbook import Cookbook


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class RecipeService(BaseService):
            def delete(self, recipe_id: int) -> ServiceResult:
                with self._cookbook.transaction() as conn:
                    ...
    """

    def __init__(self, cookbook: Cookbook) -> None:
        self._cookbook = cookbook
