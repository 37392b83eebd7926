"""Repository classes encapsulating SQL access."""

from flavorhub.infrastructure.repositories.recipes import RecipeRepository

__all__ = ["RecipeRepository"]
