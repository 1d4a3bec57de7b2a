from __future__ import annotations

import logging
from pathlib import Path

import yaml

from ..urls import hostname_of
from .base import SiteRecipe, SelectorRecipe

logger = logging.getLogger(__name__)

BUILTIN_RECIPES = Path(__file__).with_name("recipes.yaml")


def load_recipes(path: str | Path) -> list[SelectorRecipe]:
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or []
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        logger.warning(f"Ignoring {path}: expected a list of recipes, got {type(data).__name__}")
        return []
    recipes = []
    for rules in data:
        if isinstance(rules, dict) and rules.get("key"):
            recipes.append(SelectorRecipe(rules))
        else:
            logger.warning(f"Ignoring recipe without key in {path}")
    return recipes


class SiteRegistry:
    """Ordered recipes; the first one whose key is in the hostname wins"""

    def __init__(self, recipes: list[SiteRecipe] | None = None):
        self.recipes = list(recipes) if recipes is not None else load_recipes(BUILTIN_RECIPES)

    @classmethod
    def from_settings(cls, settings) -> "SiteRegistry":
        if settings is None or not settings.recipes_path:
            return default_registry()
        registry = cls()
        try:
            registry.recipes.extend(load_recipes(settings.recipes_path))
        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            logger.warning(f"Could not load recipes from {settings.recipes_path}: {e}")
        return registry

    def keys(self) -> list[str]:
        return [r.key for r in self.recipes]

    def resolve_site_key(self, url: str) -> str | None:
        recipe = self.get_recipe(url)
        return recipe.key if recipe else None

    def get_recipe(self, url: str) -> SiteRecipe | None:
        try:
            host = hostname_of(url)
        except ValueError:
            return None
        if not host:
            return None
        for recipe in self.recipes:
            if recipe.can_handle(host):
                return recipe
        return None


_default_registry: SiteRegistry | None = None


def default_registry() -> SiteRegistry:
    global _default_registry
    if _default_registry is None:
        _default_registry = SiteRegistry()
    return _default_registry


def resolve_site_key(url: str) -> str | None:
    return default_registry().resolve_site_key(url)


__all__ = [
    "SiteRecipe",
    "SelectorRecipe",
    "SiteRegistry",
    "load_recipes",
    "default_registry",
    "resolve_site_key",
]
