"""
Runnable recipes, keyed by their command line names.
"""

from xrpl_recipes.recipes.batch import RECIPES, Recipe

__all__ = ["RECIPES", "Recipe"]
