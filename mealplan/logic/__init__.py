"""Core business logic layer.

Subpackages:
- planning: candidate selection, weekly assembly, plan reconstruction
- shopping: consolidating a plan into a priced grocery list

Modules:
- catalog: ingredient and recipe operations
- meal_plans: meal plan operations (create, read, grocery list)
"""
__all__ = ["planning", "shopping", "catalog", "meal_plans"]
