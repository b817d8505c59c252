from functools import lru_cache
from mealplan.infra.paths import CATALOG_FILE
from mealplan.infra.Store import JsonStore


@lru_cache(maxsize=1)
def get_store() -> JsonStore:
    """Process-wide store over the configured catalog file (overridden in tests)."""
    return JsonStore(CATALOG_FILE)
