from mealplan.utilities.config import DATA_DIR, DATA_FILE

# Centralized paths for data files (single source of truth)
CATALOG_FILE = DATA_FILE

__all__ = ['DATA_DIR', 'CATALOG_FILE']
