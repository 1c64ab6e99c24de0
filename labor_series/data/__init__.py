"""Category catalog and upstream data fetching."""

from .ine_fetcher import IneFetcher
from .catalog import categories_for, default_selection, series_id_for

__all__ = ["IneFetcher", "categories_for", "default_selection", "series_id_for"]
