# oshichecker/_singletons.py
from functools import lru_cache

from .catalog import load_catalog
from .config import load_site_config
from .share import ShareDebouncer


@lru_cache(maxsize=1)
def get_catalog():
    return load_catalog()


@lru_cache(maxsize=1)
def get_site_config():
    return load_site_config()


@lru_cache(maxsize=1)
def get_share_debouncer():
    return ShareDebouncer(rearm_seconds=get_site_config().share_debounce_seconds)
