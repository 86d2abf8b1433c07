from .schema import SearchConfig, load_search_config

__all__ = [
    "SearchConfig",
    "load_search_config",
]
