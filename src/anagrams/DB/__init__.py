from .api import AnagramStore, StatStore, WordStore, make_store

__all__ = ["AnagramStore", "StatStore", "WordStore", "make_store"]
