from .preferences import InMemoryPreferenceStore, JsonFilePreferenceStore

__all__ = ["InMemoryPreferenceStore", "JsonFilePreferenceStore"]
