"""Adapters for integrating DocExplain with storage backends."""

from .sqlalchemy_prefs import SQLAlchemyPreferenceStore, open_preference_store

__all__ = ["SQLAlchemyPreferenceStore", "open_preference_store"]
