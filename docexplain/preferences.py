"""In-memory UI preference store."""

from typing import Dict, Optional

THEME_KEY = "docexplainer-theme"
THEMES = ("dark", "light")
DEFAULT_THEME = "dark"


def flip_theme(theme: Optional[str]) -> str:
    return "light" if (theme or DEFAULT_THEME) == "dark" else "dark"


class InMemoryPreferenceStore:
    """Preference store that lives for the current process only."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def toggle_theme(self) -> str:
        theme = flip_theme(self.get(THEME_KEY))
        self.set(THEME_KEY, theme)
        return theme
