"""Port definitions for collaborators injected into the explanation engine."""

from typing import Awaitable, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Randomness used for analogy selection and simulated latency.

    ``random.Random`` satisfies this protocol; tests pass a seeded instance.
    """

    def choice(self, seq: Sequence[T]) -> T:
        """Return one element of a non-empty sequence."""

    def uniform(self, a: float, b: float) -> float:
        """Return a float between ``a`` and ``b``."""


class Sleeper(Protocol):
    """Awaitable pause used to simulate processing latency."""

    def __call__(self, seconds: float) -> Awaitable[None]:
        """Suspend for ``seconds``."""


class PreferenceStore(Protocol):
    """Key-value store for UI preferences such as the theme."""

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the stored value for ``key`` or ``default``."""

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""

    def toggle_theme(self) -> str:
        """Flip the theme between dark and light and return the new value."""
