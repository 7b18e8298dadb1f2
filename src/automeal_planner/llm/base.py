"""Plan-text provider interface."""

from abc import ABC, abstractmethod
from enum import Enum


class Unavailable(Enum):
    """Provider is not configured. Distinct from an empty reply and from a failed call."""

    UNAVAILABLE = "unavailable"


UNAVAILABLE = Unavailable.UNAVAILABLE


class PlanTextProvider(ABC):
    """A backend that turns a prompt into raw plan text."""

    name: str = "provider"

    @abstractmethod
    async def invoke(self, prompt: str) -> str | Unavailable:
        """
        Submit prompt and return the raw reply text.
        Returns UNAVAILABLE (never raises) when the provider is not configured.
        Call failures propagate to the caller.
        """
        ...
