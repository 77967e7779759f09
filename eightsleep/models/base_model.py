from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Self


@dataclass
class BaseModel(ABC):
    @classmethod
    @abstractmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Convert the API object to a model."""

    @classmethod
    def response_key(cls) -> str | None:
        """Return the key wrapping the object in an API response."""

        return None

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> Self:
        """Convert an API response to a model."""

        key = cls.response_key()
        return cls.from_dict(response[key] if key is not None else response)
