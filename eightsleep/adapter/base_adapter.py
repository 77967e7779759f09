from abc import ABC, abstractmethod
from typing import Generic, TypeVar

EncodedType = TypeVar("EncodedType")
DecodedType = TypeVar("DecodedType")


class BaseAdapter(ABC, Generic[DecodedType, EncodedType]):
    """Base class for adapters between library values and device/API values."""

    def __init__(self, value: DecodedType):
        """Initialize the adapter."""

        self._value: DecodedType = value

    @property
    def value(self) -> DecodedType:
        """Return the original value."""

        return self._value

    def encode(self) -> EncodedType:
        """Return the value as understood by the device."""

        return self._encode(self.value)

    @classmethod
    def decode(cls, value: EncodedType) -> "BaseAdapter":
        """Return the adapter from a device value."""

        return cls(cls._decode(value))

    @classmethod
    @abstractmethod
    def _encode(cls, value: DecodedType) -> EncodedType:
        """Return the encoded value."""

    @classmethod
    @abstractmethod
    def _decode(cls, value: EncodedType) -> DecodedType:
        """Return the decoded value."""

    def __eq__(self, __value: object) -> bool:
        return isinstance(__value, self.__class__) and self.value == __value.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value})"
