"""Request and response envelopes exchanged across the query boundary."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True)
class RequestEnvelope:
    """A named request. Created by the caller and consumed once."""

    method: str
    arguments: Mapping[str, Any] | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "RequestEnvelope":
        """Build an envelope from decoded JSON.

        Raises:
            ValueError: if ``method`` is missing or not a string, or if
                ``arguments`` is present but not an object.
        """
        method = raw.get("method")
        if not isinstance(method, str) or not method:
            raise ValueError("'method' must be a non-empty string")
        arguments = raw.get("arguments")
        if arguments is not None and not isinstance(arguments, Mapping):
            raise ValueError("'arguments' must be an object")
        return cls(method=method, arguments=arguments)


@dataclass(frozen=True)
class Success:
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"status": "success", "result": self.value}


@dataclass(frozen=True)
class Failure:
    code: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"status": "error", "code": self.code, "message": self.message}


@dataclass(frozen=True)
class NotImplementedResponse:
    """The method is not known to this service. Distinct from a Failure."""

    def to_dict(self) -> dict[str, Any]:
        return {"status": "not_implemented"}


ResponseEnvelope: TypeAlias = Success | Failure | NotImplementedResponse
