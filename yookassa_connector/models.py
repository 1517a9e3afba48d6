"""Request and result types shared by the connector pipeline."""

import string
from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Mapping, Optional, Union
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

HttpMethod = Literal["GET", "POST", "DELETE"]


class RequestDescriptor(BaseModel):
    """One logical API call, as built by a resource wrapper."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    path: str
    path_params: Dict[str, str] = Field(default_factory=dict)
    params: Optional[Dict[str, Any]] = None
    data: Optional[Dict[str, Any]] = None
    idempotency_key: Optional[str] = None

    @model_validator(mode="after")
    def _check_body_and_placeholders(self) -> "RequestDescriptor":
        if self.data is not None and self.method != "POST":
            raise ValueError(f"{self.method} requests cannot carry a body")
        placeholders = {
            name for _, name, _, _ in string.Formatter().parse(self.path) if name
        }
        missing = placeholders - self.path_params.keys()
        if missing:
            raise ValueError(f"missing path parameters: {', '.join(sorted(missing))}")
        return self

    def render_path(self) -> str:
        """Substitute URL-quoted path parameters into the path template."""
        quoted = {key: quote(str(value), safe="") for key, value in self.path_params.items()}
        return self.path.format(**quoted)


class ErrorPayload(BaseModel):
    """API error envelope: ``{type: "error", id, code, description}``."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Literal["error"] = "error"
    id: str = ""
    code: str = ""
    description: str = ""
    parameter: Optional[str] = None

    @classmethod
    def parse(cls, body: Any) -> Optional["ErrorPayload"]:
        """Return the envelope if ``body`` is a well-formed error, else None."""
        if not isinstance(body, Mapping) or body.get("type") != "error":
            return None
        try:
            return cls.model_validate(dict(body))
        except ValidationError:
            return None


class Ok(BaseModel):
    model_config = ConfigDict(frozen=True)

    data: Any = None
    request_id: str

    @property
    def is_ok(self) -> bool:
        return True


class Err(BaseModel):
    model_config = ConfigDict(frozen=True)

    error: ErrorPayload
    request_id: str

    @property
    def is_ok(self) -> bool:
        return False


NormalizedResult = Union[Ok, Err]


# Attempt outcomes never leave the retry loop, so plain dataclasses are enough.

@dataclass(frozen=True)
class AttemptSuccess:
    status_code: int
    body: Any = None
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class AttemptFailure:
    """A failed attempt.

    ``status_code`` is None when no response was received. ``payload`` is set
    only when the response body was a well-formed API error envelope.
    """

    status_code: Optional[int] = None
    reason: str = ""
    error_code: Optional[str] = None
    message: str = ""
    payload: Optional[ErrorPayload] = None

    @property
    def has_response(self) -> bool:
        return self.status_code is not None


AttemptOutcome = Union[AttemptSuccess, AttemptFailure]
