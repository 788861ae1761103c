# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that
# flows between the catalog, the dispatcher and the request executor.
#
#   ToolDescriptor   →  static schema for one Interzoid tool
#   CredentialContext →  which API key (if any) a single call will use
#   *Outcome         →  the uniform result of one remote call
#
# Everything here is frozen.  Descriptors are built once at startup and never
# change; credentials and outcomes live for exactly one call.
# =============================================================================

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union


# -----------------------------------------------------------------------------
# ParamMapping — one tool-facing parameter and its API query-parameter name
# -----------------------------------------------------------------------------
# The name the LLM sees (caller_name) can differ from the literal query
# parameter the Interzoid API expects (remote_name).  Most tools use the same
# name for both; see same() / mapped() in core/catalog.py.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ParamMapping:
    caller_name: str
    remote_name: str
    description: str = ""


@dataclass(frozen=True)
class ToolDescriptor:
    """Static schema for one exposed tool.

    Caller names must be unique across required and optional parameters;
    the constructor raises ValueError otherwise.
    """

    name: str
    description: str
    endpoint: str                                   # e.g. "/getorgstandard"
    required_params: tuple[ParamMapping, ...] = ()
    optional_params: tuple[ParamMapping, ...] = ()

    def __post_init__(self) -> None:
        # Accept lists from static definitions but store tuples.
        object.__setattr__(self, "required_params", tuple(self.required_params))
        object.__setattr__(self, "optional_params", tuple(self.optional_params))

        seen: set[str] = set()
        for param in self.required_params + self.optional_params:
            if param.caller_name in seen:
                raise ValueError(
                    f"Tool {self.name!r} declares parameter {param.caller_name!r} more than once"
                )
            seen.add(param.caller_name)

    def input_schema(self) -> dict[str, Any]:
        """JSON schema for the tool's arguments, as shown to MCP clients."""
        properties: dict[str, Any] = {}
        for param in self.required_params + self.optional_params:
            prop: dict[str, Any] = {"type": "string"}
            if param.description:
                prop["description"] = param.description
            properties[param.caller_name] = prop
        return {
            "type": "object",
            "properties": properties,
            "required": [p.caller_name for p in self.required_params],
        }


# -----------------------------------------------------------------------------
# CredentialContext — derived per call, never stored
# -----------------------------------------------------------------------------
class CredentialSource(str, enum.Enum):
    REQUEST = "request"     # Authorization header from the connecting client
    PROCESS = "process"     # INTERZOID_API_KEY read at startup
    NONE = "none"           # no key: the API answers 402 (x402 payment flow)


@dataclass(frozen=True)
class CredentialContext:
    resolved: str
    source: CredentialSource

    @property
    def is_empty(self) -> bool:
        return not self.resolved


# -----------------------------------------------------------------------------
# Outcome envelope — exactly one of the three variants per call
# -----------------------------------------------------------------------------
class ErrorKind(str, enum.Enum):
    MISSING_PARAMETER = "missing_parameter"
    INVALID_PARAMETER_TYPE = "invalid_parameter_type"
    TRANSPORT_FAILURE = "transport_failure"
    MALFORMED_RESPONSE = "malformed_response"
    REMOTE_ERROR = "remote_error"


@dataclass(frozen=True)
class SuccessOutcome:
    payload: dict[str, Any]


@dataclass(frozen=True)
class PaymentRequiredOutcome:
    """The API wants payment before doing the work.

    This is NOT an error.  The requirements document is relayed untouched so
    the agent (or an x402-aware client in front of it) can pay and retry.
    """

    requirements: dict[str, Any]

    def to_document(self) -> dict[str, Any]:
        return {
            "status": "payment_required",
            "x402": True,
            "paymentRequirements": self.requirements,
        }


@dataclass(frozen=True)
class ErrorOutcome:
    kind: ErrorKind
    message: str
    parameter: Optional[str] = None
    status_code: Optional[int] = None


Outcome = Union[SuccessOutcome, PaymentRequiredOutcome, ErrorOutcome]


@dataclass(frozen=True)
class ValidatedParams:
    """Outbound query parameters, already mapped to their remote names."""

    params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
