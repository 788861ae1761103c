# =============================================================================
# core/dispatcher.py  —  Tool Dispatch (name + arguments → remote call → text)
# =============================================================================
#
# HOW IT WORKS (the flow):
#   1. Look up the ToolDescriptor for the tool name
#   2. Resolve the API key (request header > process key > none)
#   3. Validate the raw argument bag into an immutable ValidatedParams
#      (or an ErrorOutcome: validation never touches the network)
#   4. Hand (key, endpoint, params) to the RequestExecutor
#   5. Render whatever Outcome comes back as the tool's text result
#
# IN-BAND ERRORS:
#   Every business failure (bad arguments, network trouble, unexpected HTTP
#   status, garbled JSON) comes back as ordinary text.  The calling agent
#   has to be able to READ the failure and react to it, so nothing here
#   raises except a call for a tool that does not exist.
#
# PAYMENT REQUIRED IS A RESULT, NOT A FAILURE:
#   A 402 renders as {"status": "payment_required", "x402": true, ...} so the
#   agent can tell "pay and retry" apart from "this call cannot succeed".
# =============================================================================

import json
import logging
from typing import Any, Mapping, Optional, Protocol, Union

from core.catalog import ToolCatalog
from core.credentials import resolve_credential
from core.models import (
    CredentialContext,
    ErrorKind,
    ErrorOutcome,
    Outcome,
    PaymentRequiredOutcome,
    SuccessOutcome,
    ToolDescriptor,
    ValidatedParams,
)

logger = logging.getLogger(__name__)


class UnknownToolError(LookupError):
    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class Executor(Protocol):
    async def execute(self, credential: str, endpoint: str, params: Mapping[str, str]) -> Outcome:
        ...


def validate_arguments(
    descriptor: ToolDescriptor, arguments: Optional[Mapping[str, Any]]
) -> Union[ValidatedParams, ErrorOutcome]:
    """Check the argument bag against a descriptor and map names to the API's.

    Required parameters must be present and be strings.  Optional parameters
    are kept only when they are non-empty strings; anything else is dropped
    without complaint.  Arguments the descriptor does not declare are ignored.
    """
    if not isinstance(arguments, Mapping):
        arguments = {}

    params: dict[str, str] = {}

    for param in descriptor.required_params:
        if param.caller_name not in arguments:
            return ErrorOutcome(
                kind=ErrorKind.MISSING_PARAMETER,
                message=f"Missing required parameter: {param.caller_name}",
                parameter=param.caller_name,
            )
        value = arguments[param.caller_name]
        if not isinstance(value, str):
            return ErrorOutcome(
                kind=ErrorKind.INVALID_PARAMETER_TYPE,
                message=f"Parameter {param.caller_name} must be a string",
                parameter=param.caller_name,
            )
        params[param.remote_name] = value

    for param in descriptor.optional_params:
        value = arguments.get(param.caller_name)
        if isinstance(value, str) and value:
            params[param.remote_name] = value

    return ValidatedParams(params=params)


def render_outcome(outcome: Outcome) -> str:
    if isinstance(outcome, SuccessOutcome):
        return json.dumps(outcome.payload, indent=2, ensure_ascii=False)
    if isinstance(outcome, PaymentRequiredOutcome):
        return json.dumps(outcome.to_document(), indent=2, ensure_ascii=False)
    return outcome.message


class Dispatcher:
    """Turns one incoming tool call into one remote call.

    The process-wide API key is injected here at construction time, so
    dispatch never consults ambient state.
    """

    def __init__(self, catalog: ToolCatalog, executor: Executor, process_credential: str = "") -> None:
        self.catalog = catalog
        self.executor = executor
        self._process_credential = process_credential

    def credential_for(self, incoming_credential: Optional[str]) -> CredentialContext:
        return resolve_credential(incoming_credential, self._process_credential)

    async def call(
        self,
        tool_name: str,
        arguments: Optional[Mapping[str, Any]],
        incoming_credential: Optional[str] = None,
    ) -> Outcome:
        """Like dispatch(), but returns the Outcome instead of its text."""
        descriptor = self.catalog.get(tool_name)
        if descriptor is None:
            raise UnknownToolError(tool_name)

        credential = self.credential_for(incoming_credential)

        validated = validate_arguments(descriptor, arguments)
        if isinstance(validated, ErrorOutcome):
            logger.info("%s rejected: %s", tool_name, validated.message)
            return validated

        logger.debug("%s → %s (credential source: %s)", tool_name, descriptor.endpoint, credential.source.value)
        return await self.executor.execute(credential.resolved, descriptor.endpoint, validated.params)

    async def dispatch(
        self,
        tool_name: str,
        arguments: Optional[Mapping[str, Any]],
        incoming_credential: Optional[str] = None,
    ) -> str:
        return render_outcome(await self.call(tool_name, arguments, incoming_credential))
