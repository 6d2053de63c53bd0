"""Request dispatcher: validate, route, run.

The single entry point of the pipeline. For every request it:
    1. Looks up the request's registry entry
    2. Runs the request's rule set; on violations it returns
       Failure(RequestValidationError) and no handler is built
    3. Builds the handler through the container's factory
    4. Awaits the handler, optionally under a timeout

Handler outcomes are returned unchanged. Unexpected exceptions propagate
(the handler has already logged them), as does caller cancellation.
"""

import asyncio
from collections.abc import Callable
from typing import Any

from crm_core.application.cqrs.computed_views import get_request_metadata
from crm_core.application.cqrs.metadata import CommandMetadata, QueryMetadata
from crm_core.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY
from crm_core.application.errors import ApplicationError, ApplicationErrorCode
from crm_core.core.config import Settings
from crm_core.core.result import Failure, Result
from crm_core.core.validation import RuleSet
from crm_core.domain.protocols.logger_protocol import LoggerProtocol

HandlerFactory = Callable[[type], Any]

_USE_SETTINGS: Any = object()


class Dispatcher:
    """Routes requests to their handlers.

    Args:
        handler_factory: Builds a handler instance from its class.
        settings: Limits for rule sets and the default timeout.
        logger: Structured logger.
    """

    def __init__(
        self,
        *,
        handler_factory: HandlerFactory,
        settings: Settings,
        logger: LoggerProtocol,
    ) -> None:
        self._handler_factory = handler_factory
        self._default_timeout = settings.request_timeout_seconds
        self._logger = logger.bind(component="dispatcher")
        self._rules: dict[type, RuleSet] = {
            meta.request_class: meta.rules(settings)
            for meta in [*COMMAND_REGISTRY, *QUERY_REGISTRY]
        }

    def rules_for(self, request_class: type) -> RuleSet | None:
        """Rule set applied to ``request_class``, if registered."""
        return self._rules.get(request_class)

    async def dispatch(
        self, request: Any, *, timeout: float | None = _USE_SETTINGS
    ) -> Result[Any, Any]:
        """Validate and handle one request.

        Args:
            request: Registered query or command instance.
            timeout: Seconds before the handler is cancelled. Defaults to
                ``Settings.request_timeout_seconds``; None disables it.

        Returns:
            The handler's Result, Failure(RequestValidationError) for invalid
            requests, or Failure(ApplicationError) for unregistered request
            types and timeouts.

        Raises:
            Exception: Unexpected handler failures, unchanged.
            asyncio.CancelledError: If the caller cancels.
        """
        request_type = type(request).__name__
        meta: CommandMetadata | QueryMetadata | None = get_request_metadata(
            type(request)
        )
        if meta is None:
            self._logger.warning("No handler registered", request_type=request_type)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.HANDLER_NOT_REGISTERED,
                    message=f"No handler registered for {request_type}",
                    details={"request_type": request_type},
                )
            )

        checked = self._rules[meta.request_class].check(request)
        if isinstance(checked, Failure):
            self._logger.warning(
                "Request rejected",
                request_type=request_type,
                fields=checked.error.fields,
                rules=[v.rule for v in checked.error.violations],
            )
            return checked

        handler = self._handler_factory(meta.handler_class)
        seconds = self._default_timeout if timeout is _USE_SETTINGS else timeout
        deadline = asyncio.timeout(seconds)
        try:
            async with deadline:
                return await handler.handle(request)
        except TimeoutError:
            if not deadline.expired():
                raise
            self._logger.warning(
                "Request timed out", request_type=request_type, timeout=seconds
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.REQUEST_TIMED_OUT,
                    message=f"{request_type} did not complete within {seconds}s",
                    details={"request_type": request_type, "timeout": str(seconds)},
                )
            )
