"""OperationRegistry — register once, execute from any surface.

INVARIANT: execute() never raises. Validation failures, handler input
errors and downstream exceptions all come back as a failed ServiceResult.
INVARIANT: The registry is frozen after plugin loading; registration order
and operation identity are stable for the lifetime of the process.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

import structlog
from pydantic import BaseModel, ValidationError

from dkgctl.dispatch.operation import InvalidInput, Operation
from dkgctl.services._helpers import resolve
from dkgctl.services.result import ServiceResult

logger = logging.getLogger(__name__)
log = structlog.get_logger(__name__)


def describe_validation_error(exc: ValidationError) -> str:
    """Render a pydantic ValidationError as one human-readable sentence.

    Examples:
        ``{}`` against a required ``message`` field -> ``"Message is required"``
        ``privacy="secret"`` -> ``"privacy: Input should be 'public' or 'private'"``
    """
    messages: list[str] = []
    for err in exc.errors(include_url=False):
        field = ".".join(str(part) for part in err["loc"])
        if err["type"] == "missing":
            messages.append(f"{field.capitalize()} is required")
        elif err["type"] == "value_error":
            messages.append(str(err["ctx"]["error"]))
        elif field:
            messages.append(f"{field}: {err['msg']}")
        else:
            messages.append(err["msg"])
    return "; ".join(messages)


def _dump(operation: Operation, output: Any) -> dict[str, Any]:
    """Serialize handler output by alias, validating plain mappings first."""
    if not isinstance(output, BaseModel):
        output = operation.output_model.model_validate(output)
    return output.model_dump(mode="json", by_alias=True)


class OperationRegistry:
    """Ordered set of operations shared by the MCP and REST adapters."""

    def __init__(self) -> None:
        self._operations: dict[str, Operation] = {}
        self._routes: set[tuple[str, str]] = set()
        self._frozen = False

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, operation: Operation) -> Operation:
        """Add *operation*; returns it so plugins can keep a reference.

        Raises:
            RuntimeError: The registry is frozen.
            ValueError: The name or the (method, path) route is taken.
        """
        if self._frozen:
            msg = f"Cannot register {operation.name!r}: registry is frozen"
            raise RuntimeError(msg)
        if operation.name in self._operations:
            msg = f"Operation {operation.name!r} is already registered"
            raise ValueError(msg)
        if operation.route is not None:
            key = (operation.route.method, operation.route.path)
            if key in self._routes:
                msg = f"Route {key[0]} {key[1]} is already registered"
                raise ValueError(msg)
            self._routes.add(key)
        self._operations[operation.name] = operation
        logger.debug("Registered operation: %s", operation.name)
        return operation

    def freeze(self) -> None:
        """Lock the registry against further registration."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> Operation | None:
        return self._operations.get(name)

    def names(self) -> list[str]:
        return list(self._operations)

    def tools(self) -> list[Operation]:
        """Operations exposed on the tool-call surface, in registration order."""
        return [op for op in self._operations.values() if op.tool is not None]

    def routes(self) -> list[Operation]:
        """Operations exposed on the REST surface, in registration order."""
        return [op for op in self._operations.values() if op.route is not None]

    def __iter__(self) -> Iterator[Operation]:
        return iter(self._operations.values())

    def __len__(self) -> int:
        return len(self._operations)

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def execute(
        self,
        name: str,
        raw_input: Mapping[str, Any] | None = None,
    ) -> ServiceResult:
        """Validate *raw_input*, run the handler and wrap the outcome.

        The handler only ever receives a validated input model instance.
        """
        operation = self._operations.get(name)
        if operation is None:
            return ServiceResult.failure(name, "unknown_operation", f"Unknown operation: {name}")

        try:
            params = operation.input_model.model_validate(raw_input if raw_input is not None else {})
        except ValidationError as exc:
            message = describe_validation_error(exc)
            logger.debug("Rejected input for %s: %s", name, message)
            return ServiceResult.failure(
                name,
                "invalid_input",
                message,
                errors=exc.errors(include_url=False, include_context=False),
            )

        try:
            output = await resolve(operation.handler(params))
            data = _dump(operation, output)
        except InvalidInput as exc:
            logger.debug("Handler rejected input for %s: %s", name, exc)
            return ServiceResult.failure(name, "invalid_input", str(exc))
        except Exception as exc:
            log.error("operation.failed", op=name, error=str(exc), exc_info=True)
            return ServiceResult.failure(
                name,
                "downstream_error",
                str(exc) or operation.fallback_message,
                exception=type(exc).__name__,
            )

        return ServiceResult(ok=True, op=name, data=data)
