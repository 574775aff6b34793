"""
Tool definitions backed by schema classes.

A Tool pairs a callable with a parameter schema. The schema supplies the JSON
Schema sent to the model and validates the arguments the model sends back.

Example:
    class WeatherParams(Schema):
        city = String(description="City name")
        unit = Enum(["celsius", "fahrenheit"], optional=True)

    weather = Tool(
        name="get_weather",
        description="Get current weather for a city",
        parameters=WeatherParams,
        execute=lambda args: {"city": args["city"], "temperature": 21},
    )

    result = weather.execute_call(ToolCall(id="call_1", name="get_weather", args={"city": "Oslo"}))
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

from fieldschema.common.exceptions import ConfigurationError, SchemaDefinitionError
from fieldschema.common.logging import get_logger

from .extraction import clone, to_object
from .instance import SchemaInstance, is_schema_class
from .proxy import Proxied, create, get_raw_instance
from .serialization import to_json
from .validation import parse, validate

logger = get_logger(__name__)

__all__ = ["Tool", "ToolCall", "ToolResult"]

SchemaSource = type[SchemaInstance] | SchemaInstance | Proxied[Any]


class ToolCall(BaseModel):
    """A tool invocation requested by the model."""

    id: str
    name: str
    args: Any = None


class ToolResult(BaseModel):
    """Outcome of executing a tool call."""

    id: str
    result: Any = None
    success: bool
    error: str | None = None


def _as_instance(source: SchemaSource, role: str) -> Proxied[Any]:
    if is_schema_class(source):
        return create(source)  # type: ignore[arg-type]
    try:
        raw = get_raw_instance(source)  # type: ignore[arg-type]
    except ConfigurationError as e:
        raise SchemaDefinitionError(
            f"Tool {role} must be a schema class or instance",
            context={"type": type(source).__name__},
        ) from e
    return Proxied(raw)


@dataclass
class Tool:
    """
    A callable tool with schema-validated arguments.

    Attributes:
        name: Function name exposed to the model
        description: What the tool does
        parameters: Parameter schema (class or instance)
        execute: Callable receiving the parsed argument dict
        result_schema: Optional schema the result must satisfy
    """

    name: str
    description: str
    parameters: SchemaSource
    execute: Callable[[dict[str, Any]], Any]
    result_schema: SchemaSource | None = None
    _parameters: Proxied[Any] = field(init=False, repr=False)
    _result: Proxied[Any] | None = field(init=False, repr=False, default=None)

    def __post_init__(self) -> None:
        if not self.name or not isinstance(self.name, str):
            raise SchemaDefinitionError("Tool name is required and must be a string")
        if not self.description or not isinstance(self.description, str):
            raise SchemaDefinitionError(
                "Tool description is required and must be a string",
                context={"tool": self.name},
            )
        if not callable(self.execute):
            raise SchemaDefinitionError("Tool execute must be callable", context={"tool": self.name})

        self._parameters = _as_instance(self.parameters, "parameters")
        if self.result_schema is not None:
            self._result = _as_instance(self.result_schema, "result_schema")

    def parameters_schema(self) -> dict[str, Any]:
        """JSON Schema for the tool's parameters."""
        return to_json(self._parameters)

    def to_definition(self) -> dict[str, Any]:
        """Function-tool definition for a chat completion request."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters_schema(),
            },
        }

    def validate_args(self, args: Any) -> bool:
        return validate(self._parameters, args)

    def parse_args(self, args: Any) -> dict[str, Any]:
        """
        Validate arguments and return them as a plain dict.

        Parsing happens on a clone, so the tool's parameter instance is never
        modified.

        Raises:
            SchemaError: If the arguments do not satisfy the parameter schema
        """
        instance = clone(self._parameters)
        parse(instance, args)
        return to_object(instance)

    def validate_result(self, result: Any) -> bool:
        if self._result is None:
            return True
        return validate(self._result, result)

    def execute_call(self, call: ToolCall) -> ToolResult:
        """
        Run a tool call: validate arguments, execute, validate the result.

        Failures are reported in the returned ToolResult rather than raised,
        so they can be sent back to the model.
        """
        if not self.validate_args(call.args):
            return ToolResult(
                id=call.id,
                success=False,
                error=f"Invalid arguments for tool {self.name}",
            )

        try:
            result = self.execute(self.parse_args(call.args))
        except Exception as e:
            logger.warning("tool.execution_failed", tool=self.name, call_id=call.id, error=str(e))
            return ToolResult(id=call.id, success=False, error=str(e))

        if not self.validate_result(result):
            return ToolResult(
                id=call.id,
                success=False,
                error=f"Invalid result from tool {self.name}",
            )
        return ToolResult(id=call.id, result=result, success=True)
