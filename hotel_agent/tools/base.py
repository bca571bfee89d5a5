"""
Tool envelope shared by every Amadeus tool.

A tool is a static ``ToolDescriptor`` (what an LLM sees) plus an async
handler (what runs). ``ApiTool.__call__`` validates the raw arguments with a
pydantic model, runs the handler and always returns a ``ToolResult``:
exceptions never cross the tool boundary.
"""
import logging
import traceback
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, Literal, Mapping, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from ..amadeus.errors import AmadeusError

logger = logging.getLogger(__name__)


class CamelModel(BaseModel):
    """Tool arguments and results use the camelCase keys Amadeus uses."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def dump(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


class ToolDescriptor(BaseModel):
    """
    Static name, description and JSON schema of a tool.

    ``input_schema`` is stored as a read-only view (mappings become
    ``MappingProxyType``, lists become tuples). Use ``schema_copy()`` for a
    plain, mutable JSON schema.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    description: str
    input_schema: Any

    @field_validator("input_schema")
    @classmethod
    def _read_only_schema(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            raise ValueError("input_schema must be a JSON object")
        return _freeze(value)

    def schema_copy(self) -> Dict[str, Any]:
        return _thaw(self.input_schema)

    def to_mcp(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description, "inputSchema": self.schema_copy()}

    def to_openai(self) -> Dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.schema_copy(),
            },
        }


class ErrorDetail(BaseModel):
    # transport | upstream | mapping | validation | internal
    kind: str
    message: str
    status_code: Optional[int] = None
    payload: Any = None
    stack: Optional[str] = None


class ToolSuccess(BaseModel):
    ok: Literal[True] = True
    data: Any

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class ToolFailure(BaseModel):
    ok: Literal[False] = False
    error: ErrorDetail

    @classmethod
    def from_exception(cls, exc: BaseException, kind: Optional[str] = None) -> "ToolFailure":
        if isinstance(exc, AmadeusError):
            detail = exc.to_detail()
        else:
            detail = {"kind": kind or "internal", "message": str(exc) or type(exc).__name__}
        detail["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return cls(error=ErrorDetail(**detail))

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


ToolResult = Union[ToolSuccess, ToolFailure]

Handler = Callable[[Any], Awaitable[Any]]


class ApiTool:
    """An executable tool: descriptor + argument model + async handler."""

    def __init__(self, descriptor: ToolDescriptor, args_model: Type[BaseModel], handler: Handler):
        self.descriptor = descriptor
        self.args_model = args_model
        self.handler = handler

    @property
    def name(self) -> str:
        return self.descriptor.name

    def __repr__(self):
        return f"ApiTool({self.name!r})"

    async def __call__(self, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        log_extra = {"tool": self.name}
        try:
            args = self.args_model.model_validate(arguments or {})
        except ValidationError as e:
            logger.warning(f"Invalid arguments for {self.name}: {e}", extra=log_extra)
            return ToolFailure.from_exception(e, kind="validation")

        try:
            data = await self.handler(args)
        except AmadeusError as e:
            logger.error(f"{self.name} failed ({e.kind}): {e.message}", extra=log_extra)
            return ToolFailure.from_exception(e)
        except Exception as e:
            logger.exception(f"Unexpected error in {self.name}: {e}", extra=log_extra)
            return ToolFailure.from_exception(e)

        return ToolSuccess(data=data)


def api_tool(name: str, description: str, parameters: Dict[str, Any], args_model: Type[BaseModel]):
    """Decorator turning an async handler into an ApiTool."""
    descriptor = ToolDescriptor(name=name, description=description, input_schema=parameters)

    def decorator(func: Handler) -> ApiTool:
        return ApiTool(descriptor, args_model, func)

    return decorator
