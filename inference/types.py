from dataclasses import dataclass
from typing import Optional, Dict, Any, Literal

ModelStatus = Literal["success", "recoverable_error", "fatal_error"]
ModelErrorType = Literal["configuration", "upstream", "response_format", "timeout", "transport"]


@dataclass
class ModelRequest:
    prompt: str
    timeout_s: Optional[float] = None   # falls back to the backend default
    trace_id: Optional[str] = None


@dataclass
class ModelResponse:
    status: ModelStatus
    output: Optional[str] = None
    error_type: Optional[ModelErrorType] = None
    error: Optional[str] = None          # human-readable, surfaced as "details"
    metadata: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"
