from .base import ModelBackend
from .types import ModelRequest, ModelResponse


class StubModelBackend(ModelBackend):
    """
    Deterministic fake model for local runs and CI.

    Selected with LLM_BACKEND=stub. Never touches the network.
    """

    def __init__(self, output: str = "This is a stubbed response."):
        self.output = output
        self.calls = 0

    async def generate(self, request: ModelRequest) -> ModelResponse:
        self.calls += 1
        return ModelResponse(
            status="success",
            output=self.output,
            metadata={"backend": "stub", "trace_id": request.trace_id},
        )
