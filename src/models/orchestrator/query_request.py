from pydantic import BaseModel, Field


class OrchestratorQueryRequest(BaseModel):
    query: str = Field(..., description="Free-text travel query")
