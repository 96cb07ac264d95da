from src.models.orchestrator.query_request import OrchestratorQueryRequest
from src.models.orchestrator.query_result import IntentResponse, QueryResponse, QueryResult

__all__ = ["IntentResponse", "OrchestratorQueryRequest", "QueryResponse", "QueryResult"]
