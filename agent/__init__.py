from agent.query_analyzer import KeywordQueryAnalyzer, QueryAnalyzer, query_analyzer
from agent.tourism_agent import TourismAgent, tourism_agent

__all__ = [
    "KeywordQueryAnalyzer",
    "QueryAnalyzer",
    "TourismAgent",
    "query_analyzer",
    "tourism_agent",
]
