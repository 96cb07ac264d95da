from src.api.v1.analyzer.analyzer_routes import router as analyzer_router

__all__ = ["analyzer_router"]
