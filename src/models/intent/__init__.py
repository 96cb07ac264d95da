from src.models.intent.intent import Intent

__all__ = ["Intent"]
