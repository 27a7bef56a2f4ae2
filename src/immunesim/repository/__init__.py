from .json_store import JsonScenarioRepository

__all__ = ["JsonScenarioRepository"]
