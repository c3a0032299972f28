from .settings import Settings, get_settings, load_environment

__all__ = ["Settings", "get_settings", "load_environment"]
