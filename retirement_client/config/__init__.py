from retirement_client.config.settings import ClientSettings

__all__ = ["ClientSettings"]
