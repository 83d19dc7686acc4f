from intercom.clients.http_client import HTTPClient

__all__ = ["HTTPClient"]
