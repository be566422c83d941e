from src.exceptions.client.proxy_client_error import ProxyClientError

__all__ = ["ProxyClientError"]
