from .fixerio import AsyncApi
from .url_builder import DEFAULT_BASE_URL, build_url

__all__ = ['AsyncApi', 'DEFAULT_BASE_URL', 'build_url']
