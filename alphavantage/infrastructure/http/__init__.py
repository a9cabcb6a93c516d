from .request import DEFAULT_BASE_URL, APIRequest, APIRequestBuilder
from .transport import Transport

__all__ = ['DEFAULT_BASE_URL', 'APIRequest', 'APIRequestBuilder', 'Transport']
