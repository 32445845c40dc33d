"""Service layer over remote procedures."""
from .social import SocialService, PaginationParams, DEFAULT_PAGE_SIZE

__all__ = [
    'SocialService',
    'PaginationParams',
    'DEFAULT_PAGE_SIZE',
]
