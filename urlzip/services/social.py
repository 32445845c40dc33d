"""
Social interaction service.

Thin forwarding layer over the ``market.social`` remote procedures:
follows, favorites and likes. Parameters are reshaped, results are
returned as the endpoint sends them.
"""
import warnings
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Union

from ..core.rpc import RPCClient

TargetType = Literal['agent', 'plugin']
TargetRef = Union[int, str]

DEFAULT_PAGE_SIZE = 10
PROCEDURE_PREFIX = 'market.social'


@dataclass
class PaginationParams:
    """1-based page request."""
    page: Optional[int] = None
    page_size: Optional[int] = None

    def to_limit_offset(self) -> Dict[str, Optional[int]]:
        """Translate to ``{limit, offset}``; offset is None without a page."""
        offset = None
        if self.page:
            offset = (self.page - 1) * (self.page_size or DEFAULT_PAGE_SIZE)
        return {'limit': self.page_size, 'offset': offset}


def _pagination(params: Optional[PaginationParams]) -> Dict[str, Optional[int]]:
    if params is None:
        return {'limit': None, 'offset': None}
    return params.to_limit_offset()


def _target(target_type: TargetType, target: TargetRef) -> Dict[str, Any]:
    """Numeric targets are ids, string targets are identifiers."""
    if isinstance(target, int):
        return {'targetId': target, 'targetType': target_type}
    return {'identifier': target, 'targetType': target_type}


class SocialService:
    """
    Social operations on market agents and plugins.

    Example:
        >>> async with RPCClient(config) as client:
        ...     social = SocialService(client)
        ...     await social.follow(123)
    """

    def __init__(self, client: RPCClient):
        self._client = client

    async def _query(self, name: str, input: Dict[str, Any]) -> Any:
        return await self._client.query(f"{PROCEDURE_PREFIX}.{name}", input)

    async def _mutate(self, name: str, input: Dict[str, Any]) -> Any:
        return await self._client.mutate(f"{PROCEDURE_PREFIX}.{name}", input)

    def set_access_token(self, token: Optional[str]) -> None:
        """Deprecated: authentication is carried by the RPC client configuration."""
        warnings.warn(
            "SocialService.set_access_token() is deprecated; "
            "set RPCConfig.access_token instead",
            DeprecationWarning,
            stacklevel=2
        )

    # ==================== Follow ====================

    async def follow(self, following_id: int) -> Any:
        return await self._mutate('follow', {'followingId': following_id})

    async def unfollow(self, following_id: int) -> Any:
        return await self._mutate('unfollow', {'followingId': following_id})

    async def check_follow_status(self, user_id: int) -> Any:
        """Returns ``{isFollowing, isMutual}`` for the target user."""
        return await self._query('checkFollowStatus', {'targetUserId': user_id})

    async def get_follow_counts(self, user_id: int) -> Any:
        return await self._query('getFollowCounts', {'userId': user_id})

    async def get_following(self, user_id: int, params: Optional[PaginationParams] = None) -> Any:
        return await self._query('getFollowing', {**_pagination(params), 'userId': user_id})

    async def get_followers(self, user_id: int, params: Optional[PaginationParams] = None) -> Any:
        return await self._query('getFollowers', {**_pagination(params), 'userId': user_id})

    # ==================== Favorite ====================

    async def add_favorite(self, target_type: TargetType, target: TargetRef) -> Any:
        return await self._mutate('addFavorite', _target(target_type, target))

    async def remove_favorite(self, target_type: TargetType, target: TargetRef) -> Any:
        return await self._mutate('removeFavorite', _target(target_type, target))

    async def check_favorite_status(self, target_type: TargetType, target: TargetRef) -> Any:
        return await self._query(
            'checkFavorite',
            {'targetIdOrIdentifier': target, 'targetType': target_type}
        )

    async def get_my_favorites(self, params: Optional[PaginationParams] = None) -> Any:
        return await self._query('getMyFavorites', _pagination(params))

    async def get_user_favorite_agents(
        self,
        user_id: int,
        params: Optional[PaginationParams] = None
    ) -> Any:
        return await self._query('getUserFavoriteAgents', {**_pagination(params), 'userId': user_id})

    async def get_user_favorite_plugins(
        self,
        user_id: int,
        params: Optional[PaginationParams] = None
    ) -> Any:
        return await self._query('getUserFavoritePlugins', {**_pagination(params), 'userId': user_id})

    # ==================== Like ====================

    async def like(self, target_type: TargetType, target: TargetRef) -> Any:
        return await self._mutate('like', _target(target_type, target))

    async def unlike(self, target_type: TargetType, target: TargetRef) -> Any:
        return await self._mutate('unlike', _target(target_type, target))

    async def check_like_status(self, target_type: TargetType, target: TargetRef) -> Any:
        return await self._query(
            'checkLike',
            {'targetIdOrIdentifier': target, 'targetType': target_type}
        )

    async def toggle_like(self, target_type: TargetType, target: TargetRef) -> Any:
        """Returns ``{liked}`` after toggling."""
        return await self._mutate('toggleLike', _target(target_type, target))

    async def get_user_liked_agents(
        self,
        user_id: int,
        params: Optional[PaginationParams] = None
    ) -> Any:
        return await self._query('getUserLikedAgents', {**_pagination(params), 'userId': user_id})

    async def get_user_liked_plugins(
        self,
        user_id: int,
        params: Optional[PaginationParams] = None
    ) -> Any:
        return await self._query('getUserLikedPlugins', {**_pagination(params), 'userId': user_id})
