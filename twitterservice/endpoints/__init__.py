"""Typed endpoint groups, one per ``{resource}/`` prefix of the REST API."""

from twitterservice.endpoints.account import AccountEndpoints
from twitterservice.endpoints.application import ApplicationEndpoints
from twitterservice.endpoints.base import EndpointGroup, normalize_name
from twitterservice.endpoints.blocks import BlocksEndpoints
from twitterservice.endpoints.direct_messages import DirectMessagesEndpoints
from twitterservice.endpoints.favorites import FavoritesEndpoints
from twitterservice.endpoints.followers import FollowersEndpoints
from twitterservice.endpoints.friends import FriendsEndpoints
from twitterservice.endpoints.friendships import FriendshipsEndpoints
from twitterservice.endpoints.lists import ListsEndpoints
from twitterservice.endpoints.search import SearchEndpoints
from twitterservice.endpoints.statuses import StatusesEndpoints
from twitterservice.endpoints.users import UsersEndpoints

__all__ = [
    "AccountEndpoints",
    "ApplicationEndpoints",
    "BlocksEndpoints",
    "DirectMessagesEndpoints",
    "EndpointGroup",
    "FavoritesEndpoints",
    "FollowersEndpoints",
    "FriendsEndpoints",
    "FriendshipsEndpoints",
    "ListsEndpoints",
    "SearchEndpoints",
    "StatusesEndpoints",
    "UsersEndpoints",
    "normalize_name",
]
