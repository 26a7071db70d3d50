"""GraphQL Query resolvers."""

import strawberry
from strawberry.types import Info

from postline.config import settings
from postline.graphql.context import GraphQLContext
from postline.graphql.permissions import MODERATOR_ONLY
from postline.graphql.types import KeywordSearchResultsType, KeywordType, keyword_to_type
from postline.services import keyword_service


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(
        description="Get a random pending keyword that is popular enough to moderate.",
        permission_classes=MODERATOR_ONLY,
    )
    async def random_pending_keyword(self, info: Info[GraphQLContext, None]) -> KeywordType | None:
        keyword = await keyword_service.get_random_pending_keyword(
            info.context.db, settings.pending_keyword_min_occurrences
        )
        return keyword_to_type(keyword) if keyword else None

    @strawberry.field(
        description="Count the pending keywords waiting for moderation.",
        permission_classes=MODERATOR_ONLY,
    )
    async def count_pending_keywords(self, info: Info[GraphQLContext, None]) -> int:
        return await keyword_service.count_pending_keywords(info.context.db, settings.pending_keyword_min_occurrences)

    @strawberry.field(description="Search keywords by value.", permission_classes=MODERATOR_ONLY)
    async def search_keywords(self, info: Info[GraphQLContext, None], query: str) -> KeywordSearchResultsType:
        hits = await keyword_service.search_keywords(info.context.db, query, settings.keyword_search_limit)
        return KeywordSearchResultsType(query=query, hits=[keyword_to_type(k) for k in hits])

    @strawberry.field(description="Get a single keyword by value.", permission_classes=MODERATOR_ONLY)
    async def keyword(self, info: Info[GraphQLContext, None], value: str) -> KeywordType | None:
        keyword = await keyword_service.get_keyword(info.context.db, value)
        return keyword_to_type(keyword) if keyword else None
