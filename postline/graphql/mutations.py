"""GraphQL Mutation resolvers."""

import strawberry
from strawberry.types import Info

from postline.graphql.context import GraphQLContext
from postline.graphql.permissions import MODERATOR_ONLY
from postline.graphql.types import EmptyResponse
from postline.models.keyword import KeywordStatus
from postline.services import keyword_service


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(
        description="Allow a keyword, creating it when it does not exist.",
        permission_classes=MODERATOR_ONLY,
    )
    async def allow_keyword(self, info: Info[GraphQLContext, None], keyword: str) -> EmptyResponse:
        await keyword_service.set_keyword_status(info.context.db, keyword, KeywordStatus.ALLOW)
        return EmptyResponse()

    @strawberry.mutation(
        description="Deny a keyword, creating it when it does not exist.",
        permission_classes=MODERATOR_ONLY,
    )
    async def deny_keyword(self, info: Info[GraphQLContext, None], keyword: str) -> EmptyResponse:
        await keyword_service.set_keyword_status(info.context.db, keyword, KeywordStatus.DENY)
        return EmptyResponse()

    @strawberry.mutation(
        description="Mark a keyword as a synonym of another and re-tag its posts.",
        permission_classes=MODERATOR_ONLY,
    )
    async def set_keyword_as_synonym(
        self,
        info: Info[GraphQLContext, None],
        keyword_to_update: str,
        original_keyword: str,
    ) -> EmptyResponse:
        await keyword_service.set_keyword_as_synonym(info.context.db, keyword_to_update, original_keyword)
        return EmptyResponse()
