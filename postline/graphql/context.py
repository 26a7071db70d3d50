"""GraphQL context: carries the caller identity and DB session into resolvers."""

from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import BaseContext

from postline.auth import token_from_authorization
from postline.constants.roles import Roles
from postline.database import get_db


class GraphQLContext(BaseContext):
    """Context passed to every GraphQL resolver."""

    def __init__(self, db: AsyncSession, user_id: str | None = None, roles: list[Roles] | None = None) -> None:
        super().__init__()
        self.db = db
        self.user_id = user_id
        self.roles = roles or []

    @property
    def is_logged_in(self) -> bool:
        return self.user_id is not None

    @property
    def is_moderator(self) -> bool:
        return Roles.MODERATOR in self.roles


async def get_context(request: Request, db: AsyncSession = Depends(get_db)) -> GraphQLContext:
    token = token_from_authorization(request.headers.get("Authorization"))
    if token is None:
        return GraphQLContext(db=db)
    return GraphQLContext(db=db, user_id=token.user_id, roles=token.roles)
