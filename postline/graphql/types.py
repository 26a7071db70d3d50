"""Strawberry GraphQL types mapped from the SQLAlchemy models."""

import strawberry


@strawberry.type(name="Keyword")
class KeywordType:
    """A keyword extracted from posts, and its moderation state."""

    value: str
    status: str
    occurrences: int
    synonym: str | None


@strawberry.type(name="KeywordSearchResults")
class KeywordSearchResultsType:
    query: str
    hits: list[KeywordType]


@strawberry.type
class EmptyResponse:
    """Acknowledgement for mutations that have nothing to return."""

    empty: bool | None = strawberry.field(name="_", default=True)


# ============================================================================
# Helper conversion functions
# ============================================================================


def keyword_to_type(keyword) -> KeywordType:
    return KeywordType(
        value=keyword.value,
        status=keyword.status.value if hasattr(keyword.status, "value") else str(keyword.status),
        occurrences=keyword.occurrences,
        synonym=keyword.synonym,
    )
