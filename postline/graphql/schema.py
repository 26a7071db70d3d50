"""Strawberry schema and the extension that exposes domain error codes."""

from collections.abc import Iterator

import strawberry
from graphql import GraphQLError
from strawberry.extensions import SchemaExtension

from postline.exceptions import PostlineError
from postline.graphql.mutations import Mutation
from postline.graphql.queries import Query


def _with_code(error: GraphQLError) -> GraphQLError:
    original = error.original_error
    if not isinstance(original, PostlineError):
        return error
    return GraphQLError(
        original.message,
        nodes=error.nodes,
        source=error.source,
        positions=error.positions,
        path=error.path,
        original_error=original,
        extensions={**(error.extensions or {}), **original.to_extensions()},
    )


class ErrorCodeExtension(SchemaExtension):
    """Copy the code of domain errors into ``extensions.code``."""

    def on_operation(self) -> Iterator[None]:
        yield
        result = self.execution_context.result
        if result and result.errors:
            result.errors = [_with_code(error) for error in result.errors]


schema = strawberry.Schema(query=Query, mutation=Mutation, extensions=[ErrorCodeExtension])
