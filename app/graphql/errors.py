import logging
from typing import Iterator

from fastapi import status
from graphql import GraphQLError
from strawberry.extensions import SchemaExtension

from app.core.exceptions import describe_exception, error_body

logger = logging.getLogger(__name__)


def format_error(error: GraphQLError, path: str) -> GraphQLError:
    """Rebuild a GraphQL error with a clean message and statusCode/timestamp/path extensions"""
    if error.original_error is not None:
        status_code, message = describe_exception(error.original_error)
    else:
        # Syntax and schema validation errors
        status_code, message = status.HTTP_400_BAD_REQUEST, error.message

    body = error_body(status_code, path, message)
    extensions = dict(error.extensions or {})
    extensions.update({
        "statusCode": body["statusCode"],
        "timestamp": body["timestamp"],
        "path": body["path"],
    })
    return GraphQLError(
        body["message"],
        nodes=error.nodes,
        source=error.source,
        positions=error.positions,
        path=error.path,
        original_error=error.original_error,
        extensions=extensions,
    )


class ErrorFormatter(SchemaExtension):
    def on_operation(self) -> Iterator[None]:
        yield
        result = self.execution_context.result
        errors = getattr(result, "errors", None)
        if not errors:
            return

        request = (self.execution_context.context or {}).get("request")
        path = request.url.path if request is not None else "/graphql"
        result.errors = [format_error(error, path) for error in errors]
