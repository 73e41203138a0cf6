import logging
from typing import List, Optional

import strawberry
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
from strawberry.subscriptions import GRAPHQL_TRANSPORT_WS_PROTOCOL, GRAPHQL_WS_PROTOCOL
from strawberry.types import ExecutionContext

from app.graphql.context import get_context
from app.graphql.errors import ErrorFormatter
from app.graphql.resolvers.admin import AdminMutation, AdminQuery
from app.graphql.resolvers.customer import CustomerMutation, CustomerQuery
from app.graphql.resolvers.employee import EmployeeMutation, EmployeeQuery, EmployeeSubscription
from app.graphql.resolvers.product import ProductMutation, ProductQuery
from app.graphql.resolvers.sale import SaleMutation, SaleQuery

logger = logging.getLogger(__name__)


@strawberry.type
class Query(AdminQuery, CustomerQuery, EmployeeQuery, ProductQuery, SaleQuery):
    @strawberry.field
    def health(self) -> str:
        return "ok"


@strawberry.type
class Mutation(AdminMutation, CustomerMutation, EmployeeMutation, ProductMutation, SaleMutation):
    pass


@strawberry.type
class Subscription(EmployeeSubscription):
    pass


class DynastySchema(strawberry.Schema):
    def process_errors(
        self,
        errors: List[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        # ErrorFormatter logs unexpected failures; expected 4xx errors stay quiet
        for error in errors:
            logger.debug(f"GraphQL error: {error.message}")


schema = DynastySchema(
    query=Query,
    mutation=Mutation,
    subscription=Subscription,
    extensions=[ErrorFormatter],
)

graphql_app = GraphQLRouter(
    schema,
    context_getter=get_context,
    subscription_protocols=[GRAPHQL_TRANSPORT_WS_PROTOCOL, GRAPHQL_WS_PROTOCOL],
    multipart_uploads_enabled=True,
)
