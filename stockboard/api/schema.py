"""GraphQL schema and resolvers over the catalog store."""

from datetime import date
from typing import Any, Callable, Dict, Optional

from graphql import ExecutionResult, GraphQLError, GraphQLSchema, build_schema, graphql_sync

from ..models.product import FILTER_ALL
from ..services.kpi_generator import generate_kpis, utc_today
from ..services.product_query import filter_products
from ..store.catalog import CatalogStore
from ..utils.exceptions import BaseAppException

TYPE_DEFS = """
type Warehouse {
  code: ID!
  name: String!
  city: String!
  country: String!
}

type Product {
  id: ID!
  name: String!
  sku: String!
  warehouse: String!
  stock: Int!
  demand: Int!
  status: String!
}

type KPI {
  date: String!
  stock: Int!
  demand: Int!
}

type Query {
  products(search: String, status: String, warehouse: String): [Product!]!
  warehouses: [Warehouse!]!
  kpis(range: String!): [KPI!]!
}

type Mutation {
  updateDemand(id: ID!, demand: Int!): Product
  transferStock(id: ID!, from: String!, to: String!, qty: Int!): Product
}
"""


def _graphql_error(exc: BaseAppException) -> GraphQLError:
    return GraphQLError(exc.message, original_error=exc, extensions=exc.to_extensions())


def build_inventory_schema(
    store: CatalogStore,
    today: Callable[[], date] = utc_today
) -> GraphQLSchema:
    """
    Build the executable schema bound to ``store``.

    Args:
        store: Catalog the resolvers read and mutate
        today: Supplies the last day of KPI series

    Returns:
        Schema with resolvers attached.
    """
    schema = build_schema(TYPE_DEFS)

    def resolve_products(_root, _info, search=None, status=None, warehouse=None):
        try:
            products = filter_products(
                store.list_products(),
                search=search,
                warehouse=warehouse or FILTER_ALL,
                status=status or FILTER_ALL
            )
        except BaseAppException as e:
            raise _graphql_error(e)
        return [p.to_dict() for p in products]

    def resolve_warehouses(_root, _info):
        return [w.to_dict() for w in store.list_warehouses()]

    def resolve_kpis(_root, _info, range):
        try:
            points = generate_kpis(store.list_products(), range, today=today())
        except BaseAppException as e:
            raise _graphql_error(e)
        return [p.to_dict() for p in points]

    def resolve_update_demand(_root, _info, id, demand):
        try:
            product = store.update_demand(id, demand)
        except BaseAppException as e:
            raise _graphql_error(e)
        return product.to_dict() if product else None

    def resolve_transfer_stock(_root, _info, **args):
        try:
            product = store.transfer_stock(args["id"], args["from"], args["to"], args["qty"])
        except BaseAppException as e:
            raise _graphql_error(e)
        return product.to_dict() if product else None

    query = schema.query_type.fields
    query["products"].resolve = resolve_products
    query["warehouses"].resolve = resolve_warehouses
    query["kpis"].resolve = resolve_kpis

    mutation = schema.mutation_type.fields
    mutation["updateDemand"].resolve = resolve_update_demand
    mutation["transferStock"].resolve = resolve_transfer_stock

    return schema


def execute_operation(
    schema: GraphQLSchema,
    query: str,
    variables: Optional[Dict[str, Any]] = None,
    operation_name: Optional[str] = None
) -> ExecutionResult:
    """Run a query or mutation document against the schema."""
    return graphql_sync(
        schema,
        query,
        variable_values=variables,
        operation_name=operation_name
    )
