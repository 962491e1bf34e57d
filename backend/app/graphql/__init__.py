# GraphQL module — schema, resolvers, FastAPI router
from .schema import schema
from .router import graphql_router, get_context
