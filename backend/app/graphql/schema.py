"""
GraphQL schema - Query and Mutation roots
"""
import strawberry

from .resolvers import detokenize, get_records, get_users, insert_record


@strawberry.type
class Query:
    get_records = strawberry.field(resolver=get_records)
    detokenize = strawberry.field(resolver=detokenize)
    get_users = strawberry.field(resolver=get_users)


@strawberry.type
class Mutation:
    insert_record = strawberry.field(resolver=insert_record)


schema = strawberry.Schema(query=Query, mutation=Mutation)
