"""
GraphQL object types and their conversion from vault responses
"""
from typing import Any, Dict, Optional

import strawberry


# customized per table
@strawberry.type
class Fields:
    name: Optional[str] = None
    ssn: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_vault(cls, fields: Optional[Dict[str, Any]]) -> "Fields":
        fields = fields or {}
        return cls(
            name=fields.get("name"),
            ssn=fields.get("ssn"),
            email=fields.get("email"),
        )


@strawberry.type
class Record:
    id: Optional[strawberry.ID]
    table: str
    fields: Fields

    @classmethod
    def from_vault(cls, record: Dict[str, Any], table: Optional[str] = None) -> "Record":
        """Build from a vault record; skyflow_id may sit at the top level or inside fields"""
        fields = record.get("fields") or {}
        skyflow_id = record.get("id") or record.get("skyflow_id") or fields.get("skyflow_id")
        return cls(
            id=strawberry.ID(str(skyflow_id)) if skyflow_id else None,
            table=record.get("table") or table or "",
            fields=Fields.from_vault(fields),
        )


@strawberry.type
class Token:
    token: Optional[str]
    value: str
    token_group: Optional[str] = None

    @classmethod
    def from_vault(cls, record: Dict[str, Any]) -> "Token":
        return cls(
            token=record.get("token"),
            value=record.get("value") or "",
            token_group=record.get("token_group") or record.get("tokenGroup"),
        )


# users
@strawberry.type
class User:
    fields: Fields

    @classmethod
    def from_vault(cls, record: Dict[str, Any]) -> "User":
        return cls(fields=Fields.from_vault(record.get("fields")))
