"""
Query and mutation resolvers - build the payload, call the vault, unwrap records

Every vault failure is logged and reduced to a null result.
"""
from typing import List, Optional
import logging

import strawberry
from strawberry.types import Info

from ..vault.audit import get_audit_logger
from ..vault.skyflow_client import VaultClient
from .payloads import build_detokenize_request, build_get_request, build_insert_request
from .types import Record, Token, User

logger = logging.getLogger(__name__)

USERS_TABLE = "users"


def _vault(info: Info) -> VaultClient:
    return info.context["vault"]


def _log_failure(operation: str, table: Optional[str], error: Exception):
    logger.error(f"Vault {operation} failed: {error}")
    code = getattr(error, "vault_code", None) or getattr(error, "code", None)
    get_audit_logger().log_failure(operation, table, code)


async def _fetch_records(
    info: Info,
    table: str,
    ids: Optional[List[strawberry.ID]],
    tokens_bool: Optional[bool],
) -> Optional[List[dict]]:
    payload, options = build_get_request(table, ids, tokens_bool)
    try:
        response = await _vault(info).get(payload, tokens=options["tokens"])
    except Exception as e:
        _log_failure("get", table, e)
        return None

    records = response.get("records") or []
    get_audit_logger().log_get(table, len(ids or []), options["tokens"])
    logger.debug(f"Fetched {len(records)} records from {table}")
    return records


async def get_records(
    info: Info,
    table: str,
    ids: Optional[List[strawberry.ID]] = None,
    tokens_bool: Optional[bool] = None,
) -> Optional[List[Optional[Record]]]:
    """Fetch records by id from any vault table"""
    records = await _fetch_records(info, table, ids, tokens_bool)
    if records is None:
        return None
    return [Record.from_vault(record, table) for record in records]


async def get_users(
    info: Info,
    ids: Optional[List[strawberry.ID]] = None,
    tokens_bool: Optional[bool] = None,
) -> Optional[List[Optional[User]]]:
    """Fetch records from the users table"""
    records = await _fetch_records(info, USERS_TABLE, ids, tokens_bool)
    if records is None:
        return None
    return [User.from_vault(record) for record in records]


async def detokenize(
    info: Info,
    tokens: Optional[List[str]] = None,
) -> Optional[List[Optional[Token]]]:
    """Resolve tokens back to their values"""
    payload = build_detokenize_request(tokens)
    try:
        response = await _vault(info).detokenize(payload)
    except Exception as e:
        _log_failure("detokenize", None, e)
        return None

    records = response.get("records") or []
    get_audit_logger().log_detokenize(len(payload["records"]))
    return [Token.from_vault(record) for record in records]


async def insert_record(info: Info, name: str, fields: str) -> Optional[Record]:
    """
    Insert one record into table `name`

    `fields` is a JSON object string; the vault answers with tokens
    for the stored values and the new skyflow_id.
    """
    try:
        payload = build_insert_request(name, fields)
        response = await _vault(info).insert(payload, tokens=True)
    except Exception as e:
        _log_failure("insert", name, e)
        return None

    records = response.get("records") or []
    get_audit_logger().log_insert(name, len(records))
    if not records:
        return None
    return Record.from_vault(records[0], name)
