"""
Request payload builders - GraphQL arguments to Skyflow request dicts

No validation happens here; the vault rejects malformed requests itself.
"""
import json
from typing import Any, Dict, List, Optional, Tuple

from skyflow.vault import RedactionType


def build_get_request(
    table: str,
    ids: Optional[List[str]],
    tokens_bool: Optional[bool],
) -> Tuple[Dict[str, Any], Dict[str, bool]]:
    """
    Build a bulk-get request for one table

    Args:
        table: Vault table name
        ids: skyflow_ids to fetch
        tokens_bool: Truthy returns raw tokens, falsy returns plain text

    Returns:
        (payload, options) as passed to the vault client
    """
    tokens = bool(tokens_bool)
    record: Dict[str, Any] = {"table": table}
    if ids is not None:
        record["ids"] = [str(i) for i in ids]
    # Redaction and tokens are mutually exclusive
    if not tokens:
        record["redaction"] = RedactionType.PLAIN_TEXT
    return {"records": [record]}, {"tokens": tokens}


def build_detokenize_request(tokens: Optional[List[str]]) -> Dict[str, Any]:
    """One {"token": ...} entry per input token, order preserved"""
    return {"records": [{"token": token} for token in (tokens or [])]}


def build_insert_request(table: str, fields: str) -> Dict[str, Any]:
    """
    Build an insert request from a JSON object string

    Raises:
        ValueError: if fields is not a JSON object
    """
    parsed = json.loads(fields)
    if not isinstance(parsed, dict):
        raise ValueError("fields must be a JSON object")
    return {"records": [{"table": table, "fields": parsed}]}
