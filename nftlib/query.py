"""
Helpers for picking objects out of `nft -j list ...` output.

The listing is `{"nftables": [{"metainfo": {...}}, {"table": {...}}, ...]}`,
ie. an array of objects each tagged by a single key naming its type.
"""
import json
from typing import Any, Dict, List, Optional, Union

from .errors import InvalidResponseError, MissingFieldError

INVALID_RESPONSE = "invalid json response"

_MISSING = object()


def parse_ruleset(output: Union[str, bytes]) -> List[Dict[str, Any]]:
    try:
        if isinstance(output, bytes):
            output = output.decode("utf-8")
        data = json.loads(output)
    except (TypeError, ValueError) as e:  # UnicodeDecodeError is a ValueError
        raise InvalidResponseError(INVALID_RESPONSE) from e

    if not isinstance(data, dict) or not isinstance(data.get("nftables"), list):
        raise InvalidResponseError(INVALID_RESPONSE)

    return data["nftables"]


def find_objects(entries: List[Dict[str, Any]], kind: str, **match) -> List[Dict[str, Any]]:
    """ All `kind` objects whose fields equal `match`, in document order """
    found = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        obj = entry.get(kind)
        if not isinstance(obj, dict):
            continue
        if all(k in obj and obj[k] == v for k, v in match.items()):
            found.append(obj)
    return found


def find_object(entries: List[Dict[str, Any]], kind: str, **match) -> Optional[Dict[str, Any]]:
    found = find_objects(entries, kind, **match)
    return found[0] if found else None


def require(obj: Optional[Dict[str, Any]], key: str, message: str, *, error=MissingFieldError):
    value = obj.get(key, _MISSING) if isinstance(obj, dict) else _MISSING
    if value is _MISSING:
        raise error(message)
    return value


def pluck(objs: List[Dict[str, Any]], key: str) -> List[Any]:
    return [obj[key] for obj in objs if key in obj]


def render_element(elem) -> str:
    if isinstance(elem, str):
        return elem
    if isinstance(elem, (int, float)) and not isinstance(elem, bool):
        return str(elem)
    if isinstance(elem, dict):
        # Elements with timeouts / counters are wrapped: {"elem": {"val": ..., "timeout": ...}}
        if "elem" in elem and isinstance(elem["elem"], dict) and "val" in elem["elem"]:
            return render_element(elem["elem"]["val"])
        prefix = elem.get("prefix")
        if isinstance(prefix, dict) and "addr" in prefix and "len" in prefix:
            return f"{render_element(prefix['addr'])}/{prefix['len']}"
        if isinstance(elem.get("range"), list) and len(elem["range"]) == 2:
            low, high = elem["range"]
            return f"{render_element(low)}-{render_element(high)}"
    return json.dumps(elem, separators=(",", ":"))
