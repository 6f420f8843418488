# storefront/api/utils/params.py
import re

from flask import abort, request

_INT_RE = re.compile(r"-?[0-9]+")


def int_arg(name: str) -> int | None:
    """Optional integer query parameter; a non-integer value aborts with 400."""
    raw = (request.args.get(name) or "").strip()
    if not raw:
        return None
    # int() alone would also take "+5" and "1_0"
    if not _INT_RE.fullmatch(raw):
        abort(400, description=f"Invalid '{name}': expected an integer")
    return int(raw)


def flag_arg(name: str) -> bool:
    return (request.args.get(name) or "").strip().lower() == "true"


def json_object() -> dict:
    """Request body as a JSON object, or 400."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description="Expected a JSON object body")
    return data
