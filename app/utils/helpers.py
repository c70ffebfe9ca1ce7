from datetime import datetime
from time import perf_counter
from uuid import UUID

from fastapi import Request


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return the current local time as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(
        "%Y-%m-%d %H:%M:%S",
    )


def time_taken(start_time: float) -> str:
    """Format the elapsed time since ``start_time`` in milliseconds."""
    return f"{(perf_counter() - start_time) * 1000:.2f}ms"


def is_well_formed_id(raw: str) -> bool:
    """
    Check whether ``raw`` has the shape of a store identifier.

    Identifiers are canonical UUID strings (``8-4-4-4-12`` hex digits) or the
    same 32 hex digits without hyphens. Anything else is malformed and must be
    rejected before reaching the store.
    """
    if len(raw) not in (32, 36):
        return False
    try:
        parsed = UUID(raw)
    except ValueError:
        return False
    canonical = str(parsed) if len(raw) == 36 else parsed.hex
    return canonical == raw.lower()
