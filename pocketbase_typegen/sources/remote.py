"""Load collections from a running PocketBase server through its admin API."""
import logging
from typing import Any, Dict, List, Optional
import httpx
from pydantic import ValidationError
from pocketbase_typegen.core.errors import SchemaSourceError
from pocketbase_typegen.schemas.collections import CollectionRecord, parse_collections

log = logging.getLogger(__name__)

COLLECTIONS_PER_PAGE = 200


def _json_object(response: httpx.Response) -> Dict[str, Any]:
    payload = response.json()
    if not isinstance(payload, dict):
        raise SchemaSourceError(
            f"{response.request.method} {response.request.url} did not return a JSON object"
        )
    return payload


def from_url(
    url: str,
    email: str = "",
    password: str = "",
    timeout: float = 30.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> List[CollectionRecord]:
    """
    Authenticate as an admin and fetch the collection list.

    Args:
        url: Base URL of the PocketBase server
        email: Admin email
        password: Admin password
        timeout: Request timeout in seconds
        transport: Optional httpx transport, used to stub the server in tests

    Returns:
        Collections reported by the server
    """
    base_url = url.rstrip("/")
    log.info("Fetching schema from %s", base_url, extra={"source": "url", "stage": "load"})
    try:
        with httpx.Client(base_url=base_url, timeout=timeout, transport=transport) as client:
            r = client.post(
                "/api/admins/auth-with-password",
                data={"identity": email, "password": password},
            )
            r.raise_for_status()
            token = _json_object(r).get("token")
            if not token:
                raise SchemaSourceError(f"no admin token returned by {base_url}")

            r = client.get(
                "/api/collections",
                params={"perPage": COLLECTIONS_PER_PAGE},
                headers={"Authorization": token},
            )
            r.raise_for_status()
            items = _json_object(r).get("items", [])
            if not isinstance(items, list):
                raise SchemaSourceError(f"collection list from {base_url} is not a list")
    except httpx.HTTPStatusError as e:
        raise SchemaSourceError(
            f"{e.request.method} {e.request.url} failed with status {e.response.status_code}"
        ) from e
    except (httpx.HTTPError, ValueError) as e:
        raise SchemaSourceError(f"could not fetch schema from {base_url}: {e}") from e

    try:
        return parse_collections(items)
    except ValidationError as e:
        raise SchemaSourceError(f"invalid collection returned by {base_url}: {e}") from e
