"""
Minimal async Supabase REST (PostgREST) client.

    result = await supabase_client.query("provinces").select("*").eq("region_id", 2).execute()
    rows = result["data"]

Results are dicts with "data" and "error" keys; transport failures and
PostgREST error payloads are reported through "error" rather than raised.
"""
import json
import logging
from typing import Any, Dict, Iterable, List, Optional

import httpx

from config import get_settings

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Raised when the REST endpoint or key is not configured."""


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def _format_list(values: Iterable[Any]) -> str:
    items = []
    for v in values:
        text = _format_value(v)
        if isinstance(v, str) and any(ch in text for ch in ',()"'):
            text = '"' + text.replace('"', '\\"') + '"'
        items.append(text)
    return "(" + ",".join(items) + ")"


class QueryBuilder:
    def __init__(self, client: "SupabaseClient", table: str):
        self._client = client
        self._table = table
        self._method = "GET"
        self._params: List[tuple] = []
        self._body: Optional[Any] = None
        self._prefer: List[str] = []

    def select(self, columns: str = "*") -> "QueryBuilder":
        self._params.append(("select", columns))
        return self

    def eq(self, column: str, value: Any) -> "QueryBuilder":
        self._params.append((column, f"eq.{_format_value(value)}"))
        return self

    def in_(self, column: str, values: Iterable[Any]) -> "QueryBuilder":
        self._params.append((column, f"in.{_format_list(values)}"))
        return self

    def order(self, column: str, desc: bool = False) -> "QueryBuilder":
        self._params.append(("order", f"{column}.{'desc' if desc else 'asc'}"))
        return self

    def limit(self, count: int) -> "QueryBuilder":
        self._params.append(("limit", str(count)))
        return self

    def insert(self, rows) -> "QueryBuilder":
        self._method = "POST"
        self._body = rows
        self._prefer.append("return=representation")
        return self

    def upsert(self, rows, on_conflict: Optional[str] = None, ignore_duplicates: bool = False) -> "QueryBuilder":
        self._method = "POST"
        self._body = rows
        resolution = "ignore-duplicates" if ignore_duplicates else "merge-duplicates"
        self._prefer.extend([f"resolution={resolution}", "return=representation"])
        if on_conflict:
            self._params.append(("on_conflict", on_conflict))
        return self

    async def execute(self) -> Dict[str, Any]:
        return await self._client.request(
            self._method,
            self._table,
            params=self._params,
            body=self._body,
            prefer=self._prefer,
        )


class SupabaseClient:
    def __init__(
        self,
        url: Optional[str] = None,
        key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.url = (url if url is not None else settings.supabase_url or "").rstrip("/")
        self.key = key if key is not None else settings.supabase_secret_key
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.url and self.key)

    def query(self, table: str) -> QueryBuilder:
        return QueryBuilder(self, table)

    def _headers(self, prefer: List[str]) -> Dict[str, str]:
        headers = {
            "apikey": self.key,
            "Authorization": f"Bearer {self.key}",
            "Content-Type": "application/json",
        }
        if prefer:
            headers["Prefer"] = ",".join(prefer)
        return headers

    async def request(
        self,
        method: str,
        table: str,
        params: List[tuple],
        body: Optional[Any] = None,
        prefer: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        if not self.configured:
            raise ConfigurationError("SUPABASE_URL and SUPABASE_SECRET_KEY must be set")

        endpoint = f"{self.url}/rest/v1/{table}"
        content = json.dumps(body) if body is not None else None

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.request(
                    method,
                    endpoint,
                    params=params,
                    content=content,
                    headers=self._headers(prefer or []),
                )
        except httpx.HTTPError as e:
            logger.error("REST %s %s failed: %s", method, table, e)
            return {"data": [], "error": str(e)}

        if response.status_code >= 400:
            try:
                detail = response.json()
            except ValueError:
                detail = response.text
            logger.warning("REST %s %s returned %s: %s", method, table, response.status_code, detail)
            return {"data": [], "error": detail, "status_code": response.status_code}

        data = response.json() if response.content else []
        return {"data": data, "error": None, "status_code": response.status_code}


supabase_client = SupabaseClient()
