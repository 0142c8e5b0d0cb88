from typing import Any, Dict, Optional, Tuple

import requests
from loguru import logger

from embed_harness.app.core.settings import settings
from embed_harness.app.parsing.connection_uri import Credentials, DatabaseDialect


class BasedashAPIError(Exception):
    def __init__(self, detail: str, status_code: int, payload: Optional[dict] = None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code
        self.payload = payload or {}


def _new_session() -> requests.Session:
    return requests.Session()


def _json_body(resp: requests.Response) -> Dict[str, Any]:
    try:
        body = resp.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _error_detail(body: Dict[str, Any], fallback: str) -> str:
    err = body.get("error")
    if isinstance(err, dict) and err.get("detail"):
        return str(err["detail"])
    return fallback


class BasedashClient:
    """Thin wrapper over the Basedash public API, authenticated with an API key."""

    def __init__(self, api_key: str, base_url: Optional[str] = None):
        self.api_key = api_key
        self.base_url = (base_url or settings.basedash_url).rstrip("/")

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    def _post_json(self, path: str, payload: dict, fallback_error: str) -> dict:
        with _new_session() as session:
            resp = session.post(
                f"{self.base_url}{path}",
                headers=self._headers(),
                json=payload,
                timeout=settings.HTTP_TIMEOUT_S,
            )
            body = _json_body(resp)
        if not resp.ok:
            detail = _error_detail(body, fallback_error)
            logger.warning(f"basedash {path} failed: {resp.status_code} {detail}")
            raise BasedashAPIError(detail, resp.status_code, body)
        return body.get("data") or {}

    def create_organization(self, name: str) -> Dict[str, str]:
        data = self._post_json(
            "/api/public/organizations",
            {"name": name, "skipOnboarding": True, "fullEmbedEnabled": True},
            "Failed to create organization",
        )
        return {
            "id": data.get("id", ""),
            "slug": data.get("slug", ""),
            "jwtSecret": data.get("jwtSecret", ""),
        }

    def create_data_source(
        self,
        org_id: str,
        display_name: str,
        dialect: DatabaseDialect,
        creds: Credentials,
    ) -> Dict[str, str]:
        data = self._post_json(
            "/api/public/data-sources",
            {
                "type": "direct",
                "organizationId": org_id,
                "displayName": display_name,
                "dialect": dialect.value,
                "host": creds.host,
                "port": creds.port,
                "databaseName": creds.database_name,
                "username": creds.username,
                "password": creds.password,
                "sslEnabled": creds.ssl_enabled,
            },
            "Failed to create data source",
        )
        return {"id": data.get("id", ""), "displayName": data.get("displayName", "")}

    def upload_icon(
        self, org_id: str, filename: str, content: bytes, content_type: str
    ) -> Tuple[int, Dict[str, Any]]:
        """Forward an icon file; returns the upstream status and JSON body unchanged."""
        with _new_session() as session:
            resp = session.post(
                f"{self.base_url}/api/public/organizations/{org_id}/icon",
                headers=self._headers(),
                files={"icon": (filename, content, content_type)},
                timeout=settings.HTTP_TIMEOUT_S,
            )
            return resp.status_code, _json_body(resp)
