"""HTTP client for the Messagely backend."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from messagely_client.config import BACKEND_BASE_URL, REQUEST_TIMEOUT


class APIClient:
    def __init__(self, base_url: str = BACKEND_BASE_URL, timeout: int = REQUEST_TIMEOUT) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.token: Optional[str] = None

    # -------------------- Auth --------------------
    def register(self, username: str, password: str, first_name: str, last_name: str, phone: str) -> str:
        payload = {
            "username": username,
            "password": password,
            "first_name": first_name,
            "last_name": last_name,
            "phone": phone,
        }
        res = self._post("/auth/register", json=payload)
        self.token = res.get("token")
        return self.token

    def login(self, username: str, password: str) -> str:
        payload = {"username": username, "password": password}
        res = self._post("/auth/login", json=payload)
        self.token = res.get("token")
        return self.token

    # -------------------- Users --------------------
    def list_users(self) -> List[Dict[str, Any]]:
        return self._get("/users")["users"]

    def get_user(self, username: str) -> Dict[str, Any]:
        return self._get(f"/users/{username}")["user"]

    def inbox(self, username: str) -> List[Dict[str, Any]]:
        return self._get(f"/users/{username}/to")["messages"]

    def outbox(self, username: str) -> List[Dict[str, Any]]:
        return self._get(f"/users/{username}/from")["messages"]

    # -------------------- Messages --------------------
    def send_message(self, to_username: str, body: str) -> Dict[str, Any]:
        payload = {"to_username": to_username, "body": body}
        return self._post("/messages", json=payload)["message"]

    def get_message(self, message_id: int) -> Dict[str, Any]:
        return self._get(f"/messages/{message_id}")["message"]

    def mark_read(self, message_id: int) -> Dict[str, Any]:
        return self._post(f"/messages/{message_id}/read")["message"]

    # -------------------- Internal helpers --------------------
    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _post(self, path: str, json: Dict[str, Any] | None = None) -> Dict[str, Any]:
        res = requests.post(f"{self.base_url}{path}", json=json or {}, headers=self._headers(), timeout=self.timeout)
        try:
            res.raise_for_status()
        except requests.HTTPError as exc:
            detail = f"POST {path} -> {res.status_code} {res.reason}; body={res.text}"
            raise requests.HTTPError(detail, response=res) from exc
        return res.json() if res.text else {}

    def _get(self, path: str, params: Dict[str, Any] | None = None) -> Dict[str, Any]:
        res = requests.get(f"{self.base_url}{path}", params=params or {}, headers=self._headers(), timeout=self.timeout)
        try:
            res.raise_for_status()
        except requests.HTTPError as exc:
            detail = f"GET {path} -> {res.status_code} {res.reason}; body={res.text}"
            raise requests.HTTPError(detail, response=res) from exc
        return res.json() if res.text else {}


def get_client(base_url: str | None = None) -> APIClient:
    return APIClient(base_url=base_url or BACKEND_BASE_URL)
