"""
HTTP client for the portfolio API.

Admin tooling talks to the backend through PortfolioClient. After login the
bearer token is kept in a TokenStore and added to every request, the same
way the SPA keeps it in local storage. Logging out only forgets the token;
the server keeps no session.
"""
import json
import logging
import os
from datetime import date
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"


class ApiError(Exception):
    """Non-2xx answer from the API, carrying its ``message``."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class TokenStore:
    """Holds the admin token in memory, optionally mirrored to a JSON file."""

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self._token: Optional[str] = None

        if path and os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                self._token = json.load(f).get("token")

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        self._token = token
        if self.path:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({"token": token}, f)

    def clear(self) -> None:
        self._token = None
        if self.path and os.path.exists(self.path):
            os.remove(self.path)


class PortfolioClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token_store: Optional[TokenStore] = None,
        http: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ):
        self.token_store = token_store or TokenStore()
        self.http = http or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    @property
    def is_authenticated(self) -> bool:
        return self.token_store.get() is not None

    def _request(self, method: str, path: str, **kwargs) -> Any:
        headers = {"Content-Type": "application/json"}
        token = self.token_store.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        response = self.http.request(method, path, headers=headers, **kwargs)

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None

            if isinstance(body, dict) and body.get("message"):
                message = body["message"]
            else:
                message = response.text or response.reason_phrase
            logger.debug(f"{method} {path} failed: {response.status_code} {message}")
            raise ApiError(response.status_code, message)

        return response.json()

    # Auth

    def login(self, passcode: str) -> Dict[str, Any]:
        """Log in and remember the returned token."""
        data = self._request("POST", "/api/auth/login", json={"passcode": passcode})
        self.token_store.set(data["token"])
        return data

    def logout(self) -> None:
        self.token_store.clear()

    def me(self) -> Dict[str, Any]:
        return self._request("GET", "/api/auth/me")

    def change_passcode(self, new_passcode: str) -> Dict[str, Any]:
        return self._request(
            "PUT", "/api/auth/change-passcode", json={"newPasscode": new_passcode}
        )

    # Projects

    def list_projects(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/projects")

    def list_featured_projects(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/projects/featured")

    def get_project(self, project_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/api/projects/{project_id}")

    def create_project(self, project: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/projects", json=project)

    def update_project(self, project_id: int, project: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/api/projects/{project_id}", json=project)

    def delete_project(self, project_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/projects/{project_id}")

    # Skills

    def list_skills(self, admin: bool = False) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/cms/skills" if admin else "/api/skills")

    def create_skill(self, name: str, category: str, devicon: str) -> Dict[str, Any]:
        return self._request(
            "POST",
            "/api/cms/skills",
            json={"name": name, "category": category, "devicon": devicon},
        )

    def update_skill(
        self, skill_id: int, name: str, category: str, devicon: str
    ) -> Dict[str, Any]:
        return self._request(
            "PUT",
            f"/api/cms/skills/{skill_id}",
            json={"name": name, "category": category, "devicon": devicon},
        )

    def delete_skill(self, skill_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/cms/skills/{skill_id}")

    # Singleton content

    def get_hero(self) -> Dict[str, Any]:
        return self._request("GET", "/api/cms/hero")

    def update_hero(self, name: str, roles: List[str]) -> Dict[str, Any]:
        return self._request("PUT", "/api/cms/hero", json={"name": name, "roles": roles})

    def get_about(self) -> Dict[str, Any]:
        return self._request("GET", "/api/cms/about")

    def update_about(self, content: str) -> Dict[str, Any]:
        return self._request("PUT", "/api/cms/about", json={"content": content})

    def get_settings(self) -> Dict[str, Any]:
        return self._request("GET", "/api/settings")

    def update_settings(self, settings: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", "/api/settings", json=settings)

    # Education

    def list_education(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/cms/education")

    def get_education(self, education_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/api/cms/education/{education_id}")

    def create_education(self, entry: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/cms/education", json=_serialize_dates(entry))

    def update_education(self, education_id: int, entry: Dict[str, Any]) -> Dict[str, Any]:
        return self._request(
            "PUT", f"/api/cms/education/{education_id}", json=_serialize_dates(entry)
        )

    def delete_education(self, education_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/cms/education/{education_id}")

    # Contacts

    def submit_contact(self, name: str, email: str, message: str) -> Dict[str, Any]:
        return self._request(
            "POST",
            "/api/contacts",
            json={"name": name, "email": email, "message": message},
        )

    def list_contacts(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/contacts")

    def unread_count(self) -> int:
        return self._request("GET", "/api/contacts/unread")["count"]

    def mark_contact_read(self, contact_id: int) -> Dict[str, Any]:
        return self._request("PUT", f"/api/contacts/{contact_id}/read")

    def reply_to_contact(self, contact_id: int, message: str) -> Dict[str, Any]:
        return self._request(
            "POST", f"/api/contacts/{contact_id}/reply", json={"message": message}
        )

    def delete_contact(self, contact_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/contacts/{contact_id}")

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/health")


def _serialize_dates(entry: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: value.isoformat() if isinstance(value, date) else value
        for key, value in entry.items()
    }
