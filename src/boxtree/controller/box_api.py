"""Box REST API collaborator (request/response plumbing only)."""

from __future__ import annotations

import json
import os
from contextlib import contextmanager
from typing import Any, BinaryIO, Iterator, Optional, Union

import requests

from boxtree.auth import AuthInfo
from boxtree.errors import (
    ApiError,
    HttpErrorInfo,
    InvalidArgumentError,
    NetworkError,
    map_http_error,
)
from boxtree.util.logging import get_logger

logger = get_logger(__name__)

UploadSource = Union[str, "os.PathLike[str]", BinaryIO]


class BoxApi:
    """
    Thin wrapper around the Box 2.0 REST API.

    Every method performs one request and returns the parsed JSON payload
    (a plain dict). Failures are raised as boxtree errors; nothing is
    retried here.
    """

    DEFAULT_BASE_URL: str = "https://api.box.com/2.0"
    DEFAULT_UPLOAD_URL: str = "https://upload.box.com/api/2.0"
    DEFAULT_TIMEOUT_SEC: float = 60.0

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        base_url: Optional[str] = None,
        upload_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._session = session if session is not None else requests.Session()
        self._configure(base_url, upload_url, timeout)
        self.set_access_token(auth_info.access_token)

    @classmethod
    def from_session(
        cls,
        session: Any,
        *,
        base_url: Optional[str] = None,
        upload_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "BoxApi":
        """Create an API object around a pre-built session (useful for tests)."""
        obj = cls.__new__(cls)
        obj._session = session
        obj._configure(base_url, upload_url, timeout)
        return obj

    @property
    def base_url(self) -> str:
        return self._base_url

    def set_access_token(self, access_token: Optional[str]) -> None:
        """Set (or clear, with None) the bearer token sent with every request."""
        if access_token:
            self._session.headers["Authorization"] = f"Bearer {access_token}"
        else:
            self._session.headers.pop("Authorization", None)

    # ----------------------------
    # Account
    # ----------------------------
    def get_account_info(self) -> dict[str, Any]:
        return self._json("GET", "users", "me")

    # ----------------------------
    # Files
    # ----------------------------
    def get_file_info(self, file_id: str) -> dict[str, Any]:
        return self._json("GET", "files", file_id)

    def update_file_info(self, file_id: str, info: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        return self._json("PUT", "files", file_id, json=_with_parent_ref(info or {}))

    def delete_file(self, file_id: str, etag: Optional[str] = None) -> bool:
        self._request("DELETE", "files", file_id, headers={"If-Match": etag or ""})
        return True

    def upload_file(
        self,
        parent_id: str,
        file: UploadSource,
        *,
        name: Optional[str] = None,
    ) -> dict[str, Any]:
        with _upload_source(file, name) as (handle, filename):
            attributes = {"name": filename, "parent": {"id": parent_id}}
            return self._json(
                "POST",
                "files",
                "content",
                base_url=self._upload_url,
                files={
                    "attributes": (None, json.dumps(attributes)),
                    "file": (filename, handle),
                },
            )

    def upload_version(
        self,
        file_id: str,
        file: UploadSource,
        etag: Optional[str] = None,
        *,
        name: Optional[str] = None,
    ) -> dict[str, Any]:
        with _upload_source(file, name) as (handle, filename):
            return self._json(
                "POST",
                "files",
                file_id,
                "content",
                base_url=self._upload_url,
                headers={"If-Match": etag or ""},
                files={
                    "attributes": (None, json.dumps({"name": filename})),
                    "file": (filename, handle),
                },
            )

    def download_file(self, file_id: str) -> bytes:
        return self._request("GET", "files", file_id, "content").content

    def copy_file(
        self,
        file_id: str,
        new_parent_id: str,
        new_name: Optional[str] = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"parent": {"id": new_parent_id}}
        if new_name is not None:
            body["name"] = new_name
        return self._json("POST", "files", file_id, "copy", json=body)

    def share_file(self, file_id: str, params: Optional[dict[str, Any]]) -> dict[str, Any]:
        return self._json("PUT", "files", file_id, json={"shared_link": params})

    def get_file_comments(self, file_id: str) -> dict[str, Any]:
        return self._json("GET", "files", file_id, "comments")

    def get_file_versions(self, file_id: str) -> dict[str, Any]:
        return self._json("GET", "files", file_id, "versions")

    def get_file_version_info(self, file_id: str, version_id: str) -> dict[str, Any]:
        return self._json("GET", "files", file_id, "versions", version_id)

    def delete_file_version(self, file_id: str, version_id: str) -> bool:
        self._request("DELETE", "files", file_id, "versions", version_id)
        return True

    def download_file_version(self, file_id: str, version_id: str) -> bytes:
        resp = self._request("GET", "files", file_id, "content", params={"version": version_id})
        return resp.content

    # ----------------------------
    # Comments
    # ----------------------------
    def add_comment(self, file_id: str, message: str) -> dict[str, Any]:
        return self._json("POST", "files", file_id, "comments", json={"message": message})

    def get_comment_info(self, comment_id: str) -> dict[str, Any]:
        return self._json("GET", "comments", comment_id)

    def update_comment(self, comment_id: str, message: str) -> dict[str, Any]:
        return self._json("PUT", "comments", comment_id, json={"message": message})

    def delete_comment(self, comment_id: str) -> bool:
        self._request("DELETE", "comments", comment_id)
        return True

    # ----------------------------
    # Folders
    # ----------------------------
    def get_folder_info(self, folder_id: str) -> dict[str, Any]:
        return self._json("GET", "folders", folder_id)

    def get_folder_items(
        self,
        folder_id: str,
        *,
        limit: int = 100,
        offset: int = 0,
    ) -> dict[str, Any]:
        if limit <= 0 or offset < 0:
            raise InvalidArgumentError(
                "limit must be positive and offset non-negative",
                details={"limit": limit, "offset": offset},
            )
        return self._json(
            "GET",
            "folders",
            folder_id,
            "items",
            params={"limit": limit, "offset": offset},
        )

    def create_folder(self, parent_id: str, name: str) -> dict[str, Any]:
        return self._json("POST", "folders", json={"parent": {"id": parent_id}, "name": name})

    def update_folder_info(self, folder_id: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        return self._json("PUT", "folders", folder_id, json=_with_parent_ref(params or {}))

    def delete_folder(self, folder_id: str, recursive: bool = False) -> bool:
        self._request(
            "DELETE",
            "folders",
            folder_id,
            params={"recursive": "true" if recursive else "false"},
        )
        return True

    def copy_folder(
        self,
        folder_id: str,
        new_parent_id: str,
        new_name: Optional[str] = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"parent": {"id": new_parent_id}}
        if new_name is not None:
            body["name"] = new_name
        return self._json("POST", "folders", folder_id, "copy", json=body)

    def share_folder(self, folder_id: str, params: Optional[dict[str, Any]]) -> dict[str, Any]:
        return self._json("PUT", "folders", folder_id, json={"shared_link": params})

    # ----------------------------
    # Discussions
    # ----------------------------
    def get_folder_discussions(self, folder_id: str) -> dict[str, Any]:
        return self._json("GET", "folders", folder_id, "discussions")

    def create_discussion(
        self,
        folder_id: str,
        name: str,
        description: Optional[str] = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"parent": {"id": folder_id}, "name": name}
        if description is not None:
            body["description"] = description
        return self._json("POST", "discussions", json=body)

    def get_discussion_info(self, discussion_id: str) -> dict[str, Any]:
        return self._json("GET", "discussions", discussion_id)

    def update_discussion(self, discussion_id: str, params: dict[str, Any]) -> dict[str, Any]:
        return self._json("PUT", "discussions", discussion_id, json=params)

    def delete_discussion(self, discussion_id: str) -> bool:
        self._request("DELETE", "discussions", discussion_id)
        return True

    def get_discussion_comments(self, discussion_id: str) -> dict[str, Any]:
        return self._json("GET", "discussions", discussion_id, "comments")

    def add_discussion_comment(self, discussion_id: str, message: str) -> dict[str, Any]:
        return self._json(
            "POST",
            "discussions",
            discussion_id,
            "comments",
            json={"message": message},
        )

    # ----------------------------
    # Internals
    # ----------------------------
    def _configure(
        self,
        base_url: Optional[str],
        upload_url: Optional[str],
        timeout: Optional[float],
    ) -> None:
        self._base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self._upload_url = (upload_url or self.DEFAULT_UPLOAD_URL).rstrip("/")
        self._timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT_SEC

    def _json(self, method: str, *segments: Any, **kwargs: Any) -> dict[str, Any]:
        resp = self._request(method, *segments, **kwargs)
        if not resp.content:
            return {}
        try:
            data = resp.json()
        except ValueError as exc:
            raise ApiError(
                "Box API returned a non-JSON body",
                details={"status_code": resp.status_code},
                cause=exc,
            ) from exc
        if not isinstance(data, dict):
            raise ApiError("Box API returned an unexpected payload", details={"payload": data})
        return data

    def _request(
        self,
        method: str,
        *segments: Any,
        base_url: Optional[str] = None,
        **kwargs: Any,
    ) -> requests.Response:
        url = "/".join([base_url or self._base_url, *(str(s) for s in segments)])
        logger.debug("%s %s", method, url)

        try:
            resp = self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.RequestException as exc:
            raise NetworkError("Network error", details={"url": url}, cause=exc) from exc

        if resp.status_code >= 400:
            info = _response_to_info(resp)
            logger.debug("%s %s failed: %s %s", method, url, info.status_code, info.reason)
            raise map_http_error(info)
        return resp


def _with_parent_ref(params: dict[str, Any]) -> dict[str, Any]:
    body = dict(params)
    parent = body.get("parent")
    if parent is not None and not isinstance(parent, dict):
        body["parent"] = {"id": str(parent)}
    return body


@contextmanager
def _upload_source(
    file: UploadSource,
    name: Optional[str],
) -> Iterator[tuple[BinaryIO, str]]:
    if isinstance(file, (str, os.PathLike)):
        path = os.fspath(file)
        if not os.path.isfile(path):
            raise InvalidArgumentError("Upload source does not exist", details={"path": path})
        with open(path, "rb") as handle:
            yield handle, name or os.path.basename(path)
        return

    filename = name or os.path.basename(str(getattr(file, "name", "") or ""))
    if not filename:
        raise InvalidArgumentError("name is required when uploading from a stream")
    yield file, filename


def _response_to_info(resp: Any) -> HttpErrorInfo:
    status_code = getattr(resp, "status_code", None)
    reason = getattr(resp, "reason", None)

    message = None
    details: dict[str, Any] = {}

    try:
        payload = resp.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        if isinstance(payload.get("message"), str):
            message = payload["message"]
        if isinstance(payload.get("code"), str):
            reason = payload["code"]
        if payload.get("request_id") is not None:
            details["request_id"] = payload["request_id"]
        if payload.get("context_info") is not None:
            details["context_info"] = payload["context_info"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
