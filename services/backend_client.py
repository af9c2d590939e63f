# ============================================================================
# BACKEND HTTP CLIENT
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Service - Async HTTP client for the version backend
# PURPOSE: Fetch application, environment and deployment snapshots
# CREATED: 19 OCT 2026
# ============================================================================
"""
Backend HTTP Client

Async httpx client for the version backend, which owns applications,
environments, instances and deployments.

Endpoints (paths configurable via BackendDefaults):
    GET /applications  -> [Application] or {"applications": [...]}
    GET /environments  -> [Environment] or {"environments": [...]}
    GET /versions      -> [VersionCell] or {"cells": [...], "latest": [...]}

Failures are raised as BackendError subclasses. A failed fetch is never
turned into an empty snapshot - callers must see the failure.
"""

import asyncio
from typing import Any, List, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from core.config import BackendDefaults, get_defaults
from core.logging import get_logger, ComponentType
from core.models import (
    Application,
    Environment,
    LatestVersion,
    TrackingSnapshot,
    VersionCell,
)

logger = get_logger(__name__, ComponentType.CLIENT)

ModelT = TypeVar("ModelT", bound=BaseModel)


# ============================================================================
# ERRORS
# ============================================================================

class BackendError(Exception):
    """Base class for version backend failures."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class BackendUnavailableError(BackendError):
    """Backend could not be reached."""


class BackendTimeoutError(BackendError):
    """Backend did not answer in time."""


class BackendResponseError(BackendError):
    """Backend answered with an error status or an unusable body."""

    def __init__(self, message: str, path: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message, path)
        self.status_code = status_code


# ============================================================================
# CLIENT
# ============================================================================

class BackendClient:
    """Async HTTP client for the version backend."""

    def __init__(
        self,
        config: Optional[BackendDefaults] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or get_defaults().backend
        self._transport = transport
        self._timeout = httpx.Timeout(
            self.config.read_timeout,
            connect=self.config.connect_timeout,
        )

    @property
    def base_url(self) -> str:
        return self.config.base_url.rstrip("/")

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def _get_json(self, client: httpx.AsyncClient, path: str) -> Any:
        """
        GET a path and decode the JSON body.

        Raises:
            BackendUnavailableError: connection failed
            BackendTimeoutError: request timed out
            BackendResponseError: status >= 400 or body is not JSON
        """
        try:
            resp = await client.get(path)
        except httpx.TimeoutException as e:
            logger.error(f"Backend timeout: {self.base_url}{path}: {e}")
            raise BackendTimeoutError(f"Backend timed out on {path}", path) from e
        except httpx.HTTPError as e:
            logger.error(f"Cannot reach backend at {self.base_url}{path}: {e}")
            raise BackendUnavailableError(f"Backend unreachable: {e}", path) from e

        if resp.status_code >= 400:
            logger.error(f"Backend error {resp.status_code}: {path} -> {resp.text[:200]}")
            raise BackendResponseError(
                f"Backend returned {resp.status_code} for {path}",
                path,
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as e:
            raise BackendResponseError(
                f"Backend returned invalid JSON for {path}",
                path,
                status_code=resp.status_code,
            ) from e

    @staticmethod
    def _unwrap(payload: Any, key: str, path: str) -> List[Any]:
        """Accept a bare list, a {key: [...]} envelope, or null (empty)."""
        if payload is None:
            return []
        if isinstance(payload, list):
            return payload
        if isinstance(payload, dict) and key in payload:
            return payload[key] or []
        raise BackendResponseError(f"Unexpected payload shape for {path}", path)

    @staticmethod
    def _validate(model: Type[ModelT], items: List[Any], path: str) -> List[ModelT]:
        try:
            return TypeAdapter(List[model]).validate_python(items)
        except ValidationError as e:
            logger.error(f"Invalid {model.__name__} records from {path}: {e.error_count()} errors")
            raise BackendResponseError(
                f"Invalid {model.__name__} records from {path}",
                path,
            ) from e

    # ------------------------------------------------------------------
    # LISTS
    # ------------------------------------------------------------------

    async def _fetch_applications(self, client: httpx.AsyncClient) -> List[Application]:
        path = self.config.applications_path
        payload = await self._get_json(client, path)
        return self._validate(Application, self._unwrap(payload, "applications", path), path)

    async def _fetch_environments(self, client: httpx.AsyncClient) -> List[Environment]:
        path = self.config.environments_path
        payload = await self._get_json(client, path)
        return self._validate(Environment, self._unwrap(payload, "environments", path), path)

    async def _fetch_versions(
        self, client: httpx.AsyncClient
    ) -> Tuple[List[VersionCell], List[LatestVersion]]:
        path = self.config.versions_path
        payload = await self._get_json(client, path)

        cells = self._validate(VersionCell, self._unwrap(payload, "cells", path), path)
        latest: List[LatestVersion] = []
        if isinstance(payload, dict) and payload.get("latest"):
            latest = self._validate(LatestVersion, payload["latest"], path)
        return cells, latest

    async def list_applications(self) -> List[Application]:
        """GET applications"""
        async with self._client() as client:
            return await self._fetch_applications(client)

    async def list_environments(self) -> List[Environment]:
        """GET environments"""
        async with self._client() as client:
            return await self._fetch_environments(client)

    async def list_versions(self) -> Tuple[List[VersionCell], List[LatestVersion]]:
        """GET versions -> (cells, latest versions)"""
        async with self._client() as client:
            return await self._fetch_versions(client)

    # ------------------------------------------------------------------
    # SNAPSHOT
    # ------------------------------------------------------------------

    async def fetch_snapshot(self) -> TrackingSnapshot:
        """
        Fetch every record needed for one dashboard build.

        The three lists are requested concurrently. Any failure aborts the
        whole snapshot.
        """
        async with self._client() as client:
            applications, environments, (cells, latest) = await asyncio.gather(
                self._fetch_applications(client),
                self._fetch_environments(client),
                self._fetch_versions(client),
            )

        return TrackingSnapshot(
            applications=applications,
            environments=environments,
            cells=cells,
            latest=latest,
        )

    async def ping(self) -> bool:
        """True when the backend answers the applications endpoint."""
        try:
            async with self._client() as client:
                await self._get_json(client, self.config.applications_path)
            return True
        except BackendError as e:
            logger.warning(f"Backend ping failed: {e}")
            return False


__all__ = [
    "BackendClient",
    "BackendError",
    "BackendUnavailableError",
    "BackendTimeoutError",
    "BackendResponseError",
]
