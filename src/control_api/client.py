"""HTTP RPC client for the control API."""

from typing import Any

import httpx
import structlog

from .base import Model, Validatable
from .config import Settings, get_settings
from .disk import (
    Disk,
    DiskCreate,
    DiskDelete,
    DiskGet,
    DiskItem,
    DiskList,
    DiskListResult,
    DiskMetrics,
    DiskMetricsResult,
    DiskUpdate,
)
from .errors import APIError
from .log import setup_logging
from .service_account import (
    ServiceAccount,
    ServiceAccountCreate,
    ServiceAccountCreateKey,
    ServiceAccountDelete,
    ServiceAccountDeleteKey,
    ServiceAccountGet,
    ServiceAccountGetResult,
    ServiceAccountKey,
    ServiceAccountList,
    ServiceAccountListResult,
    ServiceAccountUpdate,
)
from .types import Empty


logger = structlog.get_logger()


class Client:
    """
    Transport for ``<endpoint>/<method>`` RPC calls.

    Requests are posted as JSON. Responses are envelopes of the form
    ``{"ok": true, "result": {...}}`` or
    ``{"ok": false, "error": {"code": "...", "message": "..."}}``.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.settings.endpoint,
                headers={
                    "Authorization": f"Bearer {self.settings.token}",
                    "Content-Type": "application/json",
                },
                timeout=self.settings.timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def invoke(self, method: str, m: Model, *, timeout: float | None = None) -> dict[str, Any]:
        """Validate ``m`` and post it to ``method``.

        Raises the request's validation error before anything is sent.
        ``timeout`` overrides the configured timeout for this call.
        """
        if isinstance(m, Validatable):
            err = m.valid()
            if err is not None:
                logger.info("rpc_request_invalid", method=method, error=str(err))
                raise err

        logger.debug("rpc_call", method=method)
        if timeout is None:
            response = self.client.post(f"/{method}", json=m.to_dict())
        else:
            response = self.client.post(f"/{method}", json=m.to_dict(), timeout=timeout)
        return self._handle_response(method, response)

    def _handle_response(self, method: str, response: httpx.Response) -> dict[str, Any]:
        """Unwrap the response envelope, raising APIError on failure."""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and "ok" in body:
            if body["ok"]:
                return body.get("result") or {}
            error = body.get("error") or {}
            status_code = response.status_code if response.status_code >= 400 else 400
            err = APIError(
                status_code,
                error.get("message") or f"HTTP {response.status_code}",
                error.get("code", ""),
            )
        elif response.status_code >= 400:
            err = APIError(response.status_code, response.text or f"HTTP {response.status_code}")
        else:
            return body if isinstance(body, dict) else {}

        logger.warning(
            "rpc_call_failed",
            method=method,
            status_code=err.status_code,
            code=err.code,
            error=err.message,
        )
        raise err


class DiskClient(Disk):
    def __init__(self, client: Client):
        self._client = client

    def create(self, m: DiskCreate, *, timeout: float | None = None) -> Empty:
        return Empty.model_validate(self._client.invoke("disk.create", m, timeout=timeout))

    def get(self, m: DiskGet, *, timeout: float | None = None) -> DiskItem:
        return DiskItem.model_validate(self._client.invoke("disk.get", m, timeout=timeout))

    def list(self, m: DiskList, *, timeout: float | None = None) -> DiskListResult:
        return DiskListResult.model_validate(self._client.invoke("disk.list", m, timeout=timeout))

    def update(self, m: DiskUpdate, *, timeout: float | None = None) -> Empty:
        return Empty.model_validate(self._client.invoke("disk.update", m, timeout=timeout))

    def delete(self, m: DiskDelete, *, timeout: float | None = None) -> Empty:
        return Empty.model_validate(self._client.invoke("disk.delete", m, timeout=timeout))

    def metrics(self, m: DiskMetrics, *, timeout: float | None = None) -> DiskMetricsResult:
        return DiskMetricsResult.model_validate(
            self._client.invoke("disk.metrics", m, timeout=timeout)
        )


class ServiceAccountClient(ServiceAccount):
    def __init__(self, client: Client):
        self._client = client

    def create(self, m: ServiceAccountCreate, *, timeout: float | None = None) -> Empty:
        return Empty.model_validate(
            self._client.invoke("serviceAccount.create", m, timeout=timeout)
        )

    def get(
        self, m: ServiceAccountGet, *, timeout: float | None = None
    ) -> ServiceAccountGetResult:
        return ServiceAccountGetResult.model_validate(
            self._client.invoke("serviceAccount.get", m, timeout=timeout)
        )

    def list(
        self, m: ServiceAccountList, *, timeout: float | None = None
    ) -> ServiceAccountListResult:
        return ServiceAccountListResult.model_validate(
            self._client.invoke("serviceAccount.list", m, timeout=timeout)
        )

    def update(self, m: ServiceAccountUpdate, *, timeout: float | None = None) -> Empty:
        return Empty.model_validate(
            self._client.invoke("serviceAccount.update", m, timeout=timeout)
        )

    def delete(self, m: ServiceAccountDelete, *, timeout: float | None = None) -> Empty:
        return Empty.model_validate(
            self._client.invoke("serviceAccount.delete", m, timeout=timeout)
        )

    def create_key(
        self, m: ServiceAccountCreateKey, *, timeout: float | None = None
    ) -> ServiceAccountKey:
        return ServiceAccountKey.model_validate(
            self._client.invoke("serviceAccount.createKey", m, timeout=timeout)
        )

    def delete_key(self, m: ServiceAccountDeleteKey, *, timeout: float | None = None) -> Empty:
        return Empty.model_validate(
            self._client.invoke("serviceAccount.deleteKey", m, timeout=timeout)
        )


def get_client() -> Client:
    """Get a configured API client."""
    settings = get_settings()
    errors = settings.validate_config()
    if errors:
        raise ValueError("\n".join(errors))
    setup_logging(settings.debug)
    logger.debug(
        "client_configured",
        endpoint=settings.endpoint,
        token=Settings.mask_token(settings.token),
    )
    return Client(settings)
