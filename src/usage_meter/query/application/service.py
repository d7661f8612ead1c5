"""QueryService — routes named requests and maps every outcome to one response."""

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import TypeVar

from usage_meter.accounting.application.accountant import UsageAccountant
from usage_meter.core.errors import UsageMeterError
from usage_meter.counter.infrastructure.errors import QueryFailedError
from usage_meter.permission.domain.gate import PermissionGate
from usage_meter.query.domain.envelope import (
    Failure,
    NotImplementedResponse,
    RequestEnvelope,
    ResponseEnvelope,
    Success,
)
from usage_meter.query.domain.mode import NetworkStatsMode
from usage_meter.query.domain.observer import QueryObserver

_T = TypeVar("_T")

GET_NETWORK_STATS = "getNetworkStats"
CHECK_USAGE_STATS_PERMISSION = "checkUsageStatsPermission"
REQUEST_USAGE_STATS_PERMISSION = "requestUsageStatsPermission"

_DEFAULT_TIMEOUT_SECONDS = 0.3


class QueryService:
    """Stateless request/response handler in front of the accountant and permission gate.

    handle() never raises: a request always ends in Success, Failure or
    NotImplementedResponse. The permission methods always succeed: a gate
    fault reads as not granted, and a failed request launch is only logged.
    Counter reads run in a worker thread bounded by ``timeout_seconds``;
    exceeding it is reported as a failed query.
    """

    def __init__(
        self,
        accountant: UsageAccountant,
        permission_gate: PermissionGate,
        observer: QueryObserver,
        network_stats_mode: NetworkStatsMode = NetworkStatsMode.CUMULATIVE,
        timeout_seconds: float = _DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._accountant = accountant
        self._permission_gate = permission_gate
        self._observer = observer
        self._network_stats_mode = network_stats_mode
        self._timeout_seconds = timeout_seconds
        self._routes: dict[str, Callable[[], Awaitable[ResponseEnvelope]]] = {
            GET_NETWORK_STATS: self._get_network_stats,
            CHECK_USAGE_STATS_PERMISSION: self._check_usage_stats_permission,
            REQUEST_USAGE_STATS_PERMISSION: self._request_usage_stats_permission,
        }

    @property
    def methods(self) -> list[str]:
        return list(self._routes)

    async def handle(self, request: RequestEnvelope) -> ResponseEnvelope:
        """Dispatch *request* and return its single response envelope."""
        method = request.method
        self._observer.request_received(method=method)
        started_at = time.monotonic()

        route = self._routes.get(method)
        if route is None:
            self._observer.method_not_implemented(method=method)
            return NotImplementedResponse()

        try:
            response = await route()
        except UsageMeterError as exc:
            self._observer.request_failed(method=method, code=exc.code, reason=str(exc))
            response = Failure(code=exc.code, message=str(exc))
        except Exception as exc:  # noqa: BLE001
            reason = f"unexpected error: {exc}"
            self._observer.request_failed(method=method, code="UNAVAILABLE", reason=reason)
            response = Failure(code="UNAVAILABLE", message=f"Failed to handle {method}: {reason}")

        self._observer.request_completed(
            method=method,
            status=response.to_dict()["status"],
            duration_ms=int((time.monotonic() - started_at) * 1000),
        )
        return response

    async def _get_network_stats(self) -> ResponseEnvelope:
        if self._network_stats_mode == NetworkStatsMode.WINDOWED:
            total = await self._bounded(self._accountant.get_windowed_total)
            return Success(total)
        report = await self._bounded(self._accountant.get_simple_report)
        return Success(report.to_channel())

    async def _check_usage_stats_permission(self) -> ResponseEnvelope:
        # A gate that cannot answer counts as not granted.
        try:
            granted = self._permission_gate.has_usage_permission()
        except Exception as exc:  # noqa: BLE001
            self._observer.request_failed(
                method=CHECK_USAGE_STATS_PERMISSION,
                code="UNAVAILABLE",
                reason=f"unexpected error: {exc}",
            )
            return Success(False)
        return Success(granted)

    async def _request_usage_stats_permission(self) -> ResponseEnvelope:
        try:
            self._permission_gate.request_usage_permission()
        except Exception as exc:  # noqa: BLE001
            self._observer.request_failed(
                method=REQUEST_USAGE_STATS_PERMISSION,
                code="UNAVAILABLE",
                reason=f"unexpected error: {exc}",
            )
        return Success(None)

    async def _bounded(self, read: Callable[[], _T]) -> _T:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(read), timeout=self._timeout_seconds
            )
        except TimeoutError as exc:
            raise QueryFailedError(
                reason=f"counter read exceeded {round(self._timeout_seconds * 1000)} ms"
            ) from exc
