"""Request middleware: CORS headers, error recovery and access logging."""

from __future__ import annotations

import logging
import sys
import time
from datetime import datetime, timedelta
from typing import Any

from flask import Flask, g, jsonify, request

from taskapi.models import ErrorResponse

log = logging.getLogger("taskapi")

ALLOW_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")
ALLOW_HEADERS = (
    "Origin",
    "Content-Length",
    "Content-Type",
    "Authorization",
    "X-Requested-With",
    "Accept",
    "Cache-Control",
)
EXPOSE_HEADERS = ("Content-Length", "X-Request-ID")
MAX_AGE = 86400

_START_NS = "_taskapi_start_ns"
_STARTED_AT = "_taskapi_started_at"


def _is_cors_request() -> bool:
    origin = request.headers.get("Origin", "")
    if not origin:
        return False
    host = request.host
    return origin not in (f"http://{host}", f"https://{host}")


def _common_cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Origin": "*",
    }


def install_cors(app: Flask) -> None:
    """Allow cross-origin requests from any origin, with credentials."""

    @app.before_request
    def _answer_preflight():
        if request.method != "OPTIONS" or not _is_cors_request():
            return None
        response = app.response_class(status=204)
        headers = _common_cors_headers()
        headers["Access-Control-Allow-Methods"] = ",".join(ALLOW_METHODS)
        headers["Access-Control-Allow-Headers"] = ",".join(ALLOW_HEADERS)
        headers["Access-Control-Max-Age"] = str(MAX_AGE)
        for name, value in headers.items():
            response.headers[name] = value
        return response

    @app.after_request
    def _add_cors_headers(response):
        if request.method != "OPTIONS" and _is_cors_request():
            headers = _common_cors_headers()
            headers["Access-Control-Expose-Headers"] = ",".join(EXPOSE_HEADERS)
            for name, value in headers.items():
                response.headers[name] = value
        return response


def _is_http_error(exc: BaseException) -> bool:
    return isinstance(getattr(exc, "code", None), int) and hasattr(exc, "get_response")


def install_error_handler(app: Flask) -> None:
    """Turn unexpected exceptions into a JSON 500 response."""

    def _recover(exc: Exception):
        if _is_http_error(exc):
            return exc
        log.error("Panic recovered: %s", exc)
        body = ErrorResponse("Internal server error", "An unexpected error occurred")
        return jsonify(body.to_dict()), 500

    app.register_error_handler(Exception, _recover)


def _fraction(value: int, unit: int) -> str:
    whole, rest = divmod(value, unit)
    if not rest:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{rest:0{digits}d}".rstrip("0")


def _format_duration(ns: int) -> str:
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    ns = abs(ns)
    if ns < 1_000:
        body = f"{ns}ns"
    elif ns < 1_000_000:
        body = _fraction(ns, 1_000) + "µs"
    elif ns < 1_000_000_000:
        body = _fraction(ns, 1_000_000) + "ms"
    else:
        minutes, rest = divmod(ns, 60_000_000_000)
        hours, minutes = divmod(minutes, 60)
        seconds = _fraction(rest, 1_000_000_000) + "s"
        if hours:
            body = f"{hours}h{minutes}m{seconds}"
        elif minutes:
            body = f"{minutes}m{seconds}"
        else:
            body = seconds
    return sign + body


def _to_ns(latency: timedelta | int) -> int:
    if isinstance(latency, timedelta):
        return latency // timedelta(microseconds=1) * 1_000
    return int(latency)


def format_access_line(
    timestamp: datetime,
    method: str,
    path: str,
    status: int,
    latency: timedelta | int,
    client_ip: str,
    error_message: str,
) -> str:
    """Render one access-log line; latency is a timedelta or nanoseconds."""
    return (
        f"[{timestamp:%Y-%m-%d %H:%M:%S}] {method} {path} {status} "
        f"{_format_duration(_to_ns(latency))} {client_ip} {error_message}\n"
    )


def _mark_start() -> None:
    g.setdefault(_START_NS, time.perf_counter_ns())
    g.setdefault(_STARTED_AT, datetime.now().astimezone())


def _elapsed_ns() -> int:
    start = g.get(_START_NS)
    if start is None:
        return 0
    return time.perf_counter_ns() - start


def _query_string() -> str:
    return request.query_string.decode("latin-1")


def install_logger(app: Flask) -> None:
    """Write one access line per request to standard output."""

    @app.before_request
    def _start_timer():
        _mark_start()

    @app.after_request
    def _write_access_line(response):
        path = request.path
        query = _query_string()
        if query:
            path = f"{path}?{query}"
        sys.stdout.write(
            format_access_line(
                datetime.now(),
                request.method,
                path,
                response.status_code,
                _elapsed_ns(),
                request.remote_addr or "",
                "",
            )
        )
        return response


def _go_map(data: dict[str, Any]) -> str:
    return "map[" + " ".join(f"{key}:{data[key]}" for key in sorted(data)) + "]"


def install_structured_logger(app: Flask) -> None:
    """Log request details as key/value pairs through the logging module."""

    @app.before_request
    def _start_timer():
        _mark_start()

    @app.after_request
    def _log_request(response):
        started_at = g.get(_STARTED_AT) or datetime.now().astimezone()
        data = {
            "timestamp": started_at.isoformat(timespec="seconds"),
            "method": request.method,
            "path": request.path,
            "query": _query_string(),
            "status": response.status_code,
            "latency": _format_duration(_elapsed_ns()),
            "client_ip": request.remote_addr or "",
            "user_agent": request.user_agent.string,
        }
        log.info("API Request: %s", _go_map(data))
        return response