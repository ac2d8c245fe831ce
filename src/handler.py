from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from src.adapters.api.dependencies import build_bus_filter_service
from src.adapters.api.schemas.buses import BusResultSchema
from src.adapters.settings import BusStopSettings
from src.domain.exceptions import ConfigurationError, UpstreamFetchError

logger = logging.getLogger(__name__)


def _response(status_code: int, body: Any) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def handler(event: Any = None, context: Any = None) -> dict[str, Any]:
    """AWS Lambda entry point behind an HTTP API route (GET /buses)."""

    try:
        settings = BusStopSettings.from_env()
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return _response(500, {"message": str(exc)})

    service = build_bus_filter_service(settings)

    try:
        buses = asyncio.run(service.approaching_buses())
    except UpstreamFetchError as exc:
        logger.error("Failed to fetch vehicle feed: %s", exc)
        return _response(502, {"message": str(exc)})
    except Exception:
        logger.exception("Unhandled error while filtering buses")
        return _response(500, {"message": "Internal Server Error"})

    return _response(
        200,
        [
            BusResultSchema.from_domain(bus).model_dump(mode="json", by_alias=True)
            for bus in buses
        ],
    )


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    result = handler({}, None)
    print(f"Status Code: {result['statusCode']}")
    print(f"Body: {json.dumps(json.loads(result['body']), indent=2)}")


if __name__ == "__main__":
    main()
