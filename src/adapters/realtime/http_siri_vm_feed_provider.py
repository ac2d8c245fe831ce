from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any

import httpx

from src.app.ports.output import IVehicleFeedProvider
from src.domain.exceptions import UpstreamFetchError
from src.domain.models import FeedSnapshot

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    # "{http://www.siri.org.uk/siri}LineRef" -> "LineRef"
    return tag.rsplit("}", 1)[-1]


def _first_element(node: ET.Element | None, name: str) -> ET.Element | None:
    if node is None:
        return None
    return next((el for el in node.iter() if _local_name(el.tag) == name), None)


def _child_text(node: ET.Element | None, name: str) -> str | None:
    if node is None:
        return None
    for child in node:
        if _local_name(child.tag) == name:
            return (child.text or "").strip() or None
    return None


def element_to_tree(element: ET.Element) -> Any:
    """Convert an element into a record tree.

    Leaf elements become their text; other elements become a dict of child
    name -> subtree, with repeated child names collected into a list.
    """

    children = list(element)
    if not children:
        return (element.text or "").strip()

    out: dict[str, Any] = {}
    for child in children:
        name = _local_name(child.tag)
        value = element_to_tree(child)
        if name not in out:
            out[name] = value
        elif isinstance(out[name], list):
            out[name].append(value)
        else:
            out[name] = [out[name], value]
    return out


def parse_siri_vm(content: bytes) -> FeedSnapshot:
    """Parse a SIRI-VM document into a snapshot.

    A well-formed document without vehicle activities yields an empty snapshot.
    """

    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise UpstreamFetchError("Vehicle feed is not valid XML") from exc

    activities: list[dict[str, Any]] = []

    service_delivery = _first_element(root, "ServiceDelivery")
    vm_deliveries = [
        el for el in root.iter() if _local_name(el.tag) == "VehicleMonitoringDelivery"
    ]
    # The delivery carrying the activities stamps the snapshot.
    vm_delivery = next(
        (
            d
            for d in vm_deliveries
            if _first_element(d, "VehicleActivity") is not None
        ),
        vm_deliveries[0] if vm_deliveries else None,
    )
    response_timestamp = _child_text(vm_delivery, "ResponseTimestamp") or _child_text(
        service_delivery, "ResponseTimestamp"
    )

    for element in root.iter():
        if _local_name(element.tag) != "VehicleActivity":
            continue
        tree = element_to_tree(element)
        if isinstance(tree, dict):
            activities.append(tree)

    return FeedSnapshot(
        response_timestamp=response_timestamp,
        activities=tuple(activities),
    )


@dataclass(slots=True)
class HttpSiriVmFeedProvider(IVehicleFeedProvider):
    """Fetches a SIRI-VM vehicle monitoring datafeed over HTTP.

    The access key is sent as the `api_key` query parameter and is never
    logged or included in errors.
    """

    url: str
    api_key: str = field(repr=False)
    timeout_s: float = 10.0
    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False)

    async def fetch_snapshot(self) -> FeedSnapshot:
        logger.info("Fetching vehicle feed from %s?api_key=***", self.url)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_s, transport=self.transport
            ) as client:
                resp = await client.get(self.url, params={"api_key": self.api_key})
                resp.raise_for_status()
                content = resp.content
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.error("Vehicle feed returned HTTP %d", status)
            raise UpstreamFetchError(
                f"Vehicle feed returned HTTP {status}"
            ) from None
        except httpx.HTTPError as exc:
            logger.error("Vehicle feed request failed: %s", type(exc).__name__)
            raise UpstreamFetchError(
                f"Vehicle feed request failed ({type(exc).__name__})"
            ) from None

        logger.info("Parsing vehicle feed XML (%d bytes)", len(content))
        return parse_siri_vm(content)
