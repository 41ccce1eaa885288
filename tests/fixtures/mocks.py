"""
Mock objects for testing.

These mocks stand in for the zeep-backed transport and the SOAP faults it raises.
"""

from typing import Any

from lxml import etree
from zeep.exceptions import Fault

from .builders import CM_NAMESPACE, build_campaign_registry

XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"


class MockTransport:
    """Records calls and answers them with canned replies."""

    def __init__(self, registry=None, replies: list[Any] | None = None):
        self.registry = registry if registry is not None else build_campaign_registry()
        self.client = None
        self.replies = list(replies or [])
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.messages: list[tuple[str, dict[str, Any]]] = []
        self.error: Exception | None = None

    def add_reply(self, reply: Any) -> None:
        self.replies.append(reply)

    def call(self, method: str, arguments: dict[str, Any]) -> Any:
        self.calls.append((method, arguments))
        if self.error is not None:
            raise self.error
        if self.replies:
            return self.replies.pop(0)
        return None

    def create_message(self, method: str, arguments: dict[str, Any]) -> str:
        self.messages.append((method, arguments))
        return f"<soap:Envelope><{method}/></soap:Envelope>"


def build_fault_detail(*errors: dict[str, Any]) -> Any:
    """Build an ApiExceptionFault detail element with one ``errors`` child per map.

    Each map needs an ``xsi_type`` key; the other keys become child elements.
    """
    nsmap = {"ns0": CM_NAMESPACE, "xsi": XSI_NAMESPACE}
    detail = etree.Element("detail")
    fault = etree.SubElement(detail, f"{{{CM_NAMESPACE}}}ApiExceptionFault", nsmap=nsmap)
    etree.SubElement(fault, f"{{{CM_NAMESPACE}}}message").text = "[CampaignError.DUPLICATE_CAMPAIGN_NAME]"
    etree.SubElement(fault, f"{{{CM_NAMESPACE}}}ApplicationException.Type").text = "ApiException"

    for error in errors:
        node = etree.SubElement(fault, f"{{{CM_NAMESPACE}}}errors")
        node.set(f"{{{XSI_NAMESPACE}}}type", f"ns0:{error['xsi_type']}")
        for name, value in error.items():
            if name == "xsi_type":
                continue
            etree.SubElement(node, f"{{{CM_NAMESPACE}}}{name}").text = str(value)
    return detail


def build_fault(*errors: dict[str, Any], message: str = "[CampaignError.DUPLICATE_CAMPAIGN_NAME]") -> Fault:
    return Fault(message, code="soap:Server", detail=build_fault_detail(*errors))
