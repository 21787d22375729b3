"""
Backend for chat triage: service wiring, gateway handler, HTTP server, CLI.
"""

from .gateway import InboundMessage, MessageGateway, OutboundReply, TriageHandler
from .triage_service import TriageService, create_triage_service, format_reply

__all__ = [
    "InboundMessage",
    "MessageGateway",
    "OutboundReply",
    "TriageHandler",
    "TriageService",
    "create_triage_service",
    "format_reply",
]
