"""
One-shot triage from the command line.

Usage:
    python -m backend.cli "payments API returns 502 for everyone"
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from chatops.core.config import load_config
from chatops.core.exceptions import ConfigurationError, TriageError
from chatops.core.logging_config import setup_logging

from .triage_service import create_triage_service, format_reply

logger = logging.getLogger("backend.cli")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Classify a single chat message")
    parser.add_argument("message", help="Chat message text to triage")
    args = parser.parse_args(argv)

    load_dotenv()
    try:
        config = load_config()
        setup_logging(config)
        service = create_triage_service(config)
    except ConfigurationError as exc:
        logger.error("startup failed: %s", exc)
        return 1

    try:
        result = service.triage(args.message)
    except TriageError as exc:
        logger.error("cannot triage: %s", exc)
        return 1

    print(f"Message: {args.message}")
    print(format_reply(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
