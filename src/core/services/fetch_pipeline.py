"""Orquestación del pipeline validar -> obtener -> presentar.

The CLI owns every side effect (printing) and passes it in through
`PipelineHooks`, so the same flow runs unchanged from tests or other
entry-points. This module is the single catch boundary for the whole
system: stage errors are reported once and never re-raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from core.domain.models import JSONValue
from core.errors import ApiFetcherError
from core.interfaces.fetcher import JSONFetcher
from core.services.url_validator import validate_url

logger = logging.getLogger(__name__)


@dataclass
class PipelineHooks:
    """Callbacks for the UI layer."""

    present: Callable[[JSONValue], None]
    error: Callable[[str], None]


async def run(url: str, *, fetcher: JSONFetcher, hooks: PipelineHooks) -> bool:
    """Run one fetch against `url`.

    Returns True when the payload was presented, False after a failure was
    reported through `hooks.error`. Nothing is presented on failure.
    """

    try:
        validated = validate_url(url)
        data = await fetcher.fetch(validated)
    except ApiFetcherError as exc:
        logger.debug("pipeline failed: %s", exc.message)
        hooks.error(exc.message)
        return False

    hooks.present(data)
    logger.info("pipeline finished for %s", validated)
    return True
