import logging

import httpx

from eplmeta.config import HTTP_ERRORS
from eplmeta.errors import GeneratorError

logger = logging.getLogger(__name__)


async def probe_injector(client: httpx.AsyncClient, url: str) -> None:
    logger.info(f"Checking authlib-injector at '{url}'")
    try:
        # only the status matters, the body is never read
        async with client.stream('GET', url) as resp:
            resp.raise_for_status()
    except HTTP_ERRORS as e:
        raise GeneratorError(f"Couldn't retrieve authlib-injector: {e}") from e


__all__ = ['probe_injector']
