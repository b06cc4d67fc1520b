import asyncio
import contextlib
import logging

import httpx
from pydantic import BaseModel

from eplmeta.config import ARTIFACT_PREFIX, HTTP_ERRORS, VERSION_PLACEHOLDER
from eplmeta.utils import hash_bytes

logger = logging.getLogger(__name__)


class LibraryOverride(BaseModel):
    name: str
    url: str
    sha1: str
    size: int


def build_download_url(url_format: str, full_version: str) -> str:
    return url_format.replace(VERSION_PLACEHOLDER, full_version)


async def fetch_override(
    client: httpx.AsyncClient, url_format: str, full_version: str
) -> LibraryOverride:
    url = build_download_url(url_format, full_version)
    logger.info(f"Downloading '{url}'")
    resp = await client.get(url)
    resp.raise_for_status()
    content = resp.content
    return LibraryOverride(
        name=f'{ARTIFACT_PREFIX}:{full_version}',
        url=url,
        sha1=hash_bytes(content),
        size=len(content),
    )


async def collect_overrides(
    client: httpx.AsyncClient,
    url_format: str,
    versions: list[tuple[str, str]],
    max_concurrency: int | None = None,
) -> dict[str, LibraryOverride]:
    """
    Downloads every build in ``versions`` (``(short, full)`` pairs) at once.

    A failed download is logged and left out of the result, the rest of the
    batch is unaffected. The result keeps the order of ``versions``.
    """
    semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None

    async def fetch(full_version: str) -> LibraryOverride:
        async with semaphore or contextlib.nullcontext():
            return await fetch_override(client, url_format, full_version)

    results = await asyncio.gather(
        *(fetch(full_version) for _, full_version in versions),
        return_exceptions=True,
    )

    overrides: dict[str, LibraryOverride] = {}
    for (authlib_version, full_version), result in zip(versions, results):
        if isinstance(result, HTTP_ERRORS):
            logger.warning(
                f"Couldn't create library metadata for '{authlib_version}' "
                f"({full_version}): {result}"
            )
            continue
        if isinstance(result, BaseException):
            raise result
        overrides[authlib_version] = result
    return overrides


__all__ = [
    'LibraryOverride',
    'build_download_url',
    'fetch_override',
    'collect_overrides',
]
