import logging
import xml.etree.ElementTree as ET

import httpx

from eplmeta.config import HTTP_ERRORS
from eplmeta.errors import GeneratorError

logger = logging.getLogger(__name__)


def parse_metadata_versions(text: str) -> list[str]:
    """Return the ``metadata/versioning/versions/version`` values in document order."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise GeneratorError(f"Couldn't parse Maven metadata: {e}") from e

    if root.tag.rpartition('}')[2] != 'metadata':
        raise GeneratorError(
            f"Couldn't parse Maven metadata: unexpected root element '{root.tag}'"
        )
    versioning = root.find('{*}versioning')
    if versioning is None:
        raise GeneratorError("Couldn't parse Maven metadata: no <versioning> element")
    versions = versioning.find('{*}versions')
    if versions is None:
        raise GeneratorError("Couldn't parse Maven metadata: no <versions> element")

    res = []
    for version in versions.findall('{*}version'):
        if version.text and version.text.strip():
            res.append(version.text.strip())
    return res


async def fetch_metadata_versions(client: httpx.AsyncClient, url: str) -> list[str]:
    logger.info(f"Fetching Maven metadata from '{url}'")
    try:
        resp = await client.get(url)
        resp.raise_for_status()
    except HTTP_ERRORS as e:
        raise GeneratorError(f"Couldn't download Maven metadata: {e}") from e

    versions = parse_metadata_versions(resp.text)
    logger.info(f'Found {len(versions)} published versions')
    return versions


__all__ = ['parse_metadata_versions', 'fetch_metadata_versions']
