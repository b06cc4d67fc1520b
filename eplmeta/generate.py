import asyncio
import contextlib
import json
import logging
from pathlib import Path

import aiofiles
import httpx
from pydantic import BaseModel

from eplmeta.artifacts import LibraryOverride, collect_overrides
from eplmeta.config import GeneratorConfig, INJECTOR_EXTRA_KEY, LIBRARY_ID
from eplmeta.errors import GeneratorError
from eplmeta.injector import probe_injector
from eplmeta.metadata import fetch_metadata_versions
from eplmeta.versions import resolve_versions

logger = logging.getLogger(__name__)


class OverridesDocument(BaseModel):
    overrides: dict[str, dict[str, LibraryOverride]]
    extras: dict[str, str] | None = None

    def to_json(self) -> str:
        return json.dumps(self.model_dump(exclude_none=True), indent=2)


def build_document(
    overrides: dict[str, LibraryOverride], injector_url: str | None = None
) -> OverridesDocument:
    return OverridesDocument(
        overrides={LIBRARY_ID: overrides},
        extras={INJECTOR_EXTRA_KEY: injector_url} if injector_url else None,
    )


async def write_document(document: OverridesDocument, path: Path) -> None:
    logger.info(f"Writing overrides to '{path}'")
    try:
        async with aiofiles.open(path, 'w') as f:
            await f.write(document.to_json())
    except OSError as e:
        raise GeneratorError(f"Couldn't write '{path}': {e}") from e


async def generate(
    config: GeneratorConfig, client: httpx.AsyncClient | None = None
) -> OverridesDocument:
    if client is None:
        async with config.create_client() as client:
            return await generate(config, client)

    # started first so its latency overlaps the metadata download
    injector_probe = asyncio.create_task(
        probe_injector(client, config.injector_download_url)
    )
    try:
        full_versions = await fetch_metadata_versions(client, config.metadata_url)
        versions = resolve_versions(full_versions)
        logger.info(
            f"Resolved authlib versions: {', '.join(x for x, _ in versions) or 'none'}"
        )
        overrides = await collect_overrides(
            client,
            config.authlib_download_url_format,
            versions,
            config.max_concurrency,
        )
        await injector_probe
    finally:
        injector_probe.cancel()
        with contextlib.suppress(asyncio.CancelledError, GeneratorError):
            await injector_probe

    document = build_document(overrides, config.injector_download_url)
    await write_document(document, config.output_file)
    logger.info(f'Generated {len(overrides)} of {len(versions)} overrides')
    return document


__all__ = ['OverridesDocument', 'build_document', 'write_document', 'generate']
