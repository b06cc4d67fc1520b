from dataclasses import dataclass
from pathlib import Path

import httpx

# key of the library being replaced in the launcher's override file
LIBRARY_ID = 'com.mojang:authlib'
ARTIFACT_PREFIX = 'by.ely:authlib'
INJECTOR_EXTRA_KEY = 'authlib-injector'
VERSION_PLACEHOLDER = '{}'

# InvalidURL is not an HTTPError subclass
HTTP_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


@dataclass
class GeneratorConfig:
    metadata_url: str
    authlib_download_url_format: str
    injector_download_url: str
    output_file: Path
    timeout: float | None = None
    max_concurrency: int | None = None

    def __post_init__(self):
        self.output_file = Path(self.output_file)
        if self.max_concurrency is not None and self.max_concurrency < 1:
            raise ValueError('max_concurrency must be at least 1')

    def create_client(self, **kwargs) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            follow_redirects=True, timeout=self.timeout, **kwargs
        )


__all__ = [
    'GeneratorConfig',
    'LIBRARY_ID',
    'ARTIFACT_PREFIX',
    'INJECTOR_EXTRA_KEY',
    'VERSION_PLACEHOLDER',
    'HTTP_ERRORS',
]
