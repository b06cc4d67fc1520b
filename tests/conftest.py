from typing import Callable

import httpx
import pytest

from eplmeta.config import GeneratorConfig

METADATA_URL = 'https://maven.ely.by/releases/by/ely/authlib/maven-metadata.xml'
DOWNLOAD_URL_FORMAT = (
    'https://maven.ely.by/releases/by/ely/authlib/{}/authlib-{}.jar'
)
INJECTOR_URL = 'https://example.org/authlib-injector-1.2.5.jar'


def make_metadata(versions: list[str]) -> str:
    version_elements = ''.join(f'<version>{x}</version>' for x in versions)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<metadata>'
        '<groupId>by.ely</groupId>'
        '<artifactId>authlib</artifactId>'
        '<versioning>'
        f'<latest>{versions[-1] if versions else ""}</latest>'
        f'<versions>{version_elements}</versions>'
        '<lastUpdated>20250101000000</lastUpdated>'
        '</versioning>'
        '</metadata>'
    )


def jar_url(full_version: str) -> str:
    return DOWNLOAD_URL_FORMAT.replace('{}', full_version)


def jar_content(full_version: str) -> bytes:
    return f'authlib {full_version}'.encode()


class FakeMaven:
    """Serves metadata, jars and the injector, with switchable failures."""

    def __init__(self, versions: list[str]):
        self.versions = versions
        self.missing_jars: set[str] = set()
        self.broken_jars: set[str] = set()
        self.injector_status = 200
        self.metadata_status = 200
        self.metadata_text: str | None = None
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        if url == METADATA_URL:
            text = self.metadata_text or make_metadata(self.versions)
            return httpx.Response(self.metadata_status, text=text)
        if url == INJECTOR_URL:
            return httpx.Response(self.injector_status, content=b'injector')
        for version in self.versions:
            if url == jar_url(version):
                if version in self.broken_jars:
                    raise httpx.ConnectError('connection refused', request=request)
                if version in self.missing_jars:
                    return httpx.Response(404, text='not found')
                return httpx.Response(200, content=jar_content(version))
        return httpx.Response(404, text='not found')

    def client(self, config: GeneratorConfig) -> httpx.AsyncClient:
        return config.create_client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def make_config(tmp_path) -> Callable[..., GeneratorConfig]:
    def factory(**kwargs) -> GeneratorConfig:
        params = dict(
            metadata_url=METADATA_URL,
            authlib_download_url_format=DOWNLOAD_URL_FORMAT,
            injector_download_url=INJECTOR_URL,
            output_file=tmp_path / 'authlib-overrides.json',
        )
        params.update(kwargs)
        return GeneratorConfig(**params)

    return factory
