import pytest

from src.adapters.memory_host import (
    MemoryImage,
    MemoryLanguage,
    MemoryLanguageRegistry,
    MemoryPage,
    MemoryPageStore,
    MemoryTemplate,
)
from src.components.metadata import HostServices, create_host_services
from src.rules.models import MetadataConfig


@pytest.fixture
def config() -> MetadataConfig:
    """Config with a real base URL, everything else default."""
    return MetadataConfig(base_url="https://example.com/", site_name="Example")


@pytest.fixture
def image() -> MemoryImage:
    return MemoryImage(
        http_url="https://example.com/site/assets/files/2/hero.jpg",
        width=2400,
        height=1260,
        fields={"alt": "Hero image"},
    )


@pytest.fixture
def home() -> MemoryPage:
    return MemoryPage(id=1, url="/", fields={"title": "Home"})


@pytest.fixture
def page(home: MemoryPage) -> MemoryPage:
    """
    A page two levels below home with a title and summary.
    """
    section = MemoryPage(id=2, url="/blog/", fields={"title": "Blog"}, parents=[home])
    return MemoryPage(
        id=3,
        url="/blog/hello/",
        fields={"title": "Hello", "summary": "A short summary."},
        parents=[home, section],
    )


@pytest.fixture
def page_store(home: MemoryPage, page: MemoryPage) -> MemoryPageStore:
    return MemoryPageStore([home, *page.parents[1:], page])


@pytest.fixture
def languages() -> MemoryLanguageRegistry:
    """Registry with a single default language and no codes."""
    return MemoryLanguageRegistry([MemoryLanguage(name="default")])


@pytest.fixture
def host(languages: MemoryLanguageRegistry, page_store: MemoryPageStore) -> HostServices:
    return create_host_services(languages=languages, pages=page_store)


@pytest.fixture
def make_languages():
    """Build a registry of languages named by code; an empty code leaves the field blank."""

    def _make(*codes: str, page_names: bool = True) -> MemoryLanguageRegistry:
        template = MemoryTemplate(name="language", fields=frozenset({"languageCode"}))
        langs = [
            MemoryLanguage(
                name=code or f"lang{i}",
                fields={"languageCode": code},
                template=template,
            )
            for i, code in enumerate(codes)
        ]
        return MemoryLanguageRegistry(langs, page_names=page_names)

    return _make
