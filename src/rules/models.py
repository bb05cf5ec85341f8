from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

TruncateMode = Literal["word", "punctuation", "sentence", "block"]

TRUNCATE_MODES: tuple[str, ...] = ("word", "punctuation", "sentence", "block")


class MetadataConfig(BaseModel):
    """
    Markup metadata configuration.

    Every option has a default, so an empty mapping is a valid configuration.
    Selectors and field names are opaque strings handed to the host.
    Integer dimensions use 0 for "unset".
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Site
    base_url: str = "https://domain.com"
    charset: str = "utf-8"
    viewport: str = "width=device-width, initial-scale=1.0"
    keywords_selector: str = "keywords"

    # Document title
    page_title_selector: str = "title"
    document_title_separator: str = "-"
    site_name: str = "Site name"

    # Description
    description_selector: str = "summary"
    description_max_length: int = Field(default=160, ge=0)
    description_truncate_mode: TruncateMode = "word"

    # Image
    image_selector: str = "image"
    image_width: int = Field(default=1200, ge=0)
    image_height: int = Field(default=630, ge=0)
    image_alt_field: str | None = "alt"
    image_inherit: bool = False
    image_fallback_page: int | str | None = None

    # Hreflang
    render_hreflang: bool = False
    hreflang_code_field: str = "languageCode"

    # Open Graph
    render_og: bool = True
    og_type: str = "website"

    # Twitter
    render_twitter: bool = True
    twitter_card: str = "summary_large_image"
    twitter_site: str | None = None
    twitter_creator: str | None = None

    # Facebook
    render_facebook: bool = False
    facebook_app_id: str | None = None

    @field_validator("twitter_site", "twitter_creator", "facebook_app_id", mode="before")
    @classmethod
    def numbers_as_text(cls, v: object) -> object:
        """Accept unquoted numeric IDs from YAML."""
        if isinstance(v, int | float) and not isinstance(v, bool):
            return str(v)
        return v
