from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    model_validator,
)
from pydantic.alias_generators import to_camel

from crypto_news.modules.news.models import SentimentType, Source

_datetime_adapter = TypeAdapter(datetime)


def _optional_datetime(value: Any) -> datetime | None:
    """Blank or unparseable timestamps count as absent."""
    if value is None or value == "":
        return None
    try:
        return _datetime_adapter.validate_python(value)
    except ValidationError:
        return None


OptionalDatetime = Annotated[datetime | None, BeforeValidator(_optional_datetime)]


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python, immutable once built."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ── Articles ────────────────────────────────────────────────────


class Article(WireModel):
    """One entry of an article listing."""

    id: Any = None  # opaque, string or number depending on the provider
    slug: str | None = None
    title: str | None = None
    summary: str | None = None
    time: OptionalDatetime = None
    time_str: str | None = None  # display string, kept untouched
    url: str | None = None
    thumbnail_url: str | None = None
    source: Source | None = None


class ArticlesPage(WireModel):
    articles: list[Article] = []
    has_more: bool = False


class PaginatedArticles(WireModel):
    """Raw list payload; only ``data`` and ``has_next_page`` leave the router."""

    data: list[dict[str, Any]] | None = None
    total_pages: int | None = None
    has_next_page: bool | None = None
    current_pages: int | None = None
    limit: int | None = None
    pagination_token: str | None = None


# ── Content blocks ──────────────────────────────────────────────


class HeadingBlock(WireModel):
    type: Literal["HEADING"]
    text: str | None = None
    level: int | None = None


class ParagraphBlock(WireModel):
    type: Literal["PARAGRAPH"]
    text: str | None = None


class ImageBlock(WireModel):
    type: Literal["IMAGE"]
    url: str | None = None
    alt: str | None = None
    caption: str | None = None


class QuoteBlock(WireModel):
    type: Literal["QUOTE"]
    text: str | None = None
    author: str | None = None


class ListBlock(WireModel):
    type: Literal["LIST"]
    ordered: bool | None = None
    items: list[str] | None = None


class TextBlock(WireModel):
    type: Literal["TEXT"]
    text: str | None = None


class LinkBlock(WireModel):
    type: Literal["LINK"]
    text: str | None = None
    url: str | None = None


class SpanBlock(WireModel):
    type: Literal["SPAN"]
    text: str | None = None
    content: list["ContentBlock"] | None = None


class DivBlock(WireModel):
    type: Literal["DIV"]
    code: str | None = None
    provider: str | None = None  # embed provider, e.g. twitter / youtube
    content: list["ContentBlock"] | None = None


# Only SPAN and DIV declare ``content``; children sent on a leaf are dropped.
ContentBlock = Annotated[
    Union[
        HeadingBlock,
        ParagraphBlock,
        ImageBlock,
        QuoteBlock,
        ListBlock,
        TextBlock,
        LinkBlock,
        SpanBlock,
        DivBlock,
    ],
    Field(discriminator="type"),
]

SpanBlock.model_rebuild()
DivBlock.model_rebuild()


class ArticleDetail(WireModel):
    id: Any = None
    title: str | None = None
    summary: str | None = None
    thumbnail_url: str | None = None
    url: str | None = None
    published_at: datetime
    author: str | None = None
    category: str | None = None
    content_raw: str | None = None
    content: Annotated[list[ContentBlock], BeforeValidator(lambda v: [] if v is None else v)] = []
    source: Source | None = None


# ── Sentiment ───────────────────────────────────────────────────


class SentimentItem(WireModel):
    sentiment_type: SentimentType = Field(alias="type")
    count: int = Field(ge=0)
    percentage: float = Field(ge=0, le=100)


class SentimentResult(WireModel):
    """Upstream-computed summary; percentages are not re-validated to sum to 100."""

    interval: str
    total_articles: int = Field(default=0, ge=0)
    sentiment_summary: list[SentimentItem] = []


# ── Envelope ────────────────────────────────────────────────────


class SuccessEnvelope(WireModel):
    status: Literal["SUCCESS"]
    data: Any = None
    processing_time_sec: float | None = None


class ErrorEnvelope(WireModel):
    status: Literal["ERROR"]
    message: str | None = None
    processing_time_sec: float | None = None


Envelope = Annotated[Union[SuccessEnvelope, ErrorEnvelope], Field(discriminator="status")]

envelope_adapter: TypeAdapter[SuccessEnvelope | ErrorEnvelope] = TypeAdapter(Envelope)
articles_adapter: TypeAdapter[list[Article]] = TypeAdapter(list[Article])


# ── Query parameters ────────────────────────────────────────────


class QueryModel(WireModel):
    """Outgoing parameters. Unknown fields are rejected; category and sort
    tokens are opaque strings, the enums in ``models`` are shorthands."""

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _unwrap_enums(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {k: v.value if isinstance(v, Enum) else v for k, v in data.items()}
        return data

    def to_params(self) -> dict[str, Any]:
        """Wire parameters: camelCase keys, unset fields dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ArticleQuery(QueryModel):
    page: int | None = None
    limit: int | None = None
    search: str | None = None
    pagination_token: str | None = None
    category: str | None = None


class DecryptQuery(ArticleQuery):
    sort: str | None = None
    is_editor_pick: bool | None = None


class SentimentQuery(QueryModel):
    interval: str = ""
    category: str | None = None
