"""SEO configuration model and template validation.

``SeoConfig`` uses snake_case attributes with camelCase aliases so the same
model reads the JSON template format (``siteName``, ``businessType``...) and
is convenient from Python.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from templatekit.utils import console, print_error

REQUIRED_STRING_FIELDS: tuple[str, ...] = (
    "siteName",
    "siteTagline",
    "siteUrl",
    "author",
    "businessType",
)

# Annotation keys allowed in template files; dropped before validation.
IGNORED_TEMPLATE_KEYS: tuple[str, ...] = ("_comments", "$schema")


class BusinessType(str, Enum):
    BLOG = "blog"
    ECOMMERCE = "ecommerce"
    PORTFOLIO = "portfolio"
    SAAS = "saas"
    CORPORATE = "corporate"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return _BUSINESS_TYPE_NAMES[self]


_BUSINESS_TYPE_NAMES: dict[BusinessType, str] = {
    BusinessType.BLOG: "Blog/Content Site",
    BusinessType.ECOMMERCE: "E-commerce",
    BusinessType.PORTFOLIO: "Portfolio",
    BusinessType.SAAS: "SaaS/Web App",
    BusinessType.CORPORATE: "Corporate/Business",
    BusinessType.OTHER: "Other",
}

BUSINESS_TYPE_VALUES: tuple[str, ...] = tuple(bt.value for bt in BusinessType)


class SocialLinks(BaseModel):
    """Optional social profiles. Blank values are stored as ``None``."""

    twitter: str | None = Field(default=None, description="Handle without the leading @")
    facebook: str | None = None
    linkedin: str | None = None

    @field_validator("twitter", "facebook", "linkedin", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            if value.startswith("@"):
                value = value[1:]
            return value or None
        return value

    def any_set(self) -> bool:
        return any((self.twitter, self.facebook, self.linkedin))

    def same_as(self) -> list[str]:
        """Profile URLs for the schema.org ``sameAs`` list."""
        urls: list[str] = []
        if self.twitter:
            urls.append(f"https://twitter.com/{self.twitter}")
        if self.facebook:
            urls.append(self.facebook)
        if self.linkedin:
            urls.append(self.linkedin)
        return urls


class SeoConfig(BaseModel):
    """Validated SEO answers for one run."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    site_name: str = Field(..., alias="siteName")
    site_tagline: str = Field(..., alias="siteTagline")
    site_url: str = Field(..., alias="siteUrl")
    author: str
    locale: str = Field(default="en")
    business_type: BusinessType = Field(..., alias="businessType")
    keywords: list[str] = Field(default_factory=list)
    social: SocialLinks = Field(default_factory=SocialLinks)

    @field_validator("site_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value[:-1] if value.endswith("/") else value

    @field_validator("locale", mode="before")
    @classmethod
    def _default_locale(cls, value: Any) -> Any:
        return value or "en"

    @field_validator("social", mode="before")
    @classmethod
    def _default_social(cls, value: Any) -> Any:
        return value or {}

    @property
    def is_blog(self) -> bool:
        return self.business_type is BusinessType.BLOG

    @property
    def twitter_handle(self) -> str:
        """``@handle`` or an empty string."""
        return f"@{self.social.twitter}" if self.social.twitter else ""

    @classmethod
    def from_template(cls, data: dict[str, Any]) -> "SeoConfig":
        """Build a config from a template document that passed validation."""
        cleaned = strip_template_annotations(data)
        return cls.model_validate(cleaned)


def strip_template_annotations(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if k not in IGNORED_TEMPLATE_KEYS}


def collect_validation_errors(candidate: Any) -> list[str]:
    """Return every problem with *candidate*, in a stable order.

    An empty list means :meth:`SeoConfig.from_template` will succeed.
    """
    if not isinstance(candidate, dict):
        return ["template must be a JSON object"]

    errors: list[str] = []
    for field in REQUIRED_STRING_FIELDS:
        value = candidate.get(field)
        if not value or not isinstance(value, str):
            errors.append(f"{field} is required and must be a string")

    business_type = candidate.get("businessType")
    if business_type and business_type not in BUSINESS_TYPE_VALUES:
        errors.append(f"businessType must be one of: {', '.join(BUSINESS_TYPE_VALUES)}")

    keywords = candidate.get("keywords")
    if not isinstance(keywords, list):
        errors.append("keywords must be an array")
    elif not all(isinstance(k, str) for k in keywords):
        errors.append("keywords must contain only strings")

    locale = candidate.get("locale")
    if locale is not None and not isinstance(locale, str):
        errors.append("locale must be a string")

    social = candidate.get("social")
    if social is not None:
        if not isinstance(social, dict):
            errors.append("social must be an object")
        else:
            for key in ("twitter", "facebook", "linkedin"):
                if social.get(key) is not None and not isinstance(social[key], str):
                    errors.append(f"social.{key} must be a string")

    return errors


def validate_seo_config(candidate: Any) -> bool:
    """Print every validation error for *candidate*; ``True`` if there are none."""
    errors = collect_validation_errors(candidate)
    if not errors:
        return True

    print_error("\nTemplate validation errors:\n")
    for error in errors:
        console.print(f"  - {error}")
    console.print()
    return False
