"""Document configuration from keyword arguments or environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentConfig(BaseSettings):
    # Copy styles registered with Document.make_style into an embedded
    # <style> element and hand out class names instead of inline styles.
    generate_embedded_stylesheet: bool = False

    # Register each distinct style text only once in the stylesheet.
    stylesheet_unify_styles: bool = False

    # Prefix every stylesheet rule with "#<document id> " so classes stay
    # local when several documents share one HTML page. Requires Document.id.
    scope_style_definitions: bool = False

    # Leave out the xmlns attribute (document is inlined into HTML).
    embedded: bool = False

    model_config = SettingsConfigDict(
        env_prefix="SVGDOC_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


class Settings(BaseSettings):
    svgdoc_log_level: str = "warning"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
