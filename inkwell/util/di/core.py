"""Configuration providers."""

from dishka import Scope, provide

from inkwell.config import ContentSettings, Settings
from inkwell.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings from the environment, read once per container."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_content_settings(self, settings: Settings) -> ContentSettings:
        """Excerpt, read time and listing knobs for the post service."""
        return settings.content
