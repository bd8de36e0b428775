"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from lingo.config import AuthSettings, ContentSettings, Settings
from lingo.util.di.base import ProviderBase
from lingo.util.retry import ReadRetry


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_content_settings(self, settings: Settings) -> ContentSettings:
        """Provide content paging settings."""
        return settings.content

    @provide(scope=Scope.APP)
    def provide_read_retry(self, settings: Settings) -> ReadRetry:
        """Provide the retry policy for storage reads."""
        return ReadRetry.from_settings(settings.storage)
