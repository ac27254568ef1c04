"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from askit.config import (
    AuthSettings,
    NotificationSettings,
    PaginationSettings,
    ReputationSettings,
    Settings,
)
from askit.util.di.base import ProviderBase
from askit.util.password import PasswordHasher


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
    def provide_reputation_settings(self, settings: Settings) -> ReputationSettings:
        """Provide reputation thresholds."""
        return settings.reputation

    @provide(scope=Scope.APP)
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        return settings.pagination

    @provide(scope=Scope.APP)
    def provide_notification_settings(self, settings: Settings) -> NotificationSettings:
        return settings.notifications

    @provide(scope=Scope.APP)
    def provide_password_hasher(self, auth_settings: AuthSettings) -> PasswordHasher:
        """Provide bcrypt password hasher."""
        return PasswordHasher(rounds=auth_settings.bcrypt_rounds)
