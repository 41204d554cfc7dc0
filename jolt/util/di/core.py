"""Settings providers (non-mockable)."""

from dishka import Scope, provide

from jolt.config import AuthSettings, HashingSettings, Settings
from jolt.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Reads ``Settings`` once per process and hands out its sections.

    Services depend on the narrowest section they need, so tests can build
    them with a hand-made ``AuthSettings`` or ``HashingSettings``.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_hashing_settings(self, settings: Settings) -> HashingSettings:
        return settings.hashing
