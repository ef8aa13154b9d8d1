"""Settings and process-wide singletons."""

from dishka import Scope, provide

from tyrantcam.config import AuthSettings, Settings, VotingSettings
from tyrantcam.domain.service import LoginRateLimiter
from tyrantcam.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings read once per container from the environment and .env."""

    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def auth(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def voting(self, settings: Settings) -> VotingSettings:
        return settings.voting

    @provide
    def login_rate_limiter(self, auth: AuthSettings) -> LoginRateLimiter:
        """Failed-login counters shared by every request of this process."""
        return LoginRateLimiter(
            max_attempts=auth.max_login_attempts,
            window_seconds=auth.login_window_minutes * 60,
        )
