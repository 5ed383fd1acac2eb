"""Authentication and route-gate configuration, built once at process start."""

from dataclasses import dataclass

from poetsite.core.config import Settings


@dataclass(frozen=True)
class AuthConfig:
    """Everything the session issuer and the route gate need to know."""

    secret: str
    algorithm: str
    expire_minutes: int
    cookie_name: str
    cookie_secure: bool
    admin_prefix: str
    login_path: str
    register_path: str
    admin_home: str
    site_home: str

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuthConfig":
        return cls(
            secret=settings.SESSION_SECRET.get_secret_value(),
            algorithm=settings.SESSION_ALGORITHM,
            expire_minutes=settings.SESSION_EXPIRE_MINUTES,
            cookie_name=settings.SESSION_COOKIE_NAME,
            cookie_secure=settings.SESSION_COOKIE_SECURE,
            admin_prefix=settings.ADMIN_PREFIX,
            login_path=settings.LOGIN_PATH,
            register_path=settings.REGISTER_PATH,
            admin_home=settings.ADMIN_HOME,
            site_home=settings.SITE_HOME,
        )

    @property
    def auth_pages(self) -> tuple[str, ...]:
        return (self.login_path, self.register_path)
