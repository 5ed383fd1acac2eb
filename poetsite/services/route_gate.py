"""Route gate: redirect decisions for auth pages and the admin back-office."""

from dataclasses import dataclass

from poetsite.core.auth_config import AuthConfig
from poetsite.core.roles import is_administrative
from poetsite.services.session import SessionClaim


@dataclass(frozen=True)
class GateDecision:
    """redirect_to is None when the request may proceed."""

    redirect_to: str | None = None

    @property
    def allowed(self) -> bool:
        return self.redirect_to is None


ALLOW = GateDecision()


def _under(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix.rstrip("/") + "/")


def is_auth_page(path: str, config: AuthConfig) -> bool:
    return any(_under(path, page) for page in config.auth_pages)


def is_admin_path(path: str, config: AuthConfig) -> bool:
    return _under(path, config.admin_prefix)


def is_gated(path: str, config: AuthConfig) -> bool:
    """True for paths the gate evaluates (auth pages and the admin prefix)."""
    return is_auth_page(path, config) or is_admin_path(path, config)


def evaluate_gate(path: str, claim: SessionClaim | None, config: AuthConfig) -> GateDecision:
    """
    Decide what to do with a request, first matching rule wins.

    Signed-in visitors are bounced off login/register (admins to the admin
    home, everyone else to the site home). The admin prefix needs a session
    with an administrative role: no session goes to login, other roles go to
    the site home. Everything else proceeds. Stateless, no store access.
    """
    if is_auth_page(path, config) and claim is not None:
        if is_administrative(claim.role):
            return GateDecision(redirect_to=config.admin_home)
        return GateDecision(redirect_to=config.site_home)
    if is_admin_path(path, config):
        if claim is None:
            return GateDecision(redirect_to=config.login_path)
        if not is_administrative(claim.role):
            return GateDecision(redirect_to=config.site_home)
    return ALLOW
