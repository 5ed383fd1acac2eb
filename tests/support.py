"""Shared helpers: an app bound to a fresh in-memory database, and account factories."""

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from poetsite.core.auth_config import AuthConfig
from poetsite.core.database import get_db
from poetsite.core.roles import Role
from poetsite.core.security import hash_password
from poetsite.main import create_app
from poetsite.models import Base, User

PASSWORD = "secret-pass"

AUTH_CONFIG = AuthConfig(
    secret="test-session-secret-0123456789abcdef",
    algorithm="HS256",
    expire_minutes=60,
    cookie_name="poetsite_session",
    cookie_secure=False,
    admin_prefix="/admin",
    login_path="/login",
    register_path="/register",
    admin_home="/admin",
    site_home="/",
)


def make_session_factory() -> sessionmaker:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def make_user(
    db: Session,
    email: str,
    role: Role = Role.USER,
    name: str = "Test User",
    password: str | None = PASSWORD,
) -> User:
    user = User(
        email=email,
        name=name,
        password_hash=hash_password(password, rounds=4) if password else None,
        role=role.value,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


class AppHarness:
    """A TestClient over a fresh database; ``db`` is a separate session for setup and asserts."""

    def __init__(self) -> None:
        self.SessionLocal = make_session_factory()
        self.app = create_app()

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        self.app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(self.app)
        self.db = self.SessionLocal()

    def login(self, email: str, password: str = PASSWORD):
        return self.client.post("/api/v1/auth/login", json={"email": email, "password": password})

    def close(self) -> None:
        self.db.close()
        self.client.close()
        self.app.dependency_overrides.clear()
