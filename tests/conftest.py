import pytest
from fastapi.testclient import TestClient

from devconnector.config import Settings
from devconnector.core.accounts import AccountStore
from devconnector.core.registration import CredentialIssuer
from devconnector.core.security import PasswordHasher, TokenSigner
from devconnector.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        jwt_secret_key="test-secret",
        database_url=f"sqlite:///{tmp_path / 'app.db'}",
        bcrypt_rounds=4,
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    try:
        yield app
    finally:
        app.state.engine.dispose()


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def session_factory(app):
    return app.state.session_factory


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def signer(settings):
    return TokenSigner(settings)


@pytest.fixture
def hasher(settings):
    return PasswordHasher(settings.bcrypt_rounds)


@pytest.fixture
def make_issuer(settings, hasher, signer):
    def factory(session):
        return CredentialIssuer(
            store=AccountStore(session),
            hasher=hasher,
            signer=signer,
            settings=settings,
        )
    return factory


@pytest.fixture
def issuer(make_issuer, db):
    return make_issuer(db)
