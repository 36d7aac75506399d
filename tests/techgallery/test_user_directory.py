"""Tests for directory user resolution and people provider sync."""

import httpx
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from techgallery.database import Base
from techgallery.exceptions import InternalServerError, NotFoundError, PeopleProviderError
from techgallery.models.user import TechGalleryUser
from techgallery.services.people_provider import PeopleProviderClient
from techgallery.services.user_directory import UserDirectory


@pytest.fixture
def db():
    """Create in-memory SQLite database with one known user."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()

    session.add(TechGalleryUser(google_id="g-alice", email="alice@example.com", login="alice"))
    session.commit()

    yield session

    session.close()
    Base.metadata.drop_all(engine)
    engine.dispose()


def _provider(handler) -> PeopleProviderClient:
    """PeopleProviderClient backed by an in-process mock transport."""
    return PeopleProviderClient("https://people.example.com/", transport=httpx.MockTransport(handler))


class TestResolve:
    """Tests for identity token resolution."""

    def test_resolve_known_token(self, db):
        """Known tokens resolve to their user."""
        user = UserDirectory(db).resolve("g-alice")
        assert user.login == "alice"

    def test_resolve_unknown_token(self, db):
        """Unknown tokens resolve to None."""
        assert UserDirectory(db).resolve("g-nobody") is None

    @pytest.mark.parametrize("token", [None, ""])
    def test_resolve_empty_token(self, db, token):
        """Empty tokens resolve to None."""
        assert UserDirectory(db).resolve(token) is None


class TestSyncFromProvider:
    """Tests for user sync by login."""

    def test_known_login_skips_provider(self, db):
        """Directory users are returned without calling the provider."""

        def handler(request):
            raise AssertionError("provider must not be called")

        user = UserDirectory(db, provider=_provider(handler)).sync_from_provider("alice")
        assert user.google_id == "g-alice"

    def test_known_login_without_provider(self, db):
        """Directory users sync without a provider."""
        assert UserDirectory(db).sync_from_provider("alice").email == "alice@example.com"

    def test_unknown_login_without_provider(self, db):
        """Unknown logins cannot be synced without a provider."""
        with pytest.raises(NotFoundError):
            UserDirectory(db).sync_from_provider("bob")

    def test_unknown_login_created_from_provider(self, db):
        """Unknown logins are created from the provider profile."""
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(
                200,
                json={"login": "bob", "email": "bob@example.com", "name": "Bob", "google_id": "g-bob"},
            )

        user = UserDirectory(db, provider=_provider(handler)).sync_from_provider("bob")

        assert seen == ["https://people.example.com/people/bob"]
        assert user.id is not None
        assert user.email == "bob@example.com"
        assert user.google_id == "g-bob"
        assert UserDirectory(db).resolve("g-bob").login == "bob"

    def test_provider_does_not_know_login(self, db):
        """A provider 404 is a not-found error."""
        directory = UserDirectory(db, provider=_provider(lambda request: httpx.Response(404)))
        with pytest.raises(NotFoundError, match="bob"):
            directory.sync_from_provider("bob")

    def test_provider_server_error(self, db):
        """Provider failures are internal errors."""
        directory = UserDirectory(db, provider=_provider(lambda request: httpx.Response(503)))
        with pytest.raises(InternalServerError):
            directory.sync_from_provider("bob")

    def test_provider_profile_without_email(self, db):
        """Profiles without e-mail cannot create users."""
        directory = UserDirectory(
            db, provider=_provider(lambda request: httpx.Response(200, json={"login": "bob"}))
        )
        with pytest.raises(PeopleProviderError, match="no e-mail"):
            directory.sync_from_provider("bob")
        assert directory.get_by_login("bob") is None


    def test_conflicting_profile_is_internal_error(self, db):
        """Store conflicts while creating a user roll back and surface as internal errors."""
        directory = UserDirectory(
            db,
            provider=_provider(
                lambda request: httpx.Response(200, json={"email": "alice@example.com"})
            ),
        )
        with pytest.raises(InternalServerError, match="alice2"):
            directory.sync_from_provider("alice2")

        assert directory.get_by_login("alice2") is None
        assert directory.get_by_login("alice").email == "alice@example.com"


class TestPeopleProviderClient:
    """Tests for the people provider HTTP client."""

    def test_connection_error(self):
        """Transport errors become PeopleProviderError."""

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(PeopleProviderError, match="request failed"):
            _provider(handler).get_person("bob")

    def test_invalid_json(self):
        """Non-JSON responses become PeopleProviderError."""
        client = _provider(lambda request: httpx.Response(200, content=b"<html>"))
        with pytest.raises(PeopleProviderError):
            client.get_person("bob")

    def test_not_found_returns_none(self):
        """Unknown logins return None."""
        assert _provider(lambda request: httpx.Response(404)).get_person("bob") is None
