"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from types import SimpleNamespace

import httpx
import pytest
from supabase import AuthApiError, PostgrestAPIError

from fido_dashboard.adapters.supabase_auth_client import SupabaseAuthClient
from fido_dashboard.adapters.supabase_feeding_repository import (
    SupabaseFeedingRepository,
)
from fido_dashboard.adapters.supabase_user_repository import SupabaseUserRepository
from fido_dashboard.domain.errors import (
    AuthenticationError,
    MissingIndexError,
    StorePermissionError,
    StoreUnavailableError,
    UserRegistrationError,
)
from fido_dashboard.domain.feeding import NewFeedingEntry
from fido_dashboard.domain.filters import TimeFilter
from fido_dashboard.domain.users import Role
from fido_dashboard.services.planner import plan_query
from fido_dashboard.services.users import AuthClient


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None
    count: int | None = None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": []}
    )
    count: int | None = None
    error: Exception | None = None
    last_payload: object | None = None
    last_filters: list[tuple[str, str, object]] = field(default_factory=list)
    last_order: tuple[str, bool] | None = None
    last_count_mode: str | None = None

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args, count: str | None = None) -> "FakeTable":
        self._action = "select"
        self.last_count_mode = count
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append(("eq", column, value))
        return self

    def gte(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append(("gte", column, value))
        return self

    def lte(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append(("lte", column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.last_order = (column, desc)
        return self

    def execute(self) -> FakeResponse:
        if self.error:
            raise self.error
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data, count=self.count)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)
    auth: object | None = None

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


@dataclass
class FakeAuthAdmin:
    signed_out: list[str] = field(default_factory=list)
    created: list[dict[str, object]] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    error: Exception | None = None

    def sign_out(self, jwt: str) -> None:
        if self.error:
            raise self.error
        self.signed_out.append(jwt)

    def create_user(self, attributes: dict[str, object]) -> SimpleNamespace:
        if self.error:
            raise self.error
        self.created.append(attributes)
        return SimpleNamespace(
            user=SimpleNamespace(id="new-id", email=attributes["email"])
        )

    def delete_user(self, id: str) -> None:
        if self.error:
            raise self.error
        self.deleted.append(id)


@dataclass
class FakeAuth:
    users: dict[str, SimpleNamespace] = field(default_factory=dict)
    admin: FakeAuthAdmin = field(default_factory=FakeAuthAdmin)
    error: Exception | None = None

    def get_user(self, jwt: str) -> SimpleNamespace | None:
        if self.error:
            raise self.error
        user = self.users.get(jwt)
        if user is None:
            raise AuthApiError("invalid JWT", 403, "bad_jwt")
        return SimpleNamespace(user=user)


def _postgrest_error(code: str) -> PostgrestAPIError:
    return PostgrestAPIError({"message": f"failure {code}", "code": code})


def test_feeding_repository_runs_inclusive_ordered_range_query() -> None:
    client = FakeSupabaseClient()
    table = client.table("feeding_records")
    table.queue(
        "select",
        [
            {
                "id": 1,
                "amount": 1,
                "amount_unit": "kg",
                "timestamp": "2025-08-11T08:00:00.000Z",
                "type": "automatic",
                "source": "dispenser",
                "status": "completed",
            },
            {"id": 2, "amount": "500", "timestamp": "2025-08-12T08:00:00.000Z"},
        ],
    )
    repository = SupabaseFeedingRepository(client)

    records = repository.list_in_range(plan_query(TimeFilter.week("2025-W33")))

    assert table.last_filters == [
        ("gte", "timestamp", "2025-08-11T00:00:00.000Z"),
        ("lte", "timestamp", "2025-08-17T23:59:59.999Z"),
    ]
    assert table.last_order == ("timestamp", False)
    assert records[0].id == "1"
    assert records[0].amount_unit == "kg"
    assert records[1].amount == "500"
    assert records[1].amount_unit is None
    assert records[1].type is None


def test_feeding_repository_degrades_malformed_rows() -> None:
    client = FakeSupabaseClient()
    client.table("feeding_records").queue(
        "select", [{"amount": None, "amount_unit": 5, "timestamp": 123}]
    )

    records = SupabaseFeedingRepository(client).list_in_range(
        plan_query(TimeFilter.date_range("2025-08-01", "2025-08-07"))
    )

    assert records[0].timestamp is None
    assert records[0].amount_unit is None
    assert records[0].id is None


def test_feeding_repository_inserts_manual_entry() -> None:
    client = FakeSupabaseClient()
    table = client.table("feeding_records")
    table.queue(
        "insert",
        [
            {
                "id": "abc",
                "amount": 250,
                "amount_unit": "g",
                "timestamp": "2025-08-11T00:00:00.000Z",
                "type": "manual",
                "source": "dashboard",
                "status": "completed",
            }
        ],
    )
    repository = SupabaseFeedingRepository(client)

    created = repository.add_record(
        NewFeedingEntry(
            amount=250,
            amount_unit="g",
            timestamp="2025-08-11T00:00:00.000Z",
            user_id="admin-id",
        )
    )

    assert created.id == "abc"
    assert isinstance(table.last_payload, dict)
    assert table.last_payload["source"] == "dashboard"
    assert table.last_payload["user_id"] == "admin-id"


def test_feeding_repository_counts_and_latest() -> None:
    client = FakeSupabaseClient()
    table = client.table("feeding_records")
    table.count = 12
    table.queue("select", [{"id": "z", "timestamp": "2025-08-20T08:00:00.000Z"}])
    repository = SupabaseFeedingRepository(client)

    latest = repository.get_latest()
    total = repository.count_all()
    recent = repository.count_since("2025-08-01T00:00:00.000Z")

    assert latest is not None
    assert latest.id == "z"
    assert total == 12
    assert recent == 12
    assert table.last_count_mode == "exact"
    assert ("gte", "timestamp", "2025-08-01T00:00:00.000Z") in table.last_filters


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("42501", StorePermissionError),
        ("PGRST301", StorePermissionError),
        ("57014", MissingIndexError),
        ("08006", StoreUnavailableError),
    ],
)
def test_feeding_repository_maps_store_errors(code: str, expected: type) -> None:
    client = FakeSupabaseClient()
    client.table("feeding_records").error = _postgrest_error(code)
    repository = SupabaseFeedingRepository(client)

    with pytest.raises(expected):
        repository.list_in_range(plan_query(TimeFilter.week("2025-W33")))


def test_feeding_repository_maps_transport_errors() -> None:
    client = FakeSupabaseClient()
    client.table("feeding_records").error = httpx.ConnectError("offline")

    with pytest.raises(StoreUnavailableError):
        SupabaseFeedingRepository(client).count_all()


def test_permission_error_names_collection() -> None:
    client = FakeSupabaseClient()
    client.table("feeding_records").error = _postgrest_error("42501")

    with pytest.raises(StorePermissionError, match="feeding_records"):
        SupabaseFeedingRepository(client).get_latest()


def test_user_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    table = client.table("users")
    table.queue(
        "insert",
        [
            {
                "id": "u1",
                "email": "nuevo@fido.test",
                "role": "consulta",
                "created_at": "2025-08-11T08:00:00+00:00",
            }
        ],
    )
    table.queue("select", [{"id": "u1", "email": "nuevo@fido.test", "role": "ADMIN"}])
    repository = SupabaseUserRepository(client)

    created = repository.create_profile("u1", "nuevo@fido.test", Role.READ_ONLY)
    fetched = repository.get_profile("u1")

    assert created.role is Role.READ_ONLY
    assert created.created_at is not None
    assert isinstance(table.last_payload, dict)
    assert table.last_payload["role"] == "consulta"
    assert fetched is not None
    assert fetched.role is Role.ADMIN
    assert ("eq", "id", "u1") in table.last_filters


def test_user_repository_returns_none_for_unknown_role_or_user() -> None:
    client = FakeSupabaseClient()
    client.table("users").queue("select", [{"id": "u2", "role": "veterinario"}])
    repository = SupabaseUserRepository(client)

    profile = repository.get_profile("u2")

    assert profile is not None
    assert profile.role is None
    assert repository.get_profile("missing") is None


def test_auth_client_resolves_and_rejects_tokens() -> None:
    auth = FakeAuth(users={"jwt": SimpleNamespace(id="u1", email="a@fido.test")})
    client = SupabaseAuthClient(FakeSupabaseClient(auth=auth))

    user = client.get_user("jwt")

    assert user is not None
    assert user.id == "u1"
    assert client.get_user("expired") is None


def test_auth_client_maps_transport_errors() -> None:
    auth = FakeAuth(error=httpx.ConnectError("offline"))
    client = SupabaseAuthClient(FakeSupabaseClient(auth=auth))

    with pytest.raises(StoreUnavailableError):
        client.get_user("jwt")


def test_auth_client_signs_out() -> None:
    auth = FakeAuth()
    client = SupabaseAuthClient(FakeSupabaseClient(auth=auth))

    client.sign_out("jwt")

    assert auth.admin.signed_out == ["jwt"]


def test_auth_client_maps_sign_out_failure() -> None:
    auth = FakeAuth(admin=FakeAuthAdmin(error=AuthApiError("gone", 401, None)))
    client = SupabaseAuthClient(FakeSupabaseClient(auth=auth))

    with pytest.raises(AuthenticationError):
        client.sign_out("jwt")


def test_auth_client_creates_confirmed_user() -> None:
    auth = FakeAuth()
    client = SupabaseAuthClient(FakeSupabaseClient(auth=auth))

    created = client.create_user("nuevo@fido.test", "secreto")

    assert created.id == "new-id"
    assert auth.admin.created == [
        {"email": "nuevo@fido.test", "password": "secreto", "email_confirm": True}
    ]


@pytest.mark.parametrize(
    ("code", "message"),
    [
        ("email_exists", "ya está registrado"),
        ("weak_password", "muy débil"),
        ("email_address_invalid", "inválido"),
        ("unexpected_failure", "Error al registrar usuario"),
    ],
)
def test_auth_client_maps_registration_errors(code: str, message: str) -> None:
    auth = FakeAuth(admin=FakeAuthAdmin(error=AuthApiError("rejected", 422, code)))
    client = SupabaseAuthClient(FakeSupabaseClient(auth=auth))

    with pytest.raises(UserRegistrationError, match=message):
        client.create_user("nuevo@fido.test", "secreto")


def test_auth_client_implements_service_interface() -> None:
    assert issubclass(SupabaseAuthClient, AuthClient)


def test_auth_client_deletes_user() -> None:
    auth = FakeAuth()
    client = SupabaseAuthClient(FakeSupabaseClient(auth=auth))

    client.delete_user("new-id")

    assert auth.admin.deleted == ["new-id"]


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (AuthApiError("not found", 404, "user_not_found"), UserRegistrationError),
        (httpx.ConnectError("offline"), StoreUnavailableError),
    ],
)
def test_auth_client_maps_delete_failures(
    error: Exception, expected: type[Exception]
) -> None:
    auth = FakeAuth(admin=FakeAuthAdmin(error=error))
    client = SupabaseAuthClient(FakeSupabaseClient(auth=auth))

    with pytest.raises(expected):
        client.delete_user("new-id")
