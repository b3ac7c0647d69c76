"""Supabase-backed user role repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from fido_dashboard.adapters.store_errors import run_store_call
from fido_dashboard.domain.users import Role, UserProfile
from fido_dashboard.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user role records."""

    client: Client
    table: str = "users"

    def get_profile(self, user_id: str) -> UserProfile | None:
        """Return the role record keyed by the auth user id."""
        response = run_store_call(
            lambda: self.client.table(self.table)
            .select("id, email, role, created_at")
            .eq("id", user_id)
            .limit(1)
            .execute(),
            self.table,
        )
        if response.data:
            return _parse_row(response.data[0])
        return None

    def create_profile(self, user_id: str, email: str, role: Role) -> UserProfile:
        """Insert the role record for a newly created user."""
        payload = {
            "id": user_id,
            "email": email,
            "role": role.value,
            "created_at": datetime.now(tz=UTC).isoformat(),
        }
        response = run_store_call(
            lambda: self.client.table(self.table).insert(payload).execute(),
            self.table,
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> UserProfile:
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    email = row.get("email")
    return UserProfile(
        id=str(row["id"]),
        email=email if isinstance(email, str) else None,
        role=Role.parse(row.get("role")),
        created_at=created_at,
    )
