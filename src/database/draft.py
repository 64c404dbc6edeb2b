"""
Hear Me Out - Draft Manager

CRUD operations for the `drafts` table.
"""

from datetime import datetime, timezone

from supabase import Client

from src.database.errors import first_row
from src.database.models import Draft


class DraftManager:
    """Manages draft subjects in Supabase."""

    def __init__(self, client: Client) -> None:
        self.client = client
        self.table = client.table("drafts")

    def create(self, subject: str) -> Draft:
        """Create a new draft subject."""
        data = (
            self.table
            .insert({"subject": subject})
            .execute()
        )
        return Draft.model_validate(first_row(data.data, "Creating draft"))

    def get(self, draft_id: str) -> Draft | None:
        """Look up a draft by its UUID."""
        data = (
            self.table
            .select("*")
            .eq("id", draft_id)
            .execute()
        )
        if data.data:
            return Draft.model_validate(data.data[0])
        return None

    def list_all(self) -> list[Draft]:
        """All drafts, most recently updated first."""
        data = (
            self.table
            .select("*")
            .order("updated_at", desc=True)
            .execute()
        )
        return [Draft.model_validate(row) for row in data.data]

    def update_subject(self, draft_id: str, subject: str) -> Draft:
        """Rename a draft and bump its updated_at."""
        data = (
            self.table
            .update({
                "subject": subject,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            })
            .eq("id", draft_id)
            .execute()
        )
        return Draft.model_validate(first_row(data.data, f"Updating draft {draft_id}"))

    def delete(self, draft_id: str) -> None:
        """Delete a draft (cascades to entries and games)."""
        self.table.delete().eq("id", draft_id).execute()
