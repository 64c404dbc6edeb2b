"""
Hear Me Out - Entry Manager

CRUD operations for the `entries` table.
"""

from supabase import Client

from src.database.errors import first_row
from src.database.models import Entry


class EntryManager:
    """Manages the entry pool of a draft in Supabase."""

    def __init__(self, client: Client) -> None:
        self.client = client
        self.table = client.table("entries")

    def add(self, draft_id: str, name: str, image_url: str | None = None) -> Entry:
        """Add an entry to a draft's pool."""
        data = (
            self.table
            .insert({
                "draft_id": draft_id,
                "name": name,
                "image_url": image_url,
            })
            .execute()
        )
        return Entry.model_validate(first_row(data.data, "Adding entry"))

    def list_by_draft(self, draft_id: str) -> list[Entry]:
        """Get a draft's pool in creation order."""
        data = (
            self.table
            .select("*")
            .eq("draft_id", draft_id)
            .order("created_at")
            .execute()
        )
        return [Entry.model_validate(row) for row in data.data]

    def update(self, entry_id: str, name: str, image_url: str | None = None) -> Entry:
        """Rename an entry or change its image."""
        data = (
            self.table
            .update({"name": name, "image_url": image_url})
            .eq("id", entry_id)
            .execute()
        )
        return Entry.model_validate(first_row(data.data, f"Updating entry {entry_id}"))

    def delete(self, entry_id: str) -> None:
        """Remove an entry from the pool."""
        self.table.delete().eq("id", entry_id).execute()
