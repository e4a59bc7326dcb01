"""SQLite migrations for the project record store."""

from __future__ import annotations

import aiosqlite

SCHEMA_VERSION = 1


async def apply_migrations(conn: aiosqlite.Connection) -> None:
    """Create the projects table if missing and set schema version."""
    await conn.execute(
        """
        CREATE TABLE IF NOT EXISTS schema_migrations (
            version INTEGER PRIMARY KEY
        )
        """
    )

    await conn.execute(
        """
        CREATE TABLE IF NOT EXISTS projects (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            description TEXT NOT NULL DEFAULT '',
            status TEXT NOT NULL,
            website_url TEXT,
            repo_url TEXT,
            image_url TEXT,
            tech_stack TEXT NOT NULL DEFAULT '[]',
            files TEXT NOT NULL DEFAULT '',
            item_type TEXT NOT NULL DEFAULT 'app',
            created_at INTEGER NOT NULL,
            change_history TEXT NOT NULL DEFAULT '[]',
            git_state TEXT
        )
        """
    )

    await conn.execute("DELETE FROM schema_migrations")
    await conn.execute("INSERT INTO schema_migrations(version) VALUES (?)", (SCHEMA_VERSION,))
    await conn.commit()
