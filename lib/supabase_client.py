# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for the waitlist table in Supabase.
# It implements the singleton pattern to reuse a single client connection
# and exposes the two operations the waitlist needs:
# - insert one signup (the unique constraint on email is the duplicate check)
# - count all signups
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   row = SupabaseClient.insert_signup({"email": "a@b.co", "name": None, "message": None})
#   total = SupabaseClient.count_signups()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from postgrest.exceptions import APIError
from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Carries a machine-readable code plus an optional suggestion for
    whoever reads the logs.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class DuplicateRecordError(SupabaseClientError):
    """Insert rejected by a unique constraint."""

    def __init__(self, table: str, error: str):
        super().__init__(
            message=f"Duplicate key in {table}: {error}",
            code="DUPLICATE_KEY",
            details={"table": table},
        )


class SupabaseClient:
    """
    Typed wrapper for waitlist database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods, so the class itself is
    what gets injected into the waitlist service.
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    # -------------------------------------------------------------------------
    # Waitlist Operations
    # -------------------------------------------------------------------------

    @classmethod
    def insert_signup(cls, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert one signup row.

        Args:
            data: Row with email, name and message. created_at is left to
                the table default.

        Returns:
            Inserted row (with generated id and created_at), or the input
            row if PostgREST returned no representation.

        Raises:
            DuplicateRecordError: If the email already exists
            SupabaseClientError: If the insert fails for any other reason
        """
        client = cls.get_client()
        table = settings.WAITLIST_TABLE

        try:
            response = (
                client.table(table)
                .insert(data)
                .execute()
            )

        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateRecordError(table, e.message or str(e))
            raise SupabaseClientError(
                message=f"Failed to insert signup: {e}",
                code="INSERT_SIGNUP_FAILED",
                suggestion=f"Check that the {table} table exists and matches supabase/schema.sql",
                details={"table": table, "postgres_code": e.code},
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert signup: {e}",
                code="INSERT_SIGNUP_FAILED",
                details={"table": table},
            )

        if response.data:
            return response.data[0]
        return data

    @classmethod
    def count_signups(cls) -> int:
        """
        Count every row in the waitlist table.

        Raises:
            SupabaseClientError: If the count query fails
        """
        client = cls.get_client()
        table = settings.WAITLIST_TABLE

        try:
            response = (
                client.table(table)
                .select("*", count="exact", head=True)
                .execute()
            )
            return response.count or 0

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to count signups: {e}",
                code="COUNT_SIGNUPS_FAILED",
                details={"table": table},
            )

    @classmethod
    def ping(cls) -> None:
        """
        Cheap query used by the readiness probe.

        Raises:
            SupabaseClientError: If the table cannot be reached
        """
        client = cls.get_client()
        try:
            client.table(settings.WAITLIST_TABLE).select("id").limit(1).execute()
        except Exception as e:
            raise SupabaseClientError(
                message=f"Waitlist table unreachable: {e}",
                code="PING_FAILED",
            )
