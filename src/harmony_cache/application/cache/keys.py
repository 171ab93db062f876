"""Application cache – CacheKey and CacheTag builders.

Call sites that never see each other's keys still agree on tag names, which
is what makes tag invalidation work across unrelated readers.
"""
from __future__ import annotations

import hashlib
import json

__all__ = ["RECORD_TAG_PREFIXES", "CacheKey", "CacheTag"]

# entity (table) name -> prefix of its per-record tag
RECORD_TAG_PREFIXES: dict[str, str] = {
    "patients": "patient",
    "appointments": "appointment",
    "prescriptions": "prescription",
    "lab_orders": "lab_order",
    "lab_results": "lab_result",
    "invoices": "invoice",
    "payments": "payment",
    "consultations": "consultation",
    "medications": "medication",
    "staff": "staff",
    "departments": "department",
}


class CacheKey:
    """Factory for deterministic cache key strings."""

    @staticmethod
    def for_resource(resource_type: str, resource_id: str | int) -> str:
        return f"{resource_type}:{resource_id}"

    @staticmethod
    def for_query(query_type: str, **kwargs: object) -> str:
        # deterministic: sort kwargs, JSON-encode, SHA-256 first 16 hex chars
        canonical = json.dumps(kwargs, sort_keys=True, default=str)
        digest = hashlib.sha256(canonical.encode()).hexdigest()[:16]
        return f"query:{query_type}:{digest}"


class CacheTag:
    """Factory for tag names shared between readers and writers."""

    @staticmethod
    def record_prefix(entity: str) -> str:
        """Singular prefix for *entity*; names outside the table pass through."""
        return RECORD_TAG_PREFIXES.get(entity, entity)

    @staticmethod
    def for_record(entity: str, record_id: str | int) -> str:
        """Tag of one record; ``"patients"`` and ``"patient"`` both give ``"patient-42"``."""
        return f"{CacheTag.record_prefix(entity)}-{record_id}"

    @staticmethod
    def for_collection(entity: str) -> str:
        """``CacheTag.for_collection("patients") == "patients-list"``."""
        return f"{entity}-list"

    @staticmethod
    def for_entity(entity: str) -> str:
        return f"entity:{entity}"

    @staticmethod
    def for_hospital(hospital_id: str | int) -> str:
        return f"hospital:{hospital_id}"
