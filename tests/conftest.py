"""Shared pytest fixtures for the test suite."""

from datetime import datetime, timezone

import pytest

from gestor.models import Contact, ContactOrigin, ContactStatus


PLANILLA_HEADER = "usuarios,estado de revision,,estado actual,VISTO RESPONDIDO?,RECUPERADO,TURNO DE LAS CARGAS,interesado en jugar?"


@pytest.fixture
def planilla_header():
    return PLANILLA_HEADER


@pytest.fixture
def make_contact():
    """Factory for Contact records with sensible defaults."""
    def _make(name="Ana", **overrides):
        fields = {
            "name": name,
            "phone": "",
            "origin": ContactOrigin.TABULAR,
            "status": ContactStatus.UNREVIEWED,
            "last_updated": datetime(2026, 1, 1, tzinfo=timezone.utc),
        }
        fields.update(overrides)
        return Contact(**fields)
    return _make
