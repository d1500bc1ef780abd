"""
Workflow status inference from the free-text planilla columns.

File: parsing/status.py
Created: 2026-10-12
Last Modified: 2026-10-12
"""

from typing import Optional

from ..models import ContactStatus


def classify_status(
    review_text: Optional[str],
    actual_text: Optional[str],
    interest_text: Optional[str],
) -> ContactStatus:
    """
    Derive a single status from the three planilla text columns.

    The checks run in a fixed order and the first match wins, so a row that
    says "no" to playing is NOT_INTERESTED even if its review column says it
    is loading credit.

    Args:
        review_text: "estado de revision" cell
        actual_text: "estado actual" cell
        interest_text: "interesado en jugar?" cell

    Returns:
        The inferred ContactStatus (UNREVIEWED when nothing matches)
    """
    review = (review_text or "").lower()
    actual = (actual_text or "").lower()
    interest = (interest_text or "").lower()

    if interest == "no":
        return ContactStatus.NOT_INTERESTED
    if "cargando" in review:  # also matches "esta cargando"
        return ContactStatus.PLAYING
    if "contacto" in actual:  # also matches "en contacto"
        return ContactStatus.CONTACTED
    if "no esta en wsp" in review:
        return ContactStatus.NO_MESSAGING
    return ContactStatus.UNREVIEWED
