"""
Planilla (CSV) export in the exact column layout of the shared spreadsheet.

File: export/tabular.py
Created: 2026-10-14
Last Modified: 2026-10-14
"""

from typing import List, Sequence

from ..models import Contact, ContactStatus

PLANILLA_HEADERS = [
    "usuarios",
    "estado de revision",
    "",
    "estado actual",
    "VISTO, RESPONDIDO?",
    "RECUPERADO",
    "TURNO DE LAS CARGAS",
    "interesado en jugar?",
    "ya contactados",
    "recuperados!",
    "actualmente cargando",
    "TURNO MAÑANA",
    "TURNO TARDE",
    "TURNO NOCHE",
    "contactos a borrar",
]


def _review_text(status: ContactStatus) -> str:
    if status == ContactStatus.PLAYING:
        return "esta cargando"
    if status == ContactStatus.NO_MESSAGING:
        return "no esta en wsp"
    return "promo enviada"


def _actual_text(status: ContactStatus) -> str:
    if status in (ContactStatus.CONTACTED, ContactStatus.PLAYING):
        return "EN CONTACTO"
    if status == ContactStatus.NO_MESSAGING:
        return "NO ESTA EN WSP"
    return "MENSAJE ENVIADO"


def _yes_no(flag: bool) -> str:
    return "SI" if flag else "NO"


def _at(names: List[str], index: int) -> str:
    return names[index] if index < len(names) else ""


def export_tabular(contacts: Sequence[Contact]) -> str:
    """
    Render the collection as planilla CSV text.

    The "ya contactados", "recuperados!" and "actualmente cargando" columns
    are side lists kept by the spreadsheet: row i carries the i-th name of
    each list, not anything about the contact on that row.

    Cells are joined with bare commas, matching what the planilla import
    reads back.
    """
    playing_names = [c.name for c in contacts if c.status == ContactStatus.PLAYING]
    contacted_names = [c.name for c in contacts if c.status == ContactStatus.CONTACTED]
    recovered_names = [c.name for c in contacts if c.recovered]

    rows = [",".join(PLANILLA_HEADERS)]
    for i, c in enumerate(contacts):
        rows.append(",".join([
            c.name,
            _review_text(c.status),
            "",
            _actual_text(c.status),
            _yes_no(c.seen_replied),
            _yes_no(c.recovered),
            "",
            "NO" if c.status == ContactStatus.NOT_INTERESTED else "SI",
            _at(contacted_names, i),
            _at(recovered_names, i),
            _at(playing_names, i),
            "", "", "", "",
        ]))

    return "\n".join(rows)
