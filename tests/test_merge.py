"""Tests for merging parsed contacts into the held collection."""

from datetime import datetime, timezone

from gestor.models import ContactOrigin, ContactStatus
from gestor.parsing import parse_tabular, parse_vcard
from gestor.reconcile import (
    MergeSummary,
    NameIdentity,
    PhoneIdentity,
    merge_contacts,
    reconcile,
)


def _content(contacts):
    """Everything but the timestamp, for idempotence checks."""
    return [c.model_dump(exclude={"last_updated"}) for c in contacts]


class TestMergeContacts:

    def test_disjoint_names_are_appended_in_order(self, make_contact):
        existing = [make_contact("Ana"), make_contact("Bruno")]
        incoming = [make_contact("Carla"), make_contact("Dario")]

        merged = merge_contacts(existing, incoming)

        assert len(merged) == len(existing) + len(incoming)
        assert [c.name for c in merged] == ["Ana", "Bruno", "Carla", "Dario"]
        assert [c.id for c in merged] == [c.id for c in existing + incoming]

    def test_match_is_case_insensitive_and_trimmed(self, make_contact):
        existing = [make_contact("Ana Lopez")]
        merged = merge_contacts(existing, [make_contact("  ana LOPEZ ")])
        assert len(merged) == 1

    def test_matching_record_keeps_existing_id(self, make_contact):
        original = make_contact("Ana")
        merged = merge_contacts([original], [make_contact("ana", status=ContactStatus.PLAYING)])

        assert merged[0].id == original.id
        assert merged[0].status == ContactStatus.PLAYING

    def test_incoming_fields_overwrite(self, make_contact):
        original = make_contact("Ana", seen_replied=True, interested=True)
        update = make_contact(
            "ANA",
            status=ContactStatus.NOT_INTERESTED,
            seen_replied=False,
            recovered=True,
            interested=False,
            last_updated=datetime(2026, 5, 1, tzinfo=timezone.utc),
        )

        merged = merge_contacts([original], [update])[0]

        assert merged.name == "ANA"
        assert merged.status == ContactStatus.NOT_INTERESTED
        assert merged.seen_replied is False
        assert merged.recovered is True
        assert merged.interested is False
        assert merged.last_updated == update.last_updated

    def test_known_phone_never_regresses(self, make_contact):
        existing = [make_contact("Ana", phone="111")]
        merged = merge_contacts(existing, [make_contact("Ana", phone="")])
        assert merged[0].phone == "111"

    def test_known_phone_is_not_replaced(self, make_contact):
        existing = [make_contact("Ana", phone="111")]
        merged = merge_contacts(existing, [make_contact("Ana", phone="222")])
        assert merged[0].phone == "111"

    def test_empty_phone_adopts_incoming(self, make_contact):
        existing = [make_contact("Ana", phone="")]
        merged = merge_contacts(existing, [make_contact("Ana", phone="222")])
        assert merged[0].phone == "222"

    def test_origin_stays_with_existing_record(self, make_contact):
        existing = [make_contact("Ana", origin=ContactOrigin.CARD, phone="111")]
        merged = merge_contacts(existing, [make_contact("Ana", origin=ContactOrigin.TABULAR)])
        assert merged[0].origin == ContactOrigin.CARD

    def test_existing_order_is_stable(self, make_contact):
        existing = [make_contact("Ana"), make_contact("Bruno"), make_contact("Carla")]
        incoming = [make_contact("Dario"), make_contact("carla"), make_contact("ana")]

        merged = merge_contacts(existing, incoming)

        assert [c.name for c in merged] == ["ana", "Bruno", "carla", "Dario"]

    def test_duplicates_within_incoming_collapse(self, make_contact):
        incoming = [
            make_contact("Ana", phone=""),
            make_contact("ANA", phone="333", status=ContactStatus.CONTACTED),
        ]
        merged = merge_contacts([], incoming)

        assert len(merged) == 1
        assert merged[0].id == incoming[0].id
        assert merged[0].phone == "333"
        assert merged[0].status == ContactStatus.CONTACTED

    def test_inputs_are_not_mutated(self, make_contact):
        original = make_contact("Ana", status=ContactStatus.UNREVIEWED)
        existing = [original]
        merge_contacts(existing, [make_contact("Ana", status=ContactStatus.PLAYING)])

        assert existing == [original]
        assert original.status == ContactStatus.UNREVIEWED

    def test_empty_inputs(self, make_contact):
        assert merge_contacts([], []) == []
        ana = make_contact("Ana")
        assert merge_contacts([ana], []) == [ana]

    def test_idempotent(self, make_contact):
        existing = [make_contact("Ana", phone="111"), make_contact("Bruno")]
        incoming = [
            make_contact("ana", status=ContactStatus.PLAYING),
            make_contact("Carla", phone="222"),
        ]

        once = merge_contacts(existing, incoming)
        twice = merge_contacts(once, incoming)

        assert _content(twice) == _content(once)


class TestReconcile:

    def test_summary_counts(self, make_contact):
        existing = [make_contact("Ana")]
        incoming = [make_contact("Ana"), make_contact("Bruno"), make_contact("Carla")]

        merged, summary = reconcile(existing, incoming)

        assert len(merged) == 3
        assert summary == MergeSummary(added=2, updated=1)
        assert summary.total == 3

    def test_planilla_then_agenda(self):
        planilla = parse_tabular(
            "usuarios,estado de revision,,estado actual,VISTO,RECUPERADO,,interesado en jugar?\n"
            "Luis Perez,esta cargando,,EN CONTACTO,SI,NO,,si\n"
        )
        agenda = parse_vcard("BEGIN:VCARD\nFN:luis perez\nTEL:+54 9 351-000111\nEND:VCARD")

        merged = merge_contacts(planilla, agenda)

        assert len(merged) == 1
        luis = merged[0]
        assert luis.id == planilla[0].id
        assert luis.phone == "549351000111"
        assert luis.origin == ContactOrigin.TABULAR
        # Agenda records always come in unreviewed and overwrite the status
        assert luis.status == ContactStatus.UNREVIEWED

    def test_phone_identity_merges_renamed_contact(self, make_contact):
        existing = [make_contact("Luis", phone="16502530000")]
        incoming = [make_contact("Luis Perez", phone="+1 (650) 253-0000")]

        merged = merge_contacts(existing, incoming, identity=PhoneIdentity("AR"))

        assert len(merged) == 1
        assert merged[0].id == existing[0].id
        assert merged[0].name == "Luis Perez"

    def test_phone_identity_agenda_then_planilla(self):
        agenda = parse_vcard("BEGIN:VCARD\nFN:Luis Perez\nTEL:+1 650 253 0000\nEND:VCARD")
        planilla = parse_tabular("usuarios,estado de revision\nLuis Perez,esta cargando\n")

        merged = merge_contacts(agenda, planilla, identity=PhoneIdentity("AR"))

        assert len(merged) == 1
        luis = merged[0]
        assert luis.id == agenda[0].id
        assert luis.phone == "16502530000"
        assert luis.status == ContactStatus.PLAYING

    def test_phone_identity_name_match_then_phone_match(self, make_contact):
        existing = [make_contact("Luis", phone="")]
        incoming = [
            make_contact("luis", phone="16502530000"),
            make_contact("Luis Perez", phone="16502530000"),
        ]

        merged, summary = reconcile(existing, incoming, identity=PhoneIdentity("US"))

        assert summary == MergeSummary(added=0, updated=2)
        assert [c.name for c in merged] == ["Luis Perez"]
        assert merged[0].id == existing[0].id

    def test_name_identity_is_default(self, make_contact):
        existing = [make_contact("Luis", phone="549351000111")]
        incoming = [make_contact("Luis Perez", phone="549351000111")]

        assert len(merge_contacts(existing, incoming)) == 2
        assert len(merge_contacts(existing, incoming, identity=NameIdentity())) == 2
