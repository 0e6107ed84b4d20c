"""
Notes API: Note Service Unit Tests
===================================

What:  Tests for NoteService business logic without HTTP.
How:   Each test gets a fresh service and a controllable clock from conftest.

What we test:
    ✅ Create: trimming (incl. Unicode spaces), id generation, equal timestamps,
       field rules
    ✅ Get / delete: not-found handling, double delete
    ✅ Update: partial merge, updatedAt advancing, rule ordering
    ✅ List: case-insensitive search over title and content
"""

import uuid

import pytest

from notes_api.exceptions import NotFoundError, ValidationError


class TestNoteServiceCreate:
    """Tests for create_note."""

    def test_create_note_success(self, note_service, clock):
        """Created note should be trimmed, stamped and stored."""
        note = note_service.create_note(title="  Groceries ", content="\tMilk, eggs\n")

        assert note.title == "Groceries"
        assert note.content == "Milk, eggs"
        assert uuid.UUID(note.id).version == 4
        assert note.created_at == clock.now
        assert note.created_at == note.updated_at
        assert len(note_service.store) == 1

    def test_create_note_ids_are_unique(self, note_service):
        ids = {note_service.create_note(title=f"t{i}", content="c").id for i in range(50)}
        assert len(ids) == 50

    @pytest.mark.parametrize("title", [None, "", "   ", 42, ["x"]])
    def test_create_note_invalid_title(self, note_service, title):
        with pytest.raises(ValidationError) as exc_info:
            note_service.create_note(title=title, content="body")

        assert exc_info.value.message == "Title is required and must be a non-empty string"
        assert exc_info.value.field == "title"
        assert len(note_service.store) == 0

    @pytest.mark.parametrize("content", [None, "", " \n ", 3.5])
    def test_create_note_invalid_content(self, note_service, content):
        with pytest.raises(ValidationError) as exc_info:
            note_service.create_note(title="title", content=content)

        assert exc_info.value.message == "Content is required and must be a non-empty string"

    def test_create_note_title_checked_before_content(self, note_service):
        with pytest.raises(ValidationError) as exc_info:
            note_service.create_note(title="", content="")
        assert exc_info.value.field == "title"

    @pytest.mark.parametrize("title", ["\ufeff", "\u3000\u00a0", "\u2028 \t"])
    def test_create_note_unicode_blank_title(self, note_service, title):
        """BOM, ideographic space, no-break space and U+2028 all count as blank."""
        with pytest.raises(ValidationError):
            note_service.create_note(title=title, content="body")

    def test_create_note_trims_unicode_spaces_only(self, note_service):
        note = note_service.create_note(title="\ufeff\u3000Plan\u00a0", content="\x85body\x1f")

        assert note.title == "Plan"
        # U+0085 and U+001F are not whitespace to clients, so they are kept
        assert note.content == "\x85body\x1f"

    def test_update_rejects_bom_only_title(self, note_service):
        created = note_service.create_note(title="T", content="C")
        with pytest.raises(ValidationError):
            note_service.update_note(created.id, {"title": "\ufeff"})


class TestNoteServiceGetAndDelete:
    """Tests for get_note and delete_note."""

    def test_get_note_found(self, note_service):
        created = note_service.create_note(title="a", content="b")
        assert note_service.get_note(created.id) == created

    def test_get_note_not_found(self, note_service):
        with pytest.raises(NotFoundError) as exc_info:
            note_service.get_note("does-not-exist")
        assert exc_info.value.message == "Note not found"
        assert exc_info.value.context["resource_id"] == "does-not-exist"

    def test_delete_note_twice(self, note_service):
        """Second delete of the same id should raise NotFoundError."""
        created = note_service.create_note(title="a", content="b")

        result = note_service.delete_note(created.id)
        assert result.success is True
        assert result.deleted_id == created.id
        assert len(note_service.store) == 0

        with pytest.raises(NotFoundError):
            note_service.delete_note(created.id)

    def test_delete_keeps_other_notes_in_order(self, note_service):
        first = note_service.create_note(title="1", content="x")
        second = note_service.create_note(title="2", content="x")
        third = note_service.create_note(title="3", content="x")

        note_service.delete_note(second.id)

        assert [n.id for n in note_service.list_notes().items] == [first.id, third.id]


class TestNoteServiceUpdate:
    """Tests for update_note."""

    def test_update_preserves_unspecified_fields(self, note_service, clock):
        created = note_service.create_note(title="Old title", content="Body")
        clock.advance(5)

        updated = note_service.update_note(created.id, {"title": "  New title  "})

        assert updated.title == "New title"
        assert updated.content == "Body"
        assert updated.created_at == created.created_at
        assert updated.updated_at > created.updated_at
        assert note_service.get_note(created.id) == updated

    def test_update_content_only(self, note_service):
        created = note_service.create_note(title="T", content="old")
        updated = note_service.update_note(created.id, {"content": "new"})
        assert (updated.title, updated.content) == ("T", "new")

    def test_update_unknown_id(self, note_service):
        with pytest.raises(NotFoundError):
            note_service.update_note("missing", {"title": "x"})

    def test_update_unknown_id_checked_before_body(self, note_service):
        with pytest.raises(NotFoundError):
            note_service.update_note("missing", {})

    def test_update_no_fields(self, note_service):
        created = note_service.create_note(title="T", content="C")
        with pytest.raises(ValidationError) as exc_info:
            note_service.update_note(created.id, {})
        assert exc_info.value.message == "Provide at least one of title or content to update"

    @pytest.mark.parametrize("field", ["title", "content"])
    @pytest.mark.parametrize("value", [None, "", "   ", 7])
    def test_update_invalid_field(self, note_service, field, value):
        created = note_service.create_note(title="T", content="C")
        with pytest.raises(ValidationError) as exc_info:
            note_service.update_note(created.id, {field: value})
        assert exc_info.value.message == f"If provided, {field} must be a non-empty string"
        assert note_service.get_note(created.id) == created

    def test_update_updated_at_never_goes_backwards(self, note_service, clock):
        created = note_service.create_note(title="T", content="C")
        clock.advance(-60)

        updated = note_service.update_note(created.id, {"content": "D"})

        assert updated.updated_at == created.updated_at


class TestNoteServiceList:
    """Tests for list_notes."""

    def test_list_notes_empty(self, note_service):
        result = note_service.list_notes()
        assert result.items == []
        assert result.count == 0

    def test_list_notes_insertion_order(self, note_service):
        created = [note_service.create_note(title=f"n{i}", content="c") for i in range(3)]
        result = note_service.list_notes()
        assert [n.id for n in result.items] == [n.id for n in created]
        assert result.count == 3

    def test_list_notes_search_is_case_insensitive(self, note_service):
        shopping = note_service.create_note(title="Shopping List", content="apples")
        meeting = note_service.create_note(title="Standup", content="Discuss the SHOP redesign")
        note_service.create_note(title="Journal", content="quiet day")

        result = note_service.list_notes(q="shop")

        assert [n.id for n in result.items] == [shopping.id, meeting.id]
        assert result.count == 2

    def test_list_notes_empty_query_returns_all(self, note_service):
        note_service.create_note(title="a", content="b")
        note_service.create_note(title="c", content="d")
        assert note_service.list_notes(q="").count == 2

    def test_list_notes_no_match(self, note_service):
        note_service.create_note(title="a", content="b")
        assert note_service.list_notes(q="zzz").count == 0
