"""Tests for the Task record and its line format."""

import pytest

from todo_cli.tasks.models import InvalidNoteError, Status, Task, TaskParseError


class TestTaskNew:
    def test_new_task_is_open(self):
        task = Task.new("buy milk")
        assert task.status is Status.TODO
        assert task.note == "buy milk"
        assert not task.is_done

    def test_empty_note_allowed(self):
        assert Task.new("").note == ""

    @pytest.mark.parametrize("note", ["two\nlines", "carriage\rreturn", "trailing\n"])
    def test_line_breaks_rejected(self, note):
        with pytest.raises(InvalidNoteError):
            Task.new(note)

    def test_invalid_note_is_value_error(self):
        with pytest.raises(ValueError):
            Task.new("a\nb")


class TestTaskTransitions:
    def test_check_marks_done(self):
        task = Task.new("a").check()
        assert task.status is Status.DONE
        assert task.note == "a"

    def test_undo_marks_open(self):
        task = Task(Status.DONE, "a").undo()
        assert task == Task(Status.TODO, "a")

    def test_check_is_idempotent(self):
        task = Task.new("a")
        assert task.check().check() == task.check()

    def test_undo_is_idempotent(self):
        task = Task(Status.DONE, "a")
        assert task.undo().undo() == task.undo()

    def test_check_on_done_returns_same_task(self):
        task = Task(Status.DONE, "a")
        assert task.check() is task

    def test_undo_on_open_returns_same_task(self):
        task = Task.new("a")
        assert task.undo() is task

    def test_undo_after_check_restores_open_task(self):
        task = Task.new("a")
        assert task.check().undo() == task

    def test_check_after_undo_restores_done_task(self):
        task = Task(Status.DONE, "a")
        assert task.undo().check() == task

    def test_check_and_undo_are_not_full_inverses(self):
        # A done task does not come back done from undo(check(...))
        done = Task(Status.DONE, "a")
        assert done.check().undo() != done
        # An open task does not come back open from check(undo(...))
        todo = Task.new("a")
        assert todo.undo().check() != todo


class TestTaskParse:
    def test_parse_open(self):
        assert Task.parse("- [ ] buy milk") == Task(Status.TODO, "buy milk")

    def test_parse_done(self):
        assert Task.parse("- [x] buy milk") == Task(Status.DONE, "buy milk")

    def test_parse_empty_note(self):
        assert Task.parse("- [ ] ") == Task(Status.TODO, "")

    def test_note_kept_verbatim(self):
        task = Task.parse("- [x]   spaced  out  ")
        assert task.note == "  spaced  out  "

    def test_note_may_contain_checkbox_text(self):
        assert Task.parse("- [ ] - [x] nested").note == "- [x] nested"

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "buy milk",
            "- [X] upper case",
            "- [-] dash",
            "- [\t] tab",
            "- [] missing status",
            "- [ ]",
            "- [ ]no space",
            "* [ ] star bullet",
            " - [ ] leading space",
            "-[ ] no space after dash",
        ],
    )
    def test_invalid_lines(self, line):
        with pytest.raises(TaskParseError) as exc_info:
            Task.parse(line)
        assert exc_info.value.line == line


class TestTaskRender:
    def test_render_open(self):
        assert Task.new("buy milk").render() == "- [ ] buy milk"

    def test_render_done(self):
        assert Task(Status.DONE, "buy milk").render() == "- [x] buy milk"

    @pytest.mark.parametrize("status", list(Status))
    @pytest.mark.parametrize("note", ["", "buy milk", "  padded  ", "ünïcødé ✓", "[bold]markup[/]"])
    def test_parse_inverts_render(self, status, note):
        task = Task(status, note)
        assert Task.parse(task.render()) == task


class TestTaskDisplay:
    def test_open_task_display(self):
        text = Task.new("buy milk").display()
        assert text.plain == "✖ buy milk"

    def test_done_task_display(self):
        text = Task(Status.DONE, "buy milk").display()
        assert text.plain == "✓ buy milk"

    def test_glyph_colors(self):
        done = Task(Status.DONE, "a").display()
        todo = Task.new("a").display()
        assert done.spans[0].style == "green"
        assert todo.spans[0].style == "red"

    def test_markup_in_note_is_not_interpreted(self):
        text = Task.new("[bold]x[/bold]").display()
        assert text.plain == "✖ [bold]x[/bold]"
