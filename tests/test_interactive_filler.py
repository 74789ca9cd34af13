import pytest

from util_dotenv.services.interactive_filler import fill, fill_env_file
from util_dotenv.services.storage import EnvFileStorage
from util_dotenv.utils.errors import EnvFileIOError, PromptCancelledError


def test_fill_commits_when_every_answer_is_given(scripted_prompt):
    prompt = scripted_prompt(["1", "two"])
    result = fill(["A=", "# comment", "B=old"], prompt)

    assert result.committed is True
    assert result.lines == ["A=1", "# comment", "B=two"]
    assert prompt.keys == ["A", "B"]


def test_fill_mixed_answers_commit(scripted_prompt):
    result = fill("A=\n#comment\nB=\n".split("\n"), scripted_prompt(["x", ""]))

    assert result.committed is True
    assert "\n".join(result.lines) == "A=x\n#comment\nB=\n"


def test_fill_does_not_commit_when_all_answers_are_empty(scripted_prompt):
    result = fill(["A=", "B="], scripted_prompt(["", None]))

    assert result.committed is False
    assert result.lines == ["A=", "B="]


def test_whitespace_only_answer_does_not_commit(scripted_prompt):
    result = fill(["A="], scripted_prompt(["   "]))

    assert result.committed is False
    assert result.lines == ["A=   "]


def test_template_without_assignments_never_commits(scripted_prompt):
    prompt = scripted_prompt([])
    result = fill(["# only comments", "", "MALFORMED"], prompt)

    assert result.committed is False
    assert result.lines == ["# only comments", "", "MALFORMED"]
    assert prompt.keys == []


def test_fill_uses_trimmed_key_and_keeps_extra_separators(scripted_prompt):
    prompt = scripted_prompt(["a=b"])
    result = fill(["  URL = "], prompt)

    assert prompt.keys == ["URL"]
    assert result.lines == ["URL=a=b"]


def test_cancellation_propagates_and_stops_prompting(scripted_prompt):
    prompt = scripted_prompt(["x", PromptCancelledError("B"), "never"])
    with pytest.raises(PromptCancelledError):
        fill(["A=", "B=", "C="], prompt)
    assert prompt.keys == ["A", "B"]


def test_fill_env_file_writes_only_when_committed(tmp_path, scripted_prompt):
    template = tmp_path / ".env.example"
    target = tmp_path / ".env"
    template.write_text("A=\n# c\nB=\n", encoding="utf-8")

    skipped = fill_env_file(template, target, scripted_prompt(["", ""]))
    assert skipped.committed is False
    assert not target.exists()

    written = fill_env_file(template, target, scripted_prompt(["1", ""]))
    assert written.committed is True
    assert target.read_text(encoding="utf-8") == "A=1\n# c\nB=\n"


def test_fill_env_file_cancel_leaves_existing_file(tmp_path, scripted_prompt):
    template = tmp_path / ".env.example"
    target = tmp_path / ".env"
    template.write_text("A=\nB=\n", encoding="utf-8")
    target.write_text("A=keep\n", encoding="utf-8")

    with pytest.raises(PromptCancelledError):
        fill_env_file(template, target, scripted_prompt(["new", PromptCancelledError("B")]))

    assert target.read_text(encoding="utf-8") == "A=keep\n"


def test_fill_env_file_encoding_failure_keeps_existing_file(tmp_path, scripted_prompt):
    template = tmp_path / ".env.example"
    target = tmp_path / ".env"
    template.write_text("A=\n", encoding="utf-8")
    target.write_text("A=keep\n", encoding="utf-8")

    with pytest.raises(EnvFileIOError):
        fill_env_file(template, target, scripted_prompt(["café"]), EnvFileStorage("ascii"))

    assert target.read_text(encoding="utf-8") == "A=keep\n"
