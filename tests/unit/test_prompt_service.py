"""
Tests for the text, password and confirm prompt primitives.
"""

import pytest

from ttyprompt.domain.errors import InputExhausted, NotATerminal
from ttyprompt.domain.value_objects import PromptRequest


class TestPromptText:
    """Tests for PromptService.prompt_text."""

    @pytest.mark.parametrize("label", ["Name?", "", "What is your name?"])
    def test_returns_line_exactly(self, make_service, label):
        """Should return the answer once, whatever the label."""
        service, _, _ = make_service("abc\n")
        assert service.prompt_text(label) == "abc"

    def test_writes_label_to_status_stream(self, make_service, status):
        """Label plus one space should go to the status stream."""
        service, _, _ = make_service("abc\n")
        service.prompt_text("Name?")
        assert status.getvalue() == "Name? "

    def test_trims_both_sides(self, make_service):
        """Should trim symmetric outer whitespace."""
        service, _, _ = make_service("  hello  \n")
        assert service.prompt_text("Greeting?") == "hello"

    def test_keeps_internal_whitespace(self, make_service):
        """Should not collapse spaces inside the answer."""
        service, _, _ = make_service("Ada   Lovelace\n")
        assert service.prompt_text("Name?") == "Ada   Lovelace"

    def test_reprompts_on_empty(self, make_service, status):
        """Empty answers should repeat the prompt."""
        service, _, _ = make_service("\n\nvalue\n")
        assert service.prompt_text("Name?") == "value"
        assert status.getvalue().count("Name? ") == 3

    def test_empty_lines_then_end_of_input(self, make_service, status):
        """Only empty lines then EOF should fail instead of looping."""
        service, _, _ = make_service("\n\n\n")
        with pytest.raises(InputExhausted):
            service.prompt_text("Name?")
        # One prompt per provided line plus the one that hit end of input
        assert status.getvalue().count("Name? ") == 4

    def test_closed_empty_pipe(self, make_service):
        """An empty stream should fail on the first read."""
        service, _, _ = make_service("")
        with pytest.raises(InputExhausted) as exc_info:
            service.prompt_text("Name?")
        assert exc_info.value.label == "Name?"

    def test_uses_default_on_empty(self, make_service, status):
        """Empty answer should return the default."""
        service, _, _ = make_service("\n")
        assert service.prompt_text("Name?", default="Ada") == "Ada"
        assert status.getvalue() == "Name? (default: Ada) "

    def test_rejects_default_failing_validator(self, make_service):
        """A default the validator rejects should never be returned."""
        service, stream, _ = make_service("\n")
        with pytest.raises(ValueError, match="fails its own validator"):
            service.prompt_text("Age?", default="abc", validator=str.isdigit)
        assert stream.tell() == 0

    def test_rejects_empty_default(self, make_service):
        """An empty default would break the non-empty guarantee."""
        service, stream, _ = make_service("\n")
        with pytest.raises(ValueError):
            service.prompt_text("Name?", default="")
        assert stream.tell() == 0

    def test_default_passing_validator(self, make_service):
        """A valid default should still be used on an empty answer."""
        service, _, _ = make_service("\n")
        assert service.prompt_text("Age?", default="42", validator=str.isdigit) == "42"

    def test_answer_overrides_default(self, make_service):
        """A typed answer should win over the default."""
        service, _, _ = make_service("Grace\n")
        assert service.prompt_text("Name?", default="Ada") == "Grace"

    def test_validator_rejections_reprompt(self, make_service, status):
        """Rejected answers should warn and re-prompt."""
        service, _, _ = make_service("abc\n42\n")
        assert service.prompt_text("Age?", validator=str.isdigit) == "42"
        assert "[WARNING] 'abc' is not a valid answer." in status.getvalue()

    def test_validator_cannot_accept_empty(self, make_service):
        """Text prompts should still require a non-empty answer."""
        service, _, _ = make_service("\nok\n")
        assert service.prompt_text("Name?", validator=lambda raw: True) == "ok"

    def test_works_on_redirected_input(self, make_service):
        """Text prompts should read from pipes as well as terminals."""
        service, _, _ = make_service("piped\n", interactive=False)
        assert service.prompt_text("Name?") == "piped"


class TestAsk:
    """Tests for PromptService.ask with a PromptRequest."""

    def test_custom_validator_may_accept_empty(self, make_service):
        """A request's own validator decides what is valid."""
        service, _, _ = make_service("\n")
        request = PromptRequest(label="Comment?", validator=lambda raw: True)
        assert service.ask(request) == ""

    def test_default_request(self, make_service):
        """Default request should behave like a text prompt."""
        service, _, _ = make_service("\nyes\n")
        assert service.ask(PromptRequest(label="Say it")) == "yes"


class TestPromptPassword:
    """Tests for PromptService.prompt_password."""

    def test_reads_hidden_input(self, make_service, status):
        """Should return the secret and restore echo."""
        service, _, terminal = make_service("hunter2\n", interactive=True)

        assert service.prompt_password("What is your password?") == "hunter2"
        assert status.getvalue() == "What is your password? \n"
        assert terminal.events == ["disable", ("restore", "saved-attrs")]

    def test_reprompts_on_empty(self, make_service, status):
        """Empty secrets should repeat the prompt, one masked read each."""
        service, _, terminal = make_service("\nhunter2\n", interactive=True)

        assert service.prompt_password("Password?") == "hunter2"
        assert status.getvalue().count("Password? ") == 2
        assert terminal.events.count("disable") == 2
        assert terminal.echo_enabled is True

    def test_empty_secret_warns(self, make_service, status):
        """An empty secret should explain why it was rejected."""
        service, _, _ = make_service("\nhunter2\n", interactive=True)
        service.prompt_password("Password?")
        assert status.getvalue().count("[WARNING] Input is required. Please enter a value.") == 1

    def test_end_of_input(self, make_service):
        """Ctrl-D on an empty line should fail instead of looping."""
        service, _, terminal = make_service("\n", interactive=True)
        with pytest.raises(InputExhausted):
            service.prompt_password("Password?")
        assert terminal.echo_enabled is True

    def test_not_a_terminal(self, make_service, status):
        """Redirected input should fail without reading any bytes."""
        service, stream, terminal = make_service("secret\n", interactive=False)

        with pytest.raises(NotATerminal):
            service.prompt_password("Password?")

        assert stream.tell() == 0
        assert status.getvalue() == ""
        assert terminal.events == []


class TestPromptConfirm:
    """Tests for PromptService.prompt_confirm."""

    @pytest.mark.parametrize("answer", ["y", "Y", "yes", "YES", "Yes", "  yes  "])
    def test_yes_forms(self, make_service, answer):
        """Should accept every yes form case-insensitively."""
        service, _, _ = make_service(f"{answer}\n")
        assert service.prompt_confirm("Continue?", default=False) is True

    @pytest.mark.parametrize("answer", ["n", "N", "no", "NO", "No"])
    def test_no_forms(self, make_service, answer):
        """Should accept every no form case-insensitively."""
        service, _, _ = make_service(f"{answer}\n")
        assert service.prompt_confirm("Continue?", default=True) is False

    def test_empty_returns_default_true(self, make_service):
        """Empty answer should return True when default is True."""
        service, _, _ = make_service("\n")
        assert service.prompt_confirm("Continue?", default=True) is True

    def test_empty_returns_default_false(self, make_service):
        """Empty answer should return False when default is False."""
        service, _, _ = make_service("\n")
        assert service.prompt_confirm("Continue?", default=False) is False

    def test_hint_reflects_default(self, make_service, status):
        """Default side of the hint should be capitalized."""
        service, _, _ = make_service("y\n")
        service.prompt_confirm("Continue?", default=True)
        assert status.getvalue() == "Continue? [Y/n] "

        status.seek(0)
        status.truncate()
        service, _, _ = make_service("y\n")
        service.prompt_confirm("Continue?", default=False)
        assert status.getvalue() == "Continue? [y/N] "

    def test_unrecognized_answer_reprompts_once(self, make_service, status):
        """One unknown answer should cause exactly one extra prompt."""
        service, _, _ = make_service("maybe\ny\n")

        assert service.prompt_confirm("Continue?") is True
        assert status.getvalue().count("Continue? [Y/n] ") == 2
        assert "[WARNING] Please enter 'y' or 'n'." in status.getvalue()

    def test_unrecognized_answers_then_end_of_input(self, make_service, status):
        """Unknown answers followed by EOF should fail, not loop."""
        service, _, _ = make_service("maybe\nsure\n")
        with pytest.raises(InputExhausted):
            service.prompt_confirm("Continue?")
        assert status.getvalue().count("Continue? [Y/n] ") == 3

    def test_closed_pipe(self, make_service):
        """An empty stream should fail rather than return the default."""
        service, _, _ = make_service("")
        with pytest.raises(InputExhausted):
            service.prompt_confirm("Continue?", default=True)
