import pytest

from splitctl.commands import run_new_split, run_send_to_split
from splitctl.config import Settings
from splitctl.errors import DeliveryReportedError
from splitctl.types import (
    Detect,
    Explicit,
    NewSplitPayload,
    SendToSplitPayload,
    SplitDirection,
    Verb,
)


def test_new_split_with_direction_only(transport, capsys) -> None:
    code = run_new_split(["--direction=right"], transport=transport)

    assert code == 0
    assert transport.calls == [
        (Detect(), Verb.NEW_SPLIT, NewSplitPayload(direction=SplitDirection.RIGHT, arguments=None)),
    ]
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_new_split_with_command(transport) -> None:
    code = run_new_split(["--direction=right", "-e", "vim", "file.txt"], transport=transport)

    assert code == 0
    _, _, payload = transport.calls[0]
    assert payload == NewSplitPayload(direction=SplitDirection.RIGHT, arguments=("vim", "file.txt"))


def test_new_split_defaults_to_auto(transport) -> None:
    assert run_new_split([], transport=transport) == 0
    _, _, payload = transport.calls[0]
    assert payload.direction is SplitDirection.AUTO


def test_new_split_with_class_targets_instance(transport) -> None:
    assert run_new_split(["--class=com.example.dev"], transport=transport) == 0
    target, _, _ = transport.calls[0]
    assert target == Explicit("com.example.dev")


def test_new_split_invalid_direction(transport, capsys) -> None:
    code = run_new_split(["--direction=sideways"], transport=transport)

    assert code == 1
    assert transport.calls == []
    err = capsys.readouterr().err
    assert "Invalid direction 'sideways'" in err
    assert "Usage: splitctl new-split" in err


def test_new_split_empty_command(transport, capsys) -> None:
    code = run_new_split(["--direction=down", "-e"], transport=transport)

    assert code == 1
    assert transport.calls == []
    assert "no command arguments were provided" in capsys.readouterr().err


def test_send_to_split_with_target(transport) -> None:
    code = run_send_to_split(["--target=2", "vim file.txt"], transport=transport)

    assert code == 0
    assert transport.calls == [
        (Detect(), Verb.SEND_TO_SPLIT, SendToSplitPayload(target="2", text="vim file.txt")),
    ]


def test_send_to_split_joins_words(transport) -> None:
    assert run_send_to_split(["--class", "work", "echo", "hello"], transport=transport) == 0
    target, _, payload = transport.calls[0]
    assert target == Explicit("work")
    assert payload == SendToSplitPayload(target="focused", text="echo hello")


def test_send_to_split_without_text(transport, capsys) -> None:
    code = run_send_to_split([], transport=transport)

    assert code == 1
    assert transport.calls == []
    err = capsys.readouterr().err
    assert "No text provided to send to split." in err
    assert "Usage: splitctl send-to-split [--target=<target>] <text>" in err


def test_send_to_split_with_empty_text(transport, capsys) -> None:
    assert run_send_to_split(["--target=1", ""], transport=transport) == 1
    assert transport.calls == []
    assert "No text provided" in capsys.readouterr().err


@pytest.mark.parametrize(
    ("argv", "text"),
    [
        (["-la"], "-la"),
        (["--", "-x"], "-x"),
        (["--target=2", "--", "--help"], "--help"),
    ],
)
def test_send_to_split_sends_dash_led_text(transport, argv, text) -> None:
    assert run_send_to_split(argv, transport=transport) == 0
    _, _, payload = transport.calls[0]
    assert payload.text == text


def test_send_to_split_bare_double_dash_has_no_text(transport, capsys) -> None:
    assert run_send_to_split(["--"], transport=transport) == 1
    assert transport.calls == []
    assert "No text provided" in capsys.readouterr().err


def test_new_split_flag_value_cannot_be_the_exec_sentinel(transport, capsys) -> None:
    assert run_new_split(["--class", "-e", "vim"], transport=transport) == 1
    assert transport.calls == []
    assert capsys.readouterr().err == "Error parsing args: missing value for '--class'\n"


@pytest.mark.parametrize(
    ("runner", "argv", "verb"),
    [
        (run_new_split, ["--direction=up"], "new-split"),
        (run_send_to_split, ["hello"], "send-to-split"),
    ],
)
def test_unsupported_platform(make_transport, capsys, runner, argv, verb) -> None:
    transport = make_transport(result=False)

    assert runner(argv, transport=transport) == 1
    assert f"+{verb} is not supported on this platform." in capsys.readouterr().err


@pytest.mark.parametrize("runner", [run_new_split, run_send_to_split])
@pytest.mark.parametrize("token", ["-h", "--help"])
def test_help_prints_usage_and_succeeds(transport, capsys, runner, token) -> None:
    assert runner([token], transport=transport) == 0
    assert transport.calls == []
    captured = capsys.readouterr()
    assert captured.out.startswith("Usage: splitctl ")
    assert "Examples:" in captured.out
    assert captured.err == ""


def test_parse_error_is_printed_verbatim(transport, capsys) -> None:
    assert run_new_split(["--bogus"], transport=transport) == 1
    assert transport.calls == []
    assert capsys.readouterr().err == "Error parsing args: unknown flag '--bogus'\n"


def test_diagnostics_are_warnings_when_collecting(transport, capsys) -> None:
    settings = Settings(collect_diagnostics=True)

    assert run_new_split(["--bogus=1", "--direction=left"], transport=transport, settings=settings) == 0
    assert len(transport.calls) == 1
    assert "warning: --bogus=1: unknown flag '--bogus'" in capsys.readouterr().err


def test_reported_failure_prints_nothing_more(make_transport, capsys) -> None:
    transport = make_transport(error=DeliveryReportedError("no server running"))

    assert run_send_to_split(["hi"], transport=transport) == 1
    assert capsys.readouterr().err == ""


def test_unreported_failure_prints_description(make_transport, capsys) -> None:
    transport = make_transport(error=OSError("connection refused"))

    assert run_new_split([], transport=transport) == 1
    assert capsys.readouterr().err == "Sending the IPC failed: connection refused\n"


@pytest.mark.parametrize("runner", [run_new_split, run_send_to_split])
def test_exactly_one_attempt_under_transient_failure(make_transport, runner) -> None:
    transport = make_transport(error=ConnectionResetError("peer went away"))

    assert runner(["--class=dev", "-e", "top"] if runner is run_new_split else ["ls"], transport=transport) == 1
    assert len(transport.calls) == 1


def test_transport_is_built_from_settings_when_not_given(monkeypatch, transport) -> None:
    built: list[Settings] = []

    def _fake_build_transport(settings: Settings):
        built.append(settings)
        return transport

    monkeypatch.setattr("splitctl.commands.pipeline.build_transport", _fake_build_transport)
    settings = Settings(tmux_binary="tmux-next")

    assert run_send_to_split(["ls"], settings=settings) == 0
    assert built == [settings]
    assert len(transport.calls) == 1


def test_invalid_input_never_builds_a_transport(monkeypatch) -> None:
    def _fail(_settings):
        raise AssertionError("transport must not be built")

    monkeypatch.setattr("splitctl.commands.pipeline.build_transport", _fail)
    assert run_new_split(["--direction=Right"]) == 1
