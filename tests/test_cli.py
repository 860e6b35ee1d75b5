import pytest

from human_ids.cli import Shell, build_parser, completion_script, main
from human_ids.words import ADJECTIVES, ADVERBS, NOUNS, VERBS


def _run(capsys, argv):
    assert main(argv) == 0
    return capsys.readouterr().out


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.separator == "-"
    assert args.capitalize is False
    assert args.adverb is False
    assert args.num_adjectives == 1
    assert args.completion is None


def test_default_output_is_lowercase(capsys):
    out = _run(capsys, []).strip()
    adjective, noun, verb = out.split("-")
    assert adjective in ADJECTIVES
    assert noun in NOUNS
    assert verb in VERBS


def test_capitalize_flag(capsys):
    parts = _run(capsys, ["-c"]).strip().split("-")
    assert len(parts) == 3
    assert all(p[0].isupper() for p in parts)
    assert parts[1].lower() in NOUNS


def test_adverb_and_count(capsys):
    parts = _run(capsys, ["--adverb", "-n", "3"]).strip().split("-")
    assert len(parts) == 6
    assert all(p in ADJECTIVES for p in parts[:3])
    assert parts[3] in NOUNS
    assert parts[4] in VERBS
    assert parts[5] in ADVERBS


def test_custom_separator(capsys):
    parts = _run(capsys, ["--separator", "_", "-n", "0"]).strip().split("_")
    assert len(parts) == 2
    assert parts[0] in NOUNS
    assert parts[1] in VERBS


def test_negative_count_is_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-n", "-1"])
    assert excinfo.value.code == 2


def test_unknown_shell_is_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--completion", "cmd"])
    assert excinfo.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert "0.1.1" in capsys.readouterr().out


@pytest.mark.parametrize("shell", list(Shell))
def test_completion_output_matches_script(capsys, shell):
    out = _run(capsys, ["--completion", shell.value])
    assert out == completion_script(shell)


@pytest.mark.parametrize("shell", list(Shell))
def test_completion_mentions_program_and_options(shell):
    script = completion_script(shell)
    assert "human-ids" in script
    for option in ("separator", "capitalize", "adverb", "num-adjectives", "completion"):
        assert option in script


def test_completion_accepts_names():
    assert completion_script("zsh") == completion_script(Shell.ZSH)
    assert completion_script("fish").count("complete -c human-ids") == 7


def test_completion_lists_shell_choices():
    script = completion_script(Shell.BASH)
    assert all(shell.value in script for shell in Shell)


def test_completion_unknown_shell_raises():
    with pytest.raises(ValueError):
        completion_script("cmd")