"""Command-line interface for generating identifiers."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from human_ids.generator import Options, generate

PROG = "human-ids"
_VERSION = "0.1.1"
_DESCRIPTION = "Generate human-readable IDs"


class Shell(Enum):
    """Shells that completion scripts can be produced for."""

    BASH = "bash"
    ELVISH = "elvish"
    FISH = "fish"
    POWERSHELL = "powershell"
    ZSH = "zsh"


@dataclass(frozen=True)
class _OptionSpec:
    short: str | None
    long: str
    help: str
    metavar: str | None = None
    choices: tuple[str, ...] = ()

    @property
    def takes_value(self) -> bool:
        return self.metavar is not None

    @property
    def flags(self) -> list[str]:
        return [f for f in (self.short and f"-{self.short}", f"--{self.long}") if f]


_SHELL_NAMES = tuple(shell.value for shell in Shell)

_OPTIONS = (
    _OptionSpec(None, "completion", "Generate shell completion scripts", "SHELL", _SHELL_NAMES),
    _OptionSpec("s", "separator", "The separator to use between words", "SEPARATOR"),
    _OptionSpec("c", "capitalize", "Capitalize each word"),
    _OptionSpec("a", "adverb", "Add an adverb"),
    _OptionSpec("n", "num-adjectives", "The number of adjectives to use", "NUM_ADJECTIVES"),
    _OptionSpec("h", "help", "Print help"),
    _OptionSpec("V", "version", "Print version"),
)


def _count(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"number must not be negative: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command."""
    parser = argparse.ArgumentParser(prog=PROG, description=_DESCRIPTION)
    parser.add_argument(
        "--completion",
        choices=_SHELL_NAMES,
        metavar="SHELL",
        help="Generate shell completion scripts for the specified shell",
    )
    parser.add_argument(
        "-s", "--separator", default="-", help="The separator to use between words"
    )
    parser.add_argument(
        "-c", "--capitalize", action="store_true", help="Capitalize each word"
    )
    parser.add_argument("-a", "--adverb", action="store_true", help="Add an adverb")
    parser.add_argument(
        "-n",
        "--num-adjectives",
        type=_count,
        default=1,
        help="The number of adjectives to use",
    )
    parser.add_argument("-V", "--version", action="version", version=f"{PROG} {_VERSION}")
    return parser


def _bash_script() -> str:
    all_flags = " ".join(flag for spec in _OPTIONS for flag in spec.flags)
    value_cases = []
    for spec in _OPTIONS:
        if not spec.takes_value:
            continue
        pattern = "|".join(spec.flags)
        reply = f'$(compgen -W "{" ".join(spec.choices)}" -- "${{cur}}")' if spec.choices else ""
        value_cases.append(
            f"        {pattern})\n"
            f"            COMPREPLY=({reply})\n"
            f"            return 0\n"
            f"            ;;"
        )
    cases = "\n".join(value_cases)
    return (
        "_human_ids() {\n"
        "    local cur prev opts\n"
        "    COMPREPLY=()\n"
        '    cur="${COMP_WORDS[COMP_CWORD]}"\n'
        '    prev="${COMP_WORDS[COMP_CWORD-1]}"\n'
        f'    opts="{all_flags}"\n'
        '    case "${prev}" in\n'
        f"{cases}\n"
        "    esac\n"
        '    COMPREPLY=($(compgen -W "${opts}" -- "${cur}"))\n'
        "    return 0\n"
        "}\n"
        f"complete -F _human_ids -o bashdefault -o default {PROG}\n"
    )


def _zsh_script() -> str:
    lines = []
    for spec in _OPTIONS:
        exclusive = " ".join(spec.flags)
        if spec.takes_value:
            values = f"({' '.join(spec.choices)})" if spec.choices else " "
            suffix = f":{spec.metavar}:{values}"
        else:
            suffix = ""
        if spec.short:
            short = f"-{spec.short}+" if spec.takes_value else f"-{spec.short}"
            long = f"--{spec.long}=" if spec.takes_value else f"--{spec.long}"
            lines.append(f"'({exclusive})'{{{short},{long}}}'[{spec.help}]{suffix}'")
        else:
            long = f"--{spec.long}=" if spec.takes_value else f"--{spec.long}"
            lines.append(f"'{long}[{spec.help}]{suffix}'")
    body = " \\\n        ".join(lines)
    return (
        f"#compdef {PROG}\n\n"
        "_human_ids() {\n"
        "    _arguments -s -S \\\n"
        f"        {body}\n"
        "}\n\n"
        '_human_ids "$@"\n'
    )


def _fish_script() -> str:
    lines = []
    for spec in _OPTIONS:
        parts = [f"complete -c {PROG}"]
        if spec.short:
            parts.append(f"-s {spec.short}")
        parts.append(f"-l {spec.long}")
        parts.append(f"-d '{spec.help}'")
        if spec.takes_value:
            parts.append("-r")
        if spec.choices:
            parts.append(f"-f -a \"{' '.join(spec.choices)}\"")
        lines.append(" ".join(parts))
    return "\n".join(lines) + "\n"


def _elvish_script() -> str:
    value_checks = []
    for spec in _OPTIONS:
        if not spec.choices:
            continue
        tests = " ".join(f"(eq $last {flag})" for flag in spec.flags)
        value_checks.append(
            f"    if (or {tests} $false) {{\n"
            f"        put {' '.join(spec.choices)}\n"
            "        return\n"
            "    }"
        )
    candidates = "\n".join(
        f"    cand {flag} '{spec.help}'" for spec in _OPTIONS for flag in spec.flags
    )
    checks = "\n".join(value_checks)
    return (
        "use builtin;\n"
        "use str;\n\n"
        f"set edit:completion:arg-completer[{PROG}] = {{|@words|\n"
        "    fn cand {|text desc|\n"
        "        edit:complex-candidate $text &display=$text' '$desc\n"
        "    }\n"
        "    var last = $words[-2]\n"
        f"{checks}\n"
        f"{candidates}\n"
        "}\n"
    )


def _powershell_script() -> str:
    entries = []
    for spec in _OPTIONS:
        for flag in spec.flags:
            entries.append(
                f"        [CompletionResult]::new('{flag}', '{flag.lstrip('-')}', "
                f"[CompletionResultType]::ParameterName, '{spec.help}')"
            )
    items = "\n".join(entries)
    return (
        "using namespace System.Management.Automation\n\n"
        f"Register-ArgumentCompleter -Native -CommandName '{PROG}' -ScriptBlock {{\n"
        "    param($wordToComplete, $commandAst, $cursorPosition)\n"
        "    $completions = @(\n"
        f"{items}\n"
        "    )\n"
        '    $completions.Where{ $_.CompletionText -like "$wordToComplete*" } |\n'
        "        Sort-Object -Property ListItemText\n"
        "}\n"
    )


_GENERATORS = {
    Shell.BASH: _bash_script,
    Shell.ELVISH: _elvish_script,
    Shell.FISH: _fish_script,
    Shell.POWERSHELL: _powershell_script,
    Shell.ZSH: _zsh_script,
}


def completion_script(shell: Shell | str) -> str:
    """Return a completion script for the given shell."""
    return _GENERATORS[Shell(shell)]()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and print one identifier or a completion script."""
    args = build_parser().parse_args(argv)

    if args.completion is not None:
        print(completion_script(args.completion), end="")
        return 0

    options = Options(
        separator=args.separator,
        capitalize=args.capitalize,
        add_adverb=args.adverb,
        adjective_count=args.num_adjectives,
    )
    print(generate(options))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())