# human_ids

Generate random, human-readable identifiers such as `Brave-Otters-Juggle`.

An identifier is built from one or more adjectives, a noun, a verb and,
optionally, an adverb.

## Installation

```
pip install human_ids
```

## Command line

The `human-ids` command prints one identifier:

```
human-ids
# fuzzy-pandas-dance

human-ids --capitalize --separator _ --num-adjectives 2 --adverb
# Tiny_Green_Frogs_Swim_Quietly
```

Options:

- `-s`, `--separator SEPARATOR`: the text between words (default `-`)
- `-c`, `--capitalize`: capitalize the first letter of each word. Without it,
  words are printed in lower case.
- `-a`, `--adverb`: add an adverb at the end
- `-n`, `--num-adjectives NUM_ADJECTIVES`: how many adjectives to use
  (default `1`). It must be a whole number of zero or more.
- `--completion SHELL`: print a completion script for `bash`, `elvish`, `fish`,
  `powershell` or `zsh` and exit
- `-V`, `--version`: print the version and exit
- `-h`, `--help`: print help and exit

The same command can be run as `python -m human_ids.cli`.

## Library

```python
from human_ids.generator import Options, generate

generate()                      # e.g. "Happy-Llamas-Sing"
generate(Options(separator="_", capitalize=False, add_adverb=True, adjective_count=2))
# e.g. "tiny_red_foxes_jump_slowly"
```

`Options` is a frozen dataclass with these fields:

- `separator`: the text between words; `None` (the default) means `-`
- `capitalize`: capitalize the first letter of each word (default `True`)
- `add_adverb`: add an adverb at the end (default `False`)
- `adjective_count`: how many adjectives to use (default `1`); a negative
  value raises `ValueError`

When `generate` is called without options, every word is capitalized and the
words are joined with `-`.

The helpers in `human_ids.generator` work on any sequence of strings:

- `random_word(words)` returns a randomly chosen entry and raises `ValueError`
  for an empty sequence.
- `longest(words)` returns the longest entry (the last one on a tie), or `""`
  for an empty sequence.
- `shortest(words)` returns the shortest entry (the first one on a tie), or
  `""` for an empty sequence.

The word lists `ADJECTIVES`, `NOUNS`, `VERBS` and `ADVERBS` live in
`human_ids.words` as tuples of strings. Some words appear more than once, which
makes them more likely to be drawn.

`human_ids.cli` also offers `build_parser()`, which returns the command's
`argparse` parser, and `completion_script(shell)`, which returns the completion
script for a `Shell` member or its name.

The identifiers are drawn with Python's `random` module; they are not meant to
be unguessable or guaranteed unique.