# logreasoner

Reads a log file and groups its lines into patterns. It then reports the most
frequent patterns, together with their dominant log level and the time span
over which each was seen.

## How it works

1. **Parsing** (`logreasoner.ingest.LogParser`). Each non-blank line becomes a
   `LogEvent` with a timestamp, a level, a message and the raw line.
   - **Timestamps.** ISO 8601 timestamps are recognised when they carry a zone,
     either `Z` or a numeric offset. Examples are `2024-01-05T12:01:03Z` and
     `2024-01-05 12:01:03+02:00`. Timestamps are converted to UTC. A timestamp
     without a zone is left unparsed, so the event has no timestamp.
   - **Levels.** The parser looks for the first level keyword in the line, in
     any letter case: `ERROR`, `ERR`, `WARN`, `WARNING`, `INFO`, `DEBUG` or
     `TRACE`.
   - **Common Log Format.** Web-server lines in this format are recognised, and
     their bracketed time is used. When such a line has no level keyword, the
     HTTP status sets one: 5xx gives `Error`, 4xx gives `Warn`, and anything
     else gives `Info`.
   - **Message.** The message is the line with the recognised timestamp and
     level keyword removed and the surrounding whitespace stripped.
2. **Grouping** (`logreasoner.grouper.LogGrouper`). In each message, numbers,
   UUIDs and IPv4 addresses are replaced with `<VAR>`, and runs of whitespace
   are collapsed. Events with the same normalised message form one `LogGroup`.
   - Groups are sorted by size, largest first. Groups of equal size keep the
     order in which they were first seen.
   - `get_stats` returns the total number of events, the number of patterns,
     and the size of the first group.
3. **Embeddings (optional).** The tool checks for an Ollama server at
   `http://localhost:11434` that has a model whose name starts with
   `nomic-embed-text`. If it finds one, it requests an embedding for each
   pattern and prints the vector dimension. If it does not, it prints a warning
   to standard error and carries on.
4. **Report** (`logreasoner.output`). `format_text` returns a readable report
   and `format_json` returns a pretty-printed JSON document.

## Installation

```
pip install .
```

## Usage

```
log-reasoner analyze app.log
```

Options for `analyze`:

| Option | Default | Meaning |
| --- | --- | --- |
| `-t`, `--top N` | 5 | number of top patterns to display |
| `-m`, `--min-count N` | 1 | drop patterns seen fewer than N times |
| `-o`, `--output FORMAT` | `text` | `json` for JSON; any other value gives text |
| `--errors-only` | off | keep only ERROR-level events |

`log-reasoner --version` prints the version. The command exits with status 1
if the log file cannot be opened.

The next example prints, as JSON, the ten most common error patterns that occur
at least three times:

```
log-reasoner analyze --errors-only -t 10 -m 3 -o json app.log
```

The JSON document has these keys:

- `patterns`: one object per group, with `pattern`, `count` and `level`, plus
  `time_window_start` and `time_window_end` when the group's events have
  timestamps.
- `total_events`
- `unique_patterns`

## Using it as a library

```python
from logreasoner.ingest import LogParser
from logreasoner.grouper import LogGrouper, get_stats
from logreasoner.output import format_text

events = LogParser().parse_file("app.log")
groups = LogGrouper().group_events(events)
print(format_text(groups, get_stats(groups), 5))
```

`LogParser.parse_lines` accepts any iterable of strings, and
`LogParser.parse_line` parses a single line.

`logreasoner.embedding.EmbeddingGenerator` works with any subclass of
`logreasoner.backends.EmbeddingBackend`. One such backend is
`logreasoner.backends.OllamaBackend`. Its constructor accepts `base_url`,
`model` and `session`, and `with_model` returns a copy that uses another model.
When something goes wrong, the backend raises `BackendError`.
`logreasoner.embedding.cosine_similarity` compares two vectors. It returns 0.0
when their lengths differ or either vector is zero.

## Limitations

Embeddings are only computed; the command reports their dimension and does not
use them in any other way. Grouping is based solely on the normalised message
text, and there is no semantic clustering of similar patterns. Nothing is
stored between runs.

## Running the tests

```
pip install .[test]
pytest
```