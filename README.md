# mqperfkit

Building blocks for a message-queue performance harness. The package has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `mqperfkit.namevalue`

`NameValueList` keeps configuration name/value pairs in insertion order. Names
may repeat; lookups use the first entry added under a name.

- `add(name, value)` appends a pair.
- `lookup(name)` returns the value or `None`.
- `get(name, max_length)` returns the value, `None` if the name is absent, and
  raises `ValueTooLongError` (a `ValueError`) if the value is longer than
  `max_length` characters. The exception carries `name`, `value` and `limit`.
- `clear()`, iteration over `(name, value)` pairs, `len()` and `in` by name.

### `mqperfkit.spinlock`

`SpinLock` is a mutual-exclusion lock, created unlocked, with `acquire()`,
`release()` and `locked()`. It can be used as a context manager. Releasing a
lock that is not held raises `RuntimeError`.

### `mqperfkit.stringbuffer`

`StringBuffer` accumulates text. `append(text)`, `append_int(value)` (plain
decimal) and `append_double(value)` (two decimal places) each return the
buffer, so calls can be chained; `append` raises `TypeError` for non-strings.
`set_length(length)` empties the buffer at zero, truncates it when shorter than
the contents, leaves it unchanged when longer, and raises `ValueError` for a
negative length. `len()` and `str()` give the length and contents.

### `mqperfkit.blankpad`

Helpers for fixed-width, blank-padded fields such as queue and queue manager
names. Strings or bytes are accepted; a NUL character ends a field.

- `blank_padded_compare(a, b, length)` compares like `strncmp`, treating the end
  of a string and trailing blanks as equal.
- `blank_padded_length(text, buffer_length)` gives one past the last non-blank
  character before any NUL, or zero.
- `format_id(label, ident)` renders a 24-byte message or correlation id as
  `"<label>: Bytes: <48 upper-case hex digits>"`; other lengths raise
  `ValueError`.
- `MQIError(function, comp_code, reason_code)` is a `RuntimeError` recording a
  failed call's completion and reason codes.

### `mqperfkit.textutil`

- `rtrim`, `ltrim`, `trim` strip spaces only; `None` passes through.
- `ends_with(text, ending)` checks the first occurrence of `ending`, which must
  not be at the start of `text`; an empty `ending` never matches.
- `expand_newlines(text)` replaces each literal `\n` with a blank and a newline;
  `expand_newlines_with_tab(text)` replaces it with a newline and a tab. A
  string that starts with a literal `\n` is returned unchanged.
- `read_message_file(path)` returns a file's bytes, raising `OSError` if it
  cannot be read.
- `make_big_string(size, randomise=False)` builds `size` characters from `A` to
  `z`, cycling in order or drawn from a fixed-seed generator.
- `build_rfh2()` returns an MQRFH2 header (`RFH2_LENGTH`, 220 bytes) with fixed
  `mcd` and `jms` folders, CCSID 1208 and format `MQSTR`.
- `make_big_string_with_rfh2(size)` returns that header followed by a cycling
  body of `size` bytes.
- `get_env(name, max_length)` returns an environment variable, or `None` if it
  is unset or longer than `max_length`.

## Example

```python
from mqperfkit.namevalue import NameValueList
from mqperfkit.stringbuffer import StringBuffer
from mqperfkit.textutil import make_big_string_with_rfh2, RFH2_LENGTH

config = NameValueList()
config.add("nt", "4")
print(config.get("nt", 16))  # 4

line = StringBuffer()
line.append("rate=").append_double(1234.5678)
print(str(line))  # rate=1234.57

payload = make_big_string_with_rfh2(10)
print(payload[RFH2_LENGTH:])  # b'ABCDEFGHIJ'
```

## What this package does not do

It provides helpers only. It does not connect to a queue manager, put or get
messages, run worker threads, time or trace a run, or offer a command to start
a benchmark.