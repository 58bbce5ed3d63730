# labtools

Three small command-line utilities. They depend only on the Python standard library.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and then run `pytest`:

```
pip install ".[test]"
pytest
```

## Recoding Cyrillic text to UTF-8

```
labtools-recode <input file> <encoding> <output file>
```

This reads a file in a single-byte Cyrillic encoding and writes it out as UTF-8. The supported encodings are `cp1251`, `iso-8859-5` and `koi8`. Bytes below `0x80` are copied unchanged, and every byte from `0x80` to `0xFF` is mapped through the table for the chosen encoding.

The command first prints the three arguments it was given. It then exits with status 1 if any of the following happens:

- the encoding is unknown;
- the input file cannot be read;
- the output file cannot be written.

With the wrong number of arguments it prints a usage message to standard error and also exits with status 1.

The same conversion is available from Python:

```python
from labtools.recode import check_encoding, decode_bytes, recode_bytes, recode_file

recode_bytes(b"\xcf\xf0\xe8\xe2\xe5\xf2", "cp1251")   # "Привет" as UTF-8 bytes
decode_bytes(b"\xf0\xd2\xc9\xd7\xc5\xd4", "koi8")     # "Привет"
recode_file("in.txt", "iso-8859-5", "out.txt")
```

`check_encoding(name)` returns the 128 code points that the encoding assigns to bytes `0x80`–`0xFF`. The tables are also available as `ENCODE_TABLES`. For an unknown name, `check_encoding`, `decode_bytes`, `recode_bytes` and `recode_file` raise `UnknownEncodingError`, which is a subclass of `ValueError`. `usage(program_name)` returns the usage text.

## Current weather

```
labtools-weather <city>
```

This prints the request URL, `http://wttr.in/<city>?format=j1`, and then a short report for the city. The city is URL-quoted in the request. The report shows:

- the temperature in Celsius and in Fahrenheit;
- the observation time;
- a description of the weather;
- the wind direction and the wind speed in km/h.

A field missing from the response is shown as `n/a`.

City names longer than 20 bytes in UTF-8 are rejected. Network failures are reported as errors, and so are bodies that are not JSON or that have no `current_condition` entry. In every such case the command prints the message to standard error and exits with status 1. The body of an HTTP error response is parsed like any other body.

In Python:

```python
from labtools.weather import build_url, fetch_json, parse_report

url = build_url("London")
report = parse_report("London", fetch_json(url))
print(report.format())
```

`build_url`, `fetch_json` and `parse_report` raise `WeatherError` on failure. `WeatherReport` is a frozen dataclass with these fields:

- `city`
- `celsius`
- `fahrenheit`
- `observation_time`
- `description`
- `wind_direction`
- `wind_speed_kmph`

## Directory tree

```
labtools-dirtree [directory]
```

This recursively lists a directory, which defaults to the current one, and prints the result as text. The output starts with a `Type	Name` header. Each entry is marked `d` for a directory or `.` for anything else and is shown with its full path. Nested entries are indented by two spaces per level.

Entries are sorted by name. A directory that cannot be read lists as empty. A directory reached again through a link is shown but not entered again.

In Python:

```python
from labtools.dirtree import list_dirs, render_tree

nodes = list_dirs(".")
print(render_tree(nodes))
for node in nodes:
    for depth, entry in node.walk():
        print(depth, entry.kind, entry.path)
```

`TreeNode` has the fields `path`, `is_dir` and `children`, and a `kind` property that is `d` or `.`. `walk()` yields `(depth, node)` pairs in pre-order.

## What is not included

The directory tree is printed to the terminal only. There is no graphical window or interactive tree view.