# ftprintf

A small printf-style formatter. It understands the conversions `c`, `s`,
`p`, `d`, `i`, `u`, `x`, `X` and `o`, together with field widths, the `-`
and `0` flags, precisions, and `*` for a width or precision taken from the
arguments. `%%` prints a percent sign.

## Installation

```
pip install .
```

## Usage

`sprintf` returns the formatted text; `printf` writes it to standard output
and returns the number of characters written.

```python
from ftprintf.formatter import sprintf, printf

sprintf("%5d|", 42)               # '   42|'
sprintf("%-5d|", 42)              # '42   |'
sprintf("%05d", -42)              # '-0042'
sprintf("%.3s", "abcdef")         # 'abc'
sprintf("%*d", 4, 7)              # '   7'
sprintf("%x %X %o", 255, 255, 8)  # 'ff FF 10'
sprintf("100%%")                  # '100%'

count = printf("%s, %s!\n", "Hello", "world")
```

`%c` takes a one-character string or a character code. A `None` passed to
`%s` prints as `(null)`; `%p` prints `0x` followed by lower-case hexadecimal
digits. Integers for `d` and `i` follow 32-bit signed arithmetic; `u`, `x`,
`X` and `o` take them as 32-bit unsigned.

If the format asks for more arguments than were given, a
`FormatArgumentError` (a subclass of `TypeError`) is raised. A `*` that is
given something other than an integer raises it too.

### Lower-level pieces

`ftprintf.formatter` also offers `conversion_index`, which gives a
conversion letter's position in `"cspdiuxXo"` (or -1), and `skip_flags`,
which steps over the flag, width and precision characters of a directive.

`ftprintf.conversions` holds the single-conversion formatters
(`format_char`, `format_string`, `format_pointer`, `format_decimal`,
`format_unsigned`, `format_hex_lower`, `format_hex_upper`, `format_octal`)
and `crop`. Each formatter works with a `Spec`, which holds the parsed width
and precision, and an `Output`, which collects the text; `Output.text`
returns what has been written.

```python
from ftprintf.conversions import Output, Spec, format_decimal

out = Output()
format_decimal(Spec(width=6), out, -17)
out.text   # '   -17'
```

`ftprintf.textutils` holds the string and number helpers the formatter is
built on: `atoi`, `itoa`, `number_length`, `unsigned_length`, `to_base`,
`split`, `strtrim`, `substr`, `strnstr`, `strncmp` and `strmapi`.

```python
from ftprintf.textutils import to_base, split, strtrim

to_base(255, "0123456789abcdef")   # 'ff'
split("  a b  c ", " ")            # ['a', 'b', 'c']
strtrim("xxhixx", "x")             # 'hi'
```

## What it does not do

- There are no floating-point conversions (`f`, `e`, `g`), no length
  modifiers such as `l` or `h`, and no `#` flag. A letter after `%` that is
  not one of the supported conversions is printed as it stands, without the
  percent sign.
- The package is a library only; it installs no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```