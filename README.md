# sponge

Sequence numbers for a TCP implementation.

TCP carries sequence numbers as 32-bit values that start at a random
initial sequence number (ISN) and wrap around at 2**32. Inside a TCP stack
it is easier to count bytes with a 64-bit absolute sequence number that
starts at zero. The module `sponge.wrapping_integers` converts between the
two.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from sponge.wrapping_integers import WrappingInt32, wrap, unwrap

isn = WrappingInt32(2**32 - 2)

# absolute -> relative
seqno = wrap(3, isn)                          # WrappingInt32(raw_value=1)

# relative -> absolute, choosing the value closest to a recent checkpoint
absolute = unwrap(seqno, isn, checkpoint=0)   # 3
```

### `WrappingInt32`

An immutable 32-bit value with a single field, `raw_value`.

- The constructor takes an `int` and reduces it modulo 2**32; any other type
  (including `bool`) raises `TypeError`.
- `a + n` and `a - n` step forward or back by an integer, wrapping at 2**32,
  and return a new `WrappingInt32`.
- `a - b` between two wrapping integers gives the signed 32-bit offset from
  `b` to `a`, in the range -2**31 to 2**31 - 1.
- `a == b` compares the raw values, and `str(a)` gives the raw value in
  decimal.

### `wrap(n, isn)`

Returns the `WrappingInt32` that the absolute sequence number `n` maps to
when the stream starts at `isn`.

### `unwrap(n, isn, checkpoint)`

Returns the absolute (64-bit) sequence number that wraps to `n` and lies
closest to `checkpoint`. The checkpoint is taken modulo 2**64. Each direction
of a TCP connection has its own ISN, so use the ISN of the stream the
sequence number belongs to.

## What this package does not do

It provides only the sequence-number arithmetic. There is no byte stream,
reassembler, TCP sender or receiver, segment parsing, or network interface
here, and no command-line program.