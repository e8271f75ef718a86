# mixbag

A handful of small programs in one package. The largest is a Reversi
(Othello) player that connects to a game master over TCP, answers its
messages and chooses a move on each turn.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `mixbag.quicksort`

- `quick_sort(values, start=0, end=None, max_threads=8)` sorts
  `values[start:end + 1]` in place (`end` is inclusive and defaults to the
  last index). It partitions around the first element of the range and
  hands the two halves to new threads while fewer than `max_threads`
  worker threads are running; after that it carries on in the current
  thread. A range outside the sequence raises `IndexError`.
- `is_sorted(values)` tells whether a sequence is in non-decreasing order.

### `mixbag.completion`

`CompletionDictionary(word)` stores words as chains of letters. A word added
with `add_word(word)` shares the letters it has in common with a stored
chain and hangs its remaining letters off the point where it diverges.
`lines()` yields every stored word, depth first; `display(out=None)` writes
them one per line to `out` or standard output. Words may not contain `$`,
which marks the end of a chain; such words raise `ValueError`.

```python
from mixbag.completion import CompletionDictionary

words = CompletionDictionary("MY")
words.add_word("MYTHIC")
print(list(words.lines()))   # ['MY', 'MYTHIC']
```

### `mixbag.shapes`

`Circle(radius)`, `Rectangle(left, top, width, height)` and
`Triangle(x1, x2, x3, y1, y2, y3)` are dataclasses derived from `Shape`,
each with a `describe()` method returning a one-line text.
`display_list(shapes, out=None)` writes the description of each shape on
its own line.

### `mixbag.protocol`

The framed protocol spoken with the game master. A frame is the sync byte
`0x55`, the body length, the message type, the body, and a checksum that is
the low byte of the type plus every body byte.

- `MessageType` — an `IntEnum` of the message types (`CONNECT`, `OKNOK`,
  `NEWMOVE`, `END`, `NEXTTURN`, `STATUS1`, `STATUS2`, `CONTROL`,
  `PLAYEROK`, `PING`).
- `Frame(message_type, body)` — a frame that has been read.
- `checksum(message_type, body)` and `encode(message_type, body=b"")`;
  `encode` raises `ValueError` for a body over 255 bytes or a type that
  does not fit in a byte.
- `connect_message(name)`, `ok_message()` and `move_message(x, y)` build
  the frames a player sends; `move_message(-1, -1)` means "no move".
- `read_frame(stream)` reads one frame from a binary stream. It raises
  `ProtocolError` on a bad sync byte or a stream that ends mid-frame, and
  `ChecksumError` (a `ProtocolError`) when the checksum does not match.

```python
from mixbag.protocol import MessageType, encode

frame = encode(MessageType.CONNECT, b"\x03bob")
```

### `mixbag.board`

Board decoding and move choice. A next-turn body holds the last move's x
and y (`0xff` for none), the board width and height, then two bytes per row
of an 8x8 board, four 2-bit cells per byte.

- `decode_board(body)` returns a `BoardState` (`last_x`, `last_y`, `width`,
  `height`, `cells`); a body that is not 20 bytes raises `ValueError`.
- `player_color(body)` reads the colour from a player-ok body (1 black,
  2 white), raising `ValueError` for anything else.
- `opponent(color)` gives the other colour.
- `playable_squares(board, color)` lists the empty `(row, col)` squares
  from which `color` captures in any of the eight directions.
- `move_weight(row, col)` scores a square: corners 1000, other edge squares
  more the further they are from the centre, a few squares next to corners
  low.
- `best_move(playable)` returns the `(x, y)` of the highest-weighted square
  (the last in row-major order on ties), or `(-1, -1)` if there is none.
- `find_move(body, color)` combines these for a next-turn body.

### `mixbag.linear`

A simpler strategy that reads the board as one flat run of cells.
`unpack_cells(body)` unpacks every byte after the 4-byte header into 2-bit
cells. `find_adjacent_move(cells, color, width, height)` returns the
`(x, y)` of the first square two steps away, across one opponent piece,
from one of the player's pieces — trying right, left, then down or up — or
`None`. The client does not use it.

### `mixbag.client`

`PlayerClient(connection, name)` plays for one player over any object with
`read(size)` and `write(data)`. `connect()` sends the connect frame;
`handle(frame)` records the colour from a player-ok message, answers OK to
an OK/NOK request and plays `find_move` on a next-turn message (raising
`ProtocolError` if no colour has been assigned yet), returning the bytes it
sent; `run()` reads and handles frames until the connection closes and
returns how many it handled. Progress is reported through the `logging`
module under the `mixbag.client` logger.

## Commands

Sort random integers in the range 0–999 with threads and print the
processor time taken (the default size, 100,000,000, takes a long time in
Python):

    mixbag-quicksort [--size N] [--threads N] [--seed N]

Build the sample completion dictionary and print its words:

    mixbag-completion

Print the sample list of shapes:

    mixbag-shapes

Join a running game master as a player with the given name (default address
127.0.0.1, port 8888):

    mixbag-client NAME [--host HOST] [--port PORT]

It exits with status 1 if the connection fails or a bad frame arrives, and
with 0 when the game master closes the connection.

## What it does not do

There is no game master here: `mixbag-client` needs one already running to
connect to. The client does not check the game master's replies to its
moves, keeps no record of the game, and the `mixbag-client` command does not
set up logging, so its per-message reports are not shown unless the caller
configures `logging`.