"""Player client that connects to a reversi game master and plays its turns."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
from typing import Protocol

from .board import find_move
from .protocol import (
    Frame,
    MessageType,
    ProtocolError,
    connect_message,
    move_message,
    ok_message,
    read_frame,
)
from .board import player_color

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8888

log = logging.getLogger(__name__)


class Connection(Protocol):
    def read(self, size: int) -> bytes: ...

    def write(self, data: bytes) -> object: ...


class _Replay:
    """A stream that hands back one byte already read before reading on."""

    def __init__(self, first: bytes, stream: Connection) -> None:
        self._first = first
        self._stream = stream

    def read(self, size: int) -> bytes:
        if self._first:
            head, self._first = self._first, b""
            return head
        return self._stream.read(size)


class _SocketConnection:
    """Adapts a connected socket to the read/write interface of the client."""

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock

    def read(self, size: int) -> bytes:
        return self._sock.recv(size)

    def write(self, data: bytes) -> None:
        self._sock.sendall(data)


class PlayerClient:
    """Answers the game master's messages for one player."""

    def __init__(self, connection: Connection, name: str) -> None:
        self.connection = connection
        self.name = name
        self.color: int | None = None

    def _send(self, data: bytes) -> bytes:
        self.connection.write(data)
        log.info("Message sent : %s", " ".join(f"{byte:x}" for byte in data))
        return data

    def connect(self) -> bytes:
        """Announce the player's name to the game master; return the bytes sent."""
        return self._send(connect_message(self.name))

    def handle(self, frame: Frame) -> bytes | None:
        """React to one frame; return the bytes sent in reply, if any."""
        kind = frame.message_type
        if kind == MessageType.PLAYEROK:
            try:
                self.color = player_color(frame.body)
            except ValueError as error:
                log.warning("colour unknown: %s", error)
            else:
                log.info("playing as %s", "black" if self.color == 1 else "white")
            return None
        if kind == MessageType.OKNOK:
            return self._send(ok_message())
        if kind == MessageType.NEXTTURN:
            if self.color is None:
                raise ProtocolError("next turn received before a colour was assigned")
            x, y = find_move(frame.body, self.color)
            log.info("playing x=%d y=%d", x, y)
            return self._send(move_message(x, y))
        log.info("unknown message type: 0x%x", kind)
        return None

    def run(self) -> int:
        """Handle frames until the connection closes; return how many were handled."""
        handled = 0
        while True:
            first = self.connection.read(1)
            if not first:
                return handled
            frame = read_frame(_Replay(first, self.connection))
            self.handle(frame)
            handled += 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play reversi against a game master.")
    parser.add_argument("name", help="player name announced to the game master")
    parser.add_argument("--host", default=DEFAULT_HOST, help="game master address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="game master port")
    args = parser.parse_args(argv)

    try:
        sock = socket.create_connection((args.host, args.port))
    except OSError as error:
        print(f"connect failed. Error: {error}", file=sys.stderr)
        return 1
    with sock:
        print("Connected")
        client = PlayerClient(_SocketConnection(sock), args.name)
        try:
            client.connect()
            client.run()
        except ProtocolError as error:
            print(f"protocol error: {error}", file=sys.stderr)
            return 1
    return 0