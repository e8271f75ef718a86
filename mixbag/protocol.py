"""Framing of messages exchanged with the reversi game master.

A frame is: sync byte 0x55, body length, message type, body, checksum,
where the checksum is the low byte of the type plus all body bytes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO

SYNC = 0x55
OK_RESPONSE = 0x01
NOK_RESPONSE = 0x00
BLACK_PLAYER = 0x01
WHITE_PLAYER = 0x02
MAX_BODY = 0xFF


class MessageType(IntEnum):
    CONNECT = 0x01
    OKNOK = 0x02
    NEWMOVE = 0x03
    END = 0x04
    NEXTTURN = 0x05
    STATUS1 = 0x06
    STATUS2 = 0x07
    CONTROL = 0x08
    PLAYEROK = 0x10
    PING = 0x11


class ProtocolError(Exception):
    """A frame could not be read."""


class ChecksumError(ProtocolError):
    """A frame's checksum does not match its content."""


@dataclass(frozen=True)
class Frame:
    message_type: int
    body: bytes


def checksum(message_type: int, body: bytes) -> int:
    """Low byte of the message type plus every body byte."""
    return (int(message_type) + sum(body)) & 0xFF


def encode(message_type: int, body: bytes = b"") -> bytes:
    """Build the wire bytes of a frame."""
    body = bytes(body)
    if len(body) > MAX_BODY:
        raise ValueError(f"body of {len(body)} bytes exceeds {MAX_BODY}")
    if not 0 <= int(message_type) <= 0xFF:
        raise ValueError(f"message type {message_type} does not fit in a byte")
    return bytes([SYNC, len(body), int(message_type)]) + body + bytes([checksum(message_type, body)])


def connect_message(name: str) -> bytes:
    """Frame announcing the player's name."""
    raw = name.encode("utf-8")
    if len(raw) >= MAX_BODY:
        raise ValueError("player name is too long")
    return encode(MessageType.CONNECT, bytes([len(raw)]) + raw)


def ok_message() -> bytes:
    """Frame answering OK to an OK/NOK request."""
    return encode(MessageType.OKNOK, bytes([OK_RESPONSE]))


def _coordinate_byte(value: int) -> int:
    if not -0x80 <= value <= 0xFF:
        raise ValueError(f"coordinate {value} does not fit in a byte")
    return value & 0xFF


def move_message(x: int, y: int) -> bytes:
    """Frame playing the move at column ``x``, row ``y``; -1, -1 means no move."""
    return encode(MessageType.NEWMOVE, bytes([_coordinate_byte(x), _coordinate_byte(y)]))


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining:
        chunk = stream.read(remaining)
        if not chunk:
            raise ProtocolError("connection closed in the middle of a frame")
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_frame(stream: BinaryIO) -> Frame:
    """Read one frame from a binary stream and check it."""
    sync = _read_exact(stream, 1)[0]
    if sync != SYNC:
        raise ProtocolError(f"bad sync byte 0x{sync:02x}")
    length, message_type = _read_exact(stream, 2)
    body = _read_exact(stream, length)
    received = _read_exact(stream, 1)[0]
    expected = checksum(message_type, body)
    if received != expected:
        raise ChecksumError(f"checksum 0x{received:02x}, expected 0x{expected:02x}")
    return Frame(message_type, body)