"""Steno machines that deliver strokes."""

from __future__ import annotations

import abc

import serial

from chordkit.stroke import Stroke

PACKET_SIZE = 6
BAUD_RATE = 115200

# (byte, bit, key) for every key in a Gemini PR packet.
_GEMINI_KEYS: tuple[tuple[int, int, Stroke], ...] = (
    (1, 6, Stroke.START_S),
    (1, 5, Stroke.START_S),
    (1, 4, Stroke.START_T),
    (1, 3, Stroke.START_K),
    (1, 2, Stroke.START_P),
    (1, 1, Stroke.START_W),
    (1, 0, Stroke.START_H),
    (2, 6, Stroke.START_R),
    (2, 3, Stroke.STAR),
    (2, 2, Stroke.STAR),
    (3, 5, Stroke.STAR),
    (3, 4, Stroke.STAR),
    (0, 5, Stroke.HASH),
    (0, 4, Stroke.HASH),
    (2, 5, Stroke.START_A),
    (2, 4, Stroke.START_O),
    (3, 1, Stroke.END_F),
    (4, 6, Stroke.END_P),
    (4, 4, Stroke.END_L),
    (4, 2, Stroke.END_T),
    (4, 0, Stroke.END_D),
    (3, 0, Stroke.END_R),
    (4, 5, Stroke.END_B),
    (4, 3, Stroke.END_G),
    (4, 1, Stroke.END_S),
    (5, 0, Stroke.END_Z),
    (3, 3, Stroke.END_E),
    (3, 2, Stroke.END_U),
)


class Machine(abc.ABC):
    """A source of strokes."""

    @abc.abstractmethod
    def connect(self) -> None:
        """Open the connection to the machine."""

    @abc.abstractmethod
    def disconnect(self) -> None:
        """Close the connection to the machine."""

    @abc.abstractmethod
    def get_stroke(self) -> Stroke:
        """Block until the next stroke arrives and return it."""


def decode_packet(buffer: bytes) -> Stroke:
    """Decode a six-byte Gemini PR packet into a stroke."""
    if len(buffer) != PACKET_SIZE:
        raise ValueError(f"Gemini PR packets are {PACKET_SIZE} bytes, got {len(buffer)}")
    stroke = Stroke(0)
    for byte, bit, key in _GEMINI_KEYS:
        if buffer[byte] & (1 << bit):
            stroke |= key
    return stroke


class GeminiPR(Machine):
    """A machine speaking the Gemini PR protocol over a serial port."""

    def __init__(self, tty_path: str) -> None:
        self.tty_path = tty_path
        self._port: serial.Serial | None = None

    def connect(self) -> None:
        self._port = serial.Serial(self.tty_path, BAUD_RATE)

    def disconnect(self) -> None:
        if self._port is not None:
            self._port.close()
        self._port = None

    def get_stroke(self) -> Stroke:
        if self._port is None:
            raise RuntimeError("Machine is not connected")
        data = bytes(self._port.read(PACKET_SIZE))
        return decode_packet(data[:PACKET_SIZE].ljust(PACKET_SIZE, b"\0"))