"""The saved progress file: high score, candies, bought skins and chosen skin."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from pathlib import Path

SKIN_SLOTS = 20
SKIN_NAME_LENGTH = 20
DEFAULT_SKIN = "img/skins/bird.png"

_HEADER = struct.Struct("<ii")


def decode_skin_name(raw: bytes, max_length: int = SKIN_NAME_LENGTH) -> str:
    """Printable prefix of ``raw``: stops at the first byte outside 33..122."""
    chars = []
    for byte in raw[:max_length]:
        if not 32 < byte < 123:
            break
        chars.append(chr(byte))
    return "".join(chars)


def _no_skins() -> list[bool]:
    return [False] * SKIN_SLOTS


@dataclass
class SaveData:
    """Progress kept between games."""

    high_score: int = 0
    candy_amount: int = 0
    bought_skins: list[bool] = field(default_factory=_no_skins)
    skin_name: str = DEFAULT_SKIN

    def __post_init__(self) -> None:
        if len(self.bought_skins) != SKIN_SLOTS:
            raise ValueError(f"expected {SKIN_SLOTS} skin flags, got {len(self.bought_skins)}")

    @classmethod
    def load(cls, path: str | Path = "data") -> SaveData:
        """Read the progress file; a missing file gives fresh progress."""
        try:
            raw = Path(path).read_bytes()
        except FileNotFoundError:
            return cls()
        data = cls()
        if len(raw) >= 4:
            data.high_score = struct.unpack_from("<i", raw, 0)[0]
        if len(raw) >= _HEADER.size:
            data.candy_amount = struct.unpack_from("<i", raw, 4)[0]
        flags = raw[_HEADER.size:_HEADER.size + SKIN_SLOTS]
        data.bought_skins = [byte != 0 for byte in flags] + [False] * (SKIN_SLOTS - len(flags))
        name = decode_skin_name(raw[_HEADER.size + SKIN_SLOTS:], SKIN_NAME_LENGTH)
        if name:
            data.skin_name = name
        return data

    def save(self, path: str | Path = "data", score: int = 0) -> int:
        """Write the progress file, raising the high score to ``score``; returns the high score written."""
        high = max(self.high_score, score)
        payload = bytearray(_HEADER.pack(high, self.candy_amount))
        payload.extend(1 if flag else 0 for flag in self.bought_skins)
        payload.extend(self.skin_name.encode("utf-8"))
        Path(path).write_bytes(bytes(payload))
        return high