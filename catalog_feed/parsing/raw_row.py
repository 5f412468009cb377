"""
Raw feed row.

Splits one feed line on tabs and gives index access that tolerates
ragged (short) lines.
"""

from typing import List

from ..common.constants import FEED_COLUMN_COUNT


class RawRow:
    """Tab-separated fields of a single feed line."""

    __slots__ = ('fields',)

    def __init__(self, fields: List[str]):
        self.fields = fields

    @classmethod
    def from_line(cls, line: str) -> 'RawRow':
        # CRLF feeds leave a carriage return on the last field
        if line.endswith('\r'):
            line = line[:-1]
        return cls(line.split('\t'))

    def get(self, index: int) -> str:
        """Return the field at `index`, or "" if the line is too short."""
        if 0 <= index < len(self.fields):
            return self.fields[index]
        return ''

    def __getitem__(self, index: int) -> str:
        return self.get(index)

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def is_short(self) -> bool:
        return len(self.fields) < FEED_COLUMN_COUNT

    def __repr__(self) -> str:
        return f"RawRow({self.fields!r})"
