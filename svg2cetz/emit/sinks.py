"""Destinations for rendered output."""

from __future__ import annotations

from typing import Protocol, TextIO


class OutputSink(Protocol):
    """Anything that accepts rendered emissions in order."""

    def write(self, emission: str) -> None: ...


class ListSink:
    """Collect emissions in memory."""

    def __init__(self) -> None:
        self.emissions: list[str] = []

    def write(self, emission: str) -> None:
        self.emissions.append(emission)

    def getvalue(self) -> str:
        return "".join(f"{emission}\n" for emission in self.emissions)


class StreamSink:
    """Write each emission followed by a newline to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def write(self, emission: str) -> None:
        self.stream.write(emission)
        self.stream.write("\n")
