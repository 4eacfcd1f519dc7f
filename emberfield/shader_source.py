"""Reading GLSL sources, including files that hold several stages behind markers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from os import PathLike
from typing import Dict, Iterator, Optional, Union

MARKER = "#SHADER"

PathType = Union[str, "PathLike[str]"]


class ShaderStage(IntEnum):
    """Pipeline stages a combined shader file can hold."""

    VERTEX = 0
    FRAGMENT = 1
    GEOMETRY = 2


@dataclass(frozen=True)
class ShaderSources:
    """Source text of each stage; stages not present are empty strings."""

    vertex: str = ""
    fragment: str = ""
    geometry: str = ""

    def __getitem__(self, stage: ShaderStage) -> str:
        return {
            ShaderStage.VERTEX: self.vertex,
            ShaderStage.FRAGMENT: self.fragment,
            ShaderStage.GEOMETRY: self.geometry,
        }[ShaderStage(stage)]


def _lines(text: str) -> Iterator[str]:
    """Split text into lines the way a line reader does: no empty trailing line."""
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return iter(parts)


def _marker_stage(line: str, geometry_enabled: bool) -> Optional[ShaderStage]:
    if "VERTEX" in line:
        return ShaderStage.VERTEX
    if "PIXEL" in line or "FRAGMENT" in line:
        return ShaderStage.FRAGMENT
    if geometry_enabled and "GEOMETRY" in line:
        return ShaderStage.GEOMETRY
    return None


def parse_shader(text: str, geometry_enabled: bool = False) -> ShaderSources:
    """Split combined shader text into stages.

    A line containing ``#SHADER`` switches the current stage: ``VERTEX``,
    ``PIXEL`` or ``FRAGMENT``, and ``GEOMETRY`` only when ``geometry_enabled``.
    A marker naming no recognised stage leaves the current stage unchanged.
    Every other line is appended, with a newline, to the current stage.

    Raises ``ValueError`` for source lines that come before any stage marker.
    """
    buffers: Dict[ShaderStage, list] = {stage: [] for stage in ShaderStage}
    current: Optional[ShaderStage] = None
    for number, line in enumerate(_lines(text), start=1):
        if MARKER in line:
            stage = _marker_stage(line, geometry_enabled)
            if stage is not None:
                current = stage
            continue
        if current is None:
            raise ValueError(f"line {number}: shader source before any {MARKER} marker")
        buffers[current].append(line + "\n")
    return ShaderSources(
        vertex="".join(buffers[ShaderStage.VERTEX]),
        fragment="".join(buffers[ShaderStage.FRAGMENT]),
        geometry="".join(buffers[ShaderStage.GEOMETRY]),
    )


def parse_shader_file(path: PathType, geometry_enabled: bool = False) -> ShaderSources:
    """Read a combined shader file and split it into stages."""
    with open(path, encoding="utf-8") as stream:
        return parse_shader(stream.read(), geometry_enabled)


def read_shader_file(path: PathType) -> str:
    """Read a single-stage shader file; every line ends with a newline."""
    with open(path, encoding="utf-8") as stream:
        return "".join(line + "\n" for line in _lines(stream.read()))