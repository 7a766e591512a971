"""OpenGL context version handling and GLSL version directives."""

from __future__ import annotations

from dataclasses import dataclass

_DIRECTIVE_TEMPLATE = "#version {major}{minor}0 core"


@dataclass(frozen=True)
class GLVersion:
    """An OpenGL core profile version in the supported range 3.3 to 4.6."""

    major: int
    minor: int

    def __post_init__(self) -> None:
        if not _is_supported(self.major, self.minor):
            raise ValueError("opengl versions supported: 3.3 - 4.6")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"

    def directive(self) -> str:
        """GLSL ``#version`` line matching this context, e.g. ``#version 330 core``."""
        return _DIRECTIVE_TEMPLATE.format(major=self.major, minor=self.minor)

    def no_block_bindings(self) -> bool:
        """True when shaders cannot declare uniform block bindings (before 4.2)."""
        return not (self.major == 4 and self.minor >= 2)

    @property
    def supports_debug_output(self) -> bool:
        """True when the context can report debug messages (4.3 and later)."""
        return self.major == 4 and self.minor >= 3


def _is_supported(major: int, minor: int) -> bool:
    return (major == 3 and 3 <= minor <= 9) or (major == 4 and 0 <= minor <= 6)


def parse_gl_version(version: str) -> GLVersion:
    """Parse a version of the form ``"x.y"``; only the first three characters count."""
    if len(version) < 3:
        raise ValueError("invalid opengl version")
    major_char, dot, minor_char = version[0], version[1], version[2]
    if not (major_char in "0123456789" and minor_char in "0123456789"):
        raise ValueError("invalid opengl version, missing numbers")
    if dot != ".":
        raise ValueError("invalid opengl version, missing dot")
    return GLVersion(int(major_char), int(minor_char))