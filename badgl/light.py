"""Point and directional lights for Phong shading."""

from __future__ import annotations

from dataclasses import dataclass

from badgl.mathx import Vec3

DIR_LIGHT_UNIFORMS = (
    "dir_light.dir",
    "dir_light.ambient",
    "dir_light.diffuse",
    "dir_light.specular",
)


@dataclass
class Light:
    """Point light.

    ``attenuation`` holds the constants (quadratic, linear, constant).
    """

    pos: Vec3
    ambient: Vec3
    diffuse: Vec3
    specular: Vec3
    attenuation: Vec3

    def packed(self) -> tuple[float, ...]:
        """Fields as consecutive vec4s with w set to 1, as laid out in the light buffer."""
        fields = (self.pos, self.ambient, self.diffuse, self.specular, self.attenuation)
        return tuple(value for vec in fields for value in (*vec, 1.0))


@dataclass
class DirLight:
    """Directional light; ``dir`` is the direction the light comes from."""

    dir: Vec3
    ambient: Vec3
    diffuse: Vec3
    specular: Vec3

    def uniforms(self) -> dict[str, Vec3]:
        """Shader uniform names mapped to their values."""
        values = (self.dir, self.ambient, self.diffuse, self.specular)
        return dict(zip(DIR_LIGHT_UNIFORMS, values))