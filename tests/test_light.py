from badgl.light import DirLight, Light
from badgl.mathx import Vec3


def _light():
    return Light(
        pos=Vec3(0.0, 5.0, 5.0),
        ambient=Vec3(0.2, 0.2, 0.2),
        diffuse=Vec3(0.6, 0.6, 0.6),
        specular=Vec3(0.8, 0.8, 0.8),
        attenuation=Vec3(0.003, 0.007, 1.0),
    )


def test_packed_is_five_vec4s():
    packed = _light().packed()
    assert len(packed) == 20
    assert packed[3::4] == (1.0,) * 5


def test_packed_keeps_field_order():
    light = _light()
    packed = light.packed()
    fields = [light.pos, light.ambient, light.diffuse, light.specular, light.attenuation]
    for index, vec in enumerate(fields):
        assert packed[index * 4:index * 4 + 3] == tuple(vec)


def test_packed_follows_changes():
    light = _light()
    light.pos = Vec3(10.0, 5.0, 5.0)
    assert light.packed()[:3] == (10.0, 5.0, 5.0)


def test_dir_light_uniform_names_and_values():
    light = DirLight(
        dir=Vec3(-4.0, -12.0, 10.0),
        ambient=Vec3(0.2, 0.2, 0.2),
        diffuse=Vec3(0.5, 0.5, 0.5),
        specular=Vec3(0.8, 0.8, 0.8),
    )
    uniforms = light.uniforms()
    assert list(uniforms) == [
        "dir_light.dir",
        "dir_light.ambient",
        "dir_light.diffuse",
        "dir_light.specular",
    ]
    assert uniforms["dir_light.dir"] == light.dir
    assert uniforms["dir_light.specular"] == light.specular