import pytest

from planetsim.texture import (
    TEXTURE_HEIGHT,
    TEXTURE_WIDTH,
    TextureSet,
    read_raw_texture,
)


def test_read_pads_short_file(tmp_path):
    path = tmp_path / "small.raw"
    path.write_bytes(b"\x01\x02\x03\x04\x05\x06")
    data = read_raw_texture(path, 2, 2)
    assert data == b"\x01\x02\x03\x04\x05\x06" + b"\0" * 6


def test_read_truncates_long_file(tmp_path):
    path = tmp_path / "big.raw"
    path.write_bytes(bytes(range(20)))
    assert read_raw_texture(path, 1, 2) == bytes(range(6))


def test_read_default_size(tmp_path):
    path = tmp_path / "texture.raw"
    path.write_bytes(b"\xff" * 9)
    data = read_raw_texture(path)
    assert len(data) == 1024 * 512 * 3
    assert data[:9] == b"\xff" * 9


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_raw_texture(tmp_path / "absent.raw")


def test_read_bad_size(tmp_path):
    path = tmp_path / "x.raw"
    path.write_bytes(b"")
    with pytest.raises(ValueError):
        read_raw_texture(path, 0, 4)


def test_set_uses_uploader(tmp_path):
    path = tmp_path / "texture.raw"
    path.write_bytes(b"\x10\x20\x30")
    calls = []

    def upload(data, width, height):
        calls.append((data, width, height))
        return 42

    textures = TextureSet([path], upload)
    assert textures[0] == 42
    assert len(textures) == 1
    data, width, height = calls[0]
    assert (width, height) == (1024, 512)
    assert (width, height) == (TEXTURE_WIDTH, TEXTURE_HEIGHT)
    assert len(data) == width * height * 3
    assert data[:3] == b"\x10\x20\x30"


def test_missing_file_gets_zero(tmp_path):
    calls = []
    textures = TextureSet([tmp_path / "missing.raw"], lambda *a: calls.append(a) or 7)
    assert list(textures) == [0]
    assert calls == []


def test_default_ids_count_loaded_files(tmp_path):
    present = tmp_path / "a.raw"
    present.write_bytes(b"abc")
    textures = TextureSet([present, tmp_path / "none.raw", present])
    assert list(textures) == [1, 0, 2]


def test_index_out_of_range(tmp_path):
    textures = TextureSet([tmp_path / "none.raw"])
    assert len(textures) == 1
    assert textures[0] == 0
    with pytest.raises(IndexError):
        textures[1]