import pytest

from labtools.recode import (
    UnknownEncodingError,
    check_encoding,
    decode_bytes,
    main,
    recode_bytes,
    recode_file,
    usage,
)

HIGH = bytes(range(0x80, 0x100))
ALL = bytes(range(0x100))


@pytest.mark.parametrize("encoding", ["cp1251", "iso-8859-5", "koi8"])
def test_tables_cover_high_half(encoding):
    assert len(check_encoding(encoding)) == 128


@pytest.mark.parametrize("encoding", ["utf-8", "CP1251", "", "koi8-u"])
def test_unknown_encoding_raises(encoding):
    with pytest.raises(UnknownEncodingError):
        check_encoding(encoding)
    with pytest.raises(UnknownEncodingError):
        recode_bytes(b"abc", encoding)


def test_ascii_passes_through():
    data = b"Hello, world!\n"
    assert recode_bytes(data, "koi8") == data


def test_cp1251_capital_a():
    assert decode_bytes(bytes([0xC0]), "cp1251") == chr(1040)
    assert recode_bytes(bytes([0xC0]), "cp1251") == b"\xd0\x90"


def test_cp1251_0x98_maps_to_table_value():
    assert decode_bytes(bytes([0x98]), "cp1251") == chr(9888)


def test_cp1251_matches_standard_codec_elsewhere():
    data = bytes(b for b in ALL if b != 0x98)
    assert decode_bytes(data, "cp1251") == data.decode("cp1251")


def test_iso_8859_5_matches_standard_codec():
    assert decode_bytes(ALL, "iso-8859-5") == ALL.decode("iso8859_5")


def test_koi8_matches_koi8_r():
    assert decode_bytes(ALL, "koi8") == ALL.decode("koi8_r")


@pytest.mark.parametrize("encoding", ["cp1251", "iso-8859-5", "koi8"])
def test_recode_is_utf8_of_decoded(encoding):
    out = recode_bytes(HIGH, encoding)
    assert out.decode("utf-8") == decode_bytes(HIGH, encoding)
    assert len(decode_bytes(HIGH, encoding)) == len(HIGH)


def test_recode_file(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_bytes("Привет".encode("cp1251"))
    recode_file(src, "cp1251", dst)
    assert dst.read_text(encoding="utf-8") == "Привет"


def test_recode_file_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        recode_file(tmp_path / "missing", "koi8", tmp_path / "out")


def test_usage_lists_encodings():
    text = usage("prog")
    assert "prog" in text
    assert "cp1251, iso-8859-5, koi8" in text


def test_main_success(tmp_path, capsys):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_bytes("Мир".encode("koi8_r"))
    assert main([str(src), "koi8", str(dst)]) == 0
    assert dst.read_text(encoding="utf-8") == "Мир"
    out = capsys.readouterr().out
    assert f"input_file_path = {src}" in out
    assert "encoding = koi8" in out


def test_main_wrong_argument_count(capsys):
    assert main(["only-one"]) == 1
    assert "cp1251, iso-8859-5, koi8" in capsys.readouterr().err


def test_main_unknown_encoding(tmp_path, capsys):
    assert main([str(tmp_path / "a"), "latin1", str(tmp_path / "b")]) == 1
    assert "latin1" in capsys.readouterr().out
    assert not (tmp_path / "b").exists()


def test_main_missing_input(tmp_path, capsys):
    missing = tmp_path / "nope.txt"
    assert main([str(missing), "cp1251", str(tmp_path / "out")]) == 1
    assert str(missing) in capsys.readouterr().out