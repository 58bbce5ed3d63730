"""Convert single-byte Cyrillic text files to UTF-8."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path

CP1251 = "cp1251"
ISO_8859_5 = "iso-8859-5"
KOI8 = "koi8"

# Code points for bytes 0x80..0xFF in each supported encoding.
ENCODE_TABLES: dict[str, tuple[int, ...]] = {
    CP1251: (
        1026, 1027, 8218, 1107, 8222, 8230, 8224, 8225,
        8364, 8240, 1033, 8249, 1034, 1036, 1035, 1039,
        1106, 8216, 8217, 8220, 8221, 8226, 8211, 8212,
        9888, 8482, 1113, 8250, 1114, 1116, 1115, 1119,
        160, 1038, 1118, 1032, 164, 1168, 166, 167,
        1025, 169, 1028, 171, 172, 173, 174, 1031,
        176, 177, 1030, 1110, 1169, 181, 182, 183,
        1105, 8470, 1108, 187, 1112, 1029, 1109, 1111,
        *range(1040, 1104),
    ),
    ISO_8859_5: (
        *range(128, 161),
        *range(1025, 1037),
        173,
        *range(1038, 1104),
        8470,
        *range(1105, 1117),
        167, 1118, 1119,
    ),
    KOI8: (
        9472, 9474, 9484, 9488, 9492, 9496, 9500, 9508,
        9516, 9524, 9532, 9600, 9604, 9608, 9612, 9616,
        9617, 9618, 9619, 8992, 9632, 8729, 8730, 8776,
        8804, 8805, 160, 8993, 176, 178, 183, 247,
        9552, 9553, 9554, 1105, 9555, 9556, 9557, 9558,
        9559, 9560, 9561, 9562, 9563, 9564, 9565, 9566,
        9567, 9568, 9569, 1025, 9570, 9571, 9572, 9573,
        9574, 9575, 9576, 9577, 9578, 9579, 9580, 169,
        1102, 1072, 1073, 1094, 1076, 1077, 1092, 1075,
        1093, 1080, 1081, 1082, 1083, 1084, 1085, 1086,
        1087, 1103, 1088, 1089, 1090, 1091, 1078, 1074,
        1100, 1099, 1079, 1096, 1101, 1097, 1095, 1098,
        1070, 1040, 1041, 1062, 1044, 1045, 1060, 1043,
        1061, 1048, 1049, 1050, 1051, 1052, 1053, 1054,
        1055, 1071, 1056, 1057, 1058, 1059, 1046, 1042,
        1068, 1067, 1047, 1064, 1069, 1065, 1063, 1066,
    ),
}

_DECODERS: dict[str, tuple[str, ...]] = {
    name: tuple(chr(b) for b in range(0x80)) + tuple(chr(cp) for cp in table)
    for name, table in ENCODE_TABLES.items()
}


class UnknownEncodingError(ValueError):
    """Raised for an encoding name that is not supported."""

    def __init__(self, encoding: str) -> None:
        super().__init__(f"Неизвестная кодировка: {encoding}")
        self.encoding = encoding


def check_encoding(encoding: str) -> tuple[int, ...]:
    """Return the high-half code point table for ``encoding``."""
    try:
        return ENCODE_TABLES[encoding]
    except KeyError:
        raise UnknownEncodingError(encoding) from None


def decode_bytes(data: bytes, encoding: str) -> str:
    """Decode ``data`` from the named single-byte encoding."""
    check_encoding(encoding)
    decoder = _DECODERS[encoding]
    return "".join(map(decoder.__getitem__, data))


def recode_bytes(data: bytes, encoding: str) -> bytes:
    """Convert ``data`` from the named encoding to UTF-8 bytes."""
    return decode_bytes(data, encoding).encode("utf-8")


def recode_file(input_path: str | os.PathLike, encoding: str,
                output_path: str | os.PathLike) -> None:
    """Convert the file at ``input_path`` to UTF-8 and write it to ``output_path``."""
    check_encoding(encoding)
    data = Path(input_path).read_bytes()
    Path(output_path).write_bytes(recode_bytes(data, encoding))


def usage(program_name: str) -> str:
    """Return the usage message."""
    return (
        f"Использование: {program_name} <входной файл> <кодировка> <выходной файл>\n"
        f"Доступные кодировки: {', '.join(ENCODE_TABLES)}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter from the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "recode"
    if len(args) != 3:
        print(usage(program), file=sys.stderr)
        return 1

    input_path, encoding, output_path = args
    print(f"input_file_path = {input_path}")
    print(f"encoding = {encoding}")
    print(f"output_file_path = {output_path}")

    try:
        check_encoding(encoding)
    except UnknownEncodingError as exc:
        print(exc)
        return 1

    try:
        data = Path(input_path).read_bytes()
    except OSError:
        print(f"Не удалось открыть {input_path} для чтения!")
        return 1

    try:
        Path(output_path).write_bytes(recode_bytes(data, encoding))
    except OSError:
        print(f"Не удалось открыть {output_path} для записи!")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())