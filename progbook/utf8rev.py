"""Reverse the characters of UTF-8 encoded bytes."""

from __future__ import annotations


def _decode(buffer) -> str:
    return bytes(buffer).decode("utf-8", "surrogateescape")


def reverse_utf8(buffer: bytes | bytearray) -> bytes | bytearray:
    """Reverse the characters of UTF-8 data; a bytearray is changed in place."""
    reversed_data = _decode(buffer)[::-1].encode("utf-8", "surrogateescape")
    if isinstance(buffer, bytearray):
        buffer[:] = reversed_data
        return buffer
    return reversed_data


def describe(buffer: bytes | bytearray) -> str:
    """Describe the byte length, character count and each character's width."""
    text = bytes(buffer).decode("utf-8", "replace")
    lines = [f"len({text}) = {len(buffer)}, rune count({text}) = {len(text)}"]
    lines.extend(f"rune length({ch}) = {len(ch.encode())}" for ch in text)
    return "\n".join(lines) + "\n"


def main(argv=None) -> None:
    t1 = bytearray("1234".encode())
    reverse_utf8(t1)
    print(f"Reverse(t1) = {t1.decode()}\n")

    t2 = bytearray("1²³⁴".encode())
    print(describe(t2), end="")
    reverse_utf8(t2)
    print(f"Reverse(t2) = {t2.decode()}\n\n")