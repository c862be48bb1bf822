"""Wczytywanie wejścia komend: plik, stdin albo wartość '@ścieżka'."""

from __future__ import annotations

import pathlib
import sys


def read_input(path: str | None) -> str:
    """Treść pliku; brak ścieżki albo '-' → stdin."""
    if path is None or path == "-":
        return sys.stdin.read()
    p = pathlib.Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Plik nie istnieje: {p}")
    return p.read_text(encoding="utf-8")


def read_field(value: str | None) -> str:
    """Wartość pola formularza; '@plik.txt' wczytuje treść pliku."""
    if not value:
        return ""
    if value.startswith("@"):
        return read_input(value[1:])
    return value
