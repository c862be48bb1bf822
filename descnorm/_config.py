"""Ustawienia domyślne CLI — konfiguracja przez zmienne środowiskowe."""

from __future__ import annotations

import os

from data_model.descriptions import DescriptionDomain, HeadingLevelMode


def parse_domain(value: str) -> DescriptionDomain:
    try:
        return DescriptionDomain(value.strip().lower())
    except ValueError:
        allowed = ", ".join(d.value for d in DescriptionDomain)
        raise ValueError(f"Nieznana domena opisu: '{value}' (dozwolone: {allowed})") from None


def parse_level_mode(value: str) -> HeadingLevelMode:
    try:
        return HeadingLevelMode(value.strip().lower())
    except ValueError:
        allowed = ", ".join(m.value for m in HeadingLevelMode)
        raise ValueError(
            f"Nieznany tryb poziomu nagłówków: '{value}' (dozwolone: {allowed})"
        ) from None


def get_default_domain() -> DescriptionDomain:
    return parse_domain(os.getenv("DESCNORM_DOMAIN", DescriptionDomain.JOB.value))


def get_default_level_mode() -> HeadingLevelMode:
    return parse_level_mode(
        os.getenv("DESCNORM_HEADING_LEVELS", HeadingLevelMode.LEADING.value)
    )
