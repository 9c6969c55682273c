"""Catalog-based localization shipped with the plugin.

Catalogs are JSON objects mapping the English message id to its translation,
one file per language under ``officeconnect/l10n``. Templates use named
placeholders; placeholders without an argument are left in place so rich
subjects can keep ``{notifier}`` and ``{file}`` for client-side rendering.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_DIR = Path(__file__).resolve().parent.parent / "l10n"
DEFAULT_LANGUAGE = "en"
LANGUAGE_CODE_RE = re.compile(r"[A-Za-z]{2,3}(_[A-Za-z0-9]{2,4})?")


class _KeepMissing(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def candidate_languages(language_code: str) -> list[str]:
    """Return catalog names to try for *language_code*, most specific first.

    ``de-DE`` and ``de_DE`` both resolve to ``["de_DE", "de"]``. Codes that
    are not a plain language tag resolve to no catalog at all.
    """
    code = (language_code or "").strip().replace("-", "_")
    if not LANGUAGE_CODE_RE.fullmatch(code):
        return []
    candidates = [code]
    base = code.split("_", 1)[0].lower()
    if base and base != code:
        candidates.append(base)
    return candidates


class CatalogLocalization:
    """LocalizationService backed by JSON catalogs on disk."""

    def __init__(self, catalog_dir: Path | str | None = None) -> None:
        self.catalog_dir = Path(catalog_dir) if catalog_dir else DEFAULT_CATALOG_DIR
        self._catalogs: dict[str, dict[str, str]] = {}

    def _load(self, language: str) -> dict[str, str] | None:
        if language in self._catalogs:
            return self._catalogs[language]
        path = self.catalog_dir / f"{language}.json"
        if not path.is_file():
            return None
        try:
            catalog = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Failed to load l10n catalog %s: %s", path, e)
            return None
        self._catalogs[language] = catalog
        return catalog

    def available_languages(self) -> list[str]:
        return sorted(p.stem for p in self.catalog_dir.glob("*.json"))

    def lookup(self, template: str, language_code: str) -> str:
        """Return the translated template, or the template itself when untranslated."""
        for language in candidate_languages(language_code):
            if language == DEFAULT_LANGUAGE:
                break
            catalog = self._load(language)
            if catalog and catalog.get(template):
                return catalog[template]
        return template

    def translate(self, template: str, args: Mapping[str, Any], language_code: str) -> str:
        return self.lookup(template, language_code).format_map(_KeepMissing(args))
