"""
Internationalization (i18n) service for loading localized strings.

Strings live in JSON files under locale/{lang}/{namespace}.json and are
addressed with dot-separated keys whose first segment is the namespace,
e.g. "common.roll".
"""

import json
from pathlib import Path
from typing import Any


class I18nService:
    """
    Centralized localization service.

    Loads every locale/{lang}/*.json file on initialization and provides a
    get() method to retrieve localized strings with fallback.

    The service follows a fallback chain:
    1. Requested language
    2. Default language (en)
    3. Error placeholder "[MISSING: key]"

    Examples:
        >>> i18n = I18nService(default_lang="en")
        >>> i18n.get("common.roll", lang="en")
        'Roll'
        >>> i18n.get("common.roll", lang="cn")
        '掷骰子'
        >>> i18n.get("common.roll", lang="fr")  # Falls back to en
        'Roll'
    """

    def __init__(self, default_lang: str = "en", locale_dir: Path | None = None):
        """
        Initialize the i18n service.

        Args:
            default_lang: Default language code (used for fallback)
            locale_dir: Path to locale directory (defaults to project's locale/)
        """
        self.default_lang = default_lang
        self._cache: dict[str, dict[str, Any]] = {}

        if locale_dir is None:
            # src/backend/core -> project root
            project_root = Path(__file__).parent.parent.parent.parent
            locale_dir = project_root / "locale"

        self.locale_dir = Path(locale_dir)
        self._load_all()

    @property
    def languages(self) -> list[str]:
        """Language codes that have at least one namespace loaded."""
        return sorted({key.split(".", 1)[0] for key in self._cache})

    def _load_all(self) -> None:
        """Load all JSON files from locale directories."""
        if not self.locale_dir.exists():
            raise FileNotFoundError(f"Locale directory not found: {self.locale_dir}")

        for lang_dir in sorted(self.locale_dir.iterdir()):
            if not lang_dir.is_dir():
                continue

            for json_file in lang_dir.glob("*.json"):
                cache_key = f"{lang_dir.name}.{json_file.stem}"
                try:
                    with open(json_file, encoding="utf-8") as f:
                        self._cache[cache_key] = json.load(f)
                except json.JSONDecodeError as exc:
                    raise ValueError(f"Invalid JSON in {json_file}: {exc}") from exc

    def get(self, key: str, lang: str | None = None, **kwargs: Any) -> str:
        """
        Get localized string with fallback.

        Args:
            key: Dot-separated key (e.g., "common.roll")
            lang: Language code. If None, uses default_lang.
            **kwargs: Optional format arguments for string interpolation

        Returns:
            Localized string, or "[MISSING: key]" if not found anywhere
        """
        lang = lang or self.default_lang

        try:
            parts = key.split(".")
            if len(parts) < 2:
                raise KeyError(f"Invalid key format: {key}")

            namespace = parts[0]
            data = self._cache.get(f"{lang}.{namespace}")
            if data is None:
                raise KeyError(f"Namespace not found: {lang}.{namespace}")

            for segment in parts[1:]:
                data = data[segment]

            if isinstance(data, str):
                return data.format(**kwargs) if kwargs else data

            raise ValueError(f"Key '{key}' does not point to a string: {type(data)}")

        except (KeyError, TypeError):
            if lang != self.default_lang:
                try:
                    return self.get(key, self.default_lang, **kwargs)
                except (KeyError, TypeError, ValueError):
                    pass

            return f"[MISSING: {key}]"

    def has_key(self, key: str, lang: str | None = None) -> bool:
        """Check if a key resolves to a string."""
        return not self.get(key, lang).startswith("[MISSING:")

    def reload(self) -> None:
        """Reload all locale files from disk."""
        self._cache.clear()
        self._load_all()


_global_i18n: I18nService | None = None


def get_i18n() -> I18nService:
    """
    Get the global i18n service instance.

    Creates the instance on first call (lazy initialization).
    """
    global _global_i18n
    if _global_i18n is None:
        _global_i18n = I18nService()
    return _global_i18n


def reset_i18n() -> None:
    """Reset the global i18n instance (useful for testing)."""
    global _global_i18n
    _global_i18n = None
