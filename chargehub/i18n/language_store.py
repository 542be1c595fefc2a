import json
import logging
from pathlib import Path

from chargehub.i18n.messages import DEFAULT_LANGUAGE, RTL_LANGUAGES, SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)


class LanguageStore:
    """The one persisted preference: the UI language and its text direction."""

    def __init__(self, path: str | Path, default: str = DEFAULT_LANGUAGE) -> None:
        if default not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {default}")
        self._path = Path(path)
        self._default = default
        self._language = self.load()

    @property
    def language(self) -> str:
        return self._language

    @property
    def is_rtl(self) -> bool:
        return self._language in RTL_LANGUAGES

    def load(self) -> str:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return self._default
        except OSError:
            logger.warning("Could not read language file %s", self._path)
            return self._default

        try:
            saved = json.loads(raw).get("language")
        except (json.JSONDecodeError, AttributeError):
            logger.warning("Ignoring malformed language file %s", self._path)
            return self._default

        if saved not in SUPPORTED_LANGUAGES:
            logger.warning("Ignoring unsupported saved language %r", saved)
            return self._default
        return saved

    def change_language(self, language: str) -> None:
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {language}")

        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps({"language": language}), encoding="utf-8"
        )
        self._language = language
        logger.info("Language changed to %s (rtl=%s)", language, self.is_rtl)
