# -*- coding: utf-8 -*-
"""Centralized Translation Manager for i18n support."""

from typing import Callable, List

from app.config import Config
from utils.logger import get_logger

logger = get_logger(__name__)


class TranslationManager:
    """Singleton Translation Manager with RTL/LTR support."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._current_language = Config.DEFAULT_LANGUAGE
            cls._instance._translations = {}
            cls._instance._listeners: List[Callable] = []
            cls._instance._load_translations()
        return cls._instance

    def _load_translations(self):
        from services.translations.ar import AR_TRANSLATIONS
        from services.translations.en import EN_TRANSLATIONS
        self._translations = {
            "ar": AR_TRANSLATIONS,
            "en": EN_TRANSLATIONS,
        }
        if self._current_language not in self._translations:
            self._current_language = "ar"

    def on_language_changed(self, callback: Callable):
        self._listeners.append(callback)

    def set_language(self, lang_code: str):
        if lang_code not in self._translations:
            lang_code = "ar"
        if self._current_language != lang_code:
            self._current_language = lang_code
            logger.info(f"Language changed to: {lang_code}")
            for callback in self._listeners:
                try:
                    callback(lang_code)
                except Exception as e:
                    logger.error(f"Language change callback error: {e}")

    def get_language(self) -> str:
        return self._current_language

    def has_key(self, key: str) -> bool:
        return key in self._translations.get(self._current_language, {})

    def tr(self, key: str, **kwargs) -> str:
        translation = self._translations.get(
            self._current_language, {}
        ).get(key)
        if translation is None:
            translation = key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, ValueError, IndexError):
                pass
        return translation

    def is_rtl(self) -> bool:
        return self._current_language in ("ar", "he", "fa")


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()


def is_rtl() -> bool:
    return _translator.is_rtl()


def on_language_changed(callback: Callable):
    _translator.on_language_changed(callback)
