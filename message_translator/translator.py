import json
import logging
import os
from typing import Dict, List, Optional, Any, Mapping, Sequence
from .config import settings
from .placeholder import MessagePlaceholder, Replacements, stringify_value

logger = logging.getLogger(__name__)

FlatMessageMap = Dict[str, str]


class TranslationLoadError(Exception):
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


def build_replacements(args: Sequence[Any] = (), kwargs: Optional[Mapping[str, Any]] = None) -> Replacements:
    """Mappings among positional args merge by name, other args are keyed by index ("0", "1", ...).
    Keyword arguments are applied last."""
    replace: Replacements = {}
    for i, arg in enumerate(args):
        if isinstance(arg, Mapping):
            replace.update(arg)
        else:
            replace[str(i)] = arg
    if kwargs:
        replace.update(kwargs)
    return replace


def uppercase_suffix(value: str) -> str:
    # en-gb -> en-GB; no hyphen means no change
    idx = value.rfind('-')
    if idx == -1:
        return value
    return value[:idx] + value[idx:].upper()


class MessageTranslator:
    def __init__(self, default_replacements: Optional[Mapping[str, Any]] = None):
        self.placeholder = MessagePlaceholder()
        self.placeholder.add_default_replacements(default_replacements)
        self.translations: Dict[str, FlatMessageMap] = {}
        self.fallback: Optional[FlatMessageMap] = None

    def load_translations_from_folder(self, folder_path: str, default_language: Optional[str] = None,
                                      strict: Optional[bool] = None) -> None:
        """Load every <folder>/<lang>/**/*.json file into per-language flat maps.

        Nothing is replaced unless the whole folder loads. On failure the error is logged,
        and re-raised as TranslationLoadError when strict (or settings.RAISE_ON_LOAD_ERROR) is set.
        """
        default_language = default_language or settings.DEFAULT_LANG
        if strict is None:
            strict = settings.RAISE_ON_LOAD_ERROR

        translations: Dict[str, FlatMessageMap] = {}
        fallback: Optional[FlatMessageMap] = None
        current = folder_path
        try:
            for lang_name in sorted(os.listdir(folder_path)):
                lang_path = os.path.join(folder_path, lang_name)
                if not os.path.isdir(lang_path):
                    continue
                current = lang_path
                lang_map: FlatMessageMap = {}
                for file_path in self.read_files_recursively(lang_path):
                    current = file_path
                    prefix = self.get_key_from_path(os.path.relpath(file_path, lang_path))
                    with open(file_path, 'r', encoding='utf-8') as f:
                        data = json.load(f)
                    if not isinstance(data, dict):
                        raise TranslationLoadError(
                            f"{file_path}: top-level JSON value must be an object", path=file_path)
                    self.flatten_translations(data, lang_map, prefix)
                    if fallback is None:
                        fallback = lang_map
                translations[lang_name.lower()] = lang_map
                logger.debug("Loaded %s keys for language %s", len(lang_map), lang_name)
        except Exception as e:
            logger.exception("Error loading translations from folder %s (at %s)", folder_path, current)
            if strict:
                if isinstance(e, TranslationLoadError):
                    raise
                raise TranslationLoadError(f"Failed to load translations from {current}: {e}", path=current) from e
            return

        default_map = translations.get(default_language.lower())
        if default_map is not None:
            fallback = default_map
        self.translations = translations
        self.fallback = fallback
        logger.info("Loaded %s languages from %s (fallback: %s)", len(translations), folder_path,
                    default_language if default_map is not None else 'first loaded language')

    def read_files_recursively(self, folder_path: str) -> List[str]:
        files: List[str] = []
        for name in sorted(os.listdir(folder_path)):
            full_path = os.path.join(folder_path, name)
            if os.path.isdir(full_path):
                files.extend(self.read_files_recursively(full_path))
            elif os.path.isfile(full_path) and name.endswith('.json'):
                files.append(full_path)
        return files

    def get_key_from_path(self, file_path: str) -> str:
        """'sub/dir/file.json' -> 'sub.dir.file'"""
        parts = os.path.normpath(file_path).split(os.sep)
        filename = parts.pop()
        if filename.endswith('.json'):
            filename = filename[:-len('.json')]
        return '.'.join(p for p in ('.'.join(parts), filename) if p)

    def flatten_translations(self, source: Any, target: FlatMessageMap, prefix: str = '') -> None:
        if isinstance(source, dict):
            items = source.items()
        else:
            items = enumerate(source)
        for key, value in items:
            full_key = f"{prefix}.{key}" if prefix else str(key)
            if isinstance(value, (dict, list)):
                self.flatten_translations(value, target, full_key)
            else:
                target[full_key] = stringify_value(value)

    def _resolve_default(self, key: str) -> str:
        return (self.fallback or {}).get(key) or key

    def translate(self, key: str, *args, **kwargs) -> str:
        replace = build_replacements(args, kwargs)
        return self.placeholder.fast_format(self._resolve_default(key), replace)

    def translate_to(self, locale: str, key: str, *args, **kwargs) -> str:
        replace = build_replacements(args, kwargs)
        lang_map = self.translations.get(str(locale).lower())
        if lang_map is not None and key in lang_map:
            template = lang_map[key]
        else:
            template = self._resolve_default(key)
        return self.placeholder.fast_format(template, replace)

    uppercase_suffix = staticmethod(uppercase_suffix)

    def has_language(self, locale: str) -> bool:
        return str(locale).lower() in self.translations

    def initialize_locales(self) -> Dict[str, None]:
        return {lang: None for lang in self.get_available_languages()}

    def get_default_fallback(self) -> Optional[FlatMessageMap]:
        return self.fallback

    def get_available_languages(self) -> List[str]:
        return [uppercase_suffix(lang) for lang in self.translations]
