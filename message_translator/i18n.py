from typing import List, Optional
from .config import settings
from .translator import MessageTranslator

translator = MessageTranslator(settings.DEFAULT_REPLACEMENTS)

def load_translations(folder: Optional[str] = None, default_language: Optional[str] = None) -> List[str]:
    folder = folder or settings.LOCALES_DIR
    translator.load_translations_from_folder(folder, default_language or settings.DEFAULT_LANG)
    return translator.get_available_languages()

def t(lang: Optional[str], key: str, *args, **kwargs) -> str:
    return translator.translate_to(lang or settings.DEFAULT_LANG, key, *args, **kwargs)
