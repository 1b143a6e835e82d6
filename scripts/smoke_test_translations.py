import logging
import sys
from message_translator.config import settings
from message_translator.translator import MessageTranslator

def run(folder: str):
    logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    translator = MessageTranslator(settings.DEFAULT_REPLACEMENTS)
    translator.load_translations_from_folder(folder, settings.DEFAULT_LANG, strict=True)
    print('languages:', translator.get_available_languages())
    fallback = translator.get_default_fallback() or {}
    for key in list(fallback)[:10]:
        print(key, '=>', translator.translate(key))

if __name__ == '__main__':
    run(sys.argv[1] if len(sys.argv) > 1 else settings.LOCALES_DIR)
