# i18n.py
import gettext
import locale
import sys
from pathlib import Path
from typing import Callable, Optional

_ = lambda s: s

SUPPORTED_LANGUAGES = ('en', 'ru')


def detect_language_from_args() -> Optional[str]:
    """
    Looks for --lang in the command line arguments before argparse runs.

    Returns:
        Language code ('en', 'ru') or None if it was not given
    """
    args = sys.argv[1:]
    for i, arg in enumerate(args):
        if arg == '--lang' and i + 1 < len(args):
            lang = args[i + 1]
            if lang in SUPPORTED_LANGUAGES:
                return lang
        elif arg.startswith('--lang='):
            lang = arg.split('=', 1)[1]
            if lang in SUPPORTED_LANGUAGES:
                return lang
    return None


def setup_localization(force_lang: Optional[str] = None) -> Callable[[str], str]:
    """
    Sets up the translation function.

    Args:
        force_lang: Language to use ('en', 'ru').
                    If None, it is taken from --lang or the system locale.

    Returns:
        gettext translation function
    """
    global _

    locale_dir = Path(__file__).parent / 'locales'

    if force_lang:
        lang_code = force_lang
    else:
        lang_code = detect_language_from_args() or _system_language(locale_dir)

    translation = gettext.translation('messages',
                                      localedir=str(locale_dir),
                                      languages=[lang_code],
                                      fallback=True)

    _ = translation.gettext

    return _


def _system_language(locale_dir: Path) -> str:
    try:
        system_locale = locale.getlocale()[0]
    except ValueError:
        return 'en'
    if not system_locale:
        return 'en'

    lang_code = system_locale[:2]
    if not (locale_dir / lang_code).exists():
        return 'en'
    return lang_code


_ = setup_localization()
