"""
Language code mappings and utilities.

Standards:
- ISO 639-1: 2-letter language codes (en, zh, es)
- BCP 47: Language + Region codes (en-US, zh-CN, pt-BR)

Configuration uses lower- or mixed-case BCP 47 codes plus the special
source code 'auto'. DeepL and Youdao each expect their own spelling; the
to_deepl_code() and to_youdao_code() helpers handle that remapping.
"""

import re
from typing import Dict, Optional

AUTO = 'auto'

# Well-formed language[-script|region] tag, for codes the tables below do not list
_CODE_PATTERN = re.compile(r'[A-Za-z]{2,3}(-[A-Za-z0-9]{2,4})?')

# ISO 639-1 language codes (2-letter)
# Source: https://en.wikipedia.org/wiki/List_of_ISO_639-1_codes
ISO_639_1 = {
    'af': 'Afrikaans',
    'am': 'Amharic',
    'ar': 'Arabic',
    'ay': 'Aymara',
    'az': 'Azerbaijani',
    'bg': 'Bulgarian',
    'bn': 'Bengali',
    'bo': 'Tibetan',
    'bs': 'Bosnian',
    'ca': 'Catalan',
    'cs': 'Czech',
    'cy': 'Welsh',
    'da': 'Danish',
    'de': 'German',
    'el': 'Greek',
    'en': 'English',
    'es': 'Spanish',
    'et': 'Estonian',
    'eu': 'Basque',
    'fa': 'Persian',
    'ff': 'Fulah',
    'fi': 'Finnish',
    'fr': 'French',
    'ga': 'Irish',
    'gl': 'Galician',
    'gn': 'Guarani',
    'gu': 'Gujarati',
    'ha': 'Hausa',
    'he': 'Hebrew',
    'hi': 'Hindi',
    'hr': 'Croatian',
    'hu': 'Hungarian',
    'hy': 'Armenian',
    'id': 'Indonesian',
    'ig': 'Igbo',
    'is': 'Icelandic',
    'it': 'Italian',
    'ja': 'Japanese',
    'ka': 'Georgian',
    'kk': 'Kazakh',
    'km': 'Khmer',
    'kn': 'Kannada',
    'ko': 'Korean',
    'ky': 'Kyrgyz',
    'lb': 'Luxembourgish',
    'lo': 'Lao',
    'lt': 'Lithuanian',
    'lv': 'Latvian',
    'mg': 'Malagasy',
    'mi': 'Maori',
    'mk': 'Macedonian',
    'ml': 'Malayalam',
    'mn': 'Mongolian',
    'mr': 'Marathi',
    'ms': 'Malay',
    'mt': 'Maltese',
    'my': 'Burmese',
    'ne': 'Nepali',
    'nb': 'Norwegian Bokmål',
    'nl': 'Dutch',
    'no': 'Norwegian',
    'om': 'Oromo',
    'or': 'Odia',
    'pa': 'Punjabi',
    'pl': 'Polish',
    'pt': 'Portuguese',
    'qu': 'Quechua',
    'rn': 'Kirundi',
    'ro': 'Romanian',
    'ru': 'Russian',
    'rw': 'Kinyarwanda',
    'si': 'Sinhala',
    'sk': 'Slovak',
    'sl': 'Slovenian',
    'so': 'Somali',
    'sq': 'Albanian',
    'sr': 'Serbian',
    'ss': 'Swati',
    'st': 'Southern Sotho',
    'sv': 'Swedish',
    'sw': 'Swahili',
    'ta': 'Tamil',
    'te': 'Telugu',
    'tg': 'Tajik',
    'th': 'Thai',
    'tk': 'Turkmen',
    'tn': 'Tswana',
    'tr': 'Turkish',
    'ts': 'Tsonga',
    'uk': 'Ukrainian',
    'ur': 'Urdu',
    'uz': 'Uzbek',
    've': 'Venda',
    'vi': 'Vietnamese',
    'xh': 'Xhosa',
    'yo': 'Yoruba',
    'zh': 'Chinese',
    'zu': 'Zulu',
}

# BCP 47 language-region codes (common variants)
BCP_47_VARIANTS = {
    'en-US': 'English (United States)',
    'en-GB': 'English (United Kingdom)',
    'en-AU': 'English (Australia)',
    'en-CA': 'English (Canada)',

    'zh-CN': 'Chinese (Simplified, China)',
    'zh-TW': 'Chinese (Traditional, Taiwan)',
    'zh-HK': 'Chinese (Traditional, Hong Kong)',
    'zh-SG': 'Chinese (Simplified, Singapore)',

    'es-ES': 'Spanish (Spain)',
    'es-MX': 'Spanish (Mexico)',
    'es-AR': 'Spanish (Argentina)',
    'es-CO': 'Spanish (Colombia)',

    'pt-BR': 'Portuguese (Brazil)',
    'pt-PT': 'Portuguese (Portugal)',

    'fr-FR': 'French (France)',
    'fr-CA': 'French (Canada)',
    'fr-BE': 'French (Belgium)',
    'fr-CH': 'French (Switzerland)',

    'de-DE': 'German (Germany)',
    'de-AT': 'German (Austria)',
    'de-CH': 'German (Switzerland)',

    'ar-SA': 'Arabic (Saudi Arabia)',
    'ar-AE': 'Arabic (United Arab Emirates)',
    'ar-EG': 'Arabic (Egypt)',
}

ALL_LANGUAGE_CODES = {**ISO_639_1, **BCP_47_VARIANTS}
_CODES_BY_LOWER = {code.lower(): code for code in ALL_LANGUAGE_CODES}

# DeepL wants uppercase codes, with script/region for a few languages
DEEPL_CODES = {
    'zh-cn': 'ZH-HANS',
    'zh-tw': 'ZH-HANT',
    'en': 'EN',
    'en-us': 'EN-US',
    'en-gb': 'EN-GB',
    'pt': 'PT-PT',
    'pt-br': 'PT-BR',
    'nb': 'NB',
}

# Youdao spells Chinese variants its own way; everything else is lower-case
YOUDAO_CODES = {
    'zh-cn': 'zh-CHS',
    'zh-tw': 'zh-CHT',
    'pt-br': 'pt',
}


def is_auto(code: Optional[str]) -> bool:
    """True when the code asks the provider to detect the language."""
    return not code or code.lower() == AUTO


def is_valid_language_code(code: str, allow_auto: bool = False) -> bool:
    """
    Check if a language code is usable (case-insensitive).

    Listed codes are always valid. Other well-formed tags such as 'ceb' or
    'sr-Latn' pass through to the provider, which has the final say.

    Examples:
        >>> is_valid_language_code('zh-cn')
        True
        >>> is_valid_language_code('hr')
        True
        >>> is_valid_language_code('AUTO', allow_auto=True)
        True
        >>> is_valid_language_code('invalid')
        False
    """
    if allow_auto and code.lower() == AUTO:
        return True
    return code.lower() in _CODES_BY_LOWER or _CODE_PATTERN.fullmatch(code) is not None


def get_language_name(code: str) -> Optional[str]:
    """
    Get the full language name from code.

    Examples:
        >>> get_language_name('zh-CN')
        'Chinese (Simplified, China)'
        >>> get_language_name('auto')
    """
    canonical = _CODES_BY_LOWER.get(code.lower())
    return ALL_LANGUAGE_CODES.get(canonical) if canonical else None


def extract_base_language(code: str) -> str:
    """
    Extract base language from code (remove region).

    Examples:
        >>> extract_base_language('zh-CN')
        'zh'
        >>> extract_base_language('fr')
        'fr'
    """
    return code.split('-')[0]


def to_deepl_code(code: str) -> str:
    """
    Map a configured language code to DeepL's spelling.

    Examples:
        >>> to_deepl_code('zh-CN')
        'ZH-HANS'
        >>> to_deepl_code('fr-CA')
        'FR'
    """
    lower = code.lower()
    return DEEPL_CODES.get(lower) or extract_base_language(code).upper()


def to_youdao_code(code: str) -> str:
    """
    Map a configured language code to Youdao's spelling.

    Examples:
        >>> to_youdao_code('zh-TW')
        'zh-CHT'
        >>> to_youdao_code('JA')
        'ja'
    """
    lower = code.lower()
    return YOUDAO_CODES.get(lower, lower)


def get_all_language_codes() -> Dict[str, str]:
    """
    Get all supported language codes.

    Returns:
        Dict mapping code to language name
    """
    return ALL_LANGUAGE_CODES.copy()
