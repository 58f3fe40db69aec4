"""Languages known to the CLD2 detector.

Member values are CLD2's numeric language ids.  The detector's table also
contains a few hundred unused placeholder ids (``X_81`` .. ``X_505``); those
are left out here and resolve to :attr:`Language.UNKNOWN_LANGUAGE` through
:meth:`Language.get`.

Each member carries the detector's internal ``code`` and, where one exists,
the ISO 639-3 code it is known under.  Codes missing here are back-filled
from the host locale catalog, see :mod:`cld2xref.locales`.
"""

from __future__ import annotations

import enum


class Language(enum.IntEnum):
    """A language (or script pseudo-language) reported by CLD2."""

    code: str
    iso639_3: str | None

    def __new__(cls, value: int, code: str, iso639_3: str | None = None) -> Language:
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.code = code
        obj.iso639_3 = iso639_3
        return obj

    ENGLISH = 0, "en", "eng"
    DANISH = 1, "da", "dan"
    DUTCH = 2, "nl", "nld"
    FINNISH = 3, "fi", "fin"
    FRENCH = 4, "fr", "fra"
    GERMAN = 5, "de", "deu"
    HEBREW = 6, "iw", "heb"
    ITALIAN = 7, "it", "ita"
    JAPANESE = 8, "ja", "jpn"
    KOREAN = 9, "ko", "kor"
    NORWEGIAN = 10, "no", "nor"
    POLISH = 11, "pl", "pol"
    PORTUGUESE = 12, "pt", "por"
    RUSSIAN = 13, "ru", "rus"
    SPANISH = 14, "es", "spa"
    SWEDISH = 15, "sv", "swe"
    CHINESE = 16, "zh", "zho"
    CZECH = 17, "cs", "ces"
    GREEK = 18, "el", "ell"
    ICELANDIC = 19, "is", "isl"
    LATVIAN = 20, "lv", "lav"
    LITHUANIAN = 21, "lt", "lit"
    ROMANIAN = 22, "ro", "ron"
    HUNGARIAN = 23, "hu", "hun"
    ESTONIAN = 24, "et", "est"
    TG_UNKNOWN_LANGUAGE = 25, "xxx"
    UNKNOWN_LANGUAGE = 26, "un"
    BULGARIAN = 27, "bg", "bul"
    CROATIAN = 28, "hr", "hrv"
    SERBIAN = 29, "sr", "srp"
    IRISH = 30, "ga", "gle"
    GALICIAN = 31, "gl", "glg"
    TAGALOG = 32, "tl", "tgl"
    TURKISH = 33, "tr", "tur"
    UKRAINIAN = 34, "uk", "ukr"
    HINDI = 35, "hi", "hin"
    MACEDONIAN = 36, "mk", "mkd"
    BENGALI = 37, "bn", "ben"
    INDONESIAN = 38, "id", "ind"
    LATIN = 39, "la", "lat"
    MALAY = 40, "ms", "msa"
    MALAYALAM = 41, "ml", "mal"
    WELSH = 42, "cy", "cym"
    NEPALI = 43, "ne", "nep"
    TELUGU = 44, "te", "tel"
    ALBANIAN = 45, "sq", "sqi"
    TAMIL = 46, "ta", "tam"
    BELARUSIAN = 47, "be", "bel"
    JAVANESE = 48, "jw", "jav"
    OCCITAN = 49, "oc", "oci"
    URDU = 50, "ur", "urd"
    BIHARI = 51, "bh", "bih"
    GUJARATI = 52, "gu", "guj"
    THAI = 53, "th", "tha"
    ARABIC = 54, "ar", "ara"
    CATALAN = 55, "ca", "cat"
    ESPERANTO = 56, "eo", "epo"
    BASQUE = 57, "eu", "eus"
    INTERLINGUA = 58, "ia", "ina"
    KANNADA = 59, "kn", "kan"
    PUNJABI = 60, "pa", "pan"
    SCOTS_GAELIC = 61, "gd", "gla"
    SWAHILI = 62, "sw", "swa"
    SLOVENIAN = 63, "sl", "slv"
    MARATHI = 64, "mr", "mar"
    MALTESE = 65, "mt", "mlt"
    VIETNAMESE = 66, "vi", "vie"
    FRISIAN = 67, "fy", "fry"
    SLOVAK = 68, "sk", "slk"
    CHINESE_T = 69, "zh-Hant", "zho"
    FAROESE = 70, "fo", "fao"
    SUNDANESE = 71, "su", "sun"
    UZBEK = 72, "uz", "uzb"
    AMHARIC = 73, "am", "amh"
    AZERBAIJANI = 74, "az", "aze"
    GEORGIAN = 75, "ka", "kat"
    TIGRINYA = 76, "ti", "tir"
    PERSIAN = 77, "fa", "fas"
    BOSNIAN = 78, "bs", "bos"
    SINHALESE = 79, "si", "sin"
    NORWEGIAN_N = 80, "nn", "nno"
    XHOSA = 83, "xh", "xho"
    ZULU = 84, "zu", "zul"
    GUARANI = 85, "gn", "grn"
    SESOTHO = 86, "st", "sot"
    TURKMEN = 87, "tk", "tuk"
    KYRGYZ = 88, "ky", "kir"
    BRETON = 89, "br", "bre"
    TWI = 90, "tw", "twi"
    YIDDISH = 91, "yi", "yid"
    SOMALI = 93, "so", "som"
    UIGHUR = 94, "ug", "uig"
    KURDISH = 95, "ku", "kur"
    MONGOLIAN = 96, "mn", "mon"
    ARMENIAN = 97, "hy", "hye"
    LAOTHIAN = 98, "lo", "lao"
    SINDHI = 99, "sd", "snd"
    RHAETO_ROMANCE = 100, "rm", "roh"
    AFRIKAANS = 101, "af", "afr"
    LUXEMBOURGISH = 102, "lb", "ltz"
    BURMESE = 103, "my", "mya"
    KHMER = 104, "km", "khm"
    TIBETAN = 105, "bo", "bod"
    DHIVEHI = 106, "dv", "div"
    CHEROKEE = 107, "chr", "chr"
    SYRIAC = 108, "syr", "syr"
    LIMBU = 109, "lif", "lif"
    ORIYA = 110, "or", "ori"
    ASSAMESE = 111, "as", "asm"
    CORSICAN = 112, "co", "cos"
    INTERLINGUE = 113, "ie", "ile"
    KAZAKH = 114, "kk", "kaz"
    LINGALA = 115, "ln", "lin"
    PASHTO = 117, "ps", "pus"
    QUECHUA = 118, "qu", "que"
    SHONA = 119, "sn", "sna"
    TAJIK = 120, "tg", "tgk"
    TATAR = 121, "tt", "tat"
    TONGA = 122, "to", "ton"
    YORUBA = 123, "yo", "yor"
    MAORI = 128, "mi", "mri"
    WOLOF = 129, "wo", "wol"
    ABKHAZIAN = 130, "ab", "abk"
    AFAR = 131, "aa", "aar"
    AYMARA = 132, "ay", "aym"
    BASHKIR = 133, "ba", "bak"
    BISLAMA = 134, "bi", "bis"
    DZONGKHA = 135, "dz", "dzo"
    FIJIAN = 136, "fj", "fij"
    GREENLANDIC = 137, "kl", "kal"
    HAUSA = 138, "ha", "hau"
    HAITIAN_CREOLE = 139, "ht", "hat"
    INUPIAK = 140, "ik", "ipk"
    INUKTITUT = 141, "iu", "iku"
    KASHMIRI = 142, "ks", "kas"
    KINYARWANDA = 143, "rw", "kin"
    MALAGASY = 144, "mg", "mlg"
    NAURU = 145, "na", "nau"
    OROMO = 146, "om", "orm"
    RUNDI = 147, "rn", "run"
    SAMOAN = 148, "sm", "smo"
    SANGO = 149, "sg", "sag"
    SANSKRIT = 150, "sa", "san"
    SISWANT = 151, "ss", "ssw"
    TSONGA = 152, "ts", "tso"
    TSWANA = 153, "tn", "tsn"
    VOLAPUK = 154, "vo", "vol"
    ZHUANG = 155, "za", "zha"
    KHASI = 156, "kha", "kha"
    SCOTS = 157, "sco", "sco"
    GANDA = 158, "lg", "lug"
    MANX = 159, "gv", "glv"
    MONTENEGRIN = 160, "sr-ME", "srp"
    AKAN = 161, "ak", "aka"
    IGBO = 162, "ig", "ibo"
    MAURITIAN_CREOLE = 163, "mfe", "mfe"
    HAWAIIAN = 164, "haw", "haw"
    CEBUANO = 165, "ceb", "ceb"
    EWE = 166, "ee", "ewe"
    GA = 167, "gaa", "gaa"
    HMONG = 168, "hmn", "blu"
    KRIO = 169, "kri", "kri"
    LOZI = 170, "loz", "loz"
    LUBA_LULUA = 171, "lua", "lua"
    LUO_KENYA_AND_TANZANIA = 172, "luo", "luo"
    NEWARI = 173, "new", "new"
    NYANJA = 174, "ny", "nya"
    OSSETIAN = 175, "os", "oss"
    PAMPANGA = 176, "pam", "pam"
    PEDI = 177, "nso", "nso"
    RAJASTHANI = 178, "raj", "raj"
    SESELWA = 179, "crs", "crs"
    TUMBUKA = 180, "tum", "tum"
    VENDA = 181, "ve", "ven"
    WARAY_PHILIPPINES = 182, "war", "war"
    NDEBELE = 506, "nr"
    X_BORK_BORK_BORK = 507, "zzb"
    X_PIG_LATIN = 508, "zzp"
    X_HACKER = 509, "zzh"
    X_KLINGON = 510, "tlh"
    X_ELMER_FUDD = 511, "zze"
    X_Common = 512, "xx-Zyyy"
    X_Latin = 513, "xx-Latn"
    X_Greek = 514, "xx-Grek"
    X_Cyrillic = 515, "xx-Cyrl"
    X_Armenian = 516, "xx-Armn"
    X_Hebrew = 517, "xx-Hebr"
    X_Arabic = 518, "xx-Arab"
    X_Syriac = 519, "xx-Syrc"
    X_Thaana = 520, "xx-Thaa"
    X_Devanagari = 521, "xx-Deva"
    X_Bengali = 522, "xx-Beng"
    X_Gurmukhi = 523, "xx-Guru"
    X_Gujarati = 524, "xx-Gujr"
    X_Oriya = 525, "xx-Orya"
    X_Tamil = 526, "xx-Taml"
    X_Telugu = 527, "xx-Telu"
    X_Kannada = 528, "xx-Knda"
    X_Malayalam = 529, "xx-Mlym"
    X_Sinhala = 530, "xx-Sinh"
    X_Thai = 531, "xx-Thai"
    X_Lao = 532, "xx-Laoo"
    X_Tibetan = 533, "xx-Tibt"
    X_Myanmar = 534, "xx-Mymr"
    X_Georgian = 535, "xx-Geor"
    X_Hangul = 536, "xx-Hang"
    X_Ethiopic = 537, "xx-Ethi"
    X_Cherokee = 538, "xx-Cher"
    X_Canadian_Aboriginal = 539, "xx-Cans"
    X_Ogham = 540, "xx-Ogam"
    X_Runic = 541, "xx-Runr"
    X_Khmer = 542, "xx-Khmr"
    X_Mongolian = 543, "xx-Mong"
    X_Hiragana = 544, "xx-Hira"
    X_Katakana = 545, "xx-Kana"
    X_Bopomofo = 546, "xx-Bopo"
    X_Han = 547, "xx-Hani"
    X_Yi = 548, "xx-Yiii"
    X_Old_Italic = 549, "xx-Ital"
    X_Gothic = 550, "xx-Goth", "got"
    X_Deseret = 551, "xx-Dsrt"
    X_Inherited = 552, "xx-Qaai"
    X_Tagalog = 553, "xx-Tglg"
    X_Hanunoo = 554, "xx-Hano"
    X_Buhid = 555, "xx-Buhd"
    X_Tagbanwa = 556, "xx-Tagb"
    X_Limbu = 557, "xx-Limb"
    X_Tai_Le = 558, "xx-Tale"
    X_Linear_B = 559, "xx-Linb"
    X_Ugaritic = 560, "xx-Ugar"
    X_Shavian = 561, "xx-Shaw"
    X_Osmanya = 562, "xx-Osma"
    X_Cypriot = 563, "xx-Cprt"
    X_Braille = 564, "xx-Brai"
    X_Buginese = 565, "xx-Bugi"
    X_Coptic = 566, "xx-Copt"
    X_New_Tai_Lue = 567, "xx-Talu"
    X_Glagolitic = 568, "xx-Glag"
    X_Tifinagh = 569, "xx-Tfng"
    X_Syloti_Nagri = 570, "xx-Sylo"
    X_Old_Persian = 571, "xx-Xpeo"
    X_Kharoshthi = 572, "xx-Khar"
    X_Balinese = 573, "xx-Bali"
    X_Cuneiform = 574, "xx-Xsux", "sux"
    X_Phoenician = 575, "xx-Phnx"
    X_Phags_Pa = 576, "xx-Phag"
    X_Nko = 577, "xx-Nkoo"
    X_Sundanese = 578, "xx-Sund"
    X_Lepcha = 579, "xx-Lepc"
    X_Ol_Chiki = 580, "xx-Olck"
    X_Vai = 581, "xx-Vaii"
    X_Saurashtra = 582, "xx-Saur"
    X_Kayah_Li = 583, "xx-Kali"
    X_Rejang = 584, "xx-Rjng"
    X_Lycian = 585, "xx-Lyci"
    X_Carian = 586, "xx-Cari"
    X_Lydian = 587, "xx-Lydi"
    X_Cham = 588, "xx-Cham"
    X_Tai_Tham = 589, "xx-Lana"
    X_Tai_Viet = 590, "xx-Tavt"
    X_Avestan = 591, "xx-Avst"
    X_Egyptian_Hieroglyphs = 592, "xx-Egyp"
    X_Samaritan = 593, "xx-Samr"
    X_Lisu = 594, "xx-Lisu"
    X_Bamum = 595, "xx-Bamu"
    X_Javanese = 596, "xx-Java"
    X_Meetei_Mayek = 597, "xx-Mtei"
    X_Imperial_Aramaic = 598, "xx-Armi"
    X_Old_South_Arabian = 599, "xx-Sarb"
    X_Inscriptional_Parthian = 600, "xx-Prti"
    X_Inscriptional_Pahlavi = 601, "xx-Phli"
    X_Old_Turkic = 602, "xx-Orkh"
    X_Kaithi = 603, "xx-Kthi"
    X_Batak = 604, "xx-Batk"
    X_Brahmi = 605, "xx-Brah"
    X_Mandaic = 606, "xx-Mand"
    X_Chakma = 607, "xx-Cakm"
    X_Meroitic_Cursive = 608, "xx-Merc"
    X_Meroitic_Hieroglyphs = 609, "xx-Mero"
    X_Miao = 610, "xx-Plrd"
    X_Sharada = 611, "xx-Shrd"
    X_Sora_Sompeng = 612, "xx-Sora"
    X_Takri = 613, "xx-Takr"

    @property
    def display_name(self) -> str:
        """The name CLD2 itself reports for this language."""
        return _DISPLAY_NAMES.get(self, self.name)

    @classmethod
    def get(cls, value: int) -> Language:
        """Return the member with id *value*, or ``UNKNOWN_LANGUAGE``."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN_LANGUAGE


# CLD2 reports a handful of languages in mixed case.
_DISPLAY_NAMES: dict[Language, str] = {
    Language.JAPANESE: "Japanese",
    Language.KOREAN: "Korean",
    Language.CHINESE: "Chinese",
    Language.CHINESE_T: "ChineseT",
    Language.UNKNOWN_LANGUAGE: "Unknown",
    Language.TG_UNKNOWN_LANGUAGE: "Ignore",
}

_BY_CODE: dict[str, Language] = {lang.code: lang for lang in Language}
_BY_NAME: dict[str, Language] = {lang.display_name.upper(): lang for lang in Language}


def language_name(value: int) -> str:
    """Return CLD2's display name for the language id *value*."""
    return Language.get(value).display_name


def language_code(value: int) -> str:
    """Return CLD2's internal code for the language id *value*."""
    return Language.get(value).code


def language_from_code(code: str) -> Language:
    """Look up a language by its CLD2 code.

    The match is exact and case-sensitive (``"zh-Hant"``, not ``"zh-hant"``).
    """
    return _BY_CODE.get(code, Language.UNKNOWN_LANGUAGE)


def language_from_name(name: str) -> Language:
    """Resolve a language name or code the way CLD2's name lookup does.

    Display names match case-insensitively (``"FRENCH"``, ``"Japanese"``),
    codes match exactly.  Anything else gives ``UNKNOWN_LANGUAGE``.
    """
    lang = _BY_NAME.get(name.upper())
    if lang is not None:
        return lang
    return language_from_code(name)
