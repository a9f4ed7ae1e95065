"""Fixed language signature table used by the detector."""

import re
from types import MappingProxyType
from typing import Mapping, Sequence

from langsense.core.models import LanguageCode, LanguageSignature


def _alternation(words: Sequence[str]) -> str:
    return r"\b(?:" + "|".join(words) + r")\b"


def _signature(
    code: LanguageCode,
    display_name: str,
    flag: str,
    chars: Sequence[str],
    affixes: Sequence[str],
    words: Sequence[str],
    shared: Sequence[str] = (),
) -> LanguageSignature:
    return LanguageSignature(
        code=code,
        display_name=display_name,
        flag=flag,
        char_patterns=tuple(re.compile(p, re.IGNORECASE) for p in chars),
        affix_patterns=tuple(re.compile(p, re.IGNORECASE) for p in affixes),
        common_words=tuple(dict.fromkeys(words)),
        shared_patterns=tuple(re.compile(p) for p in shared),
    )


_SIGNATURES = (
    _signature(
        LanguageCode.ENGLISH,
        "English",
        "🇺🇸",
        chars=[r"[a-z]"],
        affixes=[
            _alternation(
                "the and is in to of a that it with for as was on are you".split()
            ),
            r"ing\b",
            r"tion\b",
            r"[aeiou]",
        ],
        words="the and is in to of a that it with".split(),
    ),
    _signature(
        LanguageCode.SPANISH,
        "Spanish",
        "🇪🇸",
        chars=[r"[a-záéíóúüñ]"],
        affixes=[
            _alternation(
                "el la de que y en un es se no te lo le da su por son con para "
                "como las dos pero todo bien puede este ser hacer cada día agua "
                "hacia muchos antes debe poder estos había mí muy aquí solo hasta "
                "después he estado siempre últimos".split()
            ),
            r"ción\b",
            r"dad\b",
            r"[áéíóúüñ]",
        ],
        words="el la de que y en un es se no".split(),
    ),
    _signature(
        LanguageCode.FRENCH,
        "French",
        "🇫🇷",
        chars=[r"[a-zàâäçéèêëïîôùûüÿ]"],
        affixes=[
            _alternation(
                "le de et à un il être en avoir que pour dans ce son une sur "
                "avec ne se pas tout plus vous bien où sans moi faire été elle "
                "nous temps très dire non qui sont même après cette comme votre "
                "peut mon aussi nos aux tous vos eux ces seul entre encore depuis "
                "tant déjà chose rien peu comment leurs tel part fin sous fait "
                "deux grand lors moins autant main mise fois assez point vie "
                "ordre groupe vers devant donner venir entrer avons avez ont "
                "serez serons furent sera serait seront suis est sommes êtes "
                "était étais".split()
            ),
            r"tion\b",
            r"ment\b",
            r"[àâäçéèêëïîôùûüÿ]",
        ],
        words="le de et à un il être en avoir".split(),
    ),
    _signature(
        LanguageCode.GERMAN,
        "German",
        "🇩🇪",
        chars=[r"[a-zäöüß]"],
        affixes=[
            _alternation(
                "der die und in den von zu das mit sich des auf für ist im dem "
                "nicht ein eine als auch es an werden aus er hat dass sie nach "
                "wird bei noch wie einem über einen".split()
            ),
            r"ung\b",
            r"lich\b",
            r"[äöüß]",
        ],
        words="der die und in den von zu das mit sich".split(),
    ),
    _signature(
        LanguageCode.ITALIAN,
        "Italian",
        "🇮🇹",
        chars=[r"[a-zàèéìíîòóù]"],
        affixes=[
            _alternation(
                "il di che e la per un in è da a con del le si come non al una "
                "su sono alla lo tutto anche se più della essere questa quello "
                "molto quando fare dove bene dopo ogni questo grande stato può "
                "tempo prima così solo casa due dire stesso mondo vita parte "
                "ancora nessuno vedere".split()
            ),
            r"zione\b",
            r"mente\b",
            r"[àèéìíîòóù]",
        ],
        words="il di che e la per un in è da".split(),
    ),
    _signature(
        LanguageCode.PORTUGUESE,
        "Portuguese",
        "🇵🇹",
        chars=[r"[a-zãâáàçéêíóôõú]"],
        affixes=[
            _alternation(
                "o de a e que do da em um para é com não uma os no se na por "
                "mais as dos como mas foi ao ele das tem à seu sua ou ser quando "
                "muito há nos já está eu também só pelo pela até isso ela entre "
                "era depois sem mesmo aos ter seus quem nas tão nem essas esses "
                "pelas pelos toda todos outras outro".split()
            ),
            r"ção\b",
            r"mente\b",
            r"[ãâáàçéêíóôõú]",
        ],
        words="o de a e que do da em um para".split(),
    ),
    _signature(
        LanguageCode.TURKISH,
        "Turkish",
        "🇹🇷",
        chars=[r"[a-zçğıöşü]"],
        affixes=[
            r"\b(?:bir|bu|ve|da|de|o|ile|için|var|en|ne|ben|sen|ol|et|yap|gel"
            r"|git|gör|bil|ver)(?:m|n|k|niz|lar|ler|dir|tir|miş|muş|ecek|acak)?\b",
            r"[çğıöşü]",
            r"(?:lar|ler)\b",
            r"(?:dir|tir)\b",
        ],
        words="bir bu ve da de o ile için var en".split(),
    ),
    _signature(
        LanguageCode.ARABIC,
        "Arabic",
        "🇸🇦",
        chars=[r"[\u0600-\u06ff]"],
        affixes=[
            r"[\u0600-\u06ff]",
            _alternation(
                "في من إلى على عن مع هذا هذه ذلك تلك الذي التي كان كانت يكون "
                "تكون هو هي أن إن لا نعم ما متى أين كيف لماذا ماذا".split()
            ),
        ],
        words="في من إلى على عن مع هذا هذه ذلك تلك".split(),
    ),
    _signature(
        LanguageCode.RUSSIAN,
        "Russian",
        "🇷🇺",
        chars=[r"[\u0400-\u04ff]"],
        affixes=[
            r"[\u0400-\u04ff]",
            _alternation(
                "в и не на я быть тот он оно она а как что это все ещё также "
                "наш мой который мочь время рука два другой после работа тысяча "
                "несколько сейчас во многий пойти знать вода более очень сам "
                "хорошо старый хотеть сказать здесь слово где стоять думать "
                "место спросить ответить работать жизнь девушка играть жить "
                "месяц".split()
            ),
        ],
        words="в и не на я быть тот он оно она".split(),
    ),
    _signature(
        LanguageCode.CHINESE,
        "Chinese",
        "🇨🇳",
        chars=[r"[\u4e00-\u9fff\u3400-\u4dbf\uf900-\ufaff]"],
        affixes=[r"[\u4e00-\u9fff]", r"[\u3400-\u4dbf]", r"[\uf900-\ufaff]"],
        words="的 一 是 不 了 人 我 在 有 他".split(),
    ),
    # Kanji count only alongside kana, so pure Han text stays Chinese.
    _signature(
        LanguageCode.JAPANESE,
        "Japanese",
        "🇯🇵",
        chars=[r"[\u3040-\u309f\u30a0-\u30ff]"],
        affixes=[r"[\u3040-\u309f]", r"[\u30a0-\u30ff]"],
        words="の に は を た が で て と し".split(),
        shared=[r"[\u4e00-\u9fff]"],
    ),
    _signature(
        LanguageCode.KOREAN,
        "Korean",
        "🇰🇷",
        chars=[r"[\uac00-\ud7af\u1100-\u11ff\u3130-\u318f]"],
        affixes=[r"[\uac00-\ud7af]", r"[\u1100-\u11ff]", r"[\u3130-\u318f]"],
        words="이 그 저 것 수 있 하 되 어 들".split(),
    ),
)

SIGNATURES: Mapping[str, LanguageSignature] = MappingProxyType(
    {signature.code.value: signature for signature in _SIGNATURES}
)


def get_signature(code: str) -> LanguageSignature | None:
    """Look up the signature for a language code."""
    return SIGNATURES.get(code)
