import unicodedata

_HIRAGANA_START = ord("ぁ")
_HIRAGANA_END = ord("ゖ")
_KATAKANA_OFFSET = ord("ァ") - ord("ぁ")


def normalize_kana(value: str) -> str:
    """カナ氏名を照合用の全角カタカナへ正規化する

    半角カナ・全角英数は NFKC で正規化し、ひらがなはカタカナへ変換する。
    """
    normalized = unicodedata.normalize("NFKC", value).strip()
    return "".join(
        chr(ord(ch) + _KATAKANA_OFFSET)
        if _HIRAGANA_START <= ord(ch) <= _HIRAGANA_END
        else ch
        for ch in normalized
    )
