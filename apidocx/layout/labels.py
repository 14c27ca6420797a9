"""
Localized labels and cover-date formatting.

The Japanese table reproduces the wording of the classic Japanese Javadoc
output; English is provided as an alternative.
"""

from dataclasses import dataclass
from datetime import date
from typing import Dict


@dataclass(frozen=True)
class Labels:
    """Fixed texts used by the structure walker."""
    package: str
    class_: str
    interfaces: str
    version: str
    author: str
    enum_constants_detail: str
    fields_detail: str
    constructors_detail: str
    methods_detail: str
    field_kind: str
    enum_constant_kind: str
    constructor_kind: str
    method_kind: str
    parameters: str
    returns: str
    throws: str

    def kind(self, kind: str) -> str:
        """Label for a member kind discriminator."""
        return {
            "field": self.field_kind,
            "enum_constant": self.enum_constant_kind,
            "constructor": self.constructor_kind,
            "method": self.method_kind,
        }[kind]


LABELS: Dict[str, Labels] = {
    "ja": Labels(
        package="{name} パッケージ",
        class_="{name} クラス",
        interfaces="すべての実装されたインタフェース:",
        version="バージョン:",
        author="作成者:",
        enum_constants_detail="定数の詳細",
        fields_detail="フィールドの詳細",
        constructors_detail="コンストラクタの詳細",
        methods_detail="メソッドの詳細",
        field_kind="フィールド",
        enum_constant_kind="列挙型定数",
        constructor_kind="コンストラクタ",
        method_kind="メソッド",
        parameters="パラメータ:",
        returns="戻り値:",
        throws="例外:",
    ),
    "en": Labels(
        package="Package {name}",
        class_="Class {name}",
        interfaces="All Implemented Interfaces:",
        version="Version:",
        author="Author:",
        enum_constants_detail="Enum Constant Detail",
        fields_detail="Field Detail",
        constructors_detail="Constructor Detail",
        methods_detail="Method Detail",
        field_kind="field",
        enum_constant_kind="enum constant",
        constructor_kind="constructor",
        method_kind="method",
        parameters="Parameters:",
        returns="Returns:",
        throws="Throws:",
    ),
}

# (first day, era name), newest first
_JAPANESE_ERAS = (
    (date(2019, 5, 1), "令和"),
    (date(1989, 1, 8), "平成"),
    (date(1926, 12, 25), "昭和"),
    (date(1912, 7, 30), "大正"),
    (date(1868, 9, 8), "明治"),
)

_ENGLISH_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def get_labels(locale: str) -> Labels:
    try:
        return LABELS[locale]
    except KeyError:
        raise ValueError(f"Unsupported locale: {locale}") from None


def format_japanese_era_date(day: date) -> str:
    """Format a date in the Japanese imperial calendar, e.g. '令和8年10月19日'."""
    for start, era in _JAPANESE_ERAS:
        if day >= start:
            year = day.year - start.year + 1
            return f"{era}{year}年{day.month}月{day.day}日"
    return f"{day.year}年{day.month}月{day.day}日"


def format_long_date(day: date, locale: str) -> str:
    """Long-form date for the cover page."""
    if locale == "ja":
        return format_japanese_era_date(day)
    return f"{_ENGLISH_MONTHS[day.month - 1]} {day.day}, {day.year}"
