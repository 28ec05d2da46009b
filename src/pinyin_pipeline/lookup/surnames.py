"""Surname reading tables used by ``mode="surname"``.

Values are space-separated tone-marked syllables, one per character. Both
tables are read-only module constants.
"""

from __future__ import annotations

from types import MappingProxyType

COMPOUND_SURNAMES = MappingProxyType(
    {
        "万俟": "mò qí",
        "尉迟": "yù chí",
        "单于": "chán yú",
        "长孙": "zhǎng sūn",
        "令狐": "líng hú",
        "澹台": "tán tái",
        "皇甫": "huáng fǔ",
        "欧阳": "ōu yáng",
        "上官": "shàng guān",
        "司马": "sī mǎ",
        "诸葛": "zhū gě",
        "东方": "dōng fāng",
        "宇文": "yǔ wén",
        "慕容": "mù róng",
        "亓官": "qí guān",
        "拓跋": "tuò bá",
        "夏侯": "xià hóu",
        "公羊": "gōng yáng",
        "乐正": "yuè zhèng",
        "宰父": "zǎi fǔ",
        "谷梁": "gǔ liáng",
        "呼延": "hū yán",
        "南宫": "nán gōng",
        "闻人": "wén rén",
        "仲长": "zhòng cháng",
    }
)

SINGLE_SURNAMES = MappingProxyType(
    {
        "单": "shàn",
        "仇": "qiú",
        "区": "ōu",
        "朴": "piáo",
        "查": "zhā",
        "解": "xiè",
        "曾": "zēng",
        "盖": "gě",
        "缪": "miào",
        "乐": "yuè",
        "覃": "qín",
        "尉": "yù",
        "召": "shào",
        "繁": "pó",
        "员": "yùn",
        "种": "chóng",
        "秘": "bì",
        "折": "shé",
        "句": "gōu",
        "阚": "kàn",
        "黑": "hè",
        "翟": "zhái",
        "祭": "zhài",
        "纪": "jǐ",
        "华": "huà",
        "任": "rén",
        "都": "dū",
        "宁": "nìng",
        "过": "guō",
        "薄": "bó",
        "沈": "shěn",
        "柏": "bǎi",
        "朝": "cháo",
        "贲": "bēn",
        "隗": "wěi",
        "眭": "suī",
        "卜": "bǔ",
        "褚": "chǔ",
        "能": "nài",
        "谌": "chén",
    }
)
