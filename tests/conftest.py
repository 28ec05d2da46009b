"""Shared fixtures: a small reading table standing in for the full dictionary."""

from __future__ import annotations

import pytest

from pinyin_pipeline.lookup.repository import ReadingRepository

MINI_TABLE = {
    "中": "zhōng,zhòng",
    "国": "guó",
    "女": "nǚ,rǔ",
    "绿": "lǜ,lù",
    "行": "xíng,háng,hàng,héng",
    "吗": "ma,má,mǎ",
    "安": "ān",
    "单": "dān,shàn,chán",
    "尉": "wèi,yù",
    "迟": "chí",
    "熊": "xióng",
    "我": "wǒ",
    "爱": "ài",
    "学": "xué",
    "句": "jù,gōu",
    0x55EF: "ǹg,ń",
}


@pytest.fixture
def repo() -> ReadingRepository:
    """Build a repository over ``MINI_TABLE`` with the bundled surname tables."""

    return ReadingRepository(table=MINI_TABLE)
