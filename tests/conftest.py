"""
Shared fixtures: ichiran-cli -f documents in wire form.

The documents are built as Python data and serialized on demand, so tests
can tweak a copy before decoding it.
"""

import copy
import json

import pytest


def dumps(data) -> str:
    return json.dumps(data, ensure_ascii=False)


# ichiran-cli -f "いい天気ですね。"
IITENKI_WORDS = [
    ["iitenki", {
        "reading": "いい天気 【いいてんき】",
        "text": "いい天気",
        "kana": "いいてんき",
        "score": 315,
        "seq": 1914340,
        "gloss": [{"pos": "[n,exp]", "gloss": "fine weather; fair weather"}],
    }, []],
    ["desu", {
        "reading": "です",
        "text": "です",
        "kana": "です",
        "score": 64,
        "seq": 1628500,
        "gloss": [{"pos": "[cop]", "gloss": "be; is"}],
        "conj": [{
            "prop": [{"pos": "cop", "type": [], "fml": True}],
            "reading": "だ",
            "gloss": [{"pos": "[cop,cop-da]", "gloss": "be; is", "info": "plain copula"}],
            "readok": True,
        }],
    }, []],
    ["ne", {
        "reading": "ね",
        "text": "ね",
        "kana": "ね",
        "score": 16,
        "seq": 2029080,
        "gloss": [
            {"pos": "[prt]", "gloss": "right?; isn't it?; doesn't it?; don't you?; don't you think?",
             "info": "at sentence end; used as a request for confirmation or agreement"},
            {"pos": "[int]", "gloss": "hey; say; listen; look; come on"},
        ],
    }, []],
]

IITENKI_DOC = [
    [[IITENKI_WORDS, 405]],
    ". ",
]


# A single word info, used to build alternatives in both spellings
SHI_INFO = {
    "reading": "し",
    "text": "し",
    "kana": "し",
    "score": 11,
    "seq": 1157170,
    "gloss": [{"pos": "[vs-i]", "gloss": "to do"}],
    "conj": [{
        "prop": [{"pos": "vs-i", "type": "Continuative (~i)"}],
        "reading": "する",
        "gloss": [{"pos": "[vs-i]", "gloss": "to do"}],
        "readok": True,
    }],
}

SHI2_INFO = {
    "reading": "四",
    "text": "四",
    "kana": "し",
    "score": 11,
    "seq": 1579350,
    "gloss": [{"pos": "[num]", "gloss": "four; 4"}],
}

TABETEIMASU_INFO = {
    "reading": "食べています 【たべています】",
    "text": "食べています",
    "kana": "たべています",
    "score": 560,
    "compound": ["食べて", "います"],
    "components": [
        {
            "reading": "食べて 【たべて】",
            "text": "食べて",
            "kana": "たべて",
            "score": 0,
            "seq": 1358280,
            "gloss": [{"pos": "[v1,vt]", "gloss": "to eat"}],
            "conj": [{
                "prop": [{"pos": "v1", "type": "Conjunctive (~te)"}],
                "reading": "食べる 【たべる】",
                "gloss": [{"pos": "[v1,vt]", "gloss": "to eat"}],
                "readok": True,
            }],
        },
        {
            "reading": "います",
            "text": "います",
            "kana": "います",
            "score": 0,
            "seq": 1577980,
            "suffix": "indicates continuing action (to be ...ing)",
            "conj": [{
                "prop": [{"pos": "v1", "type": "Non-past", "fml": True}],
                "reading": "いる",
                "gloss": [{"pos": "[v1,vi]", "gloss": "to be (of animate objects)"}],
                "readok": True,
            }],
        },
    ],
}

SANBIKI_INFO = {
    "reading": "三匹 【さんびき】",
    "text": "三匹",
    "kana": "さんびき",
    "score": 420,
    "counter": {"value": "Value: 3", "ordinal": []},
    "seq": 1331780,
}

TABESASERARETA_INFO = {
    "reading": "食べさせられた 【たべさせられた】",
    "text": "食べさせられた",
    "kana": "たべさせられた",
    "score": 900,
    "conj": [{
        "prop": [{"pos": "v1", "type": "Past (~ta)"}],
        "via": [{
            "prop": [{"pos": "v1", "type": "Causative-Passive"}],
            "reading": "食べる 【たべる】",
            "gloss": [{"pos": "[v1,vt]", "gloss": "to eat"}],
            "readok": True,
        }],
        "readok": [],
    }],
}


def word(romanized, info):
    return [romanized, info, []]


def document(*segments):
    """Build a document; each segment is a string or a list of (words, score)."""
    out = []
    for segment in segments:
        if isinstance(segment, str):
            out.append(segment)
        else:
            out.append([[words, score] for words, score in segment])
    return out


@pytest.fixture
def iitenki_doc():
    return copy.deepcopy(IITENKI_DOC)


@pytest.fixture
def iitenki_json():
    return dumps(IITENKI_DOC)


@pytest.fixture
def rich_doc():
    """Alternatives, a compound, a counter and a chained conjugation."""
    return document(
        [
            ([
                word("shi", {"alternative": [copy.deepcopy(SHI_INFO), copy.deepcopy(SHI2_INFO)]}),
                word("tabeteimasu", copy.deepcopy(TABETEIMASU_INFO)),
            ], 600),
            ([
                word("shi", copy.deepcopy(SHI_INFO)),
                word("tabeteimasu", copy.deepcopy(TABETEIMASU_INFO)),
            ], 580),
        ],
        "、",
        [([word("sanbiki", copy.deepcopy(SANBIKI_INFO))], 420)],
        [([word("tabesaserareta", copy.deepcopy(TABESASERARETA_INFO))], 900)],
    )


@pytest.fixture
def rich_json(rich_doc):
    return dumps(rich_doc)
