"""Substitution cascade applied over the whole serialized corpus.

After stem elision, thousands of rows share the same ending patterns
(regular declensions, weak conjugations, runs of "f" flags). The cascade
collapses each of these long literal substrings into a 3-character token
``$<letter>%``.

Rules are applied in order when compressing and in reverse order when
decompressing. Several patterns contain tokens produced by earlier rules
($g% contains $a%, $l% contains $k%, ...), so the order is part of the
format and must never change for an existing corpus.

Tokens never occur in natural German text ("$" and "%" are not valid in any
form), which is what makes the substitution reversible.
"""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class CascadeRule:
    """A single literal pattern -> token substitution."""

    pattern: str
    token: str


# fmt: off
RULES: tuple[CascadeRule, ...] = (
    # Regular adjective declension (strong, weak, mixed)
    CascadeRule(
        "=er|=e|=es|=e|=en|=e|=es|=e|=em|=er|=em|=en|=en|=er|=en|=er"
        "\t=e|=e|=e|=en|=en|=e|=e|=en|=en|=en|=en|=en|=en|=en|=en|=en"
        "\t=er|=e|=es|=en|=en|=e|=es|=en|=en|=en|=en|=en|=en|=en|=en|=en",
        "$a%",
    ),
    # Superlative declension
    CascadeRule(
        "=ster|=ste|=stes|=ste|=sten|=ste|=stes|=ste|=stem|=ster|=stem|=sten|=sten|=ster|=sten|=ster"
        "\t=ste|=ste|=ste|=sten|=sten|=ste|=ste|=sten|=sten|=sten|=sten|=sten|=sten|=sten|=sten|=sten"
        "\t=ster|=ste|=stes|=sten|=sten|=ste|=stes|=sten|=sten|=sten|=sten|=sten|=sten|=sten|=sten"
        "|=sten",
        "$b%",
    ),
    # Weak verbs in -eln
    CascadeRule(
        "=le|=lst|=lt|=lt|=ln\t=lte|=ltest|=lte|=ltet|=lten"
        "\t=le|=lst|=le|=lt|=ln\t=lte|=ltest|=lte|=ltet|=lten",
        "$c%",
    ),
    # Regular weak verb
    CascadeRule(
        "=e|=st|=t|=t|=en\t=te|=test|=te|=tet|=ten\t=e|=est|=e|=et|=en\t=te|=test|=te|=tet|=ten"
        "\t=e du\t=t ihr\t=en Sie\t=t\t=end\tzu =en",
        "$d%",
    ),
    CascadeRule("f\tf\tf\tf\t=|=en|=|=en|=|=en|=|=en", "$e%"),
    CascadeRule(
        "|=t|=t|=en\t=te|=test|=te|=tet|=ten\t=e|=est|=e|=et|=en\t=te|=test|=te|=tet|=ten"
        "\t=e du\t=t ihr\t=en Sie",
        "$f%",
    ),
    CascadeRule("\tf\tf\tf\tf\tf\tf\t$a%\t=", "$g%"),
    CascadeRule("\tf\tf\tf\tf\t=|=n|=|=n|=|=n|=|=n\n", "$h%"),
    CascadeRule("\tf\tf\tf\t=|=e|=|=e|=|=en|=es|=e\n", "$i%"),
    # Weak verbs with stems ending in -d/-t
    CascadeRule(
        "\tf\t=e|=est|=et|=et|=en\t=ete|=etest|=ete|=etet|=eten"
        "\t=e|=est|=e|=et|=en\t=ete|=etest|=ete|=etet|=eten\t=e du\t=et ihr\t=en Sie\t",
        "$j%",
    ),
    # Separable weak verbs
    CascadeRule("t ~|=en ~\t=te ~|=test ~|=te ~|=tet ~|=ten ~\t=e ", "$k%"),
    CascadeRule(
        "\tt\t=e ~|=st ~|=t ~|=$k%~|=est ~|=e ~|=e$k%du ~\t=t ihr ~\t=en Sie ~"
        "\t~ge=t\t~=end\t~zu=en",
        "$l%",
    ),
    CascadeRule("\tf\tf\tf\tf\tf\tf\t$b%\t=er\tf\tam =sten\t", "$m%"),
    CascadeRule("|=rt|=rn\t=rte|=rtest|=rte|=rtet|=rten\t=re", "$n%"),
    CascadeRule("en ~\t=e ~|=est ~|=e ~|=et ~|=en ~\t", "$o%"),
    CascadeRule("\tf\t=e|=st$f%\tge=t\t=end\tzu =en\n", "$p%"),
    CascadeRule("\tf\tf\tf\t=|=|=|=|=|=", "$q%"),
    CascadeRule("sten\tf\t\nadjective\t", "$r%"),
    CascadeRule("\tf\tf\tf\tt\tf\tf\t$a%\t\tf\t\tf\t", "$s%"),
    CascadeRule("\tf\tt\tf\t=||=||=||=", "$t%"),
    CascadeRule("00$g%er\tf\tam =sten\tf\t", "$u%"),
    CascadeRule("du ~\t=t ihr ~\t=en Sie ~\t~ge", "$v%"),
    CascadeRule("\t~=end\t~zu=en\nverb\ther", "$w%"),
    CascadeRule("\t\tf\tf\tf\tf\tf\tf\t$b%\t=r\tf\tam =", "$x%"),
    CascadeRule("\tf\tf\tf\t=|=s|=|=s|=|=s|=s|=s\n", "$y%"),
    CascadeRule("\tf\tf\tf\t=|=e|=|=e|=|=en|=s|=e\n", "$z%"),
)
# fmt: on


def cascade(text: str, rules: Sequence[CascadeRule] = RULES) -> str:
    """Replace every rule pattern with its token, first rule first.

    Each pass is a plain global str.replace: literal, non-overlapping, and it
    never re-scans the tokens it just inserted.
    """
    for rule in rules:
        text = text.replace(rule.pattern, rule.token)
    return text


def uncascade(text: str, rules: Sequence[CascadeRule] = RULES) -> str:
    """Expand tokens back into their patterns, last rule first."""
    for rule in reversed(rules):
        text = text.replace(rule.token, rule.pattern)
    return text
