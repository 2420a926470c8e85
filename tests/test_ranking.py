from docbot.datatypes.doc_datatypes import Page
from docbot.scraper.ranking import count_occurrences, rank_pages


def page(url: str, occurrences: int, filler: str = "text") -> Page:
    return Page(url=url, text=" ".join(["term"] * occurrences + [filler]))


def test_pages_are_ordered_by_descending_count():
    ranked = rank_pages([page("A", 3), page("B", 1), page("C", 5)], "term")

    assert [p.url for p in ranked] == ["C", "A", "B"]
    assert [p.count for p in ranked] == [5, 3, 1]


def test_ties_keep_discovery_order():
    ranked = rank_pages([page("A", 2), page("B", 4), page("C", 2), page("D", 2)], "term")

    assert [p.url for p in ranked] == ["B", "A", "C", "D"]


def test_only_top_pages_are_returned():
    pages = [page(str(i), i + 1) for i in range(8)]

    ranked = rank_pages(pages, "term")

    assert [p.url for p in ranked] == ["7", "6", "5", "4", "3"]


def test_custom_limit():
    assert len(rank_pages([page("A", 1), page("B", 2)], "term", limit=1)) == 1


def test_count_is_case_insensitive():
    assert count_occurrences("Dict, DICT and dict", "dict") == 3


def test_regex_metacharacters_are_matched_literally():
    text = "call print( then print(x) and printing"

    assert count_occurrences(text, "print(") == 2
    assert count_occurrences("a+b equals a+b, not aab", "a+b") == 2
    assert count_occurrences("[x] and [y]", "[") == 2


def test_empty_query_counts_nothing():
    assert count_occurrences("anything", "") == 0
