from docbot.datatypes.doc_datatypes import (
    EMPTY_REPLY,
    FAILED_REPLY,
    DocumentationResult,
    FetchOutcome,
    LookupStatus,
    Page,
)


def test_found_result_replies_with_its_text():
    result = DocumentationResult.found("**From [x](u):**\nsnippet\n\n")

    assert result.status is LookupStatus.FOUND
    assert result.to_reply() == "**From [x](u):**\nsnippet\n\n"


def test_empty_and_failed_results_reply_with_sentinels():
    assert DocumentationResult.empty().to_reply() == EMPTY_REPLY
    assert DocumentationResult.failed().to_reply() == FAILED_REPLY


def test_scraped_text_equal_to_a_sentinel_is_still_found():
    result = DocumentationResult.found(EMPTY_REPLY)

    assert result.status is LookupStatus.FOUND


def test_lookup_status_str():
    assert str(LookupStatus.FAILED) == "failed"


def test_fetch_outcome_ok_flag():
    assert FetchOutcome(url="u", page=Page(url="u", text="t")).ok
    assert not FetchOutcome(url="u", error=RuntimeError("boom")).ok
    assert not FetchOutcome(url="u").ok


def test_page_count_defaults_to_zero():
    assert Page(url="u", text="t").count == 0
