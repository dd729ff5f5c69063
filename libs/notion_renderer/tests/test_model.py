"""
Tests unitaires du modèle — parsing du JSON Notion vers runs / blocs / page.
"""
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

# Ajout lib au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from notion_renderer import (
    Annotations, TextRun, BlockKind, BlockContent, ContentBlock, PageResult,
)


def _run(content, **flags):
    return {
        "type": "text",
        "text": {"content": content, "link": None},
        "annotations": {"bold": False, "italic": False, "strikethrough": False,
                        "underline": False, "code": False, "color": "default", **flags},
        "plain_text": content,
        "href": None,
    }


def test_text_run_from_api():
    run = TextRun.model_validate(_run("Bonjour", bold=True))
    assert run.content == "Bonjour"
    assert run.annotations.bold is True
    assert run.annotations.italic is False
    assert run.link is None


def test_text_run_falls_back_to_plain_text():
    run = TextRun.model_validate({"plain_text": "fallback"})
    assert run.content == "fallback"
    assert run.annotations == Annotations()


def test_text_run_is_frozen():
    run = TextRun(content="x")
    with pytest.raises(ValidationError):
        run.content = "y"


def test_block_payload_lifted_into_content():
    block = ContentBlock.model_validate({
        "id": "b1", "type": "heading_2",
        "heading_2": {"rich_text": [_run("Titre")], "color": "blue"},
    })
    assert block.kind is BlockKind.HEADING_2
    assert block.content.color == "blue"
    assert [r.content for r in block.rich_text] == ["Titre"]


def test_block_all_kinds_recognized():
    for kind in BlockKind:
        block = ContentBlock.model_validate({"id": kind.value, "type": kind.value,
                                             kind.value: {"rich_text": []}})
        assert block.kind is kind


def test_block_unknown_kind():
    block = ContentBlock.model_validate({"id": "x", "type": "toggle", "toggle": {"rich_text": []}})
    assert block.kind is None
    assert block.type == "toggle"


def test_block_missing_payload_has_no_runs():
    block = ContentBlock.model_validate({"id": "x", "type": "paragraph"})
    assert block.content is None
    assert block.rich_text == []


def test_block_content_null_rich_text():
    assert BlockContent.model_validate({"rich_text": None}).rich_text == []


def test_page_result_from_api():
    page = PageResult.from_api({
        "object": "list",
        "results": [{"id": "p1", "type": "paragraph", "paragraph": {"rich_text": [_run("a")]}}],
        "next_cursor": "abc",
        "has_more": True,
        "type": "block",
        "block": {},
        "request_id": "req-1",
    })
    assert len(page.results) == 1
    assert page.has_more is True
    assert page.next_cursor == "abc"
    assert page.request_id == "req-1"


def test_page_result_missing_results():
    assert PageResult.from_api({"object": "error"}).results is None
    assert PageResult.from_api(None).results is None
    assert PageResult.from_api("pas du json objet").results is None


# ── Champs null / entrées partielles ─────────────────────────────────────────

def test_text_run_null_annotations():
    run = TextRun.model_validate({**_run("x"), "annotations": None})
    assert run.annotations == Annotations()
    assert run.content == "x"


def test_text_run_null_flag():
    run = TextRun.model_validate(_run("x", bold=None, italic=True))
    assert run.annotations.bold is False
    assert run.annotations.italic is True


def test_text_run_null_text():
    run = TextRun.model_validate({"text": None, "plain_text": "secours"})
    assert run.content == "secours"


def test_block_null_fields():
    block = ContentBlock.model_validate({
        "id": None, "type": "paragraph",
        "paragraph": {"rich_text": [_run("a")], "color": None},
    })
    assert block.id == ""
    assert block.content.color == "default"
    assert block.kind is BlockKind.PARAGRAPH


def test_block_null_type():
    block = ContentBlock.model_validate({"id": "x", "type": None})
    assert block.type == ""
    assert block.kind is None


def test_block_rich_text_entries_filtered():
    content = BlockContent.model_validate({"rich_text": ["brut", _run("ok"), None]})
    assert [r.content for r in content.rich_text] == ["ok"]


def test_page_result_null_top_level():
    page = PageResult.from_api({"object": None, "has_more": None, "results": None})
    assert page.object == "list"
    assert page.has_more is False
    assert page.results is None


def test_page_result_non_block_entries_dropped():
    good = {"id": "g", "type": "paragraph", "paragraph": {"rich_text": [_run("fine")]}}
    page = PageResult.from_api({"results": [42, good, "x", None]})
    assert [b.id for b in page.results] == ["g"]


def test_page_result_results_not_a_list():
    assert PageResult.from_api({"results": {"id": "x"}}).results is None
