from content_ideas.parsing.normalizer import PLACEHOLDER_IDEA, normalize_ideas, parse_lines, parse_structured


def test_structured_reply_is_truncated_in_order() -> None:
    assert normalize_ideas('{"ideas":["X","Y","Z","Extra"]}', 3) == ["X", "Y", "Z"]


def test_line_fallback_strips_markers_and_blank_lines() -> None:
    raw = "1. Idea A\n- Idea B\n* Idea C\nIdea D\n\n"
    assert normalize_ideas(raw, 5) == ["Idea A", "Idea B", "Idea C", "Idea D"]


def test_line_fallback_handles_other_markers() -> None:
    raw = "• Første\n2) Andre\n  10. Tiende  \n-\n*   \n"
    assert normalize_ideas(raw, 10) == ["Første", "Andre", "Tiende"]


def test_empty_reply_yields_placeholder() -> None:
    assert normalize_ideas("", 3) == [PLACEHOLDER_IDEA]
    assert normalize_ideas("\n  \n- \n", 3) == [PLACEHOLDER_IDEA]
    assert normalize_ideas(None, 3) == [PLACEHOLDER_IDEA]


def test_exactly_n_when_enough_candidates() -> None:
    raw = "\n".join(f"{i}. Idea {i}" for i in range(1, 9))
    assert normalize_ideas(raw, 5) == ["Idea 1", "Idea 2", "Idea 3", "Idea 4", "Idea 5"]


def test_short_result_is_not_padded() -> None:
    assert normalize_ideas('{"ideas":["Only"]}', 5) == ["Only"]


def test_ideas_field_with_non_strings_is_not_structured() -> None:
    raw = '{"ideas":["A", 3]}'
    assert parse_structured(raw, 5) is None
    assert normalize_ideas(raw, 5) == [PLACEHOLDER_IDEA]


def test_rejected_json_block_is_not_returned_as_lines() -> None:
    raw = 'Forslag:\n- Kaffe\n{\n  "ideas": [1, 2]\n}\n- Rutiner'
    assert normalize_ideas(raw, 5) == ["Forslag:", "Kaffe", "Rutiner"]


def test_stacked_markers_are_stripped() -> None:
    raw = "- - Idea A\n1. - Idea B\n2. 3. Idea C\n* • 4) Idea D"
    assert normalize_ideas(raw, 5) == ["Idea A", "Idea B", "Idea C", "Idea D"]
    assert normalize_ideas('{"ideas": ["- - X", "1) * Y"]}', 5) == ["X", "Y"]


def test_marker_like_text_inside_an_idea_is_kept() -> None:
    assert normalize_ideas("1. 5 tips for - travle dager", 3) == ["5 tips for - travle dager"]


def test_json_after_prose_is_parsed() -> None:
    raw = 'Her er forslagene:\n{"ideas": ["A", "B"]}'
    assert normalize_ideas(raw, 5) == ["A", "B"]


def test_pretty_json_followed_by_prose_is_parsed() -> None:
    raw = '{\n  "ideas": [\n    "A",\n    "B"\n  ]\n}\nHope this helps!'
    assert normalize_ideas(raw, 5) == ["A", "B"]


def test_json_inside_fence_with_prose_is_parsed() -> None:
    raw = 'Klart!\n```json\n{"ideas": ["Kaffe", "Rutiner", "Fakta"]}\n```\nSi fra om du vil ha flere.'
    assert normalize_ideas(raw, 2) == ["Kaffe", "Rutiner"]


def test_inline_brackets_stay_part_of_an_idea() -> None:
    raw = "1. Sjekkliste for stengetid [2024]\n2. Nye rutiner"
    assert parse_structured(raw, 5) is None
    assert normalize_ideas(raw, 5) == ["Sjekkliste for stengetid [2024]", "Nye rutiner"]


def test_missing_ideas_field_falls_back_to_lines() -> None:
    assert parse_structured('{"items":["A"]}', 5) is None
    assert parse_structured("42", 5) is None
    assert parse_structured("not json", 5) is None


def test_structured_entries_are_cleaned() -> None:
    assert normalize_ideas('{"ideas":["1. X", "  ", "- Y "]}', 5) == ["X", "Y"]


def test_empty_structured_list_yields_placeholder() -> None:
    assert normalize_ideas('{"ideas": []}', 3) == [PLACEHOLDER_IDEA]


def test_fenced_json_is_parsed() -> None:
    raw = '```json\n{"ideas": ["Kaffe", "Rutiner"]}\n```'
    assert normalize_ideas(raw, 5) == ["Kaffe", "Rutiner"]


def test_bare_json_list_is_parsed() -> None:
    assert normalize_ideas('["A", "B", "C"]', 2) == ["A", "B"]


def test_fence_lines_are_skipped_in_line_fallback() -> None:
    raw = "```\n- A\n- B\n```"
    assert parse_lines(raw, 5) == ["A", "B"]


def test_nonpositive_count_is_treated_as_one() -> None:
    assert normalize_ideas("a\nb", 0) == ["a"]


def test_fallback_preserves_line_order_prefix() -> None:
    raw = "Intro text\n\n3. C\n1. A\n2) B"
    candidates = ["Intro text", "C", "A", "B"]
    for n in range(1, 6):
        assert normalize_ideas(raw, n) == candidates[:n]


def test_malformed_inputs_never_raise() -> None:
    for raw in ["{", "[[[[", "{\"ideas\": null}", "null", "\x00\x01", "[" * 5000]:
        ideas = normalize_ideas(raw, 3)
        assert 1 <= len(ideas) <= 3
        assert all(idea.strip() for idea in ideas)
