"""
Tests: Structural walk across schema variants.

Run with:
    pytest standards_automation/tests/test_walker.py -v
"""

from standards_automation.ingestion.walker import SourceContext, walk_document

SOURCE = SourceContext(standard="STD", domain="security")


def _directive_doc(section: dict) -> dict:
    return {
        "directives": [
            {"directive_code": "SEC-05", "structured_sections": [section]},
        ]
    }


class TestDirectiveRooted:
    def test_free_text_only_section(self):
        doc = _directive_doc(
            {"section_code": "4.3", "content": "4.3.1 Fences must be 2m. 4.3.2 Gates must be locked."}
        )
        records = walk_document(doc, SOURCE)
        assert [r.clause_id for r in records] == ["4.3.1", "4.3.2"]
        assert [r.reference for r in records] == ["STD SEC-05 4.3 4.3.1", "STD SEC-05 4.3 4.3.2"]

    def test_clauses_and_content_are_both_emitted(self):
        doc = _directive_doc(
            {
                "section_code": "4.3",
                "clauses": [{"clause_id": "4.3.1", "text": "Fences must be 2m high."}],
                "content": "4.3.1 Fences must be 2m. 4.3.2 Gates must be locked.",
            }
        )
        records = walk_document(doc, SOURCE)
        # one explicit clause followed by two segmented ones, not deduplicated
        assert [r.clause_id for r in records] == ["4.3.1", "4.3.1", "4.3.2"]
        assert records[0].text == "Fences must be 2m high."

    def test_directive_code_camel_case_and_section_title(self):
        doc = {
            "directives": [
                {
                    "directiveCode": "SEC-02",
                    "structured_sections": [
                        {
                            "sectionCode": "5.1",
                            "section_title": "Lighting",
                            "clauses": [{"id": "a"}, {"id": "b", "text": "Lamps shall be LED."}],
                        }
                    ],
                }
            ]
        }
        records = walk_document(doc, SOURCE)
        assert [r.clause_id for r in records] == ["a", "b"]
        assert records[0].title == "Lighting"
        assert records[0].text == ""
        assert all(r.directive_code == "SEC-02" and r.section_code == "5.1" for r in records)

    def test_malformed_entries_are_skipped(self):
        doc = {
            "directives": [
                "not a directive",
                {"directive_code": "SEC-01", "structured_sections": "oops"},
                {"directive_code": "SEC-02", "structured_sections": [None, {"clauses": [42]}]},
            ]
        }
        assert walk_document(doc, SOURCE) == []


class TestSectionRooted:
    def test_directive_code_is_empty(self):
        doc = {
            "document": {
                "structured_sections": [
                    {
                        "section_code": "903",
                        "clauses": [{"id": "903.2.1", "content": "Sprinklers shall be provided."}],
                    }
                ]
            }
        }
        records = walk_document(doc, SOURCE)
        assert len(records) == 1
        assert records[0].directive_code == ""
        assert records[0].reference == "STD 903 903.2.1"


class TestGeneric:
    def test_single_object(self):
        records = walk_document({"title": "Exit signs", "text": "Exit signs shall be lit."}, SOURCE)
        assert len(records) == 1
        assert records[0].standard == "STD"

    def test_nested_collections_are_unioned(self):
        doc = {
            "title": "Supplier obligations",
            "requirements": [{"number": "6.1", "text": "Keep the technical file."}],
            "items": [{"number": "6.2", "text": "Cooperate with authorities."}, "ignored"],
        }
        records = walk_document(doc, SOURCE)
        assert [r.title for r in records] == [
            "Supplier obligations",
            "Keep the technical file",
            "Cooperate with authorities",
        ]

    def test_array_of_mixed_shapes(self):
        doc = [
            {"text": "A loose requirement."},
            _directive_doc({"section_code": "1", "clauses": [{"text": "Directive clause."}]}),
        ]
        records = walk_document(doc, SOURCE)
        assert [r.text for r in records] == ["A loose requirement.", "Directive clause."]

    def test_unrecognized_shapes_yield_nothing(self):
        assert walk_document({"unrelated": {"deep": 1}}, SOURCE) == []
        assert walk_document("plain string", SOURCE) == []
        assert walk_document(None, SOURCE) == []


class TestInvariant:
    def test_every_record_has_title_or_text(self):
        doc = _directive_doc(
            {
                "section_code": "9",
                "clauses": [{}, {"id": "x"}, {"text": "Real requirement text."}],
                "content": "short",
            }
        )
        records = walk_document(doc, SOURCE)
        assert len(records) == 1
        assert all(r.title or r.text for r in records)
