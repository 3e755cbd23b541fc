import pytest

from podlint.core.exceptions import ManifestParseError
from podlint.core.models import INT_TAG, STR_TAG, MappingNode, ScalarNode, SequenceNode
from podlint.parsing.loader import ManifestLoader, load_documents


def test_empty_stream_has_no_documents():
    assert load_documents("") == []
    assert load_documents("# only a comment\n") == []


def test_key_order_tags_and_lines_are_preserved():
    (doc,) = load_documents(
        "kind: Pod\n"
        "port: 80\n"
        "quoted: \"80\"\n"
        "items:\n"
        "- a\n"
        "- b\n"
    )
    assert isinstance(doc, MappingNode)
    keys = [k.value for k, _ in doc.pairs]
    assert keys == ["kind", "port", "quoted", "items"]

    port_key, port = doc.pairs[1]
    assert port_key.line == 2
    assert port == ScalarNode(value="80", tag=INT_TAG, line=2)
    assert port.is_int

    quoted = doc.pairs[2][1]
    assert quoted.tag == STR_TAG
    assert not quoted.is_int

    items = doc.pairs[3][1]
    assert isinstance(items, SequenceNode)
    assert [item.value for item in items.items] == ["a", "b"]
    assert [item.line for item in items.items] == [5, 6]


def test_multiple_documents_keep_stream_order():
    docs = load_documents("name: first\n---\nname: second\n---\nname: third\n")
    assert [d.pairs[0][1].value for d in docs] == ["first", "second", "third"]
    assert docs[2].pairs[0][0].line == 5


def test_duplicate_keys_are_kept():
    (doc,) = load_documents("kind: Pod\nkind: Job\n")
    assert [v.value for _, v in doc.pairs] == ["Pod", "Job"]


def test_aliases_share_the_converted_node():
    (doc,) = load_documents("base: &b {cpu: 1}\ncopy: *b\n")
    assert doc.pairs[0][1] is doc.pairs[1][1]


def test_byte_order_mark_is_ignored():
    (doc,) = load_documents("\ufeffapiVersion: v1\n")
    assert doc.pairs[0][0].value == "apiVersion"


def test_invalid_yaml_raises_parse_error_with_line():
    with pytest.raises(ManifestParseError) as exc:
        load_documents("kind: Pod\nmetadata: name: broken\n")
    assert exc.value.line == 2
    assert "cannot parse manifest" in str(exc.value)


def test_load_file_reads_bom_encoded_text(tmp_path):
    manifest = tmp_path / "pod.yaml"
    manifest.write_bytes("\ufeffkind: Pod\n".encode("utf-8"))
    (doc,) = ManifestLoader().load_file(manifest)
    assert doc.pairs[0][0].value == "kind"


def test_bare_document_markers_are_not_documents():
    docs = load_documents("kind: Pod\n---\n")
    assert len(docs) == 1
    assert load_documents("---\n---\nkind: Pod\n---\n")[0].pairs[0][1].value == "Pod"
    assert len(load_documents("---\n---\nkind: Pod\n---\n")) == 1


def test_explicit_null_document_is_kept():
    (doc,) = load_documents("--- null\n")
    assert doc == ScalarNode(value="null", tag="tag:yaml.org,2002:null", line=1)
