"""Tests for the Rust emitter."""
from typegen.generators.emitters.rust import build_derives, emit
from typegen.generators.inference import infer_type
from typegen.generators.options import RustOptions

SAMPLE = {"a": 1, "b": "x", "c": None}


def _emit(data, **options):
    opts = RustOptions(**options)
    return emit(infer_type(data, opts.root_name), opts)


def test_default_struct():
    """Test the default output for a flat sample."""
    assert _emit(SAMPLE) == (
        "use serde::{Deserialize, Serialize};\n"
        "\n"
        "#[derive(Serialize, Deserialize, Debug, Clone)]\n"
        "pub struct Root {\n"
        "    pub a: f64,\n"
        "    pub b: String,\n"
        "    pub c: Option<()>,\n"
        "}"
    )


def test_rename_attribute_for_non_snake_keys():
    """Test serde rename when the field name differs from the key."""
    code = _emit({"userName": "x"})
    assert '    #[serde(rename = "userName")]\n    pub user_name: String,' in code


def test_optional_fields():
    """Test Option wrapping and skip_serializing_if."""
    code = _emit(SAMPLE, optional_properties=True)
    assert '    #[serde(skip_serializing_if = "Option::is_none")]\n    pub a: Option<f64>,' in code


def test_without_serde():
    """Test that disabling serde drops the use line and attributes."""
    code = _emit({"userName": "x"}, derive_serde=False)
    assert code.startswith("#[derive(Debug, Clone)]\npub struct Root {")
    assert "serde" not in code


def test_no_derives():
    """Test that the derive line is omitted when nothing is derived."""
    code = _emit(SAMPLE, derive_serde=False, derive_debug=False, derive_clone=False)
    assert code.startswith("pub struct Root {")


def test_derive_order():
    """Test derive macro order."""
    assert build_derives(RustOptions(derive_default=True)) == [
        "Serialize", "Deserialize", "Debug", "Clone", "Default",
    ]


def test_box_and_collections():
    """Test boxed nested structs and vectors."""
    code = _emit({"profile": {"age": 1}, "scores": [1], "tags": []}, use_box=True)
    assert "    pub profile: Box<Profile>," in code
    assert "    pub scores: Vec<f64>," in code
    assert "    pub tags: Vec<serde_json::Value>," in code
