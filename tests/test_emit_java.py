"""Tests for the Java emitter."""
from typegen.generators.emitters.java import emit
from typegen.generators.inference import infer_type
from typegen.generators.options import JavaOptions

SAMPLE = {"a": 1, "b": "x", "c": None}


def _emit(data, **options):
    opts = JavaOptions(**options)
    return emit(infer_type(data, opts.root_name), opts)


def test_default_record():
    """Test the default output for a flat sample."""
    assert _emit(SAMPLE) == (
        "package com.example;\n"
        "\n"
        "import java.util.List;\n"
        "\n"
        "public record Root(\n"
        "    double a,\n"
        "    String b,\n"
        "    Object c\n"
        ") {}"
    )


def test_no_package():
    """Test that an empty package name drops the package line."""
    assert _emit(SAMPLE, package_name="").startswith("import java.util.List;")


def test_lists_use_boxed_types():
    """Test generic arguments are boxed."""
    code = _emit({"scores": [1], "flags": [True], "items": [{"id": 1}]})
    assert "    List<Double> scores" in code
    assert "    List<Boolean> flags" in code
    assert "    List<ItemsItem> items" in code


def test_serialization_annotations():
    """Test annotations for keys that are not camelCase."""
    code = _emit({"user_name": "x", "id": 1}, serialization_library="jackson")
    assert "import com.fasterxml.jackson.annotation.JsonProperty;" in code
    assert '    @JsonProperty("user_name")\n    String userName' in code
    assert "@JsonProperty(\"id\")" not in code

    gson = _emit({"user_name": "x"}, serialization_library="gson")
    assert '@SerializedName("user_name")' in gson


def test_pojo_with_equals():
    """Test JavaBean output."""
    code = _emit(SAMPLE, class_style="pojo")
    assert "import java.util.Objects;" in code
    assert "    private double a;" in code
    assert "    public double getA() {\n        return a;\n    }" in code
    assert "    public void setA(double a) {\n        this.a = a;\n    }" in code
    assert "Objects.equals(a, that.a)" in code
    assert "        return Objects.hash(a, b, c);" in code


def test_pojo_without_equals():
    """Test that equals/hashCode and the Objects import can be disabled."""
    code = _emit(SAMPLE, class_style="pojo", generate_equals=False)
    assert "Objects" not in code
    assert "hashCode" not in code


def test_lombok_with_builder():
    """Test Lombok annotations and imports."""
    code = _emit(SAMPLE, class_style="lombok", generate_builder=True)
    assert "import lombok.Builder;" in code
    assert "@Data\n@Builder\n@NoArgsConstructor\n@AllArgsConstructor\npublic class Root {" in code


def test_immutables():
    """Test Immutables interface output."""
    code = _emit(SAMPLE, class_style="immutables")
    assert "import org.immutables.value.Value;" in code
    assert "@Value.Immutable\npublic interface Root {" in code
    assert "    double a();" in code


def test_validation_annotations():
    """Test bean validation annotations on fields."""
    code = _emit({"name": "x", "tags": ["a"]}, class_style="pojo", use_validation=True)
    assert "import javax.validation.constraints.NotBlank;" in code
    assert "    @NotBlank\n    private String name;" in code
    assert "    @NotNull\n    private List<String> tags;" in code


def test_optional_wrapper():
    """Test Optional wrapping of optional fields."""
    code = _emit(SAMPLE, use_optional=True, optional_properties=True)
    assert "import java.util.Optional;" in code
    assert "    Optional<Double> a" in code
