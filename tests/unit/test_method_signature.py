"""Unit tests for method signature parsing and back-link resolution."""

import pytest

from jvmsig.core.errors import GrammarError
from jvmsig.signatures import (
    ArrayTypeSignature,
    BaseType,
    BaseTypeSignature,
    ClassInfo,
    ClassRefTypeSignature,
    MethodTypeSignature,
    TypeArgument,
    TypeVariableSignature,
    parse_method_signature,
)


def iter_type_variables(node):
    """Yield every TypeVariableSignature reachable from a node."""
    if isinstance(node, TypeVariableSignature):
        yield node
    elif isinstance(node, MethodTypeSignature):
        for child in (
            *node.type_parameters,
            *node.parameter_type_signatures,
            node.result_type,
            *node.throws_signatures,
        ):
            yield from iter_type_variables(child)
    elif isinstance(node, ClassRefTypeSignature):
        for arg in node.type_arguments:
            yield from iter_type_variables(arg)
        for suffix_args in node.suffix_type_arguments:
            for arg in suffix_args:
                yield from iter_type_variables(arg)
    elif isinstance(node, TypeArgument):
        if node.type_signature is not None:
            yield from iter_type_variables(node.type_signature)
    elif isinstance(node, ArrayTypeSignature):
        yield from iter_type_variables(node.element_type_signature)
    elif hasattr(node, "interface_bounds"):
        if node.class_bound is not None:
            yield from iter_type_variables(node.class_bound)
        for bound in node.interface_bounds:
            yield from iter_type_variables(bound)


class TestParseStructure:
    """Tests for the parsed structure of method signatures."""

    def test_full_example(self) -> None:
        signature = parse_method_signature(
            "<T:Ljava/lang/Object;>(Ljava/lang/String;I)V^Ljava/lang/Exception;"
        )
        assert len(signature.type_parameters) == 1
        assert signature.type_parameters[0].name == "T"
        assert signature.type_parameters[0].class_bound == ClassRefTypeSignature("java.lang.Object")
        assert signature.parameter_type_signatures == (
            ClassRefTypeSignature("java.lang.String"),
            BaseTypeSignature(BaseType.INT),
        )
        assert signature.result_type == BaseTypeSignature(BaseType.VOID)
        assert signature.throws_signatures == (ClassRefTypeSignature("java.lang.Exception"),)

    def test_no_parameters(self) -> None:
        signature = parse_method_signature("()V")
        assert signature.type_parameters == ()
        assert signature.parameter_type_signatures == ()
        assert signature.result_type == BaseTypeSignature(BaseType.VOID)
        assert signature.throws_signatures == ()

    def test_parameter_order_preserved(self) -> None:
        signature = parse_method_signature("(JLjava/lang/String;[ZTT;D)I")
        assert [str(param) for param in signature.parameter_type_signatures] == [
            "long",
            "java.lang.String",
            "boolean[]",
            "T",
            "double",
        ]

    def test_throws_order_and_kinds(self) -> None:
        signature = parse_method_signature(
            "<X:Ljava/lang/Throwable;>()V^Ljava/io/IOException;^TX;^Ljava/lang/Error;"
        )
        assert [type(throws) for throws in signature.throws_signatures] == [
            ClassRefTypeSignature,
            TypeVariableSignature,
            ClassRefTypeSignature,
        ]
        assert [str(throws) for throws in signature.throws_signatures] == [
            "java.io.IOException",
            "X",
            "java.lang.Error",
        ]

    def test_accepts_full_grammar(self, generic_method_signature: str) -> None:
        signature = MethodTypeSignature.parse(generic_method_signature)
        assert len(signature.type_parameters) == 2
        assert len(signature.parameter_type_signatures) == 3
        assert len(signature.throws_signatures) == 2


class TestMalformedInput:
    """Tests for grammar error reporting."""

    def test_unterminated_parameter_list(self) -> None:
        with pytest.raises(GrammarError, match="Ran out of input") as exc_info:
            parse_method_signature("(I")
        assert exc_info.value.position == 2

    def test_missing_result_type(self) -> None:
        with pytest.raises(GrammarError, match="Missing method result type"):
            parse_method_signature("()")

    def test_extra_characters(self) -> None:
        with pytest.raises(GrammarError, match="Extra characters at end") as exc_info:
            parse_method_signature("()V extra")
        assert exc_info.value.position == 3

    def test_missing_parameter_type(self) -> None:
        with pytest.raises(GrammarError, match="Missing method parameter type"):
            parse_method_signature("(X)V")

    def test_missing_open_paren(self) -> None:
        with pytest.raises(GrammarError, match="Expected '\\('"):
            parse_method_signature("V")

    def test_missing_throws_type(self) -> None:
        with pytest.raises(GrammarError, match="Missing type variable signature"):
            parse_method_signature("()V^I")

    def test_array_not_allowed_in_throws(self) -> None:
        with pytest.raises(GrammarError, match="Missing type variable signature"):
            parse_method_signature("()V^[Ljava/lang/Exception;")

    def test_empty_input(self) -> None:
        with pytest.raises(GrammarError):
            parse_method_signature("")

    def test_error_in_nested_type(self) -> None:
        with pytest.raises(GrammarError) as exc_info:
            parse_method_signature("(Ljava/util/List<Ljava/lang/String>;)V")
        assert exc_info.value.text == "(Ljava/util/List<Ljava/lang/String>;)V"


class TestRendering:
    """Tests for the Java-like display rendering and the descriptor."""

    def test_display_full(self) -> None:
        signature = parse_method_signature(
            "<T:Ljava/lang/Object;U:Ljava/lang/Number;>(TT;[I)Ljava/util/List<TU;>;"
            "^Ljava/io/IOException;^Ljava/lang/InterruptedException;"
        )
        assert str(signature) == (
            "<T, U extends java.lang.Number> java.util.List<U> (T, int[]) "
            "throws java.io.IOException, java.lang.InterruptedException"
        )

    def test_display_without_type_parameters_or_throws(self) -> None:
        assert str(parse_method_signature("(Ljava/lang/String;I)V")) == "void (java.lang.String, int)"

    def test_display_no_parameters(self) -> None:
        assert str(parse_method_signature("()V")) == "void ()"

    def test_descriptor_regenerates_text(self, generic_method_signature: str) -> None:
        signature = parse_method_signature(generic_method_signature)
        assert signature.descriptor == generic_method_signature


class TestReferencedClassNames:
    """Tests for class name extraction."""

    def test_example(self) -> None:
        signature = parse_method_signature(
            "<T:Ljava/lang/Object;>(Ljava/util/List<Ljava/lang/String;>;)Ljava/lang/Integer;"
        )
        assert signature.referenced_class_names() == {
            "java.lang.Object",
            "java.util.List",
            "java.lang.String",
            "java.lang.Integer",
        }

    def test_includes_throws_and_nested(self, generic_method_signature: str) -> None:
        signature = parse_method_signature(generic_method_signature)
        assert signature.referenced_class_names() == {
            "java.lang.Object",
            "java.lang.Comparable",
            "java.util.Map",
            "java.util.List",
            "java.util.Map$Entry$Inner",
            "java.lang.String",
            "java.io.IOException",
        }

    def test_adds_to_existing_set(self) -> None:
        class_names = {"already.There"}
        parse_method_signature("(Ljava/lang/String;)V").get_all_referenced_class_names(class_names)
        assert class_names == {"already.There", "java.lang.String"}

    def test_primitives_only(self) -> None:
        assert parse_method_signature("(IJ)[D").referenced_class_names() == set()


class TestBackLinks:
    """Tests for type variable scope back-links."""

    def test_linked_to_method(self, generic_method_signature: str) -> None:
        signature = parse_method_signature(generic_method_signature)
        type_variables = list(iter_type_variables(signature))
        assert len(type_variables) == 6
        for type_variable in type_variables:
            assert type_variable.containing_method_signature is signature
            assert type_variable.containing_class_signature is None

    def test_linked_to_class(self, generic_method_signature: str, class_info: ClassInfo) -> None:
        signature = parse_method_signature(generic_method_signature, class_info)
        for type_variable in iter_type_variables(signature):
            assert type_variable.containing_method_signature is signature
            assert type_variable.containing_class_signature is class_info.type_signature

    def test_class_without_signature_leaves_class_link_unset(self) -> None:
        signature = parse_method_signature("(TT;)V", ClassInfo("com.example.Plain"))
        (type_variable,) = signature.parameter_type_signatures
        assert type_variable.containing_method_signature is signature
        assert type_variable.containing_class_signature is None

    def test_links_not_set_twice(self) -> None:
        signature = parse_method_signature("(TT;)V")
        (type_variable,) = signature.parameter_type_signatures
        with pytest.raises(RuntimeError, match="already set"):
            type_variable._bind_scope(method_signature=signature)

    def test_links_do_not_affect_equality(self, class_info: ClassInfo) -> None:
        linked = parse_method_signature("(TE;)TE;", class_info)
        unlinked = parse_method_signature("(TE;)TE;")
        assert linked == unlinked
        assert hash(linked) == hash(unlinked)

    def test_names_are_not_cross_validated(self) -> None:
        signature = parse_method_signature("<T:Ljava/lang/Object;>(TUNDECLARED;)V")
        (type_variable,) = signature.parameter_type_signatures
        assert type_variable.name == "UNDECLARED"
        assert type_variable.containing_method_signature is signature

    def test_malformed_class_context_reported_with_class_text(self) -> None:
        class_info = ClassInfo("com.example.Broken", "<E>Ljava/lang/Object;")
        with pytest.raises(GrammarError) as exc_info:
            parse_method_signature("(I", class_info)
        assert exc_info.value.text == "<E>Ljava/lang/Object;"
        assert exc_info.value.position == 2


class TestEquality:
    """Tests for structural equality."""

    def test_identical_text_equal(self, generic_method_signature: str) -> None:
        first = parse_method_signature(generic_method_signature)
        second = parse_method_signature(generic_method_signature)
        assert first == second
        assert hash(first) == hash(second)

    def test_parameter_order_matters(self) -> None:
        assert parse_method_signature("(IJ)V") != parse_method_signature("(JI)V")

    def test_throws_matter(self) -> None:
        assert parse_method_signature("()V") != parse_method_signature("()V^Ljava/lang/Exception;")
