#
# Integrity - Utils Tests
#

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from integrity.utils import class_name, default_object_text, type_tag


# Tests ----------------------------------------------------------------------------------------------------------------

class Node:
    pass


class TestClassName:
    @pytest.mark.parametrize(
        "obj, fully_qualified, expected",
        [
            pytest.param(int, False, "int", id="builtin-class"),
            pytest.param(10, False, "int", id="builtin-instance"),
            pytest.param(10, True, "int", id="builtin-instance-fq"),
            pytest.param("abc", True, "str", id="builtin-str-fq"),
            pytest.param(None, False, "NoneType", id="none"),
            pytest.param(None, True, "NoneType", id="none-fq"),
        ],
    )
    def test_builtin_names(self, obj, fully_qualified, expected):
        """Return bare builtin names regardless of qualification."""
        assert class_name(obj, fully_qualified=fully_qualified) == expected

    @pytest.mark.parametrize(
        "as_class, fully_qualified",
        [
            pytest.param(True, True, id="class-fq"),
            pytest.param(False, True, id="instance-fq"),
            pytest.param(True, False, id="class-no-fq"),
            pytest.param(False, False, id="instance-no-fq"),
        ],
    )
    def test_user_class_fq_toggle(self, as_class, fully_qualified):
        """Return user class name respecting fully_qualified flag for class and instance."""
        target = Node if as_class else Node()
        expected = f"{Node.__module__}.Node" if fully_qualified else "Node"
        assert class_name(target, fully_qualified=fully_qualified) == expected

    def test_nested_class_qualname(self):
        """Use the qualified name of nested classes when fully qualified."""

        class Inner:
            pass

        assert class_name(Inner()) == "Inner"
        assert class_name(Inner(), fully_qualified=True) == f"{__name__}.{Inner.__qualname__}"

    def test_inherited_class_name(self):
        """Return the concrete subclass name."""

        class Sub(Node):
            pass

        assert class_name(Sub()) == "Sub"


class TestTypeTag:
    @pytest.mark.parametrize(
        "obj, expected",
        [
            pytest.param(Node(), "<Node>", id="instance"),
            pytest.param(Node, "<Node>", id="class"),
            pytest.param(1.5, "<float>", id="builtin"),
        ],
    )
    def test_tag(self, obj, expected):
        """Wrap the short class name in angle brackets."""
        assert type_tag(obj) == expected


class TestDefaultObjectText:
    def test_matches_object_repr(self):
        """Reproduce the stdlib object representation even if repr is overridden."""

        class Custom:
            def __repr__(self):
                return "Custom()"

        obj = Custom()
        text = default_object_text(obj)
        assert text.startswith(f"<{__name__}.")
        assert " object at 0x" in text
        assert text != repr(obj)
