import io

from bintree.measures import height, preorder
from bintree.node import Node
from bintree.printing import print_tree, render


def _complete_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _inserted_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.right.insert_left(128)
    root.insert_left(54)
    return root


def test_render_complete_tree():
    expected = "\n".join(
        [
            "       .-------(098)-------.",
            "  .--(012)--.         .--(402)--.",
            "(006)     (016)     (256)     (512)",
        ]
    )
    assert render(_complete_tree()) == expected


def test_render_after_left_insertions():
    expected = "\n".join(
        [
            "       .--(098)-------.",
            "  .--(054)       .--(402)",
            "(012)          (128)",
        ]
    )
    assert render(_inserted_tree()) == expected


def test_render_single_node():
    assert render(Node(98)) == "(098)"


def test_render_empty_tree():
    assert render(None) == ""


def test_render_has_one_line_per_level():
    for tree in (_complete_tree(), _inserted_tree()):
        assert len(render(tree).split("\n")) == height(tree) + 1


def test_render_lines_have_no_trailing_spaces():
    for line in render(_inserted_tree()).split("\n"):
        assert line == line.rstrip(" ")


def test_render_shows_every_value():
    tree = _complete_tree()
    text = render(tree)
    for value in preorder(tree):
        assert str(value) in text


def test_render_wide_values_extend_lines():
    root = Node(123456)
    root.insert_right(7890123)
    text = render(root)
    assert "123456" in text
    assert "7890123" in text


def test_print_tree_writes_render():
    tree = _complete_tree()
    out = io.StringIO()
    print_tree(tree, out)
    assert out.getvalue() == render(tree) + "\n"


def test_print_tree_empty_writes_nothing():
    out = io.StringIO()
    print_tree(None, out)
    assert out.getvalue() == ""


def test_print_tree_defaults_to_stdout(capsys):
    tree = _inserted_tree()
    print_tree(tree)
    assert capsys.readouterr().out == render(tree) + "\n"