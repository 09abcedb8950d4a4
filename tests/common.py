import ast
import copy
import inspect
from ast import NodeTransformer
from textwrap import dedent

from _pytest.assertion.rewrite import AssertionRewriter


class AssertTransformer(NodeTransformer):
    def visit_FunctionDef(self, node):
        newfns = []
        for i, stmt in enumerate(node.body):
            if not isinstance(stmt, ast.Assert):
                raise Exception(
                    "@one_test_per_assert requires all statements to be asserts"
                )
            newfn = copy.copy(node)
            newfn.name = f"{node.name}_assert{i + 1}"
            newfn.body = [stmt]
            newfns.append(newfn)
        return ast.Module(body=newfns, type_ignores=[])


def one_test_per_assert(fn):
    """Split a test made of asserts into one test function per assert."""
    src = dedent(inspect.getsource(fn))
    filename = inspect.getsourcefile(fn)
    tree = ast.parse(src, filename)
    tree = tree.body[0]
    assert isinstance(tree, ast.FunctionDef)
    tree.decorator_list = []
    new_tree = AssertTransformer().visit(tree)
    ast.fix_missing_locations(new_tree)
    _, lineno = inspect.getsourcelines(fn)
    ast.increment_lineno(new_tree, lineno - 1)
    # Use pytest's assertion rewriter for nicer error messages
    AssertionRewriter(filename, None, None).run(new_tree)
    new_fn = compile(new_tree, filename, "exec")
    glb = fn.__globals__
    exec(new_fn, glb, glb)
