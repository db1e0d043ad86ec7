"""Shared test fixtures: small source trees written to tmp_path."""

from pathlib import Path

import pytest

PYTHON_SOURCE = '''\
"""Order helpers."""


def read_orders(path):
    with open(path) as f:
        return f.read()


def total(items, tax):
    result = 0
    for item in items:
        if item.price > 0 and item.qty:
            result += item.price * item.qty
    return result * tax


def x(a):
    return a
'''

JAVASCRIPT_SOURCE = """\
// Cart widget
function render(cart) {
  if (cart && cart.items.length) {
    return cart.items.map((i) => i.name).join(", ");
  }
  return "empty";
}

const tmp = (v) => {
  return v ? v : null;
};
"""

GO_SOURCE = """\
package main

func Serve(addr string, port int) error {
    if addr == "" || port == 0 {
        return nil
    }
    return nil
}
"""


def write(root: Path, relative: str, content: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def sample_tree(tmp_path):
    """Three analyzable files plus things discovery must skip."""
    write(tmp_path, "src/orders.py", PYTHON_SOURCE)
    write(tmp_path, "src/web/cart.js", JAVASCRIPT_SOURCE)
    write(tmp_path, "cmd/server.go", GO_SOURCE)
    # Skipped: unsupported, excluded directory, hidden directory, empty file
    write(tmp_path, "README.md", "# readme\n")
    write(tmp_path, "node_modules/lib/index.js", "function lib() {}\n")
    write(tmp_path, ".git/hooks/hook.py", "def hook():\n    pass\n")
    write(tmp_path, "src/empty.py", "")
    return tmp_path


@pytest.fixture
def single_file(tmp_path):
    return write(tmp_path, "orders.py", PYTHON_SOURCE)


@pytest.fixture
def python_source():
    return PYTHON_SOURCE
