"""
Pytest fixtures and configuration for the test suite.

Strategy:
- Real tree-sitter parsing, no mocks
- Component trees are written under tmp_path per test
- Snippets can be parsed in memory with parse_snippet
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path
from textwrap import dedent

import pytest

# Add project root to path so tests can import the hookscan package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from hookscan.components.analysis.syntax_tree_comp import (  # noqa: E402
    ParsedSource,
    grammar_for_suffix,
    parse_source,
)

# === SOURCE SNIPPETS ===

APP_TSX = """\
import React, { useContext } from 'react';
import { ThemeContext } from './theme';

export default function App() {
  const theme = useContext(ThemeContext);
  return <main className={theme}>Hello</main>;
}
"""

COUNTER_TSX = """\
import { useState, useReducer } from 'react';

function reducer(state: number, action: string) {
  return action === 'inc' ? state + 1 : state;
}

export const Counter = () => {
  const [count, setCount] = useState<number>(0);
  const [total, dispatch] = useReducer(reducer, 0);
  return <button onClick={() => setCount(count + 1)}>{count + total}</button>;
};

export function CounterLabel({ value }: { value: number }) {
  return <span>{value}</span>;
}
"""

TODO_LIST_TSX = """\
const TodoList = () => {
  const [todos, setTodos] = useAtom(todosAtom); const filter = useAtomValue(filterAtom);
  const user = useUserStore((s) => s.user);
  const dispatch = useDispatch();
  const items = useSelector(selectItems);
  return <ul>{todos.map((t) => <li key={t}>{t}</li>)}</ul>;
};

export default TodoList;
"""

USE_CART_TS = """\
import { create } from 'zustand';

export const useCartStore = create((set) => ({ items: [] }));

export function formatPrice(value: number) {
  return `$${value}`;
}
"""

MARKUP_COMPONENT_TSX = """\
export function Banner() {
  const [open, setOpen] = useState(false);
  return <div>Hi</div>;
}
"""


def _parse_snippet(code: str, relative_path: str = "src/Snippet.tsx") -> ParsedSource:
    """Parse ``code`` in memory as if it lived at ``relative_path``."""
    source = dedent(code).encode("utf-8")
    path = Path(relative_path)
    tree = parse_source(source, grammar_for_suffix(path.suffix))
    return ParsedSource(path=path, relative_path=relative_path, source=source, tree=tree)


@pytest.fixture
def parse_snippet() -> Callable[..., ParsedSource]:
    """Provide the in-memory snippet parser."""
    return _parse_snippet


# === FILESYSTEM FIXTURES ===


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes a source file relative to tmp_path."""

    def _write(relative_path: str, content: str) -> Path:
        target = tmp_path / relative_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return target

    return _write


@pytest.fixture
def sample_project(tmp_path: Path, write_source) -> Path:
    """Provide a small React project with components, noise and excluded files.

    Layout:
    src/App.tsx                        App (useContext)
    src/components/Counter.tsx         CounterLabel (markup only), Counter (useState, useReducer)
    src/components/TodoList.tsx        TodoList (jotai x2, zustand, redux x2)
    src/components/Button.styles.tsx   skipped: styling module
    src/components/Counter.test.tsx    excluded: test file
    src/constants.ts                   skipped: constants module
    src/hooks/useCart.ts               no capitalised declarations
    src/types.d.ts                     excluded: declaration file
    vite.config.ts                     excluded: build config
    node_modules/lib/index.tsx         excluded: dependency
    dist/App.tsx                       excluded: build output
    """
    write_source("src/App.tsx", APP_TSX)
    write_source("src/components/Counter.tsx", COUNTER_TSX)
    write_source("src/components/TodoList.tsx", TODO_LIST_TSX)
    write_source("src/components/Button.styles.tsx", "export const Wrapper = () => <div className='w' />;\n")
    write_source("src/components/Counter.test.tsx", MARKUP_COMPONENT_TSX)
    write_source("src/constants.ts", MARKUP_COMPONENT_TSX)
    write_source("src/hooks/useCart.ts", USE_CART_TS)
    write_source("src/types.d.ts", "export declare function Thing(): JSX.Element;\n")
    write_source("vite.config.ts", "export default { plugins: [] };\n")
    write_source("node_modules/lib/index.tsx", MARKUP_COMPONENT_TSX)
    write_source("dist/App.tsx", MARKUP_COMPONENT_TSX)
    return tmp_path


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path: Path):
    """Keep a developer's hookscan.yaml or HOOKSCAN_* env out of the tests."""
    monkeypatch.delenv("HOOKSCAN_CONFIG", raising=False)
    monkeypatch.delenv("HOOKSCAN_LOG_LEVEL", raising=False)
    monkeypatch.delenv("HOOKSCAN_TOP_LIMIT", raising=False)
    monkeypatch.chdir(tmp_path)


# === PYTEST MARKERS ===


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: fast tests of a single layer")
    config.addinivalue_line("markers", "integration: end-to-end scans through the CLI")
