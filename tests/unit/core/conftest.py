"""Shared fixtures for core unit tests"""

import pytest

from mdblocks.core.parse import build_tree


SAMPLE_MD = """\
# JS
Intro.

## Arrays
About arrays.

```js
const a=[1];
```

More.

### map
Desc.

```ts fold:"Ex"
a.map(x=>x)
```"""

SAMPLE_PATH = "/obsval/FrontEnd/SBORNICK/JS/Array.md"


@pytest.fixture(name="tree")
def tree_fixture():
    """Return a function that builds a syntax tree from markdown text."""
    return lambda md: build_tree(md, "commonmark")


@pytest.fixture(name="sample_tree")
def sample_tree_fixture(tree):
    return tree(SAMPLE_MD)


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_path")
def sample_path_fixture():
    return SAMPLE_PATH
