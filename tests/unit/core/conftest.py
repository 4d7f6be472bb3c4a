"""Shared fixtures for core unit tests"""

import pytest

from mdrender.core.parse import make_parser


SAMPLE_MD = """\
# Heading

A paragraph with 'quotes' and a [link](./other.md).

```rust, no_run
let x = 'a';
```

Inline `'code'` and "prose".
"""


@pytest.fixture(name="md")
def md_fixture():
    return make_parser()


@pytest.fixture(name="sample_tokens")
def sample_tokens_fixture(md):
    return md.parse(SAMPLE_MD)
