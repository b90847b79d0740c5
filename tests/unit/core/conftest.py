"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MD = """\
# Getting Started

A paragraph with **bold** text
that wraps onto a second line.

## Install

- item one
- item two

1. first
2. second

```python
# not a heading
print("hello")
```

![Diagram](https://example.com/d.png)

### Links

See [the docs](https://example.com/docs) and `code`.
"""

SAMPLE_FM_MD = """\
---
title: Reset Your Password
category: Accounts
tags: [password, account]
status: published
view_count: 7
---

# Steps

Body content.
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_fm_md")
def sample_fm_md_fixture():
    return SAMPLE_FM_MD
