from pathlib import Path

import pytest

from doctrine.config import settings

PYTHON_GUIDE = """# Python Style Guide

## Naming

Use `snake_case` for functions.

## Imports

Group standard library imports first.
"""

RUST_GUIDE = """# Rust Style Guide

## Errors

Prefer `Result` over panics.
"""

FRAMEWORKS_INDEX = """# Frameworks

Each guide extends a language guide.

| Framework | Guide | Language Guide |
|-----------|-------|----------------|
| FastAPI | [FastAPI](fastapi.md) | [Python](../languages/python.md) |
| Axum | [Axum](axum.md) | [Rust](../languages/rust.md) |
"""

FASTAPI_GUIDE = """# FastAPI Style Guide

> **Extends:** [Python Style Guide](../languages/python.md)

**Version:** 0.110

## Routing

Keep routers small[^routers]. Follow the [naming rules](../languages/python.md#naming).

```python
# not a heading
app = FastAPI()  # [broken](nowhere.md) [^nope]
```

## See Also

- [Axum](axum.md)

[^routers]: https://fastapi.tiangolo.com/tutorial/bigger-applications/
"""

AXUM_GUIDE = """# Axum Style Guide

**Framework:** Axum
**Version:** 0.7
**Extends:** [Rust Style Guide](../languages/rust.md)

## Handlers

Use extractors[^1].

[^1]: [Axum docs](https://docs.rs/axum)
"""

ROOT_README = """# Doctrine

Start with the [frameworks index](frameworks/README.md).
"""


def write_file(root: Path, relative: str, text: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def corpus_root(tmp_path: Path) -> Path:
    root = tmp_path / "docs"
    write_file(root, "README.md", ROOT_README)
    write_file(root, "languages/python.md", PYTHON_GUIDE)
    write_file(root, "languages/rust.md", RUST_GUIDE)
    write_file(root, "frameworks/README.md", FRAMEWORKS_INDEX)
    write_file(root, "frameworks/fastapi.md", FASTAPI_GUIDE)
    write_file(root, "frameworks/axum.md", AXUM_GUIDE)
    return root


@pytest.fixture
def configured(monkeypatch: pytest.MonkeyPatch, corpus_root: Path) -> Path:
    """Point the global settings at the temporary corpus."""
    monkeypatch.setattr(settings, "corpus_root", str(corpus_root))
    monkeypatch.setattr(settings, "check_anchors", True)
    monkeypatch.setattr(settings, "strict", False)
    return corpus_root
