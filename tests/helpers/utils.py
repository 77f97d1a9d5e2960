from pathlib import Path
from typing import Optional


def find_repo_root(start: Optional[Path] = None) -> Path:
    """Return the nearest ancestor holding pyproject.toml or .git.

    The fixture forms live under ``tests/fixtures`` relative to that
    directory.  Falls back to the working directory when neither marker is
    found, e.g. when the tests run from an unpacked sdist.
    """
    p = (start or Path(__file__).resolve()).parent
    for parent in [p, *p.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return Path.cwd()


def fixtures_dir() -> Path:
    return find_repo_root() / "tests" / "fixtures"
