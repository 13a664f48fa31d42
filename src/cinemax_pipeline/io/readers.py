from pathlib import Path
import json

def _ensure_exists(path: Path):
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"file not found: {p}")

def read_json(path: Path):
    _ensure_exists(path)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)

def read_text(path: Path) -> str:
    _ensure_exists(path)
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()

def read_lines(path: Path) -> list[str]:
    # split on "\n" only, a trailing "\r" is removed by the per-line trim
    return read_text(path).split("\n")
