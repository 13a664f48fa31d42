from pathlib import Path
import json

def atomic_write_json(obj, out: Path, indent: int = 2) -> None:
    out.parent.mkdir(parents=True, exist_ok=True)
    tmp = out.with_suffix(out.suffix + ".tmp")
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=indent, ensure_ascii=False)
    tmp.replace(out)             # atomic replace on same filesystem

def write_text(text: str, out: Path) -> None:
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8", newline="") as f:
        f.write(text)

def write_backup(text: str, original: Path) -> Path:
    """Write `<original>.backup` holding `text` and return its path."""
    backup = original.with_name(original.name + ".backup")
    write_text(text, backup)
    return backup
