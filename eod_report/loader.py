"""
loader.py — line reader for end-of-day order exports

Public API:
    lines = read_nonblank_lines("path/to/orders.csv")

The whole file is read at once. Lines are split on LF or CRLF and any line
that is empty after trimming is dropped, wherever it appears.
"""

from __future__ import annotations

from pathlib import Path

import chardet

BOM = "\ufeff"


# ══════════════════════════════════════════════════════════════════════════════
# ENCODING DETECTION
# ══════════════════════════════════════════════════════════════════════════════

def _detect_encoding_info(raw: bytes) -> dict:
    """
    Detect encoding from raw bytes.

    Returns dict with: detected, confidence, is_utf8.
    """
    result = chardet.detect(raw)
    detected = result.get("encoding") or "unknown"
    confidence = round(result.get("confidence") or 0.0, 2)
    is_utf8 = detected.upper().replace("-", "") in ("UTF8", "ASCII", "UTF8SIG")
    return {
        "detected": detected,
        "confidence": confidence,
        "is_utf8": is_utf8,
    }


# ══════════════════════════════════════════════════════════════════════════════
# LINE DECODING
# ══════════════════════════════════════════════════════════════════════════════

def _decode_line(raw_line: bytes, candidates: tuple[str, ...]) -> str:
    for enc in candidates:
        try:
            return raw_line.decode(enc)
        except (LookupError, UnicodeDecodeError):
            continue
    return raw_line.decode("latin-1")


def _decode_lines(raw: bytes, preferred_encoding: str) -> list[str]:
    """
    Split raw bytes on LF (a CR before the LF goes with it) and decode each
    line on its own, trying UTF-8 first and then the detected encoding, with
    latin-1 as the last resort since it accepts any byte. A mixed-encoding
    export therefore never aborts the run.

    A leading UTF-8 BOM and embedded NUL bytes are removed.
    """
    candidates = ("utf-8",) if preferred_encoding in ("", "unknown") else ("utf-8", preferred_encoding)
    lines: list[str] = []
    for raw_line in raw.split(b"\n"):
        if raw_line.endswith(b"\r"):
            raw_line = raw_line[:-1]
        lines.append(_decode_line(raw_line, candidates).replace("\x00", ""))
    if lines and lines[0].startswith(BOM):
        lines[0] = lines[0][len(BOM):]
    return lines


def drop_blank_lines(lines: list[str]) -> list[str]:
    return [line for line in lines if line.strip()]


def read_nonblank_lines(path: "str | Path") -> list[str]:
    """Read a whole file and return its non-blank lines in file order."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    raw = path.read_bytes()
    enc_info = _detect_encoding_info(raw)
    return drop_blank_lines(_decode_lines(raw, enc_info["detected"]))
