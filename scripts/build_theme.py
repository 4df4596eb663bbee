# Export the navigation palette tokens as CSS custom properties and document them.

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

REPO_ROOT = Path(__file__).resolve().parents[1]
CSS_OUTPUT = REPO_ROOT / "navdock" / "static" / "navdock_tokens.css"
DOC_OUTPUT = REPO_ROOT / "docs" / "nav-tokens.md"


def _ensure_project_root() -> None:
    repo_str = str(REPO_ROOT)
    if repo_str not in sys.path:
        sys.path.insert(0, repo_str)


def build_css(tokens_by_mode: Dict[str, Dict[str, str]]) -> str:
    """Return one ``[data-navdock-theme]`` block per mode."""

    blocks: List[str] = []
    for mode, tokens in tokens_by_mode.items():
        lines = [f"[data-navdock-theme='{mode}'] {{"]
        lines.extend(f"  --{name}: {value};" for name, value in tokens.items())
        lines.append("}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


def _format_table(rows: Iterable[Tuple[str, str]]) -> str:
    body = ["| Token | Value |", "| --- | --- |"]
    for token_name, value in rows:
        body.append(f"| `--{token_name}` | `{value}` |")
    return "\n".join(body)


def build_docs(tokens_by_mode: Dict[str, Dict[str, str]]) -> str:
    sections: List[str] = [
        "# Navigation tokens",
        "",
        "Generated by `scripts/build_theme.py` from `navdock.modules.visual_theme`.",
        "Edit the palettes there and run the script again to refresh this file.",
        "",
    ]
    for mode, tokens in tokens_by_mode.items():
        sections.append(f"## {mode.title()} mode")
        sections.append("")
        sections.append(_format_table(tokens.items()))
        sections.append("")
    return "\n".join(sections).strip() + "\n"


def collect_tokens(modes: Iterable[str] | None = None) -> Dict[str, Dict[str, str]]:
    _ensure_project_root()
    from navdock.modules.visual_theme import available_modes, palette_tokens

    selected = tuple(modes) if modes else available_modes()
    return {mode: palette_tokens(mode) for mode in selected}


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Export navigation palette tokens.")
    parser.add_argument(
        "--mode",
        action="append",
        dest="modes",
        help="Palette mode to export (repeatable). Defaults to every mode.",
    )
    parser.add_argument("--css-output", type=Path, default=CSS_OUTPUT)
    parser.add_argument("--doc-output", type=Path, default=DOC_OUTPUT)
    parser.add_argument(
        "--docs-only",
        action="store_true",
        help="Only rebuild the Markdown reference.",
    )
    args = parser.parse_args(argv)

    try:
        tokens = collect_tokens(args.modes)
    except ValueError as exc:
        parser.error(str(exc))

    if not args.docs_only:
        args.css_output.parent.mkdir(parents=True, exist_ok=True)
        args.css_output.write_text(build_css(tokens), encoding="utf-8")

    args.doc_output.parent.mkdir(parents=True, exist_ok=True)
    args.doc_output.write_text(build_docs(tokens), encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())
