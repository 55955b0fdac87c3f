from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cv_customizer.core.errors import InputValidationError  # noqa: E402
from cv_customizer.export.pdf import RenderError  # noqa: E402
from cv_customizer.services.export_service import export_pdf, export_text  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Export a marked-up resume or cover letter.")
    parser.add_argument("--in", dest="source", required=True, help="Markup text file (UTF-8)")
    parser.add_argument("--format", choices=("pdf", "txt"), default="pdf", help="Output format")
    parser.add_argument(
        "--out",
        default=None,
        help="Output path (defaults to the input name with the new extension)",
    )
    args = parser.parse_args(argv)

    source = Path(args.source)
    out_path = Path(args.out) if args.out else source.with_suffix(f".{args.format}")

    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Export failed: {exc}", file=sys.stderr)
        return 1

    try:
        if args.format == "pdf":
            exported = export_pdf(text, out_path.name)
        else:
            exported = export_text(text, out_path.name)
    except (InputValidationError, RenderError) as exc:
        print(f"Export failed: {exc}", file=sys.stderr)
        return 1

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(exported.content)
    print(f"Wrote {out_path} ({len(exported.content)} bytes)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
