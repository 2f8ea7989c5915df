#!/usr/bin/env python3
"""
Example: Building stylesheets from a design-tool export.

This walks a small export through both stages of the pipeline: first the
token files (theme namespaces, rewritten references, embedded modes),
then the generated theme stylesheet, component classes and class-merge
config.

Usage:
    python examples/build_tokens.py
"""

import json
import tempfile
from pathlib import Path

from chuk_mcp_tokens.pipeline import build_all
from chuk_mcp_tokens.transforms import rewrite_references

EXPORT = {
    "Theme": {
        "Background": {
            "Default": {
                "$type": "color",
                "$value": "{Color Primitives.White}",
                "$extensions": {
                    "mode": {
                        "Light": "{Color Primitives.White}",
                        "Dark": "{Color Primitives.Black}",
                    }
                },
            }
        },
        "Text": {"Default": {"$type": "color", "$value": "{Color Primitives.Black}"}},
        "Icon": {"Default": {"$type": "color", "$value": "{Color Primitives.Black}"}},
        "Border": {"Default": {"$type": "color", "$value": "{Color Primitives.Black}"}},
        "Heading": {
            "Font Family": {
                "$type": "fontFamily",
                "$value": "{Typography Primitives.Family.Family Sans}",
            },
            "Font Size H1": {"$type": "dimension", "$value": "40px"},
            "Line Height H1": {"$type": "dimension", "$value": "48px"},
        },
    },
    "Color Primitives": {
        "White": {"$type": "color", "$value": "#ffffff"},
        "Black": {"$type": "color", "$value": "#0a0a0a"},
    },
    "Typography Primitives": {
        "Family": {"Family Sans": {"$type": "string", "$value": "Inter"}},
        "Scale": {"Scale 01": {"$type": "dimension", "$value": "12px"}},
        "Weight": {"Weight Bold": {"$type": "fontWeight", "$value": 700}},
    },
    "Typography-styles": {
        "Heading": {
            "H1": {
                "$type": "typography",
                "$value": {
                    "fontFamily": "{Theme.Heading.Font Family}",
                    "fontSize": "{Theme.Heading.Font Size H1}",
                    "lineHeight": "{Theme.Heading.Line Height H1}",
                    "fontWeight": "{Typography Primitives.Weight.Weight Bold}",
                    "textCase": "UPPER",
                },
            }
        }
    },
    "Effect-styles": {
        "Drop Shadow": {
            "100": {
                "$type": "shadow",
                "$value": {"offsetX": "0", "offsetY": "1px", "blur": "2px", "color": "#0000001a"},
            }
        },
        "Inner Shadow": {},
    },
    "Size": {
        "Space": {"100": {"$type": "dimension", "$value": "4px"}},
        "Radius": {"Full": {"$type": "dimension", "$value": "9999px"}},
        "Blur": {},
        "Stroke": {
            "Border": {"$type": "dimension", "$value": "1px"},
            "Focus Ring": {"$type": "dimension", "$value": "2px"},
        },
    },
}


def main() -> None:
    """Run a full build into a temporary directory and show the outputs."""
    print("CHUK Design Tokens Demo")
    print("=" * 40)
    print()

    print("Reference rewriting:")
    for reference in (
        "{Color Primitives.White}",
        "{Theme.Heading.Font Size H1}",
        "{Typography Primitives.Weight.Weight Bold}",
    ):
        print(f"  {reference} -> {rewrite_references(reference)}")
    print()

    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        source = root / "export.json"
        source.write_text(json.dumps(EXPORT), encoding="utf-8")

        result = build_all(source, root)

        print(f"Wrote {len(result.token_files_written)} token file(s) and {result.count} output(s)")
        print()

        for path in result.files_written:
            print(f"--- {path.relative_to(root)} ---")
            print(path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
