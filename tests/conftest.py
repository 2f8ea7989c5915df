"""
Pytest configuration and shared fixtures.
"""

import copy
import json
import tempfile
from pathlib import Path
from typing import Any

import pytest

from chuk_mcp_tokens.models import Group, parse_tree

# A small export with every group the theme and component assemblers read
SAMPLE_EXPORT: dict[str, Any] = {
    "Theme": {
        "Background": {
            "Default": {
                "Default": {
                    "$type": "color",
                    "$value": "{Color Primitives.White}",
                    "$extensions": {
                        "mode": {
                            "Light": "{Color Primitives.White}",
                            "Dark": "{Color Primitives.Gray.900}",
                        }
                    },
                }
            },
            "Utilities": {"Scrim": {"$type": "color", "$value": "#00000080"}},
        },
        "Text": {
            "Default": {
                "Default": {
                    "$type": "color",
                    "$value": "{Color Primitives.Gray.900}",
                    "$extensions": {
                        "mode": {
                            "Light": "{Color Primitives.Gray.900}",
                            "Dark": "{Color Primitives.Gray.900}",
                        }
                    },
                }
            },
            "Utilities": {"Inverse": {"$type": "color", "$value": "#ffffff"}},
        },
        "Icon": {
            "Default": {"Default": {"$type": "color", "$value": "{Color Primitives.Gray.900}"}},
        },
        "Border": {
            "Default": {"Default": {"$type": "color", "$value": "{Color Primitives.Gray.300}"}},
        },
        "Heading": {
            "Font Family": {
                "$type": "fontFamily",
                "$value": "{Typography Primitives.Family.Family Serif}",
            },
            "Font Size Large": {"$type": "dimension", "$value": "32px"},
            "Font Weight": {
                "$type": "fontWeight",
                "$value": "{Typography Primitives.Weight.Weight Bold}",
            },
            "Line Height Large": {"$type": "dimension", "$value": "40px"},
            "Letter Spacing": {"$type": "dimension", "$value": "-0.5px"},
        },
        "Body": {
            "Font Family": {
                "$type": "fontFamily",
                "$value": "{Typography Primitives.Family.Family Sans}",
            },
            "Font Size Base": {
                "$type": "dimension",
                "$value": "16px",
                "$extensions": {
                    "mode": {"Base": "16px", "Compact": "14px", "Comfortable": "18px"}
                },
            },
            "Line Height Base": {"$type": "dimension", "$value": "24px"},
        },
    },
    "Color Primitives": {
        "White": {"$type": "color", "$value": "#ffffff"},
        "Gray": {
            "300": {"$type": "color", "$value": "#d4d4d4"},
            "900": {"$type": "color", "$value": "#111111"},
        },
    },
    "Typography Primitives": {
        "Family": {
            "Family Sans": {"$type": "string", "$value": "Inter"},
            "Family Serif": {"$type": "string", "$value": "Noto Serif"},
            "Family Mono": {"$type": "string", "$value": "Roboto Mono"},
        },
        "Scale": {
            "Scale 01": {"$type": "dimension", "$value": "12px"},
            "Scale 02": {"$type": "dimension", "$value": "24px"},
        },
        "Weight": {
            "Weight Regular": {"$type": "fontWeight", "$value": 400},
            "Weight Bold": {"$type": "fontWeight", "$value": 700},
            "Weight Bold Italic": {"$type": "fontWeight", "$value": 700},
        },
    },
    "Typography-styles": {
        "Heading": {
            "H1": {
                "$type": "typography",
                "$value": {
                    "fontFamily": "{Theme.Heading.Font Family}",
                    "fontSize": "{Theme.Heading.Font Size Large}",
                    "lineHeight": "{Theme.Heading.Line Height Large}",
                    "fontWeight": "{Typography Primitives.Weight.Weight Bold}",
                    "letterSpacing": "{Theme.Heading.Letter Spacing}",
                    "textCase": "UPPER",
                    "fontStyle": "normal",
                    "textDecoration": "NONE",
                },
            }
        },
        "Body": {
            "Base": {
                "$type": "typography",
                "$value": {
                    "fontFamily": "{Theme.Body.Font Family}",
                    "fontSize": "{Theme.Body.Font Size Base}",
                    "lineHeight": "{Theme.Body.Line Height Base}",
                    "fontWeight": 400,
                    "letterSpacing": "0.2px",
                    "textCase": "ORIGINAL",
                    "fontStyle": "italic",
                    "textDecoration": "UNDERLINE",
                },
            }
        },
        ".Utilities": {
            "Hidden": {
                "$type": "typography",
                "$value": {"fontSize": "0px"},
            }
        },
    },
    "Effect-styles": {
        "Drop Shadow": {
            "200": {
                "$type": "shadow",
                "$value": [
                    {"offsetX": "0", "offsetY": "2px", "blur": "4px", "color": "#000"},
                    {"inset": True, "offsetX": "0", "offsetY": "0", "blur": "0", "color": "#fff"},
                ],
            }
        },
        "Inner Shadow": {
            "100": {
                "$type": "shadow",
                "$value": {
                    "inset": True,
                    "offsetX": "0",
                    "offsetY": "1px",
                    "blur": "2px",
                    "spread": "1px",
                    "color": "{Color Primitives.Gray.300}",
                },
            }
        },
    },
    "Size": {
        "Space": {
            "200": {"$type": "dimension", "$value": "8px"},
            "300": {"$type": "dimension", "$value": "12px"},
        },
        "Depth": {"100": {"$type": "dimension", "$value": "4px"}},
        "Icon": {"Small": {"$type": "dimension", "$value": "16px"}},
        "Radius": {
            "200": {"$type": "dimension", "$value": "8px"},
            "Full": {"$type": "dimension", "$value": "9999px"},
        },
        "Blur": {"100": {"$type": "dimension", "$value": "4px"}},
        "Stroke": {
            "Border": {"$type": "dimension", "$value": "1px"},
            "Focus Ring": {"$type": "dimension", "$value": "2px"},
        },
    },
}


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_export() -> dict[str, Any]:
    """A fresh copy of the sample export, safe to modify."""
    return copy.deepcopy(SAMPLE_EXPORT)


@pytest.fixture
def source_tree(sample_export: dict[str, Any]) -> Group:
    """The sample export, parsed."""
    return parse_tree(sample_export)


@pytest.fixture
def source_path(temp_dir: Path, sample_export: dict[str, Any]) -> Path:
    """The sample export written to disk."""
    path = temp_dir / "export.tokens.json"
    path.write_text(json.dumps(sample_export), encoding="utf-8")
    return path
