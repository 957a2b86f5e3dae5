#!/usr/bin/env python3
"""
Example usage of the JSON Round-Tripper.

This script demonstrates the typeface-trimming workflow: format a font
description for editing, drop the glyphs that are not needed, then
minify the result for embedding.
"""

import tempfile
from pathlib import Path
from json_roundtrip import JSONRoundTripper, FormatMode, JsonObject


def main():
    """Main example function."""
    print("JSON Round-Tripper Example")
    print("=" * 50)

    font_json = (
        '{"glyphs":{"A":{"ha":903,"o":"m 0 0 l 354 1013 z"},'
        '"B":{"ha":847,"o":"m 97 0 l 97 1013 z"},'
        '"C":{"ha":958,"o":"m 514 -26 q 51 500 z"}},'
        '"familyName":"Helvetiker","resolution":1000}'
    )

    round_tripper = JSONRoundTripper(indent="  ")

    with tempfile.TemporaryDirectory() as temp_dir:
        source = Path(temp_dir) / "helvetiker_regular.typeface.json"
        source.write_text(font_json, encoding="utf-8")

        # Step 1: formatted copy for a human to edit
        result = round_tripper.round_trip_file(source, FormatMode.PRETTY)
        if not result.success:
            print(f"❌ Failed to format: {result.errors}")
            return
        print(f"✅ Formatted {result.input_size} bytes into {result.output_size} bytes")
        print(result.output)

        # Step 2: keep only the glyphs we need
        tree = round_tripper.parse(result.output)
        glyphs = tree.get("glyphs")
        kept = JsonObject([(key, value) for key, value in glyphs.members if key in ("A", "C")])
        trimmed = JsonObject([
            (key, kept if key == "glyphs" else value) for key, value in tree.members
        ])

        # Step 3: minified copy for embedding
        minified = round_tripper.print(trimmed, FormatMode.COMPACT)
        print(f"\n✅ Minified to {len(minified.encode('utf-8'))} bytes:")
        print(minified)

        # A broken edit is reported, not printed
        broken = round_tripper.round_trip(minified[:-1])
        if not broken.success:
            print(f"\n❌ Error before: [{broken.error_context}]")
            for error in broken.errors:
                print(f"   • {error}")


if __name__ == "__main__":
    main()
