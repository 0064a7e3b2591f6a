#!/usr/bin/env python3
"""
Simple Example: Classic Top/Bottom Caption

This is the simplest way to render a meme programmatically.
"""

from memepen import build_service, load_config

# Load config (font and background paths, uploader)
config = load_config()
service = build_service(config)

img = service.create_meme_from_template_id(
    "yall-got-any-more-of-them",
    ["Y'ALL GOT ANY MORE OF THEM", "PYTHON TYPE HINTS"],
)
img.save("my_meme.png", "PNG")

print("✓ Meme saved to: my_meme.png")
