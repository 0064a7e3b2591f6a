#!/usr/bin/env python3
"""
Example: Rendering with a Manually Constructed Template

This example shows how to build a template in code and render it without a
config file. Useful for trying out positions, strokes and rotations.
"""

from pathlib import Path

from memepen import (
    LocalFontRepository,
    LocalImageRepository,
    Template,
    TextCompositor,
    TextStyle,
)
from memepen.design.template import Font, Rotation, Stroke, TemplateImage

# =============================================================================
# Background and fonts from files
# =============================================================================
background_path = Path("background.png")  # Replace with your image file
if not background_path.exists():
    print(f"Error: Background image not found: {background_path}")
    print("Please provide a background.png file or update the path")
    exit(1)

images = LocalImageRepository({"background": background_path})
fonts = LocalFontRepository(directories=[Path("fonts")])  # impact.ttf, arial.ttf, ...

# =============================================================================
# Template with an outlined caption and a tilted label
# =============================================================================
template = Template(
    id="custom",
    slug="custom",
    name="Custom Template",
    image=TemplateImage(id="background", width=600, height=600),
    text_styles=(
        TextStyle(
            x=10,
            y=20,
            width=580,
            font=Font(family="Impact", size=48, color="#FFFFFF"),
            stroke=Stroke(size=4, color="#000000"),
        ),
        TextStyle(
            x=150,
            y=300,
            width=300,
            font=Font(family="Arial", size=28, color="#CC0000"),
            rotation=Rotation(degrees=15),
        ),
    ),
)

# =============================================================================
# Render
# =============================================================================
compositor = TextCompositor(fonts, images)
img = compositor.compose(template, ["WHEN THE CODE WORKS", "first try"])
img.save("custom_meme.png", "PNG")

print("✓ Meme saved to: custom_meme.png")
