"""Built-in templates."""

from pathlib import Path

from memepen.design.template import Font, Rotation, Stroke, Template, TemplateImage, TextStyle

# Classic top/bottom caption: white Impact with a black outline
_CAPTION_FONT = Font(family="Impact", size=40, color="#FFFFFF")
_CAPTION_STROKE = Stroke(size=4, color="#000000")

YALL_GOT_ANY_MORE_OF_THEM = Template(
    id="yall-got-any-more-of-them",
    slug="yall-got-any-more-of-them",
    name="Y'all Got Any More of Them",
    image=TemplateImage(
        id="yall-got-any-more-of-them",
        path="assets/templates/yall-got-any-more-of-that.png",
        width=600,
        height=471,
    ),
    text_styles=(
        TextStyle(x=10, y=10, width=580, font=_CAPTION_FONT, stroke=_CAPTION_STROKE),
        TextStyle(x=10, y=421, width=580, font=_CAPTION_FONT, stroke=_CAPTION_STROKE),
    ),
)

TWO_BUTTONS = Template(
    id="two-buttons",
    slug="two-buttons",
    name="Two Buttons",
    image=TemplateImage(
        id="two-buttons",
        path="assets/templates/two-buttons.png",
        width=500,
        height=756,
    ),
    text_styles=(
        # Button labels are tilted to follow the buttons
        TextStyle(
            x=80,
            y=110,
            width=100,
            font=Font(family="Arial", size=20, color="#000000"),
            rotation=Rotation(degrees=-10),
        ),
        TextStyle(
            x=245,
            y=80,
            width=100,
            font=Font(family="Arial", size=20, color="#000000"),
            rotation=Rotation(degrees=-10),
        ),
        TextStyle(x=20, y=675, width=460, font=_CAPTION_FONT, stroke=_CAPTION_STROKE),
    ),
)

DEFAULT_TEMPLATES: dict[str, Template] = {
    template.id: template for template in (YALL_GOT_ANY_MORE_OF_THEM, TWO_BUTTONS)
}

# Background image files of the built-in templates, keyed by image ID
DEFAULT_IMAGE_PATHS: dict[str, Path] = {
    template.image.id: Path(template.image.path)
    for template in DEFAULT_TEMPLATES.values()
    if template.image.path
}
