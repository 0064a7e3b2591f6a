"""Text compositing: draws a template's text fields onto its background image."""

from collections.abc import Sequence

from PIL import Image, ImageDraw, ImageFont

from memepen.design.template import Template, TextStyle
from memepen.exceptions import FontNotFound, TextCountMismatch
from memepen.fonts import FontRepository
from memepen.render.canvas import Canvas
from memepen.render.image import ImageRepository
from memepen.types import Coordinate, HexColor
from memepen.utils.text import FieldLayout, stroke_offsets

# Distance between baselines as a multiple of the face's line height
LINE_SPACING = 1.5


def draw_wrapped(
    draw: ImageDraw.ImageDraw,
    lines: Sequence[str],
    face: ImageFont.FreeTypeFont,
    anchor: Coordinate,
    fill: HexColor,
    line_spacing: float = LINE_SPACING,
) -> None:
    """
    Draw a block of wrapped lines centered on an anchor point.

    Every line is centered horizontally on anchor.x. The block as a whole is
    centered vertically on anchor.y, with block height

        n * line_height * line_spacing - (line_spacing - 1) * line_height

    where line_height is the face's ascent + descent. Each line's baseline sits
    at the bottom of its line box.

    Args:
        draw: Drawing context to render into.
        lines: Wrapped lines, top to bottom.
        face: Font face.
        anchor: Center of the block.
        fill: Text color.
        line_spacing: Baseline distance as a multiple of line height.
    """
    ascent, descent = face.getmetrics()
    line_height = ascent + descent
    block_height = len(lines) * line_height * line_spacing - (line_spacing - 1) * line_height

    x, y = anchor
    top = y - block_height / 2

    for line in lines:
        if line:
            # "ms" anchors the text at its horizontal middle on the baseline
            draw.text((x, top + line_height), line, font=face, fill=fill, anchor="ms")
        top += line_height * line_spacing


class TextCompositor:
    """
    Renders text fields onto template backgrounds.

    Fonts and background images are requested from the injected repositories,
    one blocking lookup per need; any caching is up to the repositories. Each
    call to compose() works on its own Canvas, so a compositor can be reused
    for any number of compositions.
    """

    def __init__(
        self,
        fonts: FontRepository,
        images: ImageRepository,
        line_spacing: float = LINE_SPACING,
    ) -> None:
        """
        Initialize compositor.

        Args:
            fonts: Repository resolving font family names.
            images: Repository resolving background image IDs.
            line_spacing: Baseline distance as a multiple of line height.
        """
        self.fonts = fonts
        self.images = images
        self.line_spacing = line_spacing

    def compose(self, template: Template, text: Sequence[str]) -> Image.Image:
        """
        Draw the given strings into the template's text fields.

        Fields are drawn strictly in template order, so later fields paint over
        earlier ones where they overlap.

        Args:
            template: Template to render.
            text: One string per text field, in template order.

        Returns:
            The finished RGBA image, same size as the background.

        Raises:
            TypeError: If text is a single string instead of a sequence of strings.
            TextCountMismatch: If len(text) differs from the template's field count.
            ImageNotFound: If the background image can't be loaded.
            FontNotFound: If a field's font family can't be resolved or its data isn't a usable font.
        """
        if isinstance(text, str):
            raise TypeError("text must be a sequence of strings, not a single string")

        if len(text) != template.field_count:
            raise TextCountMismatch(expected=template.field_count, actual=len(text))

        canvas = Canvas(self.images.get(template.image.id))

        for index, (style, field_text) in enumerate(zip(template.text_styles, text)):
            try:
                face = self.fonts.get(style.font.family).face(style.font.size)
            except (FontNotFound, OSError) as e:
                # OSError: the font data isn't a readable font file
                raise FontNotFound(style.font.family, field_index=index) from e

            self.draw_field(canvas, field_text, style, face)

        return canvas.to_image()

    def draw_field(
        self,
        canvas: Canvas,
        text: str,
        style: TextStyle,
        face: ImageFont.FreeTypeFont,
    ) -> FieldLayout:
        """
        Draw one text field: the stroke pass (if any), then the fill pass.

        The stroke is drawn by rendering the whole block once per offset in
        stroke_offsets(), in the stroke color, before the fill. When the field is
        rotated, every one of those draws and the fill draw gets its own rotation
        scope about the field anchor.

        Args:
            canvas: Canvas to draw onto.
            text: Field text.
            style: Field style.
            face: Font face at style.font.size.

        Returns:
            The layout that was drawn.
        """
        layout = FieldLayout.compute(text, style, face.getlength)
        anchor_x, anchor_y = layout.anchor
        degrees = style.rotation.degrees if style.rotation is not None else None

        if style.stroke is not None:
            for dx, dy in stroke_offsets(style.stroke.size):
                with canvas.rotated(degrees, layout.anchor):
                    draw_wrapped(
                        canvas.draw(),
                        layout.lines,
                        face,
                        (anchor_x + dx, anchor_y + dy),
                        style.stroke.color,
                        self.line_spacing,
                    )

        with canvas.rotated(degrees, layout.anchor):
            draw_wrapped(
                canvas.draw(),
                layout.lines,
                face,
                layout.anchor,
                style.font.color,
                self.line_spacing,
            )

        return layout
